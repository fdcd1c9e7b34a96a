"""
Test suite for the Gondola Spline Simulation.

This package contains unit tests organized by component:
- test_params.py: Tests for GondolaParams class
- test_spline.py: Tests for Hermite segments and spline evaluation
- test_track.py: Tests for track construction and sampling
- test_dynamics.py: Tests for the force and energy equations
- test_simulation.py: Tests for the gondola state machine
- test_camera.py: Tests for pixel to world mapping
- test_scene.py: Tests for input event routing
- test_analysis.py: Tests for run analysis
- test_integration.py: Integration tests for full workflow
- test_app.py: Tests for dashboard input parsing
"""
