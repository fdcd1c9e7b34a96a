"""
Web application for the Gondola Spline Simulation

Interactive dashboard to build a track and watch how the gondola rides it.
"""

import logging
from typing import Any, Dict, List, Tuple

import dash
from dash import dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate
import numpy as np
import plotly.graph_objs as go

from gondola import GondolaParams, run_track_analysis

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

DEFAULT_POINTS = "-8,8; -4,0; 0,1; 4,-6; 8,-4"


def parse_control_points(text: str) -> List[Tuple[float, float]]:
    """
    Parse "x,y; x,y; ..." into a list of points

    Raises:
        ValueError: If a point does not have exactly two numeric coordinates
    """
    points: List[Tuple[float, float]] = []
    for chunk in text.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        coords = [c.strip() for c in chunk.split(",")]
        if len(coords) != 2:
            raise ValueError(f"Point '{chunk}' must have exactly two coordinates")
        points.append((float(coords[0]), float(coords[1])))
    return points


# Initialize Dash app
app = dash.Dash(__name__)
app.title = "Gondola Spline Simulation"

# Define app layout
app.layout = html.Div([
    html.Div([
        html.H1("Gondola Spline Simulation",
                style={'textAlign': 'center', 'marginBottom': '30px'}),

        html.Div([
            html.Div([
                html.Label("Control Points (x,y separated by ';'):",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='points-input',
                    type='text',
                    value=DEFAULT_POINTS,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '40%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Simulation Duration (s):",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='duration-input',
                    type='number',
                    value=10.0,
                    min=0.1,
                    max=120.0,
                    step=0.5,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '15%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Time Step (s):",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='dt-input',
                    type='number',
                    value=0.01,
                    min=0.001,
                    max=0.1,
                    step=0.001,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '15%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Button('Run Simulation', id='run-button',
                       style={'width': '20%', 'padding': '10px', 'fontSize': '16px',
                              'backgroundColor': '#4CAF50', 'color': 'white',
                              'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'})
        ], style={'marginBottom': '30px', 'padding': '20px', 'backgroundColor': '#f5f5f5',
                  'borderRadius': '10px'}),

        html.Div(id='status-message', style={'marginBottom': '20px', 'fontSize': '14px'}),

        dcc.Loading(
            id="loading",
            type="default",
            children=[
                html.Div(id='results-container')
            ]
        )
    ], style={'maxWidth': '1400px', 'margin': '0 auto', 'padding': '20px'})
])


@app.callback(
    [Output("results-container", "children"), Output("status-message", "children")],
    [Input("run-button", "n_clicks")],
    [State("points-input", "value"), State("duration-input", "value"), State("dt-input", "value")],
)
def update_results(
    n_clicks: int | None, points_str: str, duration: float, dt: float
) -> tuple[Any, Any]:
    """Run simulation and update results"""
    if n_clicks is None:
        raise PreventUpdate

    try:
        points = parse_control_points(points_str or "")

        # Validate inputs
        if len(points) < 2:
            return [], html.Div(
                "Error: At least two control points are needed.",
                style={"color": "red"},
            )

        if duration is None or duration <= 0 or duration > 120:
            return [], html.Div(
                "Error: Duration must be between 0 and 120 seconds.",
                style={"color": "red"},
            )

        if dt is None or dt <= 0 or dt > 0.1:
            return [], html.Div(
                "Error: Time step must be between 0 and 0.1 seconds.",
                style={"color": "red"},
            )

        results = run_track_analysis({"track": points}, duration=duration, dt=dt,
                                     params=GondolaParams())
        analysis = results["track"]["analysis"]

        outcome = "still running"
        if analysis["fell"]:
            outcome = f"fell ({analysis['fall_reason']})"
        status_msg = html.Div(
            f"Simulation complete! Gondola {outcome} after {analysis['duration']:.2f}s.",
            style={"color": "green"},
        )

        return create_results_layout(results["track"]), status_msg

    except ValueError as e:
        logger.warning("Rejected input: %s", e)
        return [], html.Div(f"Error: {e}", style={"color": "red"})


def create_results_layout(result: Dict[str, Any]) -> html.Div:
    """Create the results visualization layout"""
    track = result["track"]
    t = result["time"]
    history = result["history"]
    analysis = result["analysis"]

    # 1. Track, control points and gondola path
    samples = track.samples
    control_points = track.control_points
    fig1 = go.Figure()
    fig1.add_trace(
        go.Scatter(
            x=samples[:, 0],
            y=samples[:, 1],
            mode="lines",
            name="Track",
            line=dict(color="goldenrod", width=3),
        )
    )
    fig1.add_trace(
        go.Scatter(
            x=control_points[:, 0],
            y=control_points[:, 1],
            mode="markers",
            name="Control points",
            marker=dict(color="red", size=10),
        )
    )
    fig1.add_trace(
        go.Scatter(
            x=history[:, 1],
            y=history[:, 2],
            mode="lines",
            name="Gondola center",
            line=dict(color="royalblue", width=2, dash="dot"),
            hovertemplate="x: %{x:.2f}<br>y: %{y:.2f}<extra></extra>",
        )
    )
    fig1.update_layout(
        title="Track and Gondola Path",
        xaxis_title="x",
        yaxis_title="y",
        yaxis=dict(scaleanchor="x", scaleratio=1),
        height=500,
        template="plotly_white",
    )

    # 2. Speed over time
    fig2 = go.Figure()
    fig2.add_trace(
        go.Scatter(
            x=t,
            y=history[:, 4],
            mode="lines",
            name="Speed",
            line=dict(color="seagreen", width=2),
            hovertemplate="Time: %{x:.2f}s<br>Speed: %{y:.2f}<extra></extra>",
        )
    )
    fig2.update_layout(
        title="Speed Over Time",
        xaxis_title="Time (s)",
        yaxis_title="Speed",
        height=400,
        template="plotly_white",
    )

    # 3. Progress along the track
    fig3 = go.Figure()
    fig3.add_trace(
        go.Scatter(
            x=t,
            y=history[:, 0],
            mode="lines",
            name="Parameter",
            line=dict(color="purple", width=2),
        )
    )
    fig3.update_layout(
        title="Track Parameter Over Time",
        xaxis_title="Time (s)",
        yaxis_title="Parameter (knots)",
        height=400,
        template="plotly_white",
    )

    summary_rows = [
        ("Outcome", f"Fell ({analysis['fall_reason']})" if analysis["fell"] else "Running"),
        ("Duration (s)", f"{analysis['duration']:.2f}"),
        ("Max Speed", f"{analysis['max_speed']:.2f}"),
        ("Mean Speed", f"{analysis['mean_speed']:.2f}"),
        ("Distance", f"{analysis['distance']:.2f}"),
        ("Max Drop", f"{analysis['max_drop']:.2f}"),
        ("Progress", f"{analysis['progress'] * 100:.1f}%"),
        ("Total Rotation (rev)", f"{analysis['total_rotation'] / (2 * np.pi):.2f}"),
    ]
    table_rows = [html.Tr([html.Th("Metric"), html.Th("Value")])]
    for label, value in summary_rows:
        table_rows.append(html.Tr([html.Td(label), html.Td(value)]))

    return html.Div([
        html.H2("Simulation Results", style={"marginTop": "30px", "marginBottom": "20px"}),
        html.Div([
            html.H3("Summary Table", style={"marginBottom": "15px"}),
            html.Table(
                table_rows,
                style={
                    "width": "50%",
                    "borderCollapse": "collapse",
                    "marginBottom": "30px",
                    "fontSize": "14px",
                },
            ),
        ], style={"marginBottom": "30px"}),
        html.Div([
            html.Div([dcc.Graph(figure=fig1)], style={"marginBottom": "30px"}),
            html.Div([
                html.Div(
                    [dcc.Graph(figure=fig2)],
                    style={"width": "48%", "display": "inline-block", "marginRight": "2%"},
                ),
                html.Div(
                    [dcc.Graph(figure=fig3)],
                    style={"width": "48%", "display": "inline-block"},
                ),
            ], style={"marginBottom": "30px"}),
        ]),
    ])


if __name__ == "__main__":
    app.run(debug=True, port=8050)
