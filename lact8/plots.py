import plotly.graph_objects as go
from plotly.subplots import make_subplots
from typing import Optional, Sequence

from lact8.calculations.lactate import Step, ThresholdResult
from lact8.config import Config

def apply_chart_style(fig, title=None):
    """Dark transparent theme shared by the app charts."""
    fig.update_layout(
        template="plotly_dark",
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        title=dict(text=title, x=0, font=dict(size=20, color="#f0f6fc")) if title else None,
        font=dict(size=12, color="#c9d1d9"),
        legend=dict(orientation="h", y=1.08, x=0),
        margin=dict(l=20, r=20, t=60, b=20),
        hovermode="x unified",
    )
    fig.update_xaxes(showgrid=False, zeroline=False, showline=True, linecolor="#30363d")
    fig.update_yaxes(showgrid=True, gridcolor="rgba(255,255,255,0.05)", zeroline=False)
    return fig


def _add_threshold_line(fig, step: Step, label: str, color: str):
    fig.add_vline(
        x=step.intensity,
        line=dict(color=color, width=2, dash="dash"),
        annotation_text=f"{label}: {step.intensity:g}",
        annotation_position="top left",
        layer="above",
    )


def build_lactate_chart(steps: Sequence[Step], result: Optional[ThresholdResult] = None) -> go.Figure:
    """
    Lactate and heart rate against intensity.

    Only steps with positive intensity and lactate are drawn. With a result,
    LT1/LT2 get vertical markers and the LT1 -> peak chord used for LT2 is
    drawn as a dotted line.
    """
    plotted = sorted(
        (s for s in steps if s.intensity > 0 and s.lactate_mmol_l > 0),
        key=lambda s: s.intensity,
    )
    intensity = [s.intensity for s in plotted]

    fig = make_subplots(specs=[[{"secondary_y": True}]])

    fig.add_trace(
        go.Scatter(
            x=intensity, y=[s.lactate_mmol_l for s in plotted],
            name="Lactate (mmol/L)",
            mode="lines+markers",
            line=dict(color=Config.COLOR_LACTATE, width=2),
            marker=dict(size=9),
        ),
        secondary_y=False,
    )

    hr_points = [s for s in plotted if s.heart_rate_bpm > 0]
    if hr_points:
        fig.add_trace(
            go.Scatter(
                x=[s.intensity for s in hr_points], y=[s.heart_rate_bpm for s in hr_points],
                name="Heart Rate (bpm)",
                mode="lines+markers",
                line=dict(color=Config.COLOR_HR, width=1.5),
                marker=dict(size=6),
            ),
            secondary_y=True,
        )

    if result is not None:
        _add_threshold_line(fig, result.lt1, "LT1", Config.COLOR_LT1)
        if result.lt2 is not None:
            _add_threshold_line(fig, result.lt2, "LT2", Config.COLOR_LT2)
        if result.peak is not None:
            fig.add_trace(
                go.Scatter(
                    x=[result.lt1.intensity, result.peak.intensity],
                    y=[result.lt1.lactate_mmol_l, result.peak.lactate_mmol_l],
                    name="LT1 → Peak",
                    mode="lines",
                    line=dict(color=Config.COLOR_CHORD, width=1, dash="dot"),
                    hoverinfo="skip",
                ),
                secondary_y=False,
            )

    apply_chart_style(fig, "Lactate Curve")
    fig.update_xaxes(title_text="Intensity")
    fig.update_yaxes(title_text="Lactate (mmol/L)", secondary_y=False)
    fig.update_yaxes(title_text="Heart Rate (bpm)", secondary_y=True, showgrid=False)

    return fig
