"""
Markdown export of a lactate test.

The text is meant for the clipboard (notes, coaching platforms, chat).
"""

from typing import List, Optional, Sequence

from lact8.calculations.lactate import Step


def format_number(value) -> str:
    """Integral floats without a decimal part (200.0 -> '200'), others as-is."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _threshold_section(title: str, step: Step) -> List[str]:
    return [
        f"## {title}",
        f"- Intensity: {format_number(step.intensity)}",
        f"- Heart Rate: {format_number(step.heart_rate_bpm)} bpm",
        f"- Lactate: {format_number(step.lactate_mmol_l)} mmol/L",
        "",
    ]


def generate_markdown_report(steps: Sequence[Step], lt1: Optional[Step], lt2: Optional[Step]) -> str:
    """
    Build the Markdown report: threshold summaries and the raw data table.

    Args:
        steps: All steps of the test (any order, sorted by intensity here)
        lt1: First lactate threshold step, if found
        lt2: Second lactate threshold step, if found

    Returns:
        Markdown text ending with a newline
    """
    lines = ["# Lactate Test Results", ""]

    if lt1 is not None:
        lines += _threshold_section("LT1 (Aerobic Threshold)", lt1)
    if lt2 is not None:
        lines += _threshold_section("LT2 (Anaerobic Threshold)", lt2)

    lines += [
        "## Raw Data",
        "",
        "| Step # | Intensity | Heart Rate (bpm) | Lactate (mmol/L) |",
        "|--------|-----------|------------------|------------------|",
    ]
    for index, step in enumerate(sorted(steps, key=lambda s: s.intensity), start=1):
        lines.append(
            f"| {index} | {format_number(step.intensity)} | "
            f"{format_number(step.heart_rate_bpm)} | {format_number(step.lactate_mmol_l)} |"
        )

    return "\n".join(lines) + "\n"
