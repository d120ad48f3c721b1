"""
Reporting Module.

Text and file exports of a lactate step test.
"""
from .markdown_export import generate_markdown_report, format_number
from .csv_export import export_steps_csv, export_result_csv

__all__ = [
    # Markdown
    "generate_markdown_report",
    "format_number",
    # CSV
    "export_steps_csv",
    "export_result_csv",
]
