"""
Tests for the Markdown report.
"""
from lact8.calculations.lactate import Step, detect_lactate_thresholds
from lact8.reporting import format_number, generate_markdown_report


class TestFormatNumber:

    def test_integral_float(self):
        assert format_number(200.0) == "200"

    def test_fractional_float(self):
        assert format_number(1.2) == "1.2"

    def test_int(self):
        assert format_number(115) == "115"


class TestMarkdownReport:

    def test_demo_report(self, demo_steps):
        result = detect_lactate_thresholds(demo_steps)

        md = generate_markdown_report(demo_steps, result.lt1, result.lt2)

        assert md.startswith("# Lactate Test Results\n")
        assert md.endswith("\n")
        assert "## LT1 (Aerobic Threshold)\n- Intensity: 260\n- Heart Rate: 115 bpm\n- Lactate: 1.2 mmol/L" in md
        assert "## LT2 (Anaerobic Threshold)\n- Intensity: 340\n- Heart Rate: 135 bpm\n- Lactate: 4.1 mmol/L" in md

    def test_raw_data_table(self, demo_steps):
        result = detect_lactate_thresholds(demo_steps)

        md = generate_markdown_report(demo_steps, result.lt1, result.lt2)

        assert "## Raw Data" in md
        assert "| Step # | Intensity | Heart Rate (bpm) | Lactate (mmol/L) |" in md
        assert "| 1 | 200 | 103 | 1 |" in md
        assert "| 11 | 400 | 188 | 15 |" in md
        table_rows = [line for line in md.splitlines() if line.startswith("| ") and line[2].isdigit()]
        assert len(table_rows) == 11

    def test_rows_sorted_by_intensity(self, demo_steps):
        md = generate_markdown_report(list(reversed(demo_steps)), None, None)
        assert md.index("| 1 | 200 |") < md.index("| 2 | 220 |")

    def test_missing_lt2_has_no_section(self, demo_steps):
        md = generate_markdown_report(demo_steps, demo_steps[3], None)

        assert "## LT1 (Aerobic Threshold)" in md
        assert "LT2" not in md

    def test_no_thresholds(self):
        md = generate_markdown_report([Step(id=1, intensity=100.0, heart_rate_bpm=120.0, lactate_mmol_l=1.5)],
                                      None, None)
        assert "LT1" not in md
        assert "| 1 | 100 | 120 | 1.5 |" in md
