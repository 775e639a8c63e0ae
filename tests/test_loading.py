"""Tests for loading real ANSI art files (requires external files)."""

from pathlib import Path

import pytest

import ansi_canvas


@pytest.mark.external
class TestExternalFiles:
    """Tests that require external .ans files."""

    def test_load_single_file(self, single_ans_file: Path) -> None:
        """Basic load test."""
        canvas = ansi_canvas.load(single_ans_file)
        assert canvas.height >= 1
        assert canvas.width > 0

    def test_load_file_has_content(self, single_ans_file: Path) -> None:
        """Verify loaded file has actual content."""
        canvas = ansi_canvas.load(single_ans_file)
        assert any(cell.text != ' ' for _, _, cell in canvas.cells()), (
            "Loaded file should have content"
        )

    def test_forced_ansi_matches_autodetect(self, single_ans_file: Path) -> None:
        """Files with escapes decode the same with or without a format hint."""
        data = single_ans_file.read_bytes()
        if ansi_canvas.detect_format(data) != "ansi":
            pytest.skip(f"{single_ans_file.name} has no escape sequences")
        assert ansi_canvas.import_canvas(data) == ansi_canvas.import_canvas(data, "ansi")

    def test_sauce_not_in_canvas(self, sample_ans_files: list[Path]) -> None:
        """SAUCE records must never leak into the canvas."""
        checked = 0
        for path in sample_ans_files:
            data = path.read_bytes()
            if b"\x1aSAUCE00" not in data:
                continue
            checked += 1
            canvas = ansi_canvas.import_canvas(data, "ansi")
            text = "".join(canvas.row_text(y) for y in range(canvas.height))
            assert "SAUCE00" not in text, f"SAUCE leaked in {path.name}"

        # Just report - don't require all files have SAUCE
        print(f"\nChecked SAUCE truncation in {checked}/{len(sample_ans_files)} files")


@pytest.mark.external
@pytest.mark.slow
class TestAllFiles:
    """Parametrized tests across all sample files."""

    def test_load_all_files(self, ans_file: Path) -> None:
        """Load test across all sample files."""
        canvas = ansi_canvas.load(ans_file, "ansi")
        assert canvas.width == 80
        assert canvas.height >= 25
