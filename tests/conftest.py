"""Pytest configuration and shared fixtures."""

import os
import struct
from pathlib import Path
from typing import Optional

import pytest

from ansi_canvas.core.canvas import Canvas


def get_test_art_dir() -> Optional[Path]:
    """
    Get external art directory from environment or default locations.

    Set ANSI_CANVAS_TEST_DIR environment variable to specify a custom location.
    """
    # Check environment variable first
    if env_path := os.environ.get("ANSI_CANVAS_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path

    # Check common default locations
    defaults = [
        Path.home() / "ansi-art",
        Path.home() / "Documents" / "ansi-art",
    ]

    for default in defaults:
        if default.exists():
            # Verify it has .ans files
            ans_files = list(default.glob("*.ans"))[:1]
            if ans_files:
                return default

    return None


def encode_caca(canvas: Canvas) -> bytes:
    """Serialize a canvas to the native dump layout."""
    out = bytearray(b"CACA" + b"CANV")
    out += struct.pack(">II", canvas.width, canvas.height)
    for _, _, cell in canvas.cells():
        out += struct.pack(">II", cell.char, cell.attr)
    return bytes(out)


@pytest.fixture
def caca_dump():
    """Factory building native dumps from a canvas."""
    return encode_caca


@pytest.fixture(scope="session")
def test_art_dir() -> Path:
    """Fixture providing external art directory, skips if unavailable."""
    art_dir = get_test_art_dir()
    if art_dir is None:
        pytest.skip(
            "External art directory not found. "
            "Set ANSI_CANVAS_TEST_DIR to a directory of .ans files"
        )
    return art_dir


@pytest.fixture(scope="session")
def sample_ans_files(test_art_dir: Path) -> list[Path]:
    """Get list of .ans files for testing."""
    files = list(test_art_dir.glob("*.ans"))
    if not files:
        pytest.skip(f"No .ans files found in {test_art_dir}")
    # Limit to avoid very slow tests
    return sorted(files)[:50]


@pytest.fixture
def single_ans_file(sample_ans_files: list[Path]) -> Path:
    """Get a single .ans file for quick tests."""
    return sample_ans_files[0]


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Generate test cases from fixtures."""
    if "ans_file" in metafunc.fixturenames:
        art_dir = get_test_art_dir()
        files = sorted(art_dir.glob("*.ans"))[:50] if art_dir else []
        metafunc.parametrize("ans_file", files, ids=lambda p: p.name)
