"""
Pytest configuration for equity-jobs tests.

This conftest.py adds src/ to sys.path so tests can import the equity_jobs
package without installing it, and isolates the load-once dataset cache.
"""

import json
import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Add src to Python path so tests can import equity_jobs
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from equity_jobs.data_loader import reset_directory_data  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_loaded_dataset() -> Generator[None, None, None]:
    """Each test starts without a cached dataset"""
    reset_directory_data()
    yield
    reset_directory_data()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    """
    Write a JSON document into the test's temp directory.

    Example:
        def test_load(write_json):
            path = write_json("companies.json", [{"id": "1", ...}])
    """

    def _write(filename: str, data: object) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
