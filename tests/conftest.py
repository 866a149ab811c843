"""Shared test configuration and fixtures for all tests."""

import json
import os

import pytest

from src.report.models import BenchmarkSnapshot
from src.shared.config import Config
from tests.test_const import SAMPLE_RESULTS, snapshot_data


@pytest.fixture
def sample_snapshot():
    """Snapshot with three frameworks and partial endpoint coverage."""
    return BenchmarkSnapshot.model_validate(snapshot_data(SAMPLE_RESULTS))


@pytest.fixture
def empty_snapshot():
    """Snapshot without any framework results."""
    return BenchmarkSnapshot.model_validate(snapshot_data({}))


@pytest.fixture
def results_dir(tmp_path):
    """Empty results directory."""
    directory = tmp_path / "results"
    directory.mkdir()
    return directory


@pytest.fixture
def write_results_file(results_dir):
    """Factory writing a results file into the results directory with a given mtime."""
    def _write(name, data, mtime=None):
        path = results_dir / name
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path
    return _write


@pytest.fixture
def report_config(results_dir, tmp_path):
    """Config pointing at the temporary results directory."""
    return Config(results_dir=results_dir, output_file=tmp_path / "README.md")
