"""Locates and loads benchmark result snapshots."""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .constants import ReportConstants
from .exceptions import ResultsNotFoundError, SnapshotParseError, SnapshotReadError
from .models import BenchmarkSnapshot


# Configure logging
logger = logging.getLogger(__name__)


class SnapshotLoader:
    """Finds the newest results file in a directory and parses it into a snapshot."""

    @staticmethod
    def find_latest(results_dir: Union[Path, str],
                    pattern: str = ReportConstants.RESULT_FILE_PATTERN) -> Path:
        """
        Find the most recently modified results file.

        Args:
            results_dir: Directory holding the results files.
            pattern: Glob pattern results files must match.

        Returns:
            Path to the newest matching file.

        Raises:
            ResultsNotFoundError: If the directory or a matching file does not exist.
        """
        results_dir = Path(results_dir)
        if not results_dir.exists():
            raise ResultsNotFoundError("No results directory found. Run benchmarks first")

        candidates = sorted(results_dir.glob(pattern)) if results_dir.is_dir() else []
        if not candidates:
            raise ResultsNotFoundError("No benchmark results found. Run benchmarks first")

        latest_file: Optional[Path] = None
        latest_mtime = None
        for candidate in candidates:
            try:
                mtime = candidate.stat().st_mtime
            except OSError as e:
                logger.warning(f"Skipping unreadable results file {candidate}: {e}")
                continue
            if latest_mtime is None or mtime > latest_mtime:
                latest_file = candidate
                latest_mtime = mtime

        if latest_file is None:
            raise ResultsNotFoundError("No benchmark results found. Run benchmarks first")

        logger.info(f"Using latest results file: {latest_file}")
        return latest_file

    @staticmethod
    def load(input_path: Union[Path, str]) -> BenchmarkSnapshot:
        """
        Load a snapshot from a JSON results file.

        Args:
            input_path: Path to the results file.

        Returns:
            The parsed, immutable snapshot.

        Raises:
            SnapshotReadError: If the file cannot be read.
            SnapshotParseError: If the content is not a valid snapshot.
        """
        input_path = Path(input_path)
        try:
            content = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SnapshotReadError(f"Cannot read {input_path}: {e}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise SnapshotParseError(f"Invalid JSON in {input_path}: {e}") from e

        if not isinstance(data, dict):
            raise SnapshotParseError(f"Expected a JSON object in {input_path}, got {type(data).__name__}")

        try:
            snapshot = BenchmarkSnapshot.model_validate(data)
        except ValidationError as e:
            raise SnapshotParseError(f"Invalid benchmark snapshot in {input_path}: {e}") from e

        logger.info(f"Snapshot loaded from {input_path}: {len(snapshot.results)} frameworks")
        return snapshot

    @classmethod
    def load_latest(cls, results_dir: Union[Path, str],
                    pattern: str = ReportConstants.RESULT_FILE_PATTERN) -> BenchmarkSnapshot:
        """Load the most recently modified snapshot from ``results_dir``."""
        return cls.load(cls.find_latest(results_dir, pattern))
