"""Handles exporting ranked comparison results to CSV."""
import logging
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from .constants import ReportConstants
from .magnitude import format_magnitude
from .models import BenchmarkSnapshot
from .ranking import FrameworkRanker


# Configure logging
logger = logging.getLogger(__name__)

COMPARISON_COLUMNS = [
    'endpoint', 'rank', 'framework', 'display_name', 'requests_per_sec',
    'requests_per_sec_display', 'avg_latency', 'p50', 'p75', 'p90', 'p99',
]


class ResultExporter:
    """Handles exporting the per-endpoint rankings of a snapshot."""

    @staticmethod
    def comparison_frame(snapshot: BenchmarkSnapshot,
                         endpoints: Iterable[str] = ReportConstants.ENDPOINTS_TO_COMPARE) -> pd.DataFrame:
        """
        Build a flat table of every ranked framework per endpoint.

        Args:
            snapshot: Loaded benchmark snapshot.
            endpoints: Endpoint labels to include, in output order.

        Returns:
            DataFrame with one row per (endpoint, framework) pair.
        """
        rows = []
        for endpoint in endpoints:
            for rank, fw in enumerate(FrameworkRanker.rank(snapshot.results, endpoint), start=1):
                percentiles = fw.result.latency_percentiles
                rows.append({
                    'endpoint': endpoint,
                    'rank': rank,
                    'framework': fw.name,
                    'display_name': fw.display_name,
                    'requests_per_sec': fw.rps,
                    'requests_per_sec_display': format_magnitude(fw.result.requests_per_sec),
                    'avg_latency': fw.result.avg_latency,
                    'p50': percentiles.p50,
                    'p75': percentiles.p75,
                    'p90': percentiles.p90,
                    'p99': percentiles.p99,
                })
        return pd.DataFrame(rows, columns=COMPARISON_COLUMNS)

    @staticmethod
    def save_comparison_csv(snapshot: BenchmarkSnapshot, output_path: Union[Path, str]) -> bool:
        """
        Save the per-endpoint rankings to CSV.

        Args:
            snapshot: Loaded benchmark snapshot.
            output_path: Path to save CSV.

        Returns:
            True when a file was written.
        """
        df = ResultExporter.comparison_frame(snapshot)
        if df.empty:
            logger.warning("No ranked results available for CSV export")
            return False

        df.to_csv(output_path, index=False)
        logger.info(f"Comparison CSV saved: {output_path}")
        return True
