"""Report package initialization."""
from .models import (
    BenchmarkConfiguration,
    BenchmarkSnapshot,
    EndpointResult,
    LatencyPercentiles,
    RankedFramework,
)
from .constants import ReportConstants
from .exceptions import (
    ReportError,
    ReportWriteError,
    ResultsNotFoundError,
    SnapshotParseError,
    SnapshotReadError,
)
from .magnitude import format_magnitude, parse_magnitude
from .snapshot_loader import SnapshotLoader
from .ranking import FrameworkRanker
from .chart import AsciiChartGenerator
from .readme_generator import ReadmeGenerator
from .result_exporter import ResultExporter
from .runner import ReportRunner

__all__ = [
    'BenchmarkConfiguration',
    'BenchmarkSnapshot',
    'EndpointResult',
    'LatencyPercentiles',
    'RankedFramework',
    'ReportConstants',
    'ReportError',
    'ReportWriteError',
    'ResultsNotFoundError',
    'SnapshotParseError',
    'SnapshotReadError',
    'format_magnitude',
    'parse_magnitude',
    'SnapshotLoader',
    'FrameworkRanker',
    'AsciiChartGenerator',
    'ReadmeGenerator',
    'ResultExporter',
    'ReportRunner',
]
