"""Constants for the README report generator."""


class ReportConstants:
    """Centralized constants for report generation."""
    ROOT_ENDPOINT = "Root endpoint"
    ENDPOINTS_TO_COMPARE = ("Root endpoint", "Health check", "User endpoint", "POST users")

    RESULT_FILE_PATTERN = "benchmark_*.json"

    # ASCII chart layout
    CHART_BAR_WIDTH = 50
    CHART_NAME_WIDTH = 12
    CHART_BAR_CHAR = "█"
    CHART_AXIS_CHAR = "│"

    FOOTER_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

    NO_DATA_DOCUMENT = (
        "# Benchmark Results\n\n"
        "No benchmark data available. Run `./scripts/benchmark.sh` to generate results."
    )
