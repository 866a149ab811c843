"""Generates the plain-text throughput bar chart."""
import math
from typing import Sequence

from src.shared.logging import LoggingManager

from .constants import ReportConstants
from .magnitude import format_magnitude
from .models import RankedFramework


class AsciiChartGenerator:
    """Renders ranked throughput as a horizontal bar chart inside a fenced code block."""

    def __init__(self, bar_width: int = ReportConstants.CHART_BAR_WIDTH,
                 name_width: int = ReportConstants.CHART_NAME_WIDTH):
        self.bar_width = bar_width
        self.name_width = name_width
        self.logger = LoggingManager.get_logger(__name__)

    def bar_length(self, rps: float, max_rps: float) -> int:
        """Number of bar characters for ``rps`` relative to the fastest framework."""
        if max_rps <= 0:
            return 0
        return max(0, math.floor((rps / max_rps) * self.bar_width))

    def render(self, ranked: Sequence[RankedFramework]) -> str:
        """
        Render the chart.

        Args:
            ranked: Frameworks ordered fastest first, as returned by ``FrameworkRanker.rank``.

        Returns:
            Markdown fenced code block holding the chart.
        """
        chart = "\n```\nRequests per Second Comparison:\n\n"

        if ranked:
            max_rps = ranked[0].rps
            if max_rps <= 0:
                self.logger.warning("Top throughput is zero, rendering empty bars")
            for fw in ranked:
                bar = ReportConstants.CHART_BAR_CHAR * self.bar_length(fw.rps, max_rps)
                chart += (
                    f"{fw.name:<{self.name_width}} {ReportConstants.CHART_AXIS_CHAR}"
                    f"{bar:<{self.bar_width}} {format_magnitude(f'{fw.rps:.0f}')} req/s\n"
                )

        chart += "```\n"
        return chart
