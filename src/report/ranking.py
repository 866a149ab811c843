"""Ranks frameworks by throughput and renders the comparison tables."""
import logging
from typing import Iterable, List, Mapping, Sequence

from .constants import ReportConstants
from .magnitude import format_magnitude, parse_magnitude
from .models import EndpointResult, RankedFramework


# Configure logging
logger = logging.getLogger(__name__)


class FrameworkRanker:
    """Ranks frameworks by requests per second for a given endpoint."""

    @staticmethod
    def rank(results: Mapping[str, Sequence[EndpointResult]],
             endpoint: str = ReportConstants.ROOT_ENDPOINT) -> List[RankedFramework]:
        """
        Rank frameworks by throughput on one endpoint.

        Only the first result per framework that matches ``endpoint`` and has a
        throughput value is used; frameworks without one are left out. Equal
        throughputs are ordered by framework name.

        Args:
            results: Endpoint results keyed by framework name.
            endpoint: Endpoint label to rank on.

        Returns:
            Ranked frameworks, fastest first.
        """
        ranked = []
        for name, endpoint_results in results.items():
            for result in endpoint_results:
                if result.endpoint == endpoint and result.requests_per_sec != "":
                    ranked.append(RankedFramework(name=name,
                                                  rps=parse_magnitude(result.requests_per_sec),
                                                  result=result))
                    break

        ranked.sort(key=lambda fw: (-fw.rps, fw.name))
        logger.debug(f"Ranked {len(ranked)} of {len(results)} frameworks for '{endpoint}'")
        return ranked

    @classmethod
    def performance_table(cls, results: Mapping[str, Sequence[EndpointResult]]) -> str:
        """Render the headline root endpoint table with latency percentiles."""
        lines = [
            "",
            "| Framework | Requests/sec | Avg Latency | P50 | P75 | P90 | P99 |",
            "|-----------|-------------|-------------|-----|-----|-----|-----|",
        ]
        for fw in cls.rank(results):
            percentiles = fw.result.latency_percentiles
            lines.append(
                f"| **{fw.display_name}** | {format_magnitude(fw.result.requests_per_sec)} "
                f"| {fw.result.avg_latency} | {percentiles.p50} | {percentiles.p75} "
                f"| {percentiles.p90} | {percentiles.p99} |"
            )
        return "\n".join(lines) + "\n"

    @classmethod
    def endpoint_comparison(cls, results: Mapping[str, Sequence[EndpointResult]],
                            endpoints: Iterable[str] = ReportConstants.ENDPOINTS_TO_COMPARE) -> str:
        """Render one throughput/latency table per endpoint label."""
        sections = []
        for endpoint in endpoints:
            lines = [
                "",
                f"### {endpoint}",
                "",
                "| Framework | Requests/sec | Avg Latency |",
                "|-----------|-------------|-------------|",
            ]
            for fw in cls.rank(results, endpoint):
                lines.append(
                    f"| **{fw.display_name}** | {format_magnitude(fw.result.requests_per_sec)} "
                    f"| {fw.result.avg_latency} |"
                )
            sections.append("\n".join(lines) + "\n")
        return "".join(sections)
