"""Unit tests for README generation."""

from datetime import datetime
from unittest.mock import MagicMock

from src.report.constants import ReportConstants
from src.report.models import BenchmarkSnapshot
from src.report.readme_generator import ReadmeGenerator
from tests.test_const import (
    FOOTER_TIMESTAMP, GO_FIBER, HEALTH_ENDPOINT, ROOT_ENDPOINT, TEST_TIMESTAMP, endpoint_result, snapshot_data,
)

GENERATED_AT = datetime(2024, 5, 2, 8, 30, 0)


def _snapshot(raw):
    return BenchmarkSnapshot.model_validate(snapshot_data(raw))


class TestReadmeGenerator:
    """Test ReadmeGenerator.generate."""

    def test_empty_snapshot_placeholder(self, empty_snapshot):
        """Test an empty snapshot produces the placeholder document."""
        readme = ReadmeGenerator().generate(empty_snapshot, GENERATED_AT)
        assert readme == ReportConstants.NO_DATA_DOCUMENT
        assert "Run `./scripts/benchmark.sh`" in readme
        assert "| Framework |" not in readme

    def test_none_snapshot_placeholder(self):
        """Test a missing snapshot produces the placeholder document."""
        assert ReadmeGenerator().generate(None) == ReportConstants.NO_DATA_DOCUMENT

    def test_section_order(self, sample_snapshot):
        """Test the sections appear in the fixed order."""
        readme = ReadmeGenerator().generate(sample_snapshot, GENERATED_AT)
        headings = [
            "# JS vs Go Web Framework Benchmark",
            "## 🚀 Quick Results",
            "## 📊 Performance Chart",
            "## 🔧 Frameworks Tested",
            "## 📈 Detailed Results by Endpoint",
            "## ⚙️ Benchmark Configuration",
            "## 🛠️ Setup & Running",
            "## 📋 Test Endpoints",
            "## 🎯 Key Findings",
            "## 🔄 Continuous Integration",
            "## 📜 License",
            "*Generated automatically by benchmark suite.",
        ]
        positions = [readme.index(heading) for heading in headings]
        assert positions == sorted(positions)

    def test_configuration_and_footer(self, sample_snapshot):
        """Test configuration values and the footer timestamp are rendered."""
        readme = ReadmeGenerator().generate(sample_snapshot, GENERATED_AT)
        assert "- **Duration**: 30 seconds\n" in readme
        assert "- **Connections**: 100\n" in readme
        assert "- **Threads**: 4\n" in readme
        assert "- **Warmup Time**: 5 seconds\n" in readme
        assert f"- **Last Updated**: {TEST_TIMESTAMP}\n" in readme
        assert readme.endswith(f"Last updated: {FOOTER_TIMESTAMP}*\n")

    def test_headline_and_chart(self, sample_snapshot):
        """Test the quick results table and chart are included."""
        readme = ReadmeGenerator().generate(sample_snapshot, GENERATED_AT)
        assert "| **Go Fiber** | 120.50k | 0.81ms |" in readme
        assert "go-fiber     │" + "█" * 50 + " 120.50k req/s" in readme
        assert "### Health check" in readme

    def test_key_findings(self, sample_snapshot):
        """Test the winner line is rendered from the root endpoint ranking."""
        readme = ReadmeGenerator().generate(sample_snapshot, GENERATED_AT)
        assert "- **🏆 Highest Throughput**: Go Fiber with 120.50k requests/second\n" in readme
        assert "- **📊 Performance Gap**: Up to" in readme

    def test_performance_gap_exact(self):
        """Test root throughputs of 100 and 50 report a 100.0% gap."""
        snapshot = _snapshot({
            "fast": [endpoint_result(ROOT_ENDPOINT, "100")],
            "slow": [endpoint_result(ROOT_ENDPOINT, "50")],
        })
        readme = ReadmeGenerator().generate(snapshot, GENERATED_AT)
        assert "- **📊 Performance Gap**: Up to 100.0% difference between fastest and slowest\n" in readme
        assert "- **🏆 Highest Throughput**: Fast with 100.00 requests/second\n" in readme

    def test_single_framework_omits_gap(self):
        """Test a single ranked framework has no gap line."""
        snapshot = _snapshot({GO_FIBER: [endpoint_result(ROOT_ENDPOINT, "10k")]})
        readme = ReadmeGenerator().generate(snapshot, GENERATED_AT)
        assert "Highest Throughput" in readme
        assert "Performance Gap" not in readme

    def test_zero_slowest_omits_gap(self):
        """Test a zero slowest throughput has no gap line."""
        snapshot = _snapshot({
            "a": [endpoint_result(ROOT_ENDPOINT, "10k")],
            "b": [endpoint_result(ROOT_ENDPOINT, "0")],
        })
        readme = ReadmeGenerator().generate(snapshot, GENERATED_AT)
        assert "Performance Gap" not in readme

    def test_no_root_endpoint_results(self):
        """Test frameworks without root results give a report without findings."""
        snapshot = _snapshot({GO_FIBER: [endpoint_result(HEALTH_ENDPOINT, "10k")]})
        readme = ReadmeGenerator().generate(snapshot, GENERATED_AT)
        assert readme != ReportConstants.NO_DATA_DOCUMENT
        assert "Highest Throughput" not in readme
        assert "| **Go Fiber** | 10.00k |" in readme.split("### Health check")[1]

    def test_uses_chart_generator(self, sample_snapshot):
        """Test the injected chart generator renders the chart section."""
        chart_generator = MagicMock()
        chart_generator.render.return_value = "CHART"
        readme = ReadmeGenerator(chart_generator).generate(sample_snapshot, GENERATED_AT)
        assert "## 📊 Performance Chart\n\nCHART" in readme
        ranked = chart_generator.render.call_args[0][0]
        assert [fw.name for fw in ranked][0] == GO_FIBER

    def test_default_timestamp_is_now(self, sample_snapshot):
        """Test the footer defaults to the current time."""
        readme = ReadmeGenerator().generate(sample_snapshot)
        assert f"Last updated: {datetime.now().year}-" in readme
