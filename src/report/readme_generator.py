"""
README generator for benchmark snapshots.

Composes the ranked tables, the ASCII chart, the run configuration and the
key findings into a single Markdown document, surrounded by the fixed prose
that describes the benchmark suite.
"""
from datetime import datetime
from typing import List, Optional

from src.shared.logging import LoggingManager

from .chart import AsciiChartGenerator
from .constants import ReportConstants
from .magnitude import format_magnitude
from .models import BenchmarkConfiguration, BenchmarkSnapshot, RankedFramework
from .ranking import FrameworkRanker


FRAMEWORKS_SECTION = """## 🔧 Frameworks Tested

### Go Frameworks
- **Go Vanilla (net/http)**: Standard Go HTTP server using the built-in `net/http` package
- **Go Fiber**: Fast Express-inspired web framework built on top of Fasthttp

### JavaScript/TypeScript Frameworks (Bun Runtime)
- **Bun Vanilla**: Pure Bun HTTP server using Bun's native HTTP APIs
- **Hono.js**: Ultrafast web framework for Cloudflare Workers, Deno, Bun, and Node.js
"""

SETUP_SECTION = """## 🛠️ Setup & Running

### Prerequisites

```bash
# Install Go
brew install go

# Install Bun
curl -fsSL https://bun.sh/install | bash

# Install wrk (macOS)
brew install wrk

# Install wrk (Ubuntu/Debian)
sudo apt-get install wrk

# Install dependencies for each server
cd servers/go-fiber && go mod tidy
cd ../hono-bun && bun install
```

### Running Benchmarks

```bash
# Run all benchmarks
./scripts/benchmark.sh

# Run with custom parameters
./scripts/benchmark.sh --duration 60 --connections 200 --threads 8

# Generate updated README
generate-readme
```
"""

ENDPOINTS_SECTION = """## 📋 Test Endpoints

Each server implements the following endpoints:

1. **GET /**: Simple "Hello, World!" response
2. **GET /health**: Health check endpoint
3. **GET /user/:id**: Parameterized route returning user data
4. **POST /users**: Create user endpoint (accepts JSON payload)
"""

STATIC_FINDINGS = """
- **🔍 Consistency**: All frameworks maintain stable performance across different endpoint types
- **💾 Memory Usage**: Measured during peak load conditions
- **🌡️ Latency**: P99 latencies remain reasonable under high load
"""

CLOSING_SECTIONS = """## 🔄 Continuous Integration

This benchmark runs automatically:
- ✅ On every commit to main branch
- ✅ On every pull request
- ✅ Monthly scheduled runs
- 📊 Results are automatically updated in this README

## 📚 Technical Notes

### Methodology
- Each server runs on the same hardware configuration
- Servers are warmed up before benchmarking begins
- Multiple endpoints tested to simulate real-world usage
- Latency percentiles captured for detailed analysis

### Environment
- **OS**: macOS/Linux
- **CPU**: Multi-core (threads configurable)
- **Memory**: Sufficient RAM allocated per server
- **Network**: Local loopback (eliminates network latency)

## 🤝 Contributing

Feel free to:
- Add new frameworks to benchmark
- Improve existing server implementations
- Suggest additional test scenarios
- Report issues or inconsistencies

## 📜 License

MIT License - feel free to use this benchmark suite for your own comparisons.
"""


class ReadmeGenerator:
    """Renders a benchmark snapshot as a README document."""

    def __init__(self, chart_generator: Optional[AsciiChartGenerator] = None):
        self.chart_generator = chart_generator or AsciiChartGenerator()
        self.logger = LoggingManager.get_logger(__name__)

    @staticmethod
    def configuration_section(configuration: BenchmarkConfiguration, timestamp: str) -> str:
        """Render the run configuration list."""
        return (
            "## ⚙️ Benchmark Configuration\n\n"
            f"- **Duration**: {configuration.duration} seconds\n"
            f"- **Connections**: {configuration.connections}\n"
            f"- **Threads**: {configuration.threads}\n"
            f"- **Warmup Time**: {configuration.warmup_time} seconds\n"
            "- **Tool**: [wrk](https://github.com/wg/wrk)\n"
            f"- **Last Updated**: {timestamp}\n"
        )

    @staticmethod
    def key_findings(ranked: List[RankedFramework]) -> str:
        """
        Render the data-driven key findings.

        Args:
            ranked: Root endpoint ranking, fastest first.

        Returns:
            Markdown bullet lines; empty when nothing was ranked.
        """
        if not ranked:
            return ""

        winner = ranked[0]
        findings = (
            f"- **🏆 Highest Throughput**: {winner.display_name} with "
            f"{format_magnitude(f'{winner.rps:.0f}')} requests/second\n"
        )

        if len(ranked) > 1:
            slowest = ranked[-1]
            if slowest.rps > 0:
                performance_gap = ((winner.rps - slowest.rps) / slowest.rps) * 100
                findings += (
                    f"- **📊 Performance Gap**: Up to {performance_gap:.1f}% "
                    "difference between fastest and slowest\n"
                )
        return findings

    def generate(self, snapshot: Optional[BenchmarkSnapshot],
                 generated_at: Optional[datetime] = None) -> str:
        """
        Generate the README for a snapshot.

        Args:
            snapshot: Loaded benchmark snapshot.
            generated_at: Footer timestamp, defaults to now.

        Returns:
            The complete Markdown document, or a placeholder when the snapshot holds no results.
        """
        if snapshot is None or not snapshot.results:
            self.logger.warning("Snapshot has no results, generating placeholder README")
            return ReportConstants.NO_DATA_DOCUMENT

        generated_at = generated_at or datetime.now()
        ranked = FrameworkRanker.rank(snapshot.results)

        sections = [
            "# JS vs Go Web Framework Benchmark\n\n"
            "A comprehensive performance comparison between JavaScript (Bun) and Go web frameworks.\n",
            f"## 🚀 Quick Results\n\n{FrameworkRanker.performance_table(snapshot.results)}\n",
            f"## 📊 Performance Chart\n\n{self.chart_generator.render(ranked)}\n",
            FRAMEWORKS_SECTION,
            f"## 📈 Detailed Results by Endpoint\n\n{FrameworkRanker.endpoint_comparison(snapshot.results)}\n",
            self.configuration_section(snapshot.configuration, snapshot.timestamp),
            SETUP_SECTION,
            ENDPOINTS_SECTION,
            "## 🎯 Key Findings\n\nBased on the latest benchmark results:\n\n"
            + self.key_findings(ranked) + STATIC_FINDINGS,
            CLOSING_SECTIONS,
            "---\n\n"
            "*Generated automatically by benchmark suite. Last updated: "
            f"{generated_at.strftime(ReportConstants.FOOTER_TIME_FORMAT)}*\n",
        ]
        self.logger.info(f"README generated for {len(snapshot.results)} frameworks, {len(ranked)} ranked")
        return "\n".join(sections)
