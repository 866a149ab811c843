"""Report runner to orchestrate loading, rendering and writing."""
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from src.shared.config import Config
from src.shared.logging import LoggingManager

from .exceptions import ReportError, ReportWriteError
from .readme_generator import ReadmeGenerator
from .result_exporter import ResultExporter
from .snapshot_loader import SnapshotLoader


class ReportRunner:
    """Loads the latest snapshot and writes the README (and optional CSV) for it."""

    def __init__(self, config: Optional[Config] = None,
                 generator: Optional[ReadmeGenerator] = None):
        self.config = config or Config()
        self.generator = generator or ReadmeGenerator()
        self.logger = LoggingManager.get_logger(__name__)

    def run(self, output_path: Optional[Union[Path, str]] = None,
            csv_path: Optional[Union[Path, str]] = None,
            generated_at: Optional[datetime] = None) -> Path:
        """
        Run the complete report generation.

        Args:
            output_path: README destination, defaults to the configured output file.
            csv_path: Optional destination for the ranked comparison CSV.
            generated_at: Footer timestamp, defaults to now.

        Returns:
            Path of the written README.

        Raises:
            ReportError: If the snapshot cannot be loaded or an output cannot be written.
        """
        output_path = Path(output_path) if output_path is not None else self.config.output_file
        try:
            snapshot = SnapshotLoader.load_latest(self.config.results_dir, self.config.result_file_pattern)
            readme = self.generator.generate(snapshot, generated_at)

            try:
                output_path.write_text(readme, encoding="utf-8")
            except OSError as e:
                raise ReportWriteError(f"Cannot write {output_path}: {e}") from e
            self.logger.info(f"README written: {output_path}")

            if csv_path is not None:
                try:
                    ResultExporter.save_comparison_csv(snapshot, csv_path)
                except OSError as e:
                    raise ReportWriteError(f"Cannot write {csv_path}: {e}") from e
        except ReportError as e:
            self.logger.error(f"Report generation failed: {e}")
            raise

        return output_path
