from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Global configuration settings for the benchmark README generator."""

    results_dir: Path = Path("results")
    result_file_pattern: str = "benchmark_*.json"
    output_file: Path = Path("README.md")
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix='BENCH_README_',
    )
