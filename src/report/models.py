"""Data models for the report generator."""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def _is_word_separator(char: str) -> bool:
    if char.isascii():
        return not (char.isalnum() or char == "_")
    return char.isspace()


def framework_display_name(name: str) -> str:
    """
    Turn a framework key such as ``go-fiber`` into ``Go Fiber``.

    Hyphens become spaces and every letter that starts a word is upper-cased;
    a word starts after any character other than a letter, digit or underscore,
    so ``hono.js`` becomes ``Hono.Js``. The rest of each word is left as is.
    """
    chars = []
    previous = " "
    for char in name.replace("-", " "):
        chars.append(char.upper() if _is_word_separator(previous) else char)
        previous = char
    return "".join(chars)


class SnapshotModel(BaseModel):
    """Base for snapshot records. Frozen once loaded; null and missing values become zero values."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class LatencyPercentiles(SnapshotModel):
    """Latency percentiles as reported by the load tool."""
    p50: str = Field("", validation_alias=AliasChoices("50%", "p50"))
    p75: str = Field("", validation_alias=AliasChoices("75%", "p75"))
    p90: str = Field("", validation_alias=AliasChoices("90%", "p90"))
    p99: str = Field("", validation_alias=AliasChoices("99%", "p99"))


class EndpointResult(SnapshotModel):
    """One measured endpoint for one framework."""
    endpoint: str = ""
    url: str = ""
    requests_per_sec: str = Field("", validation_alias=AliasChoices("requests_per_sec", "requestsPerSec"))
    avg_latency: str = Field("", validation_alias=AliasChoices("avg_latency", "avgLatency"))
    transfer_per_sec: str = Field("", validation_alias=AliasChoices("transfer_per_sec", "transferPerSec"))
    latency_percentiles: LatencyPercentiles = Field(
        default_factory=LatencyPercentiles,
        validation_alias=AliasChoices("latency_percentiles", "latencyPercentiles"),
    )
    raw_output: str = Field("", validation_alias=AliasChoices("raw_output", "rawOutput"))


class BenchmarkConfiguration(SnapshotModel):
    """Load tool settings used for the run."""
    duration: int = Field(0, ge=0)
    connections: int = Field(0, ge=0)
    threads: int = Field(0, ge=0)
    warmup_time: int = Field(0, ge=0, validation_alias=AliasChoices("warmup_time", "warmupTime"))


class BenchmarkSnapshot(SnapshotModel):
    """One complete benchmark run, keyed by framework name."""
    timestamp: str = ""
    configuration: BenchmarkConfiguration = Field(default_factory=BenchmarkConfiguration)
    results: Dict[str, Tuple[EndpointResult, ...]] = Field(default_factory=dict)

    @field_validator("results", mode="before")
    @classmethod
    def _null_endpoint_lists(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value

        # A null list is an empty list, a null entry is an all-empty result
        normalized = {}
        for name, results in value.items():
            if results is None:
                results = ()
            elif isinstance(results, list):
                results = [{} if result is None else result for result in results]
            normalized[name] = results
        return normalized


@dataclass(frozen=True)
class RankedFramework:
    """A framework's result for one endpoint together with its parsed throughput."""
    name: str
    rps: float
    result: EndpointResult

    @property
    def display_name(self) -> str:
        return framework_display_name(self.name)
