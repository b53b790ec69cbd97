"""Result Schemas — benchmark result files, the index catalogue and the contract.

Invariants:
    - FrameworkResult mirrors one run of the load runner against one framework
    - Unknown keys are kept (extra="allow") so rewriting latest.json loses nothing
    - IndexFile.frameworks sorted by id (enforced by the aggregator, not here)
"""

from pydantic import BaseModel, ConfigDict, Field


class LatencyMs(BaseModel):
    """Latency percentiles in milliseconds."""
    p50: float
    p95: float
    p99: float


class BenchmarkResult(BaseModel):
    """One benchmark (e.g. "plaintext") in one framework run."""
    duration_seconds: float
    requests_per_sec: float
    latency_ms: LatencyMs
    errors: int = Field(ge=0)


class Environment(BaseModel):
    os: str
    ci: str
    oha_version: str


class FrameworkResult(BaseModel):
    """A framework's result file, as written by the load runner."""
    model_config = ConfigDict(extra="allow")

    framework_id: str
    language: str
    framework: str
    measured_at: str
    contract_version: int
    runner_version: str
    environment: Environment
    benchmarks: dict[str, BenchmarkResult]


class IndexEntry(BaseModel):
    id: str
    language: str
    framework: str
    measured_at: str
    latest: str


class IndexFile(BaseModel):
    """index.json — the catalogue the results site loads first."""
    generated_at: str
    contract_version: int
    frameworks: list[IndexEntry] = Field(default_factory=list)


class BenchmarkContract(BaseModel):
    """benchmarks/contract.json — only the version is read."""
    model_config = ConfigDict(extra="allow")

    version: int
