"""Run configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field


class ConfigurationError(ValueError):
    """Raised for parameter values the estimator cannot work with."""


def validate_sampling_parameters(probability: float, samples: int) -> None:
    """Fail fast on an edge probability outside [0, 1] or samples < 1."""
    if not 0.0 <= probability <= 1.0:
        raise ConfigurationError(
            f"probability must lie in [0, 1], got {probability}"
        )
    if samples < 1:
        raise ConfigurationError(f"samples must be positive, got {samples}")


@dataclass(frozen=True, slots=True)
class SamplingConfig:
    """Monte Carlo parameters shared by every requested probability."""

    probabilities: tuple[float, ...] = (0.3, 0.5, 0.7)
    samples: int = 100_000  # trials per probability
    seed: int | None = None  # None draws fresh OS entropy
    workers: int = 1  # worker processes for the trial loop
    chunk_size: int = 10_000  # trials per independently seeded chunk

    def __post_init__(self) -> None:
        if not self.probabilities:
            raise ConfigurationError("at least one probability is required")
        for p in self.probabilities:
            validate_sampling_parameters(p, self.samples)
        if self.workers < 1:
            raise ConfigurationError(
                f"workers must be positive, got {self.workers}"
            )
        if self.chunk_size < 1:
            raise ConfigurationError(
                f"chunk_size must be positive, got {self.chunk_size}"
            )
        if self.seed is not None and self.seed < 0:
            raise ConfigurationError(
                f"seed must be non-negative, got {self.seed}"
            )


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Top-level configuration of one intermediacy run.

    Source and target are node labels as they appear in the input file,
    not internal indices.
    """

    input_path: str
    source: int
    target: int
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    output_dir: str | None = None  # None writes next to the input file
    plot: bool = False
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.input_path:
            raise ConfigurationError("input_path must not be empty")
