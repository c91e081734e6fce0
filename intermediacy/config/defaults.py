"""Default sampling parameters used by the command line."""

from intermediacy.config.experiment import SamplingConfig

# probabilities=(0.3, 0.5, 0.7), samples=100_000, unseeded, one worker.
DEFAULT_SAMPLING = SamplingConfig()
