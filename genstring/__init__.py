"""
GenString - Genetic String Search

Evolves a population of random printable byte strings toward a target string
using best-parent crossover and per-character mutation.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .config import (  # noqa: F401
    DEFAULT_CONFIG,
    PRESET_BOUNDED,
    PRESET_EXPLORATORY,
    PRESET_STANDARD,
    RunParameters,
    build_run_parameters,
)
from .evolution import *  # noqa: F401,F403
from .generation import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403
