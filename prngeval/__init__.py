"""
prngeval: Evaluate pseudorandom bit generators with statistical distances.

Reads raw bit streams from files or command output, discretizes limiting
laws of random-walk statistics (arcsine, iterated logarithm) over
partitions of the real line, and measures how far empirical histograms sit
from them (total variation, Hellinger, RMS).
"""

__all__ = [
    "Config",
    "get_config",
    "__version__",
    # Errors
    "PrngEvalError",
    "SourceUnavailable",
    "StreamExhausted",
    "PartitionMismatch",
    "InvalidDomainParameter",
    # Bit sources
    "BitSource",
    "FileSource",
    "CommandSource",
    "read_bits",
    # Partitions and measures
    "Partition",
    "make_partition",
    "make_partition_for_lil",
    "make_partition_for_asin",
    "Measure",
    "format_measure",
    # Reference measures
    "ideal_asin_measure",
    "ideal_lil_measure",
    "REFERENCE_LAWS",
    # Distances
    "dist_tv",
    "dist_hell",
    "dist_rms",
    "DISTANCES",
]

__version__ = "0.1.0"

from prngeval.config import Config, get_config
from prngeval.errors import (
    PrngEvalError,
    SourceUnavailable,
    StreamExhausted,
    PartitionMismatch,
    InvalidDomainParameter,
)
from prngeval.sources import BitSource, FileSource, CommandSource, read_bits
from prngeval.partition import (
    Partition,
    make_partition,
    make_partition_for_lil,
    make_partition_for_asin,
)
from prngeval.measure import Measure, format_measure
from prngeval.reference import ideal_asin_measure, ideal_lil_measure, REFERENCE_LAWS
from prngeval.distance import dist_tv, dist_hell, dist_rms, DISTANCES
