"""One-dimensional mipmap (level pyramid) package."""

from mipmap_1d.averaging import downsample_pairs, mean_pair, pairwise_mean
from mipmap_1d.config import DEFAULT_CONFIG, MipMapConfig
from mipmap_1d.errors import (
    EmptyInputError,
    InvalidLevelError,
    InvalidShapeError,
    MipMapError,
    UnsupportedDtypeError,
)
from mipmap_1d.logger import get_logger
from mipmap_1d.mipmap import MipMap1D, build_mipmap, expected_num_levels, level_lengths

__all__ = [
    "__version__",
    "MipMap1D",
    "build_mipmap",
    "level_lengths",
    "expected_num_levels",
    "downsample_pairs",
    "pairwise_mean",
    "mean_pair",
    "MipMapConfig",
    "DEFAULT_CONFIG",
    "MipMapError",
    "EmptyInputError",
    "InvalidShapeError",
    "UnsupportedDtypeError",
    "InvalidLevelError",
    "get_logger",
]

__version__ = "1.0.0"
