"""Level pyramid of a one-dimensional numeric sequence.

Level 0 holds the source values; every following level is half as long
(rounded up) and is produced by pairwise averaging its parent. Construction
stops at the first level of length one. All levels are stored as read-only
numpy arrays and handed out without copying, so a renderer can pick the level
matching its zoom factor at no cost.
"""

from __future__ import annotations

import operator
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from mipmap_1d.averaging import PairKernel, check_dtype, downsample_pairs, pairwise_mean
from mipmap_1d.config import DEFAULT_CONFIG, MipMapConfig
from mipmap_1d.errors import (
    EmptyInputError,
    InvalidLevelError,
    InvalidShapeError,
    UnsupportedDtypeError,
)
from mipmap_1d.logger import get_logger

__all__ = [
    "MipMap1D",
    "build_mipmap",
    "level_lengths",
    "expected_num_levels",
]

logger = get_logger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]


def level_lengths(n: int) -> List[int]:
    """Return the length of every level for an ``n``-element source.

    Parameters
    ----------
    n : int
        Number of source elements.

    Returns
    -------
    list[int]
        ``[n, ceil(n/2), ..., 1]``.
    """
    n = int(n)
    if n < 1:
        raise EmptyInputError("A mipmap needs at least one source element.")
    lengths = [n]
    while lengths[-1] > 1:
        lengths.append((lengths[-1] + 1) // 2)
    return lengths


def expected_num_levels(n: int) -> int:
    """Return the level count of a mipmap built from ``n`` elements."""
    return len(level_lengths(n))


def _source_array(data: ArrayLike, config: MipMapConfig) -> np.ndarray:
    if config.dtype is not None:
        try:
            target = np.dtype(config.dtype)
        except TypeError as exc:
            raise UnsupportedDtypeError(f"Invalid dtype in config: {config.dtype!r}") from exc
        check_dtype(target)
    else:
        target = None

    if config.copy_source:
        arr = np.array(data, dtype=target, copy=True)
    else:
        arr = np.asarray(data, dtype=target)

    if arr.ndim != 1:
        raise InvalidShapeError(f"Expected a 1D sequence, got shape={arr.shape}")
    if arr.shape[0] == 0:
        raise EmptyInputError("Cannot build a mipmap from an empty sequence.")
    check_dtype(arr.dtype)
    arr.flags.writeable = False
    return arr


class MipMap1D:
    """Immutable pyramid of pairwise-averaged levels.

    Parameters
    ----------
    data : sequence or numpy.ndarray
        Non-empty 1D sequence of integers or floats.
    kernel : callable, optional
        Pair kernel applied between levels, see
        :mod:`mipmap_1d.averaging`. Defaults to the arithmetic mean.
    config : MipMapConfig, optional
        Copy and dtype settings.

    Notes
    -----
    - The total storage is about twice the source size.
    - Levels are numpy arrays with ``writeable=False``; they can be shared
      between threads without locking.
    """

    __slots__ = ("_levels",)

    def __init__(
        self,
        data: ArrayLike,
        kernel: PairKernel = pairwise_mean,
        config: Optional[MipMapConfig] = None,
    ) -> None:
        config = config or DEFAULT_CONFIG
        current = _source_array(data, config)
        levels = [current]
        while current.shape[0] > 1:
            current = downsample_pairs(current, kernel)
            current.flags.writeable = False
            levels.append(current)
        self._levels: Tuple[np.ndarray, ...] = tuple(levels)
        logger.debug(
            "Built mipmap: n=%d dtype=%s levels=%d",
            levels[0].shape[0],
            levels[0].dtype,
            len(levels),
        )

    def num_levels(self) -> int:
        """Return the number of levels, source level included."""
        return len(self._levels)

    def get_level(self, level: int) -> Optional[np.ndarray]:
        """Return the read-only array stored for ``level``.

        Level 0 is the source data; higher levels are coarser. Returns
        ``None`` when ``level`` is past the coarsest level.
        """
        level = operator.index(level)
        if level < 0:
            raise InvalidLevelError(f"Level index must be non-negative, got {level}")
        if level >= self.num_levels():
            return None
        return self._levels[level]

    @property
    def levels(self) -> Tuple[np.ndarray, ...]:
        return self._levels

    @property
    def source(self) -> np.ndarray:
        return self._levels[0]

    @property
    def dtype(self) -> np.dtype:
        return self._levels[0].dtype

    @property
    def nbytes(self) -> int:
        """Total bytes held across all levels."""
        return int(sum(lvl.nbytes for lvl in self._levels))

    def __len__(self) -> int:
        return self.num_levels()

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self._levels)

    def __repr__(self) -> str:
        return (
            f"MipMap1D(n={self._levels[0].shape[0]}, dtype={self.dtype}, "
            f"levels={self.num_levels()})"
        )


def build_mipmap(
    data: ArrayLike,
    kernel: PairKernel = pairwise_mean,
    config: Optional[MipMapConfig] = None,
) -> MipMap1D:
    """Build a :class:`MipMap1D` from ``data``.

    Raises
    ------
    EmptyInputError
        If ``data`` has no elements.
    InvalidShapeError
        If ``data`` is not one-dimensional.
    UnsupportedDtypeError
        If the elements are not real integers or floats.
    """
    return MipMap1D(data, kernel=kernel, config=config)
