"""Pairwise averaging kernels used to downsample one pyramid level.

A kernel takes the even-indexed and odd-indexed elements of a level (two
arrays of equal length and identical dtype) and returns one combined element
per pair, in the same dtype. Only the arithmetic mean is provided.

Integer means are truncated toward zero and computed without forming
``a + b``, so values close to the limits of a fixed-width dtype never wrap.
Float means are ``(a + b) / 2``; where the sum of two finite values overflows
to infinity the halves are added instead.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from mipmap_1d.errors import UnsupportedDtypeError

__all__ = [
    "PairKernel",
    "check_dtype",
    "mean_pair",
    "pairwise_mean",
    "downsample_pairs",
]

PairKernel = Callable[[np.ndarray, np.ndarray], np.ndarray]


def check_dtype(dtype: np.dtype) -> np.dtype:
    """Return ``dtype`` if it is a real integer or floating dtype.

    Raises
    ------
    UnsupportedDtypeError
        For booleans, complex numbers, strings, datetimes, timedeltas and
        object arrays.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in "iuf":
        return dtype
    raise UnsupportedDtypeError(f"Unsupported element dtype: {dtype}")


def _truncated_int_mean(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    one = a.dtype.type(1)
    # floor((a + b) / 2) from the halves plus the carry of both low bits
    mean = (a >> one) + (b >> one) + (a & b & one)
    if np.issubdtype(a.dtype, np.signedinteger):
        odd_sum = ((a ^ b) & one) != 0
        mean = mean + ((mean < 0) & odd_sum).astype(a.dtype)
    return mean


def _float_mean(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    half = a.dtype.type(0.5)
    with np.errstate(over="ignore", invalid="ignore"):
        total = a + b
        # halve first only where the sum alone overflowed
        overflowed = np.isinf(total) & np.isfinite(a) & np.isfinite(b)
        return np.where(overflowed, a * half + b * half, total * half)


def pairwise_mean(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Average two equal-length arrays element by element.

    Parameters
    ----------
    a, b : numpy.ndarray
        Arrays of the same shape and dtype.

    Returns
    -------
    numpy.ndarray
        Truncated mean for integer dtypes, true mean for floating dtypes.
        The result keeps the input dtype.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if a.dtype != b.dtype:
        raise UnsupportedDtypeError(f"Mismatched dtypes: {a.dtype} and {b.dtype}")
    dtype = check_dtype(a.dtype)
    if dtype.kind in "iu":
        out = _truncated_int_mean(a, b)
    else:
        out = _float_mean(a, b)
    return np.asarray(out, dtype=dtype)


def mean_pair(a, b, dtype=None):
    """Average two scalars with the same rule as :func:`pairwise_mean`.

    ``dtype`` defaults to the common dtype numpy infers for ``a`` and ``b``.
    """
    if dtype is None:
        dtype = np.result_type(a, b)
    pair = np.asarray([a, b], dtype=dtype)
    return pairwise_mean(pair[:1], pair[1:])[0]


def downsample_pairs(level: np.ndarray, kernel: PairKernel = pairwise_mean) -> np.ndarray:
    """Reduce a 1D level to ``ceil(len / 2)`` elements.

    Consecutive pairs ``(2i, 2i + 1)`` are combined by ``kernel``; on odd
    length the last element is carried over unchanged.
    """
    level = np.asarray(level)
    n = int(level.shape[0])
    paired = n - (n % 2)
    head = np.asarray(kernel(level[0:paired:2], level[1:paired:2]), dtype=level.dtype)
    if n % 2:
        return np.concatenate([head, level[-1:]])
    return head
