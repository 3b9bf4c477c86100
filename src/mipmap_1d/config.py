"""Configuration dataclass for mipmap construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MipMapConfig:
    """Construction settings for :class:`~mipmap_1d.mipmap.MipMap1D`.

    Notes
    -----
    ``copy_source=False`` lets level 0 take over a numpy input without a copy.
    The caller's array is then marked read-only, since it *is* level 0.
    """

    copy_source: bool = True
    dtype: Optional[str] = None


DEFAULT_CONFIG = MipMapConfig()
