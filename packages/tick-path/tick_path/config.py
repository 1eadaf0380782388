"""Flattening configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FlattenConfig:
    """Immutable limits for bezier flattening.

    Attributes:
        max_depth: Maximum number of times a curve piece is halved before it
            is emitted as a straight line regardless of straightness. Bounds
            the output at 2 ** max_depth points per curve, which keeps a zero
            or negative straightness from recursing forever.
    """

    max_depth: int = 16

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError("max_depth must be non-negative")
