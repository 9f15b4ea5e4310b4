"""Compound value types that can be tweened."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"point({self.x}, {self.y})"


@dataclass(frozen=True)
class Dimension:
    width: int
    height: int

    def __str__(self) -> str:
        return f"dim({self.width}, {self.height})"
