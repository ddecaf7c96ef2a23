"""Constant and checkerboard textures evaluated at surface uv coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from lajolla.vector import Vector2, Vector3

T = TypeVar("T", float, Vector3)

TextureValue = Union[float, Vector3]


def _wrap_unit(value: float) -> float:
    """Wrap a coordinate into [0, 1), mapping negative values upwards."""
    return value % 1.0


@dataclass(frozen=True, slots=True)
class ConstantTexture(Generic[T]):
    """A texture with the same value everywhere."""

    value: T

    def eval(self, uv: Vector2, footprint: float = 0.0) -> T:
        """The texture's value; uv and footprint have no effect."""
        return self.value


@dataclass(frozen=True, slots=True)
class CheckerboardTexture(Generic[T]):
    """A two-colour checkerboard with two by two squares per unit of uv.

    color0 fills the squares where both local coordinates fall in the same
    half of the unit interval, color1 the others.
    """

    color0: T
    color1: T
    uscale: float = 1.0
    vscale: float = 1.0
    uoffset: float = 0.0
    voffset: float = 0.0

    def eval(self, uv: Vector2, footprint: float = 0.0) -> T:
        """The colour of the square that contains uv after scaling and offset."""
        local_u = _wrap_unit(uv.x * self.uscale + self.uoffset)
        local_v = _wrap_unit(uv.y * self.vscale + self.voffset)
        x = 2 * (int(local_u * 2) % 2) - 1
        y = 2 * (int(local_v * 2) % 2) - 1
        return self.color0 if x * y == 1 else self.color1