"""Rays, ray differentials and surface points."""

from __future__ import annotations

import math
from dataclasses import dataclass

from lajolla.vector import Vector3

_DIFFUSE_SPREAD = 0.2


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with origin, direction and the valid parameter interval [tnear, tfar)."""

    org: Vector3
    dir: Vector3
    tnear: float = 0.0
    tfar: float = math.inf


@dataclass(frozen=True, slots=True)
class RayDifferential:
    """A simplified ray differential: positional radius and directional spread, in pixels."""

    radius: float = 0.0
    spread: float = 0.0


@dataclass(frozen=True, slots=True)
class PointAndNormal:
    """A point on a surface with its normal.

    For infinitely far points the normal is the direction towards the origin.
    """

    position: Vector3 = Vector3(0.0, 0.0, 0.0)
    normal: Vector3 = Vector3(0.0, 0.0, 0.0)


def init_ray_differential(w: int, h: int) -> RayDifferential:
    """The ray differential of a primary ray for an image of w by h pixels."""
    return RayDifferential(0.0, 0.25 / max(w, h))


def transfer(r: RayDifferential, dist: float) -> float:
    """Radius of the differential after travelling the given distance."""
    return r.radius + r.spread * dist


def reflect(r: RayDifferential, mean_curvature: float, roughness: float) -> float:
    """Spread of the differential after reflection off a surface."""
    spec_spread = r.spread + 2 * mean_curvature * r.radius
    return max(spec_spread * (1 - roughness) + _DIFFUSE_SPREAD * roughness, 0.0)


def refract(
    r: RayDifferential, mean_curvature: float, eta: float, roughness: float
) -> float:
    """Spread of the differential after refraction through a surface."""
    spec_spread = (r.spread + 2 * mean_curvature * r.radius) / eta
    return max(spec_spread * (1 - roughness) + _DIFFUSE_SPREAD * roughness, 0.0)