"""Phase functions for participating media: isotropic and Henyey-Greenstein."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from lajolla.spectrum import Spectrum, make_const_spectrum
from lajolla.vector import Vector2, Vector3, build_basis, dot

_INV_FOUR_PI = 1.0 / (4.0 * math.pi)
# Below this |g| the Henyey-Greenstein inversion degenerates; sample uniformly instead.
_HG_ISOTROPIC_THRESHOLD = 1e-3


def _to_world(n: Vector3, local: Vector3) -> Vector3:
    tangent, bitangent = build_basis(n)
    return tangent * local.x + bitangent * local.y + n * local.z


def _sample_uniform_sphere(rnd_param: Vector2) -> Vector3:
    z = 1 - 2 * rnd_param.x
    r = math.sqrt(max(0.0, 1 - z * z))
    phi = 2 * math.pi * rnd_param.y
    return Vector3(r * math.cos(phi), r * math.sin(phi), z)


def _henyey_greenstein(g: float, cos_theta: float) -> float:
    base = 1 + g * g + 2 * g * cos_theta
    if base < 0:
        return math.nan
    return _INV_FOUR_PI * (1 - g * g) / base**1.5


@dataclass(frozen=True, slots=True)
class IsotropicPhase:
    """Scatters light uniformly over the sphere of directions."""

    def eval(self, dir_in: Vector3, dir_out: Vector3) -> Spectrum:
        """Value of the phase function for a pair of directions."""
        return make_const_spectrum(_INV_FOUR_PI)

    def sample(self, dir_in: Vector3, rnd_param: Vector2) -> Optional[Vector3]:
        """Draw an outgoing direction uniformly over the sphere."""
        return _sample_uniform_sphere(rnd_param)

    def pdf(self, dir_in: Vector3, dir_out: Vector3) -> float:
        """Solid-angle density of sampling dir_out; equal to the phase function."""
        return self.eval(dir_in, dir_out).x


@dataclass(frozen=True, slots=True)
class HenyeyGreenstein:
    """Henyey-Greenstein phase function with asymmetry parameter g."""

    g: float

    def eval(self, dir_in: Vector3, dir_out: Vector3) -> Spectrum:
        """Value of the phase function for a pair of directions."""
        return make_const_spectrum(_henyey_greenstein(self.g, dot(dir_in, dir_out)))

    def sample(self, dir_in: Vector3, rnd_param: Vector2) -> Optional[Vector3]:
        """Importance-sample an outgoing direction proportional to the phase function."""
        g = self.g
        if abs(g) < _HG_ISOTROPIC_THRESHOLD:
            return _sample_uniform_sphere(rnd_param)
        tmp = (g * g - 1) / (2 * rnd_param.x * g - (g + 1))
        cos_elevation = (tmp * tmp - (1 + g * g)) / (2 * g)
        sin_elevation = math.sqrt(max(1 - cos_elevation * cos_elevation, 0.0))
        azimuth = 2 * math.pi * rnd_param.y
        return _to_world(
            dir_in,
            Vector3(
                sin_elevation * math.cos(azimuth),
                sin_elevation * math.sin(azimuth),
                cos_elevation,
            ),
        )

    def pdf(self, dir_in: Vector3, dir_out: Vector3) -> float:
        """Solid-angle density of sampling dir_out."""
        return _henyey_greenstein(self.g, dot(dir_in, dir_out))