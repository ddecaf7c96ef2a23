"""Analytic spheres: ray intersection, area sampling and shading frames."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from lajolla.ray import PointAndNormal, Ray
from lajolla.vector import (
    Vector2,
    Vector3,
    build_basis,
    cross,
    distance,
    distance_squared,
    dot,
    length,
    normalize,
)


def solve_quadratic(a: float, b: float, c: float) -> Optional[Tuple[float, float]]:
    """Numerically stable roots of a*t^2 + b*t + c = 0, or None if there are none."""
    if a == 0:
        if b == 0:
            return None
        root = -c / b
        return root, root
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root_discriminant = math.sqrt(discriminant)
    if b >= 0:
        return (-b - root_discriminant) / (2 * a), 2 * c / (-b - root_discriminant)
    return 2 * c / (-b + root_discriminant), (-b + root_discriminant) / (2 * a)


@dataclass(frozen=True, slots=True)
class SphereHit:
    """A ray-sphere intersection.

    The geometric normal is not normalised; uv holds azimuth / 2pi and elevation / pi
    with y as the up axis.
    """

    t: float
    position: Vector3
    geometric_normal: Vector3
    uv: Vector2


@dataclass(frozen=True, slots=True)
class ShadingInfo:
    """Shading parameters at a surface point: uv, an orthonormal frame and curvature."""

    uv: Vector2
    tangent: Vector3
    bitangent: Vector3
    normal: Vector3
    mean_curvature: float
    inv_uv_size: float


@dataclass(frozen=True, slots=True)
class Sphere:
    """A sphere given by its centre and radius."""

    position: Vector3
    radius: float

    def bounds(self) -> Tuple[Vector3, Vector3]:
        """Lower and upper corners of the axis-aligned bounding box."""
        return self.position - self.radius, self.position + self.radius

    def _hit_distance(self, ray: Ray) -> Optional[float]:
        v = ray.org - self.position
        a = dot(ray.dir, ray.dir)
        b = 2 * dot(ray.dir, v)
        c = dot(v, v) - self.radius * self.radius
        roots = solve_quadratic(a, b, c)
        if roots is None:
            return None
        t0, t1 = sorted(roots)
        t = -1.0
        if ray.tnear <= t0 < ray.tfar:
            t = t0
        if ray.tnear <= t1 < ray.tfar and t < 0:
            t = t1
        if ray.tnear <= t < ray.tfar:
            return t
        return None

    def intersect(self, ray: Ray) -> Optional[SphereHit]:
        """The nearest intersection within the ray's interval, or None."""
        t = self._hit_distance(ray)
        if t is None:
            return None
        p = ray.org + t * ray.dir
        geometric_normal = p - self.position
        cartesian = geometric_normal / self.radius
        elevation = math.acos(min(max(cartesian.y, -1.0), 1.0))
        azimuth = math.atan2(cartesian.z, cartesian.x)
        uv = Vector2(azimuth / (2 * math.pi), elevation / math.pi)
        return SphereHit(t, p, geometric_normal, uv)

    def occluded(self, ray: Ray) -> bool:
        """True if the ray hits the sphere within its interval."""
        return self._hit_distance(ray) is not None

    def surface_area(self) -> float:
        """Area of the sphere."""
        return 4 * math.pi * self.radius * self.radius

    def sample_point(self, ref_point: Vector3, uv: Vector2) -> PointAndNormal:
        """Sample a point on the sphere as seen from ref_point.

        From inside the whole sphere is sampled uniformly; from outside the
        cone of directions subtended by the sphere is sampled uniformly.
        """
        center = self.position
        r = self.radius
        if distance_squared(ref_point, center) < r * r:
            z = 1 - 2 * uv.x
            r_ = math.sqrt(max(0.0, 1 - z * z))
            phi = 2 * math.pi * uv.y
            offset = Vector3(r_ * math.cos(phi), r_ * math.sin(phi), z)
            return PointAndNormal(center + r * offset, offset)

        dir_to_center = normalize(center - ref_point)
        tangent, bitangent = build_basis(dir_to_center)
        sin_elevation_max_sq = r * r / distance_squared(ref_point, center)
        cos_elevation_max = math.sqrt(max(0.0, 1 - sin_elevation_max_sq))
        cos_elevation = (1 - uv.x) + uv.x * cos_elevation_max
        sin_elevation = math.sqrt(max(0.0, 1 - cos_elevation * cos_elevation))
        azimuth = uv.y * 2 * math.pi

        dc = distance(ref_point, center)
        ds = dc * cos_elevation - math.sqrt(
            max(0.0, r * r - dc * dc * sin_elevation * sin_elevation)
        )
        cos_alpha = (dc * dc + r * r - ds * ds) / (2 * dc * r)
        sin_alpha = math.sqrt(max(0.0, 1 - cos_alpha * cos_alpha))
        n_on_sphere = -(
            tangent * (sin_alpha * math.cos(azimuth))
            + bitangent * (sin_alpha * math.sin(azimuth))
            + dir_to_center * cos_alpha
        )
        return PointAndNormal(r * n_on_sphere + center, n_on_sphere)

    def pdf_point(self, point_on_shape: PointAndNormal, ref_point: Vector3) -> float:
        """Area-measure density of sample_point producing point_on_shape."""
        center = self.position
        r = self.radius
        if distance_squared(ref_point, center) < r * r:
            return 1 / self.surface_area()
        sin_elevation_max_sq = r * r / distance_squared(ref_point, center)
        cos_elevation_max = math.sqrt(max(0.0, 1 - sin_elevation_max_sq))
        pdf_solid_angle = 1 / (2 * math.pi * (1 - cos_elevation_max))
        p_on_sphere = point_on_shape.position
        direction = normalize(p_on_sphere - ref_point)
        return (
            pdf_solid_angle
            * abs(dot(point_on_shape.normal, direction))
            / distance_squared(ref_point, p_on_sphere)
        )

    def shading_info(self, st: Vector2, geometric_normal: Vector3) -> ShadingInfo:
        """Shading frame, curvature and uv scale at surface parameters st."""
        r = self.radius
        u, v = st.x, st.y
        dpdu = Vector3(-r * math.sin(u) * math.sin(v), r * math.cos(u) * math.sin(v), 0.0)
        dpdv = Vector3(
            r * math.cos(u) * math.cos(v),
            r * math.sin(u) * math.cos(v),
            -r * math.sin(v),
        )
        tangent = normalize(dpdu - geometric_normal * dot(geometric_normal, dpdu))
        bitangent = normalize(cross(geometric_normal, tangent))
        return ShadingInfo(
            uv=st,
            tangent=tangent,
            bitangent=bitangent,
            normal=geometric_normal,
            mean_curvature=1 / r,
            inv_uv_size=(length(dpdu) + length(dpdv)) / 2,
        )