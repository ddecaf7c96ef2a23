import math

import pytest

from lajolla.ray import Ray
from lajolla.sphere import Sphere, solve_quadratic
from lajolla.vector import Vector2, Vector3, cross, distance, dot, length, normalize

UNIT = Sphere(Vector3(0.0, 0.0, 0.0), 1.0)
OFFSET = Sphere(Vector3(1.0, 2.0, -3.0), 2.0)


@pytest.mark.parametrize("a,b,c", [(1.0, -3.0, 2.0), (2.0, 5.0, -3.0), (1.0, 4.0, 4.0)])
def test_solve_quadratic_roots_satisfy_equation(a, b, c):
    roots = solve_quadratic(a, b, c)
    assert roots is not None
    for t in roots:
        assert a * t * t + b * t + c == pytest.approx(0.0, abs=1e-9)


def test_solve_quadratic_negative_discriminant():
    assert solve_quadratic(1.0, 0.0, 1.0) is None


def test_solve_quadratic_degenerate():
    assert solve_quadratic(0.0, 0.0, 1.0) is None
    assert solve_quadratic(0.0, 2.0, -4.0) == (2.0, 2.0)


def test_bounds():
    lower, upper = OFFSET.bounds()
    assert lower == Vector3(-1.0, 0.0, -5.0)
    assert upper == Vector3(3.0, 4.0, -1.0)


def test_intersect_from_outside():
    ray = Ray(Vector3(0.0, 0.0, -3.0), Vector3(0.0, 0.0, 1.0))
    hit = UNIT.intersect(ray)
    assert hit is not None
    assert hit.t == pytest.approx(2.0)
    assert distance(hit.position, Vector3(0.0, 0.0, -1.0)) < 1e-9
    assert hit.uv.y == pytest.approx(0.5)
    assert UNIT.occluded(ray)


def test_intersect_from_inside_hits_far_side():
    ray = Ray(Vector3(1.0, 2.0, -3.0), normalize(Vector3(1.0, 1.0, 0.0)))
    hit = OFFSET.intersect(ray)
    assert hit is not None
    assert hit.t == pytest.approx(OFFSET.radius)
    assert length(hit.geometric_normal) == pytest.approx(OFFSET.radius)
    assert dot(hit.geometric_normal, ray.dir) > 0


def test_intersect_respects_interval():
    ray = Ray(Vector3(0.0, 0.0, -3.0), Vector3(0.0, 0.0, 1.0), 0.0, 1.5)
    assert UNIT.intersect(ray) is None
    assert not UNIT.occluded(ray)


def test_miss():
    ray = Ray(Vector3(0.0, 5.0, -3.0), Vector3(0.0, 0.0, 1.0))
    assert UNIT.intersect(ray) is None
    assert not UNIT.occluded(ray)


def test_surface_area():
    assert UNIT.surface_area() == pytest.approx(4 * math.pi)


@pytest.mark.parametrize("uv", [Vector2(0.1, 0.2), Vector2(0.7, 0.9), Vector2(0.5, 0.5)])
def test_sample_point_from_outside_lies_on_visible_cap(uv):
    ref = Vector3(4.0, -1.0, 2.0)
    pn = OFFSET.sample_point(ref, uv)
    assert distance(pn.position, OFFSET.position) == pytest.approx(OFFSET.radius)
    assert length(pn.normal) == pytest.approx(1.0)
    outward = (pn.position - OFFSET.position) / OFFSET.radius
    assert distance(outward, pn.normal) < 1e-9
    assert dot(pn.normal, normalize(ref - pn.position)) >= -1e-9


def test_sample_point_from_inside_is_uniform():
    ref = Vector3(1.5, 2.0, -3.0)
    pn = OFFSET.sample_point(ref, Vector2(0.3, 0.4))
    assert distance(pn.position, OFFSET.position) == pytest.approx(OFFSET.radius)
    assert OFFSET.pdf_point(pn, ref) == pytest.approx(1 / OFFSET.surface_area())


def test_pdf_point_is_uniform_in_solid_angle():
    ref = Vector3(4.0, -1.0, 2.0)
    densities = []
    for uv in (Vector2(0.1, 0.2), Vector2(0.6, 0.8), Vector2(0.9, 0.3)):
        pn = OFFSET.sample_point(ref, uv)
        direction = normalize(pn.position - ref)
        pdf_area = OFFSET.pdf_point(pn, ref)
        densities.append(
            pdf_area * distance(ref, pn.position) ** 2 / abs(dot(pn.normal, direction))
        )
    assert densities[0] == pytest.approx(densities[1], rel=1e-6)
    assert densities[0] == pytest.approx(densities[2], rel=1e-6)


def test_shading_info_frame_is_orthonormal():
    sphere = Sphere(Vector3(0.0, 0.0, 0.0), 2.0)
    st = Vector2(0.3, 1.0)
    normal = Vector3(0.0, 0.0, 1.0)
    info = sphere.shading_info(st, normal)
    assert info.uv == st
    assert info.normal == normal
    assert length(info.tangent) == pytest.approx(1.0)
    assert length(info.bitangent) == pytest.approx(1.0)
    assert dot(info.tangent, info.normal) == pytest.approx(0.0, abs=1e-12)
    assert distance(info.bitangent, cross(info.normal, info.tangent)) < 1e-12
    assert info.mean_curvature == pytest.approx(1 / sphere.radius)
    assert info.inv_uv_size > 0