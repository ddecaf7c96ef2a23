# lajolla

Core pieces of a physically based renderer, in plain Python with no
third-party dependencies. Everything is built on small immutable
dataclasses.

## Modules

- `lajolla.vector` – frozen `Vector2` and `Vector3` with component-wise
  arithmetic, indexing and unpacking, plus `dot`, `cross`, `length`,
  `length_squared`, `normalize` (the zero vector stays zero), `distance`,
  `distance_squared`, `average`, `max_component`, `elementwise_max`,
  `has_nan`, `is_finite` (true if any component is finite) and `build_basis`,
  which returns two tangents completing an orthonormal basis around a unit
  normal.
- `lajolla.spectrum` – RGB spectra (a `Spectrum` is a `Vector3`):
  `make_zero_spectrum`, `make_const_spectrum`, `from_rgb`, `to_rgb`,
  `spectrum_sqrt`, `spectrum_exp`, `luminance`, `avg`; analytic fits of the
  CIE 1931 colour-matching functions (`x_fit_1931`, `y_fit_1931`,
  `z_fit_1931`, `xyz_integral_coeff`); `integrate_xyz`, which integrates
  `(wavelength, value)` samples sorted by wavelength from 400 nm to 700 nm;
  `xyz_to_rgb` and `srgb_to_rgb`.
- `lajolla.pcg` – `Pcg32`, the PCG32 (XSH RR) generator. `Pcg32(stream_id, seed)`
  (both optional) selects an independent stream; `next_uint32`, `next_float`
  (single-precision in [0, 1)) and `next_double` (double-precision in [0, 1))
  draw numbers.
- `lajolla.ray` – `Ray` (`org`, `dir`, `tnear`, `tfar`), `PointAndNormal` and
  `RayDifferential` (`radius`, `spread`) with `init_ray_differential`,
  `transfer`, `reflect` and `refract`.
- `lajolla.phase_function` – `IsotropicPhase` and `HenyeyGreenstein(g)`, each
  with `eval`, `sample` and `pdf`. Henyey-Greenstein falls back to uniform
  sphere sampling when `|g| < 1e-3`.
- `lajolla.sphere` – `Sphere(position, radius)` with `bounds`, `intersect`
  (returns a `SphereHit` or `None`), `occluded`, `surface_area`,
  `sample_point` and `pdf_point` for light sampling, and `shading_info`
  (returns a `ShadingInfo`); also `solve_quadratic`.
- `lajolla.texture` – `ConstantTexture` and `CheckerboardTexture`, generic
  over floats and `Vector3`, each with `eval(uv, footprint)`.
- `lajolla.progress` – `ProgressReporter(total_work, stream)`, a thread-safe
  one-line progress display written to `stream` (standard output by default)
  via `update(num)` and `done()`.
- `lajolla.timer` – `Timer`, whose `tick()` returns the seconds since the
  previous tick. A fresh timer starts at the epoch, so call `tick()` once
  before timing anything.

## Example

```python
from lajolla.pcg import Pcg32
from lajolla.ray import Ray
from lajolla.sphere import Sphere
from lajolla.vector import Vector3

rng = Pcg32(stream_id=1)
sphere = Sphere(position=Vector3(0, 0, -3), radius=1.0)
ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1), 0.0, float("inf"))

hit = sphere.intersect(ray)
if hit is not None:
    print(hit.t, hit.position)  # 2.0 (0, 0, -2)

print(rng.next_double())
```

## What this package does not do

It is a set of building blocks, not a renderer. There is no scene loading,
no triangle meshes or acceleration structure, no materials or lights, no
image input or output, no image or mipmapped textures, no integrator that
renders pixels, and no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```