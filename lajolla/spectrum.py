"""RGB spectra and conversions between spectral data, CIE XYZ and linear RGB."""

from __future__ import annotations

import math
from typing import Iterable, Tuple

from lajolla.vector import Vector3

Spectrum = Vector3

_CIE_Y_INTEGRAL = 106.856895
_WAVELENGTH_BEGIN = 400
_WAVELENGTH_END = 700


def make_zero_spectrum() -> Spectrum:
    """A spectrum that is zero everywhere."""
    return Vector3(0.0, 0.0, 0.0)


def make_const_spectrum(v: float) -> Spectrum:
    """A spectrum with the same value in every channel."""
    return Vector3(v, v, v)


def from_rgb(rgb: Vector3) -> Spectrum:
    """Spectrum from linear RGB; the channels are copied as they are."""
    r, g, b = rgb
    return Vector3(float(r), float(g), float(b))


def to_rgb(s: Spectrum) -> Vector3:
    """Linear RGB of a spectrum; the channels are copied as they are."""
    r, g, b = s
    return Vector3(float(r), float(g), float(b))


def spectrum_sqrt(s: Spectrum) -> Spectrum:
    """Channel-wise square root, with negative channels clamped to zero."""
    return Vector3(*(math.sqrt(max(c, 0.0)) for c in s))


def spectrum_exp(s: Spectrum) -> Spectrum:
    """Channel-wise exponential."""
    return Vector3(*(math.exp(c) for c in s))


def luminance(s: Spectrum) -> float:
    """Relative luminance of a linear RGB spectrum."""
    return s.x * 0.212671 + s.y * 0.715160 + s.z * 0.072169


def avg(s: Spectrum) -> float:
    """Mean over the channels."""
    return (s.x + s.y + s.z) / 3


def x_fit_1931(wavelength: float) -> float:
    """Analytic fit of the CIE 1931 x colour-matching function."""
    t1 = (wavelength - 442.0) * (0.0624 if wavelength < 442.0 else 0.0374)
    t2 = (wavelength - 599.8) * (0.0264 if wavelength < 599.8 else 0.0323)
    t3 = (wavelength - 501.1) * (0.0490 if wavelength < 501.1 else 0.0382)
    return (
        0.362 * math.exp(-0.5 * t1 * t1)
        + 1.056 * math.exp(-0.5 * t2 * t2)
        - 0.065 * math.exp(-0.5 * t3 * t3)
    )


def y_fit_1931(wavelength: float) -> float:
    """Analytic fit of the CIE 1931 y colour-matching function."""
    t1 = (wavelength - 568.8) * (0.0213 if wavelength < 568.8 else 0.0247)
    t2 = (wavelength - 530.9) * (0.0613 if wavelength < 530.9 else 0.0322)
    return 0.821 * math.exp(-0.5 * t1 * t1) + 0.286 * math.exp(-0.5 * t2 * t2)


def z_fit_1931(wavelength: float) -> float:
    """Analytic fit of the CIE 1931 z colour-matching function."""
    t1 = (wavelength - 437.0) * (0.0845 if wavelength < 437.0 else 0.0278)
    t2 = (wavelength - 459.0) * (0.0385 if wavelength < 459.0 else 0.0725)
    return 1.217 * math.exp(-0.5 * t1 * t1) + 0.681 * math.exp(-0.5 * t2 * t2)


def xyz_integral_coeff(wavelength: float) -> Vector3:
    """The three colour-matching functions evaluated at one wavelength."""
    return Vector3(
        x_fit_1931(wavelength), y_fit_1931(wavelength), z_fit_1931(wavelength)
    )


def integrate_xyz(data: Iterable[Tuple[float, float]]) -> Vector3:
    """Integrate spectral samples sorted by wavelength into CIE XYZ.

    Integrates from 400 nm to 700 nm in 1 nm steps, interpolating the samples
    linearly and holding the end values outside their range.
    """
    samples = list(data)
    if not samples:
        return Vector3(0.0, 0.0, 0.0)
    last = len(samples) - 1
    first_wave = samples[0][0]
    total = Vector3(0.0, 0.0, 0.0)
    pos = 0
    for step in range(_WAVELENGTH_BEGIN, _WAVELENGTH_END + 1):
        wavelength = float(step)
        while pos < last and not (
            (samples[pos][0] <= wavelength < samples[pos + 1][0])
            or first_wave > wavelength
        ):
            pos += 1
        if pos < last and first_wave <= wavelength:
            curr_wave, curr_data = samples[pos]
            next_wave, next_data = samples[pos + 1]
            span = next_wave - curr_wave
            measurement = (
                curr_data * (next_wave - wavelength) / span
                + next_data * (wavelength - curr_wave) / span
            )
        else:
            measurement = samples[pos][1]
        total = total + xyz_integral_coeff(wavelength) * measurement
    span = float(_WAVELENGTH_END - _WAVELENGTH_BEGIN)
    return total * (span / (_CIE_Y_INTEGRAL * span))


def xyz_to_rgb(xyz: Vector3) -> Vector3:
    """Convert CIE XYZ to linear RGB."""
    x, y, z = xyz
    return Vector3(
        3.240479 * x - 1.537150 * y - 0.498535 * z,
        -0.969256 * x + 1.875991 * y + 0.041556 * z,
        0.055648 * x - 0.204043 * y + 1.057311 * z,
    )


def _srgb_channel_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def srgb_to_rgb(srgb: Vector3) -> Vector3:
    """Convert gamma-encoded sRGB to linear RGB."""
    return Vector3(*(_srgb_channel_to_linear(c) for c in srgb))