"""Building blocks for a physically based renderer: vectors, spectra, PCG random
numbers, rays, phase functions, spheres, textures, progress reporting and timing."""

__version__ = "0.1.0"