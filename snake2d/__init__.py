"""A snake arcade game on a small software-rendered canvas, with its canvas, image, font and window pieces."""

__version__ = "0.1.0"