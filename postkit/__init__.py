"""Postkit: scaffold dated blog posts with front matter."""

__all__ = ["__version__"]

__version__ = "0.1.0"
