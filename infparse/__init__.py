"""Parse Windows INF setup files into sections and entries."""

__version__ = "0.2.0"
__all__ = ["types", "errors", "lines", "sections", "inffile"]