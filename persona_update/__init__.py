"""HTTP service for updating person records stored in MongoDB."""

__version__ = "0.1.0"
__all__ = ["__version__"]