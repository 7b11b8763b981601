"""API routers."""
from textfreq.routers import analysis

__all__ = ["analysis"]
