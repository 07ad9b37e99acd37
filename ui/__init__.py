# ui/__init__.py
from .api import ApiError, HostelApi
__all__ = ["ApiError", "HostelApi"]
