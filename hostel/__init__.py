# hostel/__init__.py
from .models import Room, SAMPLE_ROOMS
from .store import HostelManager
from .utils import parse_int_safe, parse_bool_safe

__all__ = ["Room", "SAMPLE_ROOMS", "HostelManager", "parse_int_safe", "parse_bool_safe"]
