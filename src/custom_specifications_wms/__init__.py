"""Warehouse demo for the ``custom_specifications`` library."""

from .clock import Clock, fixed_clock, utc_now, whole_days
from .config import WarehouseSettings
from .sample_data import WarehouseSnapshot, build_snapshot

__all__ = [
    "Clock",
    "fixed_clock",
    "utc_now",
    "whole_days",
    "WarehouseSettings",
    "WarehouseSnapshot",
    "build_snapshot",
]
