# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""world/ package -- rooms, exits and level files."""

from .level import Level, build_level, load_level
from .location import Location, LocationGraph

__all__ = ["Level", "Location", "LocationGraph", "build_level", "load_level"]
