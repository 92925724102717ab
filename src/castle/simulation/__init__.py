# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""simulation/ package -- the monster and how it finds its way.

Re-exports Monster as the primary entry point.
"""

from .monster import Monster, Notice
from .pathfinding import find_path, path_length

__all__ = ["Monster", "Notice", "find_path", "path_length"]
