# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Castle Escape -- a text adventure with a monster that hunts you."""

__version__ = "0.1.0"
