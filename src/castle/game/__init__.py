# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""game/ package -- command dispatch and room events around the monster."""

from .session import GameSession

__all__ = ["GameSession"]
