# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Exception hierarchy for the castle game.

Only configuration problems are fatal, and only at startup.  Everything
that can go wrong during play (no path, nowhere to wander) is absorbed
into queryable state by the pursuit engine.
"""

from __future__ import annotations


class CastleError(Exception):
    """Base class for all castle errors."""


class ConfigurationError(CastleError):
    """The level or monster configuration can never produce a valid game."""


class LevelFormatError(ConfigurationError):
    """The level file is unreadable or does not match the level schema."""


class GraphFrozenError(CastleError):
    """A location graph was mutated after it was frozen."""


class InvalidTransitionError(CastleError):
    """A state machine was asked to follow an edge it does not have."""
