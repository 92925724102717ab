# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Room-entry events, run when the player walks into a room."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from castle.world.level import QuitEvent, TeleportEvent

if TYPE_CHECKING:
    from castle.game.session import GameSession
    from castle.world.location import Location

# Teleports can chain; stop before a cycle of teleporting rooms loops forever.
MAX_EVENT_CHAIN = 8


def run_entry_events(session: GameSession, room: Location, depth: int = 0) -> list[str]:
    """Run every event attached to *room*, in order."""
    lines: list[str] = []
    for event in room.events:
        if not session.running:
            break
        if event.description:
            lines.append(event.description)

        if isinstance(event, TeleportEvent):
            if depth >= MAX_EVENT_CHAIN:
                logger.warning(f"Teleport chain from '{room.id}' cut off after {depth} hops")
                break
            destination = session.level.graph[event.destination]
            lines.extend(session.move_player(destination, depth=depth + 1))
            # The player is no longer in this room.
            break
        if isinstance(event, QuitEvent):
            session.end(won=True)
    return lines
