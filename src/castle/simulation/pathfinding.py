# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Shortest paths through the location graph.

Every exit costs one step, so a uniform-cost search collapses into a
breadth-first search: the frontier is a FIFO queue and the first time
the goal is dequeued its path is minimal.

    path = find_path(monster_room, player_room)
    if path is None:
        ...  # unreachable, the monster cannot hunt from here

Ties between equally short paths follow the exit order of each room.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Collection

if TYPE_CHECKING:
    from castle.world.location import Location


def find_path(
    start: Location,
    goal: Location,
    avoid: Collection[Location] = (),
) -> list[Location] | None:
    """Return the shortest room sequence ``[start, ..., goal]``.

    Both ends are included, so a path of length 1 means *start is goal*.
    Rooms in *avoid* are never passed through, though one may still be
    the goal itself.  Returns None if *goal* cannot be reached.
    """
    came_from: dict[Location, Location] = {}
    frontier: deque[Location] = deque([start])
    queued: set[Location] = {start}
    closed: set[Location] = set()

    while frontier:
        current = frontier.popleft()
        if current is goal:
            return _reconstruct(came_from, start, goal)

        closed.add(current)
        for neighbor in current.neighbors:
            if neighbor in closed or neighbor in queued:
                continue
            if neighbor in avoid and neighbor is not goal:
                continue
            came_from[neighbor] = current
            queued.add(neighbor)
            frontier.append(neighbor)

    return None


def path_length(start: Location, goal: Location) -> int | None:
    """Hop count between two rooms, or None if unreachable."""
    path = find_path(start, goal)
    if path is None:
        return None
    return len(path) - 1


def _reconstruct(
    came_from: dict[Location, Location], start: Location, goal: Location
) -> list[Location]:
    """Walk predecessors back from *goal* and reverse."""
    path = [goal]
    node = goal
    while node is not start:
        node = came_from[node]
        path.append(node)
    path.reverse()
    return path
