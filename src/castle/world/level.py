# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Level files -- JSON description of the castle.

A level names its rooms and exits, where the player and the monster
start, the safe room, and how the monster behaves.  Parsing is done by
pydantic models; cross-references and reachability are checked after
the graph is built, so a level that loads is always playable.

Schema::

    {
      "welcome": "You wake up in a cold cell.",
      "start_room": "cell",
      "safe_room": "chapel",
      "monster": {"start_room": "crypt", "move_chance": 0.3, "move_time_ms": 4000},
      "rooms": [
        {"id": "cell", "name": "Cell", "description": "...",
         "exits": {"north": "hall"},
         "events": [{"kind": "teleport", "destination": "hall"}]}
      ]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Union

import networkx as nx
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from castle.errors import ConfigurationError, LevelFormatError
from castle.world.location import Location, LocationGraph


class TeleportEvent(BaseModel):
    kind: Literal["teleport"]
    destination: str
    description: str = ""


class QuitEvent(BaseModel):
    kind: Literal["quit"]
    description: str = ""


RoomEvent = Union[TeleportEvent, QuitEvent]


class RoomConfig(BaseModel):
    id: str = Field(min_length=1)
    name: str = ""
    description: str = ""
    exits: dict[str, str] = Field(default_factory=dict)
    events: list[RoomEvent] = Field(default_factory=list)


class MonsterConfig(BaseModel):
    start_room: str
    move_chance: float = Field(default=0.25, ge=0.0, le=1.0)
    move_time_ms: int = Field(default=4000, gt=0)


class LevelConfig(BaseModel):
    welcome: str = ""
    start_room: str
    safe_room: str
    monster: MonsterConfig
    rooms: list[RoomConfig]


@dataclass(frozen=True)
class Level:
    """A loaded, validated level.  The graph is frozen."""

    graph: LocationGraph
    start_room: Location
    safe_room: Location
    monster_start: Location
    monster_move_chance: float
    monster_move_time_ms: int
    welcome: str = ""


def load_level(path: str | Path) -> Level:
    """Read and validate a level file.

    Raises:
        LevelFormatError: the file cannot be read or fails the schema.
        ConfigurationError: the level is well formed but unplayable.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise LevelFormatError(f"Cannot read level '{path}': {e}") from e
    level = build_level(raw)
    logger.info(f"Level loaded from {path}: {len(level.graph)} rooms")
    return level


def build_level(raw: dict) -> Level:
    """Validate a decoded level document and build its frozen graph."""
    try:
        config = LevelConfig.model_validate(raw)
    except ValidationError as e:
        raise LevelFormatError(f"Invalid level: {e}") from e

    if not config.rooms:
        raise ConfigurationError("Level has no rooms")

    graph = LocationGraph()
    for room in config.rooms:
        if room.id in graph:
            raise ConfigurationError(f"Duplicate room id '{room.id}'")
        graph.add(Location(room.id, room.name, room.description, tuple(room.events)))

    for room in config.rooms:
        for label, target in room.exits.items():
            _require_room(graph, target, f"exit '{label}' of room '{room.id}'")
            graph.connect(room.id, label, target)
        for event in room.events:
            if isinstance(event, TeleportEvent):
                _require_room(graph, event.destination, f"teleport event in room '{room.id}'")
    graph.freeze()

    start = _require_room(graph, config.start_room, "start_room")
    safe = _require_room(graph, config.safe_room, "safe_room")
    monster_start = _require_room(graph, config.monster.start_room, "monster.start_room")
    if monster_start is safe:
        raise ConfigurationError("Monster cannot start in the safe room")

    G = graph.to_networkx()
    if not nx.has_path(G, monster_start.id, safe.id):
        raise ConfigurationError(
            f"Safe room '{safe.id}' is unreachable from monster start '{monster_start.id}'"
        )
    _warn_about_layout(G, start.id, safe.id, monster_start.id)

    return Level(
        graph=graph,
        start_room=start,
        safe_room=safe,
        monster_start=monster_start,
        monster_move_chance=config.monster.move_chance,
        monster_move_time_ms=config.monster.move_time_ms,
        welcome=config.welcome,
    )


def _require_room(graph: LocationGraph, room_id: str, what: str) -> Location:
    location = graph.get(room_id)
    if location is None:
        raise ConfigurationError(f"Unknown room '{room_id}' referenced by {what}")
    return location


def _warn_about_layout(G: nx.DiGraph, start_id: str, safe_id: str, monster_id: str) -> None:
    """Log layouts that are legal but probably mistakes."""
    reachable = nx.descendants(G, start_id) | {start_id}
    unreachable = sorted(set(G.nodes) - reachable)
    if unreachable:
        logger.warning(f"Rooms unreachable from the start room: {', '.join(unreachable)}")

    # Rooms the monster can walk to without crossing the safe room.
    roaming = G.subgraph(n for n in G.nodes if n != safe_id)
    for node in nx.descendants(roaming, monster_id) | {monster_id}:
        successors = set(G.successors(node))
        if successors == {safe_id}:
            logger.warning(f"Room '{node}' only leads to the safe room; the monster will stall there")
