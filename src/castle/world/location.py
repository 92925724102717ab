# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Location graph -- rooms connected by labelled exits.

Rooms are nodes, exits are directed labelled edges.  The graph is built
once from a level description, frozen, and from then on only read.  The
pursuit engine holds plain references into it.

Usage:
    graph = LocationGraph()
    graph.add(Location("hall", "Great Hall"))
    graph.add(Location("crypt", "Crypt"))
    graph.connect("hall", "down", "crypt")
    graph.connect("crypt", "up", "hall")
    graph.freeze()
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

import networkx as nx

from castle.errors import GraphFrozenError


class Location:
    """A room in the castle.

    Equality is identity: two rooms with the same id in different graphs
    are different rooms.  Hashing uses the id so rooms key dicts cheaply.
    """

    __slots__ = ("id", "name", "description", "events", "_exits", "_frozen")

    def __init__(
        self,
        location_id: str,
        name: str = "",
        description: str = "",
        events: tuple = (),
    ) -> None:
        self.id = location_id
        self.name = name or location_id
        self.description = description
        self.events = tuple(events)
        self._exits: dict[str, Location] = {}
        self._frozen = False

    @property
    def exits(self) -> Mapping[str, Location]:
        """Read-only view of exit label -> neighbouring room."""
        return MappingProxyType(self._exits)

    @property
    def neighbors(self) -> list[Location]:
        """Neighbouring rooms in exit insertion order."""
        return list(self._exits.values())

    def exit(self, label: str) -> Location | None:
        return self._exits.get(label)

    def _add_exit(self, label: str, target: Location) -> None:
        if self._frozen:
            raise GraphFrozenError(f"Location '{self.id}' is frozen")
        self._exits[label] = target

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __repr__(self) -> str:
        return f"Location({self.id!r})"


class LocationGraph:
    """All rooms of a level, keyed by id."""

    def __init__(self) -> None:
        self._locations: dict[str, Location] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, location: Location) -> Location:
        """Register a room.  Ids must be unique."""
        if self._frozen:
            raise GraphFrozenError("Location graph is frozen")
        if location.id in self._locations:
            raise ValueError(f"Duplicate location id '{location.id}'")
        self._locations[location.id] = location
        return location

    def connect(self, from_id: str, label: str, to_id: str) -> None:
        """Add a one-way exit labelled *label* from one room to another."""
        if self._frozen:
            raise GraphFrozenError("Location graph is frozen")
        self._locations[from_id]._add_exit(label, self._locations[to_id])

    def freeze(self) -> LocationGraph:
        """Make the graph and every room read-only.  Idempotent."""
        for location in self._locations.values():
            location._frozen = True
        self._frozen = True
        return self

    def get(self, location_id: str) -> Location | None:
        return self._locations.get(location_id)

    def __getitem__(self, location_id: str) -> Location:
        return self._locations[location_id]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Location):
            return self._locations.get(item.id) is item
        return item in self._locations

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations.values())

    def __len__(self) -> int:
        return len(self._locations)

    def to_networkx(self) -> nx.DiGraph:
        """Export as a directed NetworkX graph.

        Nodes are room ids; each edge carries its exit ``label``.
        """
        G = nx.DiGraph()
        for location in self._locations.values():
            G.add_node(location.id, name=location.name)
        for location in self._locations.values():
            for label, target in location.exits.items():
                G.add_edge(location.id, target.id, label=label)
        return G
