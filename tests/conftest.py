# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Root conftest -- fake clock, scripted RNG and small graph builders."""

from __future__ import annotations

import random
from unittest.mock import MagicMock

import pytest

from castle.world.location import Location, LocationGraph


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


def build_graph(edges: dict[str, dict[str, str]], extra_rooms: tuple[str, ...] = ()) -> LocationGraph:
    """Build a frozen graph from ``{room: {label: target}}``.

    Rooms that only appear as targets are created too.
    """
    graph = LocationGraph()
    names: list[str] = []
    for room, exits in edges.items():
        for name in (room, *exits.values()):
            if name not in names:
                names.append(name)
    for name in extra_rooms:
        if name not in names:
            names.append(name)
    for name in names:
        graph.add(Location(name))
    for room, exits in edges.items():
        for label, target in exits.items():
            graph.connect(room, label, target)
    return graph.freeze()


def corridor_graph(n: int) -> LocationGraph:
    """Rooms r0..r{n-1} in a line, linked both ways by east/west."""
    edges: dict[str, dict[str, str]] = {f"r{i}": {} for i in range(n)}
    for i in range(n - 1):
        edges[f"r{i}"]["east"] = f"r{i + 1}"
        edges[f"r{i + 1}"]["west"] = f"r{i}"
    return build_graph(edges)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scripted_rng():
    """RNG whose rolls are set per test; choice() always takes the first option."""
    rng = MagicMock(spec=random.Random)
    rng.random.return_value = 0.0
    rng.choice.side_effect = lambda seq: seq[0]
    return rng


@pytest.fixture
def graph_builder():
    return build_graph


@pytest.fixture
def corridor():
    return corridor_graph
