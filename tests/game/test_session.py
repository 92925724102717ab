# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Tests for GameSession -- commands, room events and monster notifications."""

from __future__ import annotations

import pytest

from castle.game.commands import Verb, parse_command
from castle.game.session import CAUGHT_TEXT, NOTICE_TEXT, GameSession
from castle.simulation.monster import Monster, Notice
from castle.world.level import build_level

pytestmark = pytest.mark.integration

T = 1000

_LEVEL = {
    "welcome": "Welcome to the castle.",
    "start_room": "cell",
    "safe_room": "chapel",
    "monster": {"start_room": "crypt", "move_chance": 0.0, "move_time_ms": T},
    "rooms": [
        {"id": "cell", "description": "Damp.", "exits": {"north": "hall"}},
        {"id": "hall", "exits": {"south": "cell", "down": "crypt", "north": "chapel", "east": "trapdoor"}},
        {"id": "crypt", "exits": {"up": "hall"}},
        {"id": "chapel", "exits": {"south": "hall", "north": "gate"}},
        {"id": "gate", "exits": {"south": "chapel"},
         "events": [{"kind": "quit", "description": "You are free."}]},
        {"id": "trapdoor", "exits": {"west": "hall"},
         "events": [{"kind": "teleport", "destination": "crypt", "description": "You fall!"}]},
    ],
}


@pytest.fixture
def session(clock):
    level = build_level(_LEVEL)
    monster = Monster.from_level(level, clock=clock)
    return GameSession(level, monster)


def _play(session: GameSession, *commands: str) -> list[str]:
    lines: list[str] = []
    for command in commands:
        lines.extend(session.handle(command))
    return lines


class TestParsing:

    def test_verb_and_argument(self):
        command = parse_command("  GO North ")
        assert command.verb is Verb.GO
        assert command.argument == "north"

    def test_unknown_verb(self):
        assert parse_command("dance").verb is None

    def test_empty_line(self):
        command = parse_command("   ")
        assert command.verb is None
        assert command.argument is None


class TestCommands:

    def test_start_text(self, session):
        lines = session.start()
        assert lines[0] == "Welcome to the castle."
        assert "You are in the cell." in lines
        assert "Exits: north" in lines

    def test_unknown_command(self, session):
        assert session.handle("dance") == ["I don't know what you mean."]
        assert session.turns == 1

    def test_go_moves_player(self, session):
        lines = session.handle("go north")
        assert session.player_location.id == "hall"
        assert "You are in the hall." in lines

    def test_go_without_direction(self, session):
        assert session.handle("go") == ["Go where?"]

    def test_go_through_missing_door(self, session):
        assert session.handle("go west") == ["There is no door!"]
        assert session.player_location.id == "cell"

    def test_peek_sees_monster(self, session):
        session.handle("go north")
        lines = session.handle("peek down")
        assert "You see the monster!" in lines
        assert session.player_location.id == "hall"
        assert session.monster.is_waiting_for_player()

    def test_peek_quiet_room(self, session):
        lines = session.handle("peek north")
        assert "It seems quiet in there." in lines

    def test_help_lists_verbs(self, session):
        lines = session.handle("help")
        assert any("go" in line and "peek" in line and "quit" in line for line in lines)

    def test_quit(self, session):
        session.handle("quit")
        assert not session.running
        assert not session.won
        assert session.handle("look") == []


class TestMonsterNotifications:

    def test_walking_into_monster_starts_hunt(self, session):
        lines = _play(session, "go north", "go down")
        assert NOTICE_TEXT[Notice.WALKED_INTO_MONSTER] in lines
        assert NOTICE_TEXT[Notice.MONSTER_COMING] in lines
        assert session.monster.is_hunting()

    def test_non_movement_command_still_advances_chase(self, session, clock):
        _play(session, "go north", "go down", "go up", "go south")
        monster = session.monster
        assert monster.current_location.id == "crypt"
        clock.advance(T)
        session.handle("look")
        assert monster.current_location.id == "hall"

    def test_escape_to_chapel(self, session):
        lines = _play(session, "go north", "go down", "go up", "go north")
        assert NOTICE_TEXT[Notice.ESCAPED] in lines
        assert not session.monster.is_hunting()
        assert session.running

    def test_caught(self, session, clock):
        _play(session, "go north", "go down")
        clock.advance(T + 1)
        lines = session.handle("look")
        assert lines == CAUGHT_TEXT
        assert session.caught
        assert not session.running
        assert session.handle("look") == []

    def test_not_caught_while_budget_remains(self, session, clock):
        _play(session, "go north", "go down", "go up", "go south")
        clock.advance(2 * T)
        lines = session.handle("look")
        assert lines != CAUGHT_TEXT
        assert session.running


class TestRoomEvents:

    def test_teleport_notifies_monster(self, session):
        lines = _play(session, "go north", "go east")
        assert "You fall!" in lines
        assert session.player_location.id == "crypt"
        assert NOTICE_TEXT[Notice.WALKED_INTO_MONSTER] in lines
        assert session.monster.is_hunting()

    def test_quit_event_wins(self, session):
        lines = _play(session, "go north", "go north", "go north")
        assert "You are free." in lines
        assert session.won
        assert not session.running

    def test_teleport_loop_is_cut_off(self, clock):
        raw = {
            "start_room": "a",
            "safe_room": "safe",
            "monster": {"start_room": "lair"},
            "rooms": [
                {"id": "a", "exits": {"east": "loop1", "down": "lair"}},
                {"id": "lair", "exits": {"up": "a", "east": "safe"}},
                {"id": "safe", "exits": {"west": "lair"}},
                {"id": "loop1", "exits": {"west": "a"},
                 "events": [{"kind": "teleport", "destination": "loop2"}]},
                {"id": "loop2", "exits": {"west": "a"},
                 "events": [{"kind": "teleport", "destination": "loop1"}]},
            ],
        }
        level = build_level(raw)
        session = GameSession(level, Monster.from_level(level, clock=clock))
        session.handle("go east")
        assert session.player_location.id in {"loop1", "loop2"}
        assert session.running
