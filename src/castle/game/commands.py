# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Player commands -- verb lookup and the handlers behind each verb."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from castle.game.session import GameSession


class Verb(str, Enum):
    GO = "go"
    PEEK = "peek"
    LOOK = "look"
    WAIT = "wait"
    HELP = "help"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    verb: Verb | None
    argument: str | None = None
    raw: str = ""


def parse_command(line: str) -> Command:
    """Split a line into verb and optional argument.  Unknown verbs map to None."""
    words = line.strip().lower().split()
    if not words:
        return Command(None, raw=line)
    try:
        verb = Verb(words[0])
    except ValueError:
        verb = None
    argument = words[1] if len(words) > 1 else None
    return Command(verb, argument, raw=line)


def _go(session: GameSession, command: Command) -> list[str]:
    if command.argument is None:
        return ["Go where?"]
    destination = session.player_location.exit(command.argument)
    if destination is None:
        return ["There is no door!"]
    return session.move_player(destination)


def _peek(session: GameSession, command: Command) -> list[str]:
    if command.argument is None:
        return ["Peek where?"]
    neighbor = session.player_location.exit(command.argument)
    if neighbor is None:
        return ["There is no door!"]
    lines = [f"You peek into the {neighbor.name}."]
    if neighbor is session.monster.current_location:
        lines.append("You see the monster!")
    else:
        lines.append("It seems quiet in there.")
    return lines


def _look(session: GameSession, command: Command) -> list[str]:
    return session.describe_room()


def _wait(session: GameSession, command: Command) -> list[str]:
    return ["You hold your breath and wait."]


def _help(session: GameSession, command: Command) -> list[str]:
    return [
        "You are lost in the castle, and something is down here with you.",
        "Your command words are:",
        "  " + "  ".join(verb.value for verb in Verb),
    ]


def _quit(session: GameSession, command: Command) -> list[str]:
    session.end()
    return ["You give up."]


HANDLERS: dict[Verb, Callable[[GameSession, Command], list[str]]] = {
    Verb.GO: _go,
    Verb.PEEK: _peek,
    Verb.LOOK: _look,
    Verb.WAIT: _wait,
    Verb.HELP: _help,
    Verb.QUIT: _quit,
}
