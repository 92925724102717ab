# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""GameSession -- one playthrough of a level.

The session owns the player's position and feeds the monster its two
notifications.  Per command:

  1. If the monster has already caught the player, the game is over.
  2. Parse and run the command.  Every room change calls
     ``monster.on_player_moved()`` after the player has moved.
  3. Call ``monster.on_player_action()`` once.

All output is returned as lines of text; the caller decides how to show
them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from castle.game.commands import HANDLERS, parse_command
from castle.game.events import run_entry_events
from castle.simulation.monster import Notice

if TYPE_CHECKING:
    from castle.simulation.monster import Monster
    from castle.world.level import Level
    from castle.world.location import Location

NOTICE_TEXT: dict[Notice, str] = {
    Notice.MONSTER_COMING: "The monster is coming! THE MONSTER IS COMING!",
    Notice.MONSTER_ARRIVED: "The monster lurches into the room. The monster is coming!",
    Notice.WALKED_INTO_MONSTER: "You've walked right into the same room as the monster!",
    Notice.ESCAPED: "You escaped the monster.",
    Notice.LOST_TRAIL: "The monster has lost your trail.",
}

CAUGHT_TEXT = ["The monster caught you and shredded you to pieces!", "GAME OVER"]


class GameSession:
    """Player position plus the command loop glue around a Monster."""

    def __init__(self, level: Level, monster: Monster) -> None:
        self.level = level
        self.monster = monster
        self.player_location: Location = level.start_room
        self.running = True
        self.won = False
        self.caught = False
        self.turns = 0

    def start(self) -> list[str]:
        """Opening text: welcome message and the first room."""
        lines = [self.level.welcome] if self.level.welcome else []
        lines.append("Type 'help' if you need help.")
        lines.extend(self.describe_room())
        return lines

    def handle(self, line: str) -> list[str]:
        """Process one line of player input."""
        if not self.running:
            return []

        if self.monster.is_caught():
            self.caught = True
            self.end()
            logger.info(f"Player caught after {self.turns} turns")
            return list(CAUGHT_TEXT)

        command = parse_command(line)
        handler = HANDLERS.get(command.verb) if command.verb is not None else None
        if handler is None:
            lines = ["I don't know what you mean."]
        else:
            lines = handler(self, command)
        self.turns += 1

        if self.running:
            notices = self.monster.on_player_action(self.player_location)
            lines.extend(NOTICE_TEXT[n] for n in notices)
        return lines

    def move_player(self, destination: Location, depth: int = 0) -> list[str]:
        """Put the player in *destination*, tell the monster, run entry events."""
        self.player_location = destination
        lines = self.describe_room()
        notices = self.monster.on_player_moved(destination)
        lines.extend(NOTICE_TEXT[n] for n in notices)
        lines.extend(run_entry_events(self, destination, depth))
        return lines

    def describe_room(self) -> list[str]:
        room = self.player_location
        lines = [f"You are in the {room.name}."]
        if room.description:
            lines.append(room.description)
        if room.exits:
            lines.append("Exits: " + " ".join(room.exits))
        return lines

    def end(self, won: bool = False) -> None:
        self.running = False
        self.won = self.won or won
