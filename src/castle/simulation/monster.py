# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Monster -- the pursuit engine.

The monster lives in one of three behavioural states:

  - waiting_for_player: asleep in its lair until the first contact
  - idle: wanders to a random neighbouring room now and then
  - hunting: follows the shortest path toward the player

Contact (the monster wanders into the player's room, or the player walks
into the monster's room) starts a hunt.  A hunt gives the player an
escape budget of ``len(chase_path) * move_interval_ms``.  Moving away
from the monster adds one interval per extra room of distance; moving
toward it takes one away.  Reaching the safe room ends the hunt.  If the
budget runs out first, the player is caught.

Nothing runs in the background.  Time is only observed when the game
loop calls one of the two notification hooks:

  - on_player_action(): once per processed command
  - on_player_moved(): whenever the player changes room

Both return a list of Notice values for the presentation layer; the
engine itself never prints.
"""

from __future__ import annotations

import random
import time
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Callable

from loguru import logger

from castle.errors import ConfigurationError
from castle.simulation.pathfinding import find_path
from castle.simulation.state_machine import State, StateMachine

if TYPE_CHECKING:
    from castle.world.level import Level
    from castle.world.location import Location

WAITING_FOR_PLAYER = "waiting_for_player"
IDLE = "idle"
HUNTING = "hunting"


class Notice(str, Enum):
    """Things the player should be told about."""

    MONSTER_COMING = "monster_coming"
    MONSTER_ARRIVED = "monster_arrived"
    WALKED_INTO_MONSTER = "walked_into_monster"
    ESCAPED = "escaped"
    LOST_TRAIL = "lost_trail"


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Monster:
    """Pursuing antagonist bound to a frozen location graph.

    Args:
        start: Room the monster sleeps in until first contact.
        safe: Room the monster may never enter.
        wander_probability: Chance per player action that an idle monster
            moves to a neighbouring room.
        move_interval_ms: Time the monster needs to cross one room.
        clock: Returns the current time in milliseconds.
        rng: Source of wander rolls and exit choices.

    Raises:
        ConfigurationError: if the parameters can never make a valid game.
    """

    def __init__(
        self,
        start: Location | None,
        safe: Location | None,
        wander_probability: float,
        move_interval_ms: int,
        *,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if start is None or safe is None:
            raise ConfigurationError("Monster needs a start room and a safe room")
        if start is safe:
            raise ConfigurationError(f"Monster cannot start in the safe room '{safe.id}'")
        if not 0.0 <= wander_probability <= 1.0:
            raise ConfigurationError(
                f"wander_probability must be within [0, 1], got {wander_probability}"
            )
        if move_interval_ms <= 0:
            raise ConfigurationError(
                f"move_interval_ms must be positive, got {move_interval_ms}"
            )
        if find_path(start, safe) is None:
            raise ConfigurationError(
                f"Safe room '{safe.id}' is unreachable from monster start '{start.id}'"
            )

        self._clock = clock or _monotonic_ms
        self._rng = rng or random.Random()
        self._safe = safe
        self._location = start
        self.wander_probability = wander_probability
        self.move_interval_ms = move_interval_ms

        self._chase_path: deque[Location] = deque()
        self._hunt_start_ms = 0.0
        self._last_step_ms = 0.0
        self._escape_budget_ms = 0.0

        self._fsm = StateMachine(WAITING_FOR_PLAYER, clock=self._clock)
        self._fsm.add_state(State(WAITING_FOR_PLAYER))
        self._fsm.add_state(State(IDLE))
        self._fsm.add_state(State(HUNTING, on_exit=self._chase_path.clear))
        # Nothing leads back into waiting_for_player.
        self._fsm.add_transition(WAITING_FOR_PLAYER, HUNTING)
        self._fsm.add_transition(IDLE, HUNTING)
        self._fsm.add_transition(HUNTING, IDLE)

    @classmethod
    def from_level(
        cls,
        level: Level,
        *,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ) -> Monster:
        """Build the monster described by a loaded level."""
        return cls(
            level.monster_start,
            level.safe_room,
            level.monster_move_chance,
            level.monster_move_time_ms,
            clock=clock,
            rng=rng,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def current_location(self) -> Location:
        return self._location

    @property
    def safe_location(self) -> Location:
        return self._safe

    @property
    def state(self) -> str:
        return self._fsm.current_state

    @property
    def chase_path(self) -> tuple[Location, ...]:
        return tuple(self._chase_path)

    @property
    def escape_budget_ms(self) -> float:
        return self._escape_budget_ms

    @property
    def history(self) -> list[tuple[float, str, str]]:
        return self._fsm.history

    def is_hunting(self) -> bool:
        return self._fsm.current_state == HUNTING

    def is_waiting_for_player(self) -> bool:
        return self._fsm.current_state == WAITING_FOR_PLAYER

    def is_caught(self) -> bool:
        """True once a hunt has lasted longer than the escape budget.

        Pure query; evaluated from the clock every time it is called.
        """
        if not self.is_hunting():
            return False
        return self._clock() - self._hunt_start_ms > self._escape_budget_ms

    def time_remaining_ms(self) -> float | None:
        """Budget left in the current hunt, or None when not hunting."""
        if not self.is_hunting():
            return None
        return self._escape_budget_ms - (self._clock() - self._hunt_start_ms)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def on_player_action(self, player_location: Location) -> list[Notice]:
        """Called once per processed player command."""
        if self.is_hunting():
            if player_location is self._safe:
                self._fsm.transition(IDLE)
                logger.info(f"Player escaped into '{self._safe.id}', monster idles")
                return [Notice.ESCAPED]
            self._advance_chase()
            return [Notice.MONSTER_COMING]

        if self.is_waiting_for_player():
            return []

        return self._wander(player_location)

    def on_player_moved(self, destination: Location) -> list[Notice]:
        """Called after the player has moved to *destination*.

        Every call re-prices the escape budget exactly once, whatever the
        time elapsed since the previous move.
        """
        notices: list[Notice] = []
        if destination is self._location:
            notices.append(Notice.WALKED_INTO_MONSTER)
            self._start_hunt(destination)

        if not self.is_hunting():
            return notices

        old_length = len(self._chase_path)
        path = find_path(self._location, destination, avoid=(self._safe,))
        if path is None:
            self._fsm.transition(IDLE)
            logger.info(
                f"No path from '{self._location.id}' to '{destination.id}', monster lost the trail"
            )
            notices.append(Notice.LOST_TRAIL)
            return notices

        self._chase_path.clear()
        self._chase_path.extend(path)
        delta = len(path) - old_length
        self._escape_budget_ms += self.move_interval_ms * delta
        logger.debug(
            f"Chase re-priced: distance {old_length} -> {len(path)}, "
            f"budget {self._escape_budget_ms:.0f}ms"
        )
        return notices

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _start_hunt(self, player_location: Location) -> bool:
        """Begin hunting the player.  No effect if already hunting."""
        if self.is_hunting():
            return False
        path = find_path(self._location, player_location, avoid=(self._safe,))
        if path is None:
            logger.debug(f"Cannot reach '{player_location.id}', hunt not started")
            return False

        self._fsm.transition(HUNTING)
        self._chase_path.extend(path)
        now = self._clock()
        self._hunt_start_ms = now
        self._last_step_ms = now
        self._escape_budget_ms = len(path) * self.move_interval_ms
        logger.info(
            f"Monster hunting from '{self._location.id}', "
            f"budget {self._escape_budget_ms:.0f}ms"
        )
        return True

    def _advance_chase(self) -> None:
        """Take every step the elapsed time pays for, stopping next to the player."""
        now = self._clock()
        while (
            now - self._last_step_ms >= self.move_interval_ms
            and len(self._chase_path) > 1
        ):
            self._last_step_ms += self.move_interval_ms
            self._chase_path.popleft()
            self._location = self._chase_path[0]
            logger.debug(f"Monster steps into '{self._location.id}'")

    def _wander(self, player_location: Location) -> list[Notice]:
        if self._rng.random() >= self.wander_probability:
            return []

        exits = [room for room in self._location.neighbors if room is not self._safe]
        if not exits:
            logger.debug(f"Monster has nowhere to wander from '{self._location.id}'")
            return []

        self._location = self._rng.choice(exits)
        logger.debug(f"Monster wanders into '{self._location.id}'")

        if self._location is player_location and self._start_hunt(player_location):
            return [Notice.MONSTER_ARRIVED]
        return []
