# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""State machine infrastructure for event-driven behaviour.

Unlike a tick-driven FSM, nothing here polls conditions.  The owner
decides when something happened and asks for a transition; the machine
only checks that the edge exists, runs the enter/exit callbacks and
keeps a short history.

Architecture:
  - State: named state with optional on_enter/on_exit callbacks
  - StateMachine: builder-pattern table of allowed edges

Usage::

    sm = StateMachine("idle")
    sm.add_state(State("idle"))
    sm.add_state(State("hunting"))
    sm.add_transition("idle", "hunting")
    sm.transition("hunting")

An edge that was never added cannot be followed, so a state with no
incoming edges can never be re-entered once left.
"""

from __future__ import annotations

import time as _time
from typing import Callable

from castle.errors import InvalidTransitionError


class State:
    """A named state.

    Args:
        name: Unique state identifier.
        on_enter: Callback when entering this state.  Signature: () -> None.
        on_exit: Callback when leaving this state.  Signature: () -> None.
    """

    def __init__(
        self,
        name: str,
        on_enter: Callable[[], None] | None = None,
        on_exit: Callable[[], None] | None = None,
    ) -> None:
        self.name = name
        self._on_enter_cb = on_enter
        self._on_exit_cb = on_exit

    def on_enter(self) -> None:
        if self._on_enter_cb is not None:
            self._on_enter_cb()

    def on_exit(self) -> None:
        if self._on_exit_cb is not None:
            self._on_exit_cb()


class StateMachine:
    """Finite state machine over an explicit table of allowed edges."""

    def __init__(
        self,
        initial_state: str,
        history_limit: int = 20,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._clock = clock or _time.monotonic
        self._history_limit = history_limit
        self._history: list[tuple[float, str, str]] = []
        self._states: dict[str, State] = {}
        self._edges: set[tuple[str, str]] = set()
        self._current_name = initial_state
        self._entered_at = self._clock()

    def add_state(self, state: State) -> None:
        """Register a state object."""
        self._states[state.name] = state

    def add_transition(self, from_state: str, to_state: str) -> None:
        """Allow the machine to move from *from_state* to *to_state*."""
        for name in (from_state, to_state):
            if name not in self._states:
                raise ValueError(f"State '{name}' not found")
        self._edges.add((from_state, to_state))

    def can_transition(self, to_state: str) -> bool:
        return (self._current_name, to_state) in self._edges

    @property
    def current_state(self) -> str:
        """Return the current state NAME (string)."""
        return self._current_name

    @property
    def state_names(self) -> list[str]:
        return list(self._states.keys())

    @property
    def time_in_state(self) -> float:
        """Clock units elapsed since the last transition."""
        return self._clock() - self._entered_at

    @property
    def history(self) -> list[tuple[float, str, str]]:
        """Return a copy of transition history: [(timestamp, from_state, to_state), ...]."""
        return list(self._history)

    def transition(self, to_state: str) -> bool:
        """Move to *to_state*, calling on_exit then on_enter.

        Returns False (and does nothing) when already in *to_state*.
        Raises InvalidTransitionError if the edge was never added.
        """
        if to_state == self._current_name:
            return False
        if not self.can_transition(to_state):
            raise InvalidTransitionError(
                f"No transition from '{self._current_name}' to '{to_state}'"
            )
        old_name = self._current_name
        self._states[old_name].on_exit()
        self._current_name = to_state
        self._record_history(old_name, to_state)
        self._states[to_state].on_enter()
        return True

    def _record_history(self, from_state: str, to_state: str) -> None:
        """Record a transition in history, respecting the limit."""
        now = self._clock()
        self._entered_at = now
        self._history.append((now, from_state, to_state))
        if len(self._history) > self._history_limit:
            self._history = self._history[-self._history_limit:]
