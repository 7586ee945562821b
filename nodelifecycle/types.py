"""Core data types of the node lifecycle: states, transitions and their ids."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

_MAX_KEY = 0xFF


class LifecycleError(Exception):
    """Raised when a lifecycle operation cannot be carried out."""


class StateId(IntEnum):
    """Ids of the primary and transition states of a managed node."""

    UNKNOWN = 0
    UNCONFIGURED = 1
    INACTIVE = 2
    ACTIVE = 3
    FINALIZED = 4
    CONFIGURING = 10
    CLEANINGUP = 11
    SHUTTINGDOWN = 12
    ACTIVATING = 13
    DEACTIVATING = 14
    ERRORPROCESSING = 15


class TransitionId(IntEnum):
    """Ids of transitions and of the keys that trigger them."""

    CREATE = 0
    CONFIGURE = 1
    CLEANUP = 2
    ACTIVATE = 3
    DEACTIVATE = 4
    SHUTDOWN = 5
    DESTROY = 6
    UNCONFIGURED_SHUTDOWN = 7
    INACTIVE_SHUTDOWN = 8
    ACTIVE_SHUTDOWN = 9
    ON_CONFIGURE_SUCCESS = 10
    ON_CONFIGURE_FAILURE = 11
    ON_CONFIGURE_ERROR = 12
    ON_CLEANUP_SUCCESS = 20
    ON_CLEANUP_FAILURE = 21
    ON_CLEANUP_ERROR = 22
    ON_ACTIVATE_SUCCESS = 30
    ON_ACTIVATE_FAILURE = 31
    ON_ACTIVATE_ERROR = 32
    ON_DEACTIVATE_SUCCESS = 40
    ON_DEACTIVATE_FAILURE = 41
    ON_DEACTIVATE_ERROR = 42
    ON_SHUTDOWN_SUCCESS = 50
    ON_SHUTDOWN_FAILURE = 51
    ON_SHUTDOWN_ERROR = 52
    ON_ERROR_SUCCESS = 60
    ON_ERROR_FAILURE = 61
    ON_ERROR_ERROR = 62
    CALLBACK_SUCCESS = 97
    CALLBACK_FAILURE = 98
    CALLBACK_ERROR = 99


@dataclass(eq=False)
class State:
    """A lifecycle state and the transitions that leave it, keyed by trigger.

    A key is a generic stimulus such as "shutdown"; the concrete transition
    it selects depends on the state, e.g. "unconfigured_shutdown".
    """

    label: str
    id: int
    _transitions: list[tuple[int, Transition]] = field(
        default_factory=list, init=False, repr=False
    )

    def add_transition(self, key: int, transition: Transition) -> None:
        """Make ``transition`` reachable from this state under ``key``."""
        key = int(key)
        if not 0 <= key <= _MAX_KEY:
            raise LifecycleError(f"transition key {key} is out of range")
        self._transitions.append((key, transition))

    def transition_for(self, key: int) -> Transition | None:
        """Return the first transition registered under ``key``, or None."""
        return next((t for k, t in self._transitions if k == key), None)

    def valid_keys(self) -> list[int]:
        """Return the keys valid in this state, in registration order."""
        return [k for k, _ in self._transitions]

    @property
    def transitions(self) -> tuple[Transition, ...]:
        """The transitions leaving this state, in registration order."""
        return tuple(t for _, t in self._transitions)

    def _clone(self) -> State:
        copy = State(self.label, self.id)
        copy._transitions.extend(self._transitions)
        return copy

    def __repr__(self) -> str:
        return f"State(label={self.label!r}, id={self.id})"


@dataclass(eq=False)
class Transition:
    """A labelled transition from a start state to a goal state."""

    label: str
    id: int
    start: State
    goal: State | None

    def __repr__(self) -> str:
        goal = self.goal.label if self.goal is not None else None
        return (
            f"Transition(label={self.label!r}, id={self.id}, "
            f"start={self.start.label!r}, goal={goal!r})"
        )