"""Communication endpoints of a lifecycle node and transition notifications."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .types import LifecycleError, State

TRANSITION_EVENT = "transition_event"
CHANGE_STATE = "change_state"
GET_STATE = "get_state"
GET_AVAILABLE_STATES = "get_available_states"
GET_AVAILABLE_TRANSITIONS = "get_available_transitions"

_SUFFIXES = (
    TRANSITION_EVENT,
    CHANGE_STATE,
    GET_STATE,
    GET_AVAILABLE_STATES,
    GET_AVAILABLE_TRANSITIONS,
)

_FULL_TOPIC = re.compile(r"(?:/[A-Za-z_][A-Za-z0-9_]*)+")


@dataclass(frozen=True)
class TransitionEvent:
    """Notification that a node moved from one state to another."""

    start_id: int
    start_label: str
    goal_id: int
    goal_label: str


def _validate_topic_name(name: str) -> None:
    if not name:
        raise LifecycleError("topic name must not be empty")
    if _FULL_TOPIC.fullmatch(name) is None:
        raise LifecycleError(f"invalid topic name: {name!r}")


def interface_topic_names(node_name: str) -> dict[str, str]:
    """Return the topic of each lifecycle endpoint for ``node_name``."""
    if not node_name:
        raise LifecycleError("node name must not be empty")
    names = {suffix: f"/{node_name}/{suffix}" for suffix in _SUFFIXES}
    for name in names.values():
        _validate_topic_name(name)
    return names


class ComInterface:
    """The endpoints through which a lifecycle node talks to the outside."""

    def __init__(self, node_name: str, publisher: Callable[[TransitionEvent], object]):
        if node_name is None:
            raise LifecycleError("node name is None")
        if publisher is None or not callable(publisher):
            raise LifecycleError("publisher must be a callable")
        self._node_name = node_name
        self._topics = interface_topic_names(node_name)
        self._publisher = publisher
        self._open = True

    @property
    def node_name(self) -> str:
        return self._node_name

    @property
    def topics(self) -> Mapping[str, str]:
        """Endpoint name to full topic name."""
        return MappingProxyType(self._topics)

    @property
    def is_open(self) -> bool:
        return self._open

    def publish_notification(self, start: State, goal: State) -> TransitionEvent:
        """Publish and return the event for a move from ``start`` to ``goal``."""
        if not self._open:
            raise LifecycleError("communication interface is closed")
        event = TransitionEvent(start.id, start.label, goal.id, goal.label)
        try:
            self._publisher(event)
        except Exception as exc:
            raise LifecycleError("could not publish transition event") from exc
        return event

    def close(self) -> None:
        """Shut the endpoints down; later publishing fails."""
        self._open = False

    def __enter__(self) -> ComInterface:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()