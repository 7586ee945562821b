"""A lifecycle state machine driven by transition keys."""

from __future__ import annotations

import logging

from .com_interface import ComInterface
from .default_state_machine import INITIAL_STATE, build_default_transition_map
from .transition_map import TransitionMap
from .types import LifecycleError, State, Transition

_log = logging.getLogger(__name__)


class StateMachine:
    """Tracks the current state of a node and moves it along registered transitions."""

    def __init__(
        self,
        transition_map: TransitionMap,
        current_state: State | None,
        com_interface: ComInterface | None,
    ) -> None:
        self._transition_map = transition_map
        self._current_state = current_state
        self._com_interface = com_interface

    @classmethod
    def with_default_states(cls, com_interface: ComInterface | None) -> StateMachine:
        """Return a machine with the default lifecycle, starting unconfigured."""
        transition_map = build_default_transition_map()
        return cls(transition_map, transition_map.get_state(INITIAL_STATE), com_interface)

    @property
    def transition_map(self) -> TransitionMap:
        return self._transition_map

    @property
    def current_state(self) -> State | None:
        return self._current_state

    @property
    def com_interface(self) -> ComInterface | None:
        return self._com_interface

    def is_initialized(self) -> bool:
        """Return True if the endpoints are open and states are registered."""
        if self._com_interface is None or not self._com_interface.is_open:
            return False
        return self._transition_map.is_initialized()

    def is_valid_transition(self, key: int) -> Transition | None:
        """Return the transition that ``key`` triggers from the current state, or None."""
        if self._current_state is None:
            raise LifecycleError("state machine has no current state")
        state = self._transition_map.get_state(self._current_state.id)
        transition = state.transition_for(int(key)) if state is not None else None
        if transition is None:
            _log.warning(
                "No callback transition matching %d found for current state %s",
                int(key),
                self._current_state.label,
            )
        return transition

    def trigger_transition(self, key: int, publish_notification: bool = True) -> Transition:
        """Take the transition for ``key`` and return it; raise if there is none."""
        transition = self.is_valid_transition(key)
        if transition is None:
            _log.error(
                "No transition found for node %s with key %d",
                self._current_state.label,
                int(key),
            )
            raise LifecycleError("Transition is not registered.")

        if transition.goal is None:
            _log.error("No valid goal is set")
        self._current_state = transition.goal

        if publish_notification:
            if self._com_interface is None or self._current_state is None:
                raise LifecycleError("Could not publish transition")
            try:
                self._com_interface.publish_notification(
                    transition.start, self._current_state
                )
            except LifecycleError as exc:
                raise LifecycleError("Could not publish transition") from exc
        return transition

    def describe(self) -> str:
        """Return, and log, a listing of every state and its valid transitions."""
        lines: list[str] = []
        for state in self._transition_map.states:
            keys = state.valid_keys()
            lines.append(f"Primary State: {state.label}({state.id})")
            lines.append(f"# of valid transitions: {len(keys)}")
            for key, transition in zip(keys, state.transitions):
                lines.append(
                    f"\tNode {state.label}: Key {key}: Transition: {transition.label}"
                )
        text = "\n".join(lines)
        for line in lines:
            _log.info("%s", line)
        return text

    def close(self) -> None:
        """Close the endpoints and drop all registered states and transitions."""
        if self._com_interface is not None:
            self._com_interface.close()
        self._transition_map.clear()

    def __enter__(self) -> StateMachine:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()