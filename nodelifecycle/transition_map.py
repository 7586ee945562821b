"""Registry of lifecycle states and the transitions between them."""

from __future__ import annotations

from .types import LifecycleError, State, Transition


class TransitionMap:
    """Holds registered states, keyed by id, and all registered transitions."""

    def __init__(self) -> None:
        self._states: dict[int, State] = {}
        self._transitions: list[Transition] = []

    @property
    def states(self) -> tuple[State, ...]:
        """Registered states in registration order."""
        return tuple(self._states.values())

    @property
    def transitions(self) -> tuple[Transition, ...]:
        """Registered transitions in registration order."""
        return tuple(self._transitions)

    def is_initialized(self) -> bool:
        """Return True once any state or transition has been registered."""
        return bool(self._states or self._transitions)

    def register_state(self, state: State) -> None:
        """Register a copy of ``state``; its id must not be registered yet."""
        if state.id in self._states:
            raise LifecycleError(f"state {state.id} is already registered")
        self._states[state.id] = state._clone()

    def register_transition(self, transition: Transition, key: int) -> None:
        """Register ``transition`` and attach it under ``key`` to its start state."""
        state = self._states.get(transition.start.id)
        if state is None:
            raise LifecycleError(f"state {transition.start.id} is not registered")
        state.add_transition(key, transition)
        self._transitions.append(transition)

    def get_state(self, state_id: int) -> State | None:
        """Return the registered state with ``state_id``, or None."""
        return self._states.get(state_id)

    def get_transition(self, transition_id: int) -> Transition | None:
        """Return the first registered transition with ``transition_id``, or None."""
        return next((t for t in self._transitions if t.id == transition_id), None)

    def clear(self) -> None:
        """Drop every registered state and transition."""
        self._states.clear()
        self._transitions.clear()