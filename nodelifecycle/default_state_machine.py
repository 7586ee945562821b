"""The default lifecycle of a managed node: its states and transitions."""

from __future__ import annotations

from .transition_map import TransitionMap
from .types import State, StateId, Transition, TransitionId

INITIAL_STATE = StateId.UNCONFIGURED

_PRIMARY_STATES = (
    ("unknown", StateId.UNKNOWN),
    ("unconfigured", StateId.UNCONFIGURED),
    ("inactive", StateId.INACTIVE),
    ("active", StateId.ACTIVE),
    ("finalized", StateId.FINALIZED),
)

_TRANSITION_STATES = (
    ("configuring", StateId.CONFIGURING),
    ("cleaningup", StateId.CLEANINGUP),
    ("shuttingdown", StateId.SHUTTINGDOWN),
    ("activating", StateId.ACTIVATING),
    ("deactivating", StateId.DEACTIVATING),
    ("errorprocessing", StateId.ERRORPROCESSING),
)

# (label, transition id, start, goal, trigger key), in registration order.
_TRANSITIONS = (
    ("configure", TransitionId.CONFIGURE,
     StateId.UNCONFIGURED, StateId.CONFIGURING, TransitionId.CONFIGURE),
    ("configure_success", TransitionId.ON_CONFIGURE_SUCCESS,
     StateId.CONFIGURING, StateId.INACTIVE, TransitionId.CALLBACK_SUCCESS),
    ("configure_failure", TransitionId.ON_CONFIGURE_FAILURE,
     StateId.CONFIGURING, StateId.UNCONFIGURED, TransitionId.CALLBACK_FAILURE),
    ("configure_error", TransitionId.ON_CLEANUP_ERROR,
     StateId.CONFIGURING, StateId.ERRORPROCESSING, TransitionId.CALLBACK_ERROR),
    ("cleanup", TransitionId.CLEANUP,
     StateId.INACTIVE, StateId.CLEANINGUP, TransitionId.CLEANUP),
    ("cleanup_success", TransitionId.ON_CLEANUP_SUCCESS,
     StateId.CLEANINGUP, StateId.UNCONFIGURED, TransitionId.CALLBACK_SUCCESS),
    ("cleanup_failure", TransitionId.ON_CLEANUP_FAILURE,
     StateId.CLEANINGUP, StateId.INACTIVE, TransitionId.CALLBACK_FAILURE),
    ("cleanup_error", TransitionId.ON_CLEANUP_ERROR,
     StateId.CLEANINGUP, StateId.ERRORPROCESSING, TransitionId.CALLBACK_ERROR),
    ("activate", TransitionId.ACTIVATE,
     StateId.INACTIVE, StateId.ACTIVATING, TransitionId.ACTIVATE),
    ("activate_success", TransitionId.ON_ACTIVATE_SUCCESS,
     StateId.ACTIVATING, StateId.ACTIVE, TransitionId.CALLBACK_SUCCESS),
    ("activate_failure", TransitionId.ON_ACTIVATE_FAILURE,
     StateId.ACTIVATING, StateId.INACTIVE, TransitionId.CALLBACK_FAILURE),
    ("activate_error", TransitionId.ON_ACTIVATE_ERROR,
     StateId.ACTIVATING, StateId.ERRORPROCESSING, TransitionId.CALLBACK_ERROR),
    ("deactivate", TransitionId.DEACTIVATE,
     StateId.ACTIVE, StateId.DEACTIVATING, TransitionId.DEACTIVATE),
    ("deactivate_success", TransitionId.ON_DEACTIVATE_SUCCESS,
     StateId.DEACTIVATING, StateId.INACTIVE, TransitionId.CALLBACK_SUCCESS),
    ("deactivate_failure", TransitionId.ON_DEACTIVATE_FAILURE,
     StateId.DEACTIVATING, StateId.ACTIVE, TransitionId.CALLBACK_FAILURE),
    ("deactivate_error", TransitionId.ON_DEACTIVATE_ERROR,
     StateId.DEACTIVATING, StateId.ERRORPROCESSING, TransitionId.CALLBACK_ERROR),
    ("unconfigured_shutdown", TransitionId.UNCONFIGURED_SHUTDOWN,
     StateId.UNCONFIGURED, StateId.SHUTTINGDOWN, TransitionId.SHUTDOWN),
    ("inactive_shutdown", TransitionId.INACTIVE_SHUTDOWN,
     StateId.INACTIVE, StateId.SHUTTINGDOWN, TransitionId.SHUTDOWN),
    ("active_shutdown", TransitionId.ACTIVE_SHUTDOWN,
     StateId.ACTIVE, StateId.SHUTTINGDOWN, TransitionId.SHUTDOWN),
    ("shutdown_success", TransitionId.ON_SHUTDOWN_SUCCESS,
     StateId.SHUTTINGDOWN, StateId.FINALIZED, TransitionId.CALLBACK_SUCCESS),
    ("shutdown_failure", TransitionId.ON_SHUTDOWN_FAILURE,
     StateId.SHUTTINGDOWN, StateId.FINALIZED, TransitionId.CALLBACK_FAILURE),
    ("shutdown_error", TransitionId.ON_SHUTDOWN_ERROR,
     StateId.SHUTTINGDOWN, StateId.ERRORPROCESSING, TransitionId.CALLBACK_ERROR),
    ("errorprocessing_success", TransitionId.ON_ERROR_SUCCESS,
     StateId.ERRORPROCESSING, StateId.UNCONFIGURED, TransitionId.CALLBACK_SUCCESS),
    ("errorprocessing_failure", TransitionId.ON_ERROR_FAILURE,
     StateId.ERRORPROCESSING, StateId.FINALIZED, TransitionId.CALLBACK_FAILURE),
    ("errorprocessing_error", TransitionId.ON_ERROR_ERROR,
     StateId.ERRORPROCESSING, StateId.FINALIZED, TransitionId.CALLBACK_ERROR),
)


def default_states() -> dict[StateId, State]:
    """Return fresh default states, primary states first, keyed by id."""
    return {
        state_id: State(label, int(state_id))
        for label, state_id in (*_PRIMARY_STATES, *_TRANSITION_STATES)
    }


def build_default_transition_map() -> TransitionMap:
    """Return a new transition map holding the default lifecycle."""
    transition_map = TransitionMap()
    for state in default_states().values():
        transition_map.register_state(state)

    for label, transition_id, start_id, goal_id, key in _TRANSITIONS:
        transition = Transition(
            label,
            int(transition_id),
            transition_map.get_state(start_id),
            transition_map.get_state(goal_id),
        )
        transition_map.register_transition(transition, int(key))
    return transition_map