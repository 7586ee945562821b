# nodelifecycle

A small library that models the lifecycle of a managed node as a state
machine. Primary states (unknown, unconfigured, inactive, active, finalized)
are connected through transition states (configuring, cleaningup,
shuttingdown, activating, deactivating, errorprocessing). Transitions are
selected by generic keys such as `TransitionId.CONFIGURE` or
`TransitionId.SHUTDOWN`, or by the outcome of a callback:
`TransitionId.CALLBACK_SUCCESS`, `CALLBACK_FAILURE` or `CALLBACK_ERROR`.

## Installation

```
pip install nodelifecycle
```

## Modules

- `nodelifecycle.types`: `State`, `Transition`, the `StateId` and
  `TransitionId` enums, and `LifecycleError`.
- `nodelifecycle.transition_map`: `TransitionMap`, a registry of states and
  transitions.
- `nodelifecycle.com_interface`: `ComInterface`, `TransitionEvent` and
  `interface_topic_names`.
- `nodelifecycle.default_state_machine`: `default_states()` and
  `build_default_transition_map()` for the standard lifecycle.
- `nodelifecycle.state_machine`: `StateMachine`, which tracks the current state
  and triggers transitions.

## Usage

Build a state machine with the default states and transitions, then drive it
with transition keys. It starts in the unconfigured state.

```python
from nodelifecycle.state_machine import StateMachine
from nodelifecycle.types import LifecycleError, StateId, TransitionId

machine = StateMachine.with_default_states(None)

machine.trigger_transition(TransitionId.CONFIGURE, False)
machine.trigger_transition(TransitionId.CALLBACK_SUCCESS, False)
assert machine.current_state.id == StateId.INACTIVE

try:
    machine.trigger_transition(TransitionId.DEACTIVATE, False)
except LifecycleError as exc:
    print("rejected:", exc)

print(machine.describe())
machine.close()
```

`trigger_transition(key, publish_notification=True)` returns the transition
it took. A key that is not registered for the current state raises
`LifecycleError`, and the machine stays in its current state. When
`publish_notification` is true (the default) the machine needs an open
`ComInterface`; without one it raises `LifecycleError` after moving to the
goal state. `is_valid_transition(key)` returns the transition a key would take,
or `None`. `describe()` returns (and logs) a listing of every state and its
valid keys and transitions. `StateMachine` is also a context manager whose
exit calls `close()`, which closes the interface and clears the transition
map.

### Custom transition maps

`TransitionMap` holds states and the transitions between them. Register a
`State` first; a `Transition` can only start from a state that is already
registered. The map stores a copy of each registered state, so fetch states
back with `get_state` before building transitions:

```python
from nodelifecycle.transition_map import TransitionMap
from nodelifecycle.types import State, Transition

transitions = TransitionMap()
transitions.register_state(State("my_state", 0))
transitions.register_state(State("my_state", 1))

start = transitions.get_state(0)
goal = transitions.get_state(1)
transitions.register_transition(Transition("from0to1", 0, start, goal), 0)
assert transitions.is_initialized()
```

Registering the same state id twice, or a transition whose start state is not
registered, raises `LifecycleError`. Keys must lie in the range 0–255.
A machine over a custom map is built with
`StateMachine(transition_map, current_state, com_interface)`.

### Transition notifications

`ComInterface(node_name, publisher)` derives the node's endpoint names with
`interface_topic_names`, which maps `transition_event`, `change_state`,
`get_state`, `get_available_states` and `get_available_transitions` to
`/<node_name>/<endpoint>` and raises `LifecycleError` for names that are not
valid topic names. Each time a transition is triggered with notification on,
the interface hands a `TransitionEvent` (start and goal ids and labels) to the
publisher callable.

```python
from nodelifecycle.com_interface import ComInterface
from nodelifecycle.state_machine import StateMachine
from nodelifecycle.types import TransitionId

events = []
com = ComInterface("my_node", events.append)
machine = StateMachine.with_default_states(com)
machine.trigger_transition(TransitionId.CONFIGURE)
print(events[0])
```

## What it does not do

The package has no transport of its own. `ComInterface` only computes endpoint
names and passes events to the callable you supply; it does not open network
connections or serve the change-state, get-state or available-states and
transitions requests. It also runs no per-transition callbacks: the caller
decides the outcome and feeds the matching callback key back in.