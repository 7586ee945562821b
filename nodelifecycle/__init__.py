"""Managed node lifecycle: states, transition maps, notifications and a state machine."""

__version__ = "0.1.0"

__all__ = ["types", "transition_map", "com_interface", "default_state_machine", "state_machine"]