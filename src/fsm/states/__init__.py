"""
Exports públicos do módulo fsm/states.
"""

from fsm.states.draft import (
    BUSY_STATES,
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    DraftState,
    is_busy,
    is_terminal,
    is_valid_state,
)

__all__ = [
    "BUSY_STATES",
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "DraftState",
    "is_busy",
    "is_terminal",
    "is_valid_state",
]
