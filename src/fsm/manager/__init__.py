"""
Exports públicos do módulo fsm/manager.
"""

from fsm.manager.machine import (
    INITIAL_STATES,
    DraftStateMachine,
    create_fsm,
)

__all__ = [
    "INITIAL_STATES",
    "DraftStateMachine",
    "create_fsm",
]
