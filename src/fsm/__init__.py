"""
Módulo FSM — máquina de estados do formulário de anúncio.

Estrutura:
    - states/: estados (DraftState)
    - transitions/: grafo de transições (VALID_TRANSITIONS)
    - rules/: guards
    - manager/: máquina de estados (DraftStateMachine)
    - types/: StateTransition, TransitionResult
"""

from fsm.manager import (
    INITIAL_STATES,
    DraftStateMachine,
    create_fsm,
)
from fsm.rules import (
    GuardResult,
    evaluate_guards,
)
from fsm.states import (
    BUSY_STATES,
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    DraftState,
    is_busy,
    is_terminal,
    is_valid_state,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import (
    StateTransition,
    TransitionResult,
)

__all__ = [
    "BUSY_STATES",
    "DEFAULT_INITIAL_STATE",
    "INITIAL_STATES",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "DraftState",
    "DraftStateMachine",
    "GuardResult",
    "StateTransition",
    "TransitionResult",
    "create_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "is_busy",
    "is_terminal",
    "is_transition_valid",
    "is_valid_state",
    "validate_transition_map",
]
