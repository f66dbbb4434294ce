"""Registro de transições do rascunho de anúncio (`StateTransition`, `TransitionResult`)."""

from fsm.types.transition import StateTransition, TransitionResult

__all__ = [
    "StateTransition",
    "TransitionResult",
]
