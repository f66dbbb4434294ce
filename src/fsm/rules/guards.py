"""
Guards aplicados antes de cada transição do rascunho.

Um guard pode bloquear uma transição que o grafo permite.
"""

from collections.abc import Callable

from fsm.states.draft import TERMINAL_STATES, DraftState

# Transições reflexivas aceitas (recarregar enquanto carrega)
REFLEXIVE_STATES: frozenset[DraftState] = frozenset({DraftState.LOADING})


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        return cls(allowed=False, reason=reason)


Guard = Callable[[DraftState, DraftState], GuardResult]


def guard_valid_state(from_state: DraftState, to_state: DraftState) -> GuardResult:
    """Guard: ambos os estados pertencem ao enum."""
    if not isinstance(from_state, DraftState):
        return GuardResult.deny(f"Estado de origem inválido: {from_state}")

    if not isinstance(to_state, DraftState):
        return GuardResult.deny(f"Estado de destino inválido: {to_state}")

    return GuardResult.allow()


def guard_terminal_state(from_state: DraftState, to_state: DraftState) -> GuardResult:
    """Guard: estados terminais não permitem saída."""
    if from_state in TERMINAL_STATES:
        return GuardResult.deny(
            f"Estado {from_state.name} é terminal, não permite transição"
        )
    return GuardResult.allow()


def guard_same_state(from_state: DraftState, to_state: DraftState) -> GuardResult:
    """Guard: transição para o mesmo estado só em REFLEXIVE_STATES."""
    if from_state == to_state and from_state not in REFLEXIVE_STATES:
        return GuardResult.deny(
            f"Transição reflexiva não permitida: {from_state.name} → {to_state.name}"
        )
    return GuardResult.allow()


DEFAULT_GUARDS: list[Guard] = [
    guard_valid_state,
    guard_terminal_state,
    guard_same_state,
]


def evaluate_guards(
    from_state: DraftState,
    to_state: DraftState,
    guards: list[Guard] | None = None,
) -> GuardResult:
    """
    Avalia os guards em ordem.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino
        guards: Guards a aplicar (DEFAULT_GUARDS se None)

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    for guard in guards if guards is not None else DEFAULT_GUARDS:
        result = guard(from_state, to_state)
        if not result.allowed:
            return result

    return GuardResult.allow()
