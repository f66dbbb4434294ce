"""
Máquina de estados do rascunho de anúncio (DraftStateMachine).

Valida transições contra o grafo e os guards e mantém histórico.
"""

import logging
from typing import Any

from fsm.rules.guards import GuardResult, evaluate_guards
from fsm.states.draft import DEFAULT_INITIAL_STATE, DraftState, is_terminal
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult

logger = logging.getLogger(__name__)


class DraftStateMachine:
    """
    Máquina de estados de um formulário de anúncio.

    Attributes:
        current_state: Estado atual
        history: Transições realizadas
    """

    __slots__ = ("_current_state", "_draft_id", "_history")

    def __init__(
        self,
        initial_state: DraftState | None = None,
        draft_id: str = "",
    ) -> None:
        """
        Args:
            initial_state: Estado inicial (DEFAULT_INITIAL_STATE se None)
            draft_id: Identificador do formulário para logs
        """
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._draft_id = draft_id

    @property
    def current_state(self) -> DraftState:
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Cópia do histórico."""
        return list(self._history)

    @property
    def draft_id(self) -> str:
        return self._draft_id

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_state)

    def can_transition_to(self, target: DraftState) -> bool:
        """Verifica se pode transitar para o estado alvo."""
        if not is_transition_valid(self._current_state, target):
            return False
        return evaluate_guards(self._current_state, target).allowed

    def get_valid_targets(self) -> frozenset[DraftState]:
        return get_valid_targets(self._current_state)

    def transition(
        self,
        target: DraftState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Operação que causou a transição (ex: 'initialize', 'submit')
            metadata: Dados adicionais para logs

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        guard_result: GuardResult = evaluate_guards(self._current_state, target)
        if not guard_result.allowed:
            return TransitionResult(success=False, error_reason=guard_result.reason)

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_state = target
        self._history.append(transition)
        logger.debug(
            "draft_state_changed",
            extra={"draft_id": self._draft_id, **transition.to_log_dict()},
        )
        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo do estado atual para logs."""
        return {
            "draft_id": self._draft_id,
            "current_state": self._current_state.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [t.to_log_dict() for t in self._history]


def create_fsm(
    draft_id: str,
    initial_state: DraftState | None = None,
) -> DraftStateMachine:
    """Factory de DraftStateMachine."""
    return DraftStateMachine(initial_state=initial_state, draft_id=draft_id)


INITIAL_STATES = frozenset({DEFAULT_INITIAL_STATE})
