"""
Regras de transição válidas entre estados do rascunho de anúncio.

Forma o grafo de transições da máquina de estados do formulário.
"""

from fsm.states.draft import TERMINAL_STATES, DraftState

TransitionMap = dict[DraftState, frozenset[DraftState]]

# Chave: estado de origem. Valor: destinos permitidos.
VALID_TRANSITIONS: TransitionMap = {
    # IDLE: carrega anúncio existente ou abre em branco
    DraftState.IDLE: frozenset({
        DraftState.LOADING,
        DraftState.EDITING,
        DraftState.DISPOSED,
    }),

    # LOADING: termina em edição; nova navegação reinicia a carga
    DraftState.LOADING: frozenset({
        DraftState.LOADING,
        DraftState.EDITING,
        DraftState.DISPOSED,
    }),

    # EDITING: salva, troca de anúncio ou sai
    DraftState.EDITING: frozenset({
        DraftState.LOADING,
        DraftState.SAVING,
        DraftState.CLOSED,
        DraftState.DISPOSED,
    }),

    # SAVING: segue para imagens ou volta à edição em caso de falha
    DraftState.SAVING: frozenset({
        DraftState.SYNCING_IMAGES,
        DraftState.EDITING,
        DraftState.DISPOSED,
    }),

    # SYNCING_IMAGES: sempre volta à edição (com ou sem pendências)
    DraftState.SYNCING_IMAGES: frozenset({
        DraftState.EDITING,
        DraftState.DISPOSED,
    }),

    # CLOSED: o mesmo controller pode abrir outro anúncio
    DraftState.CLOSED: frozenset({
        DraftState.LOADING,
        DraftState.EDITING,
        DraftState.DISPOSED,
    }),

    DraftState.DISPOSED: frozenset(),
}


def get_valid_targets(state: DraftState) -> frozenset[DraftState]:
    """Destinos válidos a partir de `state` (vazio se terminal)."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: DraftState, to_state: DraftState) -> bool:
    """
    Verifica se uma transição é permitida pelo grafo.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino

    Returns:
        True se a transição é permitida
    """
    if from_state in TERMINAL_STATES:
        return False

    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Estados terminais têm conjunto vazio
    - Todo estado não terminal alcança DISPOSED

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in DraftState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        targets = VALID_TRANSITIONS.get(state, frozenset())
        if targets:
            errors.append(
                f"Estado terminal {state.name} não deveria ter transições: {targets}"
            )

    for from_state, targets in VALID_TRANSITIONS.items():
        if from_state not in TERMINAL_STATES and DraftState.DISPOSED not in targets:
            errors.append(f"Estado {from_state.name} não pode ser descartado")
        for target in targets:
            if not isinstance(target, DraftState):
                errors.append(
                    f"Transição {from_state.name} → {target}: destino inválido"
                )

    return errors
