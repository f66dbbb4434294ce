"""
Estados do ciclo de vida de um rascunho de anúncio no formulário.

O controller do formulário só executa uma operação quando a transição
correspondente é válida a partir do estado atual.
"""

from enum import StrEnum


class DraftState(StrEnum):
    """
    Estados do formulário de anúncio.

    - IDLE: controller criado, ainda sem rascunho
    - LOADING: buscando anúncio persistido para edição
    - EDITING: rascunho pronto; o formulário pode ser exibido
    - SAVING: gravando os campos do anúncio (create ou update)
    - SYNCING_IMAGES: aplicando remoções e envios de imagens em sequência
    - CLOSED: usuário saiu do formulário (cancelar/voltar)
    - DISPOSED: escopo destruído; nenhuma continuação é aplicada (terminal)
    """

    IDLE = "IDLE"
    LOADING = "LOADING"
    EDITING = "EDITING"
    SAVING = "SAVING"
    SYNCING_IMAGES = "SYNCING_IMAGES"
    CLOSED = "CLOSED"
    DISPOSED = "DISPOSED"

    def __str__(self) -> str:
        return self.value


TERMINAL_STATES: frozenset[DraftState] = frozenset({DraftState.DISPOSED})

# Estados em que há chamada de rede em andamento
BUSY_STATES: frozenset[DraftState] = frozenset({
    DraftState.LOADING,
    DraftState.SAVING,
    DraftState.SYNCING_IMAGES,
})

DEFAULT_INITIAL_STATE: DraftState = DraftState.IDLE


def is_terminal(state: DraftState) -> bool:
    """True se o estado não admite saída."""
    return state in TERMINAL_STATES


def is_busy(state: DraftState) -> bool:
    """True se há operação de rede pendente."""
    return state in BUSY_STATES


def is_valid_state(state: DraftState) -> bool:
    return isinstance(state, DraftState)
