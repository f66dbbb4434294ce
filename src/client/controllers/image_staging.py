"""Imagens selecionadas para envio e marcadas para remoção.

Nada aqui fala com o servidor; o controller aplica as listas no
salvamento e remove cada item conforme a etapa correspondente conclui.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from client.api.ads import StagedFile
from config.settings.infra.storage import ALLOWED_IMAGE_TYPES


@dataclass(frozen=True, slots=True)
class StagingResult:
    accepted: tuple[StagedFile, ...]
    over_limit: tuple[StagedFile, ...]
    invalid_type: tuple[StagedFile, ...]


class ImageStaging:
    """Adições (ordem de seleção) e remoções (sem repetição) pendentes."""

    def __init__(self, limit: int = 5) -> None:
        self.limit = limit
        self._additions: list[StagedFile] = []
        self._deletions: list[str] = []

    @property
    def additions(self) -> tuple[StagedFile, ...]:
        return tuple(self._additions)

    @property
    def deletions(self) -> tuple[str, ...]:
        return tuple(self._deletions)

    @property
    def is_empty(self) -> bool:
        return not self._additions and not self._deletions

    def visible_count(self, persisted: Sequence[str]) -> int:
        """Persistidas não marcadas para remoção + selecionadas."""
        kept = [name for name in persisted if name not in self._deletions]
        return len(kept) + len(self._additions)

    def stage(self, files: Iterable[StagedFile], persisted: Sequence[str]) -> StagingResult:
        """Adiciona arquivos até o limite; o excesso é ignorado."""
        accepted: list[StagedFile] = []
        over_limit: list[StagedFile] = []
        invalid: list[StagedFile] = []
        room = self.limit - self.visible_count(persisted)
        for file in files:
            if file.content_type not in ALLOWED_IMAGE_TYPES:
                invalid.append(file)
            elif len(accepted) < room:
                accepted.append(file)
            else:
                over_limit.append(file)
        self._additions.extend(accepted)
        return StagingResult(tuple(accepted), tuple(over_limit), tuple(invalid))

    def unstage(self, index: int) -> StagedFile:
        """Remove da seleção o arquivo na posição `index`.

        Raises:
            IndexError: posição inexistente.
        """
        return self._additions.pop(index)

    def mark_for_deletion(self, filename: str, persisted: Sequence[str]) -> bool:
        if filename not in persisted or filename in self._deletions:
            return False
        self._deletions.append(filename)
        return True

    def undo_deletion(self, filename: str, persisted: Sequence[str]) -> bool:
        """Desfaz a marcação, se isso não ultrapassar o limite."""
        if filename not in self._deletions:
            return False
        if self.visible_count(persisted) >= self.limit:
            return False
        self._deletions.remove(filename)
        return True

    def complete_deletion(self, filename: str) -> None:
        if filename in self._deletions:
            self._deletions.remove(filename)

    def complete_upload(self, file: StagedFile) -> None:
        for index, staged in enumerate(self._additions):
            if staged is file:
                del self._additions[index]
                return

    def clear(self) -> None:
        self._additions.clear()
        self._deletions.clear()
