"""Protocolo de armazenamento de arquivos enviados."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ImageStorageProtocol(ABC):
    """Contrato para gravar e remover arquivos servidos em /uploads."""

    @abstractmethod
    async def save(self, folder: str, content: bytes, content_type: str) -> str:
        """Grava o arquivo e retorna o nome gerado (sem diretório)."""

    @abstractmethod
    async def delete(self, folder: str, filename: str) -> bool:
        """Remove o arquivo; idempotente (False se já não existia)."""

    @abstractmethod
    def public_path(self, folder: str, filename: str) -> str:
        """Caminho público (/uploads/...) do arquivo."""
