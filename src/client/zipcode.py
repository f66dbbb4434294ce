"""Consulta de endereço por CEP (ViaCEP).

Só CEPs com 8 dígitos são consultados. A consulta tem timeout próprio
(padrão 5 s) aplicado com asyncio.wait_for sobre a requisição.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from enum import StrEnum

import httpx

from config.logging import log_fallback
from config.settings.client import VIACEP_URL

logger = logging.getLogger(__name__)

ZIPCODE_PENDING_MESSAGE = "Buscando CEP..."
ZIPCODE_NOT_FOUND_MESSAGE = "CEP não encontrado"
ZIPCODE_ERROR_MESSAGE = "Erro ao buscar CEP"

_NON_DIGITS = re.compile(r"\D")


def normalize_zipcode(value: str | None) -> str:
    """Remove tudo que não é dígito."""
    return _NON_DIGITS.sub("", value or "")


def is_lookup_candidate(value: str | None) -> bool:
    return len(normalize_zipcode(value)) == 8


class ZipCodeStatus(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ZipCodeAddress:
    address1: str
    city: str
    state: str


@dataclass(frozen=True, slots=True)
class ZipCodeResult:
    status: ZipCodeStatus
    address: ZipCodeAddress | None = None

    @property
    def found(self) -> bool:
        return self.status is ZipCodeStatus.FOUND


class ZipCodeLookup:
    """Cliente do serviço de CEP."""

    def __init__(
        self,
        base_url: str = VIACEP_URL,
        *,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def lookup(self, zipcode: str) -> ZipCodeResult:
        """Consulta o CEP; falhas de rede, timeout e resposta inválida viram ERROR.

        Raises:
            ValueError: CEP sem 8 dígitos.
        """
        cep = normalize_zipcode(zipcode)
        if len(cep) != 8:
            raise ValueError("CEP deve ter 8 dígitos")

        try:
            data = await asyncio.wait_for(self._fetch(cep), timeout=self._timeout_seconds)
        except TimeoutError:
            log_fallback(logger, "zipcode_lookup", reason="timeout")
            return ZipCodeResult(ZipCodeStatus.ERROR)
        except (httpx.HTTPError, ValueError) as exc:
            log_fallback(logger, "zipcode_lookup", reason=type(exc).__name__)
            return ZipCodeResult(ZipCodeStatus.ERROR)

        if not isinstance(data, dict) or data.get("erro"):
            logger.info("zipcode_not_found")
            return ZipCodeResult(ZipCodeStatus.NOT_FOUND)

        return ZipCodeResult(
            ZipCodeStatus.FOUND,
            ZipCodeAddress(
                address1=data.get("logradouro") or "",
                city=data.get("localidade") or "",
                state=data.get("uf") or "",
            ),
        )

    async def _fetch(self, cep: str) -> object:
        async with httpx.AsyncClient(
            timeout=self._timeout_seconds, transport=self._transport
        ) as client:
            response = await client.get(f"{self._base_url}/{cep}/json/")
            response.raise_for_status()
            return response.json()
