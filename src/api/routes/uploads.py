"""Leitura de arquivos multipart para o modelo de domínio."""

from __future__ import annotations

from fastapi import UploadFile

from app.domain.upload import UploadedFile


async def read_upload(upload: UploadFile | None) -> UploadedFile | None:
    """Lê o arquivo enviado; None quando o campo veio vazio."""
    if upload is None or not upload.filename:
        return None
    content = await upload.read()
    return UploadedFile(
        filename=upload.filename,
        content_type=upload.content_type or "",
        content=content,
    )
