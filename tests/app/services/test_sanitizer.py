"""Testes de sanitização de entrada e mascaramento de e-mail."""

from __future__ import annotations

import pytest

from app.services.sanitizer import mask_email, sanitize_payload, sanitize_text


class TestSanitizeText:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("  Bolo <script>alert(1)</script>caseiro ", "Bolo caseiro"),
            ("<SCRIPT src='x.js'>", ""),
            ('<a href="javascript:x()" onclick="y()">link</a>', '<a href="x()">link</a>'),
            ("<img src=a.png onerror=alert(1)>", "<img src=a.png>"),
            ("linha1\nlinha2\x00\x07", "linha1\nlinha2"),
            ("Preço: R$ 10,00", "Preço: R$ 10,00"),
            ("", ""),
        ],
    )
    def test_removes_active_content(self, raw: str, expected: str) -> None:
        assert sanitize_text(raw) == expected

    def test_is_deterministic(self) -> None:
        raw = "<b onmouseover='x()'>oi</b>"
        assert sanitize_text(raw) == sanitize_text(sanitize_text(raw))


def test_sanitize_payload_keeps_non_strings() -> None:
    payload = {
        "title": " <script>x</script>Bolo ",
        "radius": 5,
        "tags": ["doce", "<script>y</script>bolo"],
        "nested": {"city": " Recife "},
        "website": None,
    }

    assert sanitize_payload(payload) == {
        "title": "Bolo",
        "radius": 5,
        "tags": ["doce", "bolo"],
        "nested": {"city": "Recife"},
        "website": None,
    }


def test_mask_email() -> None:
    assert mask_email("maria.silva@example.com") == "m***@example.com"
    assert mask_email("") == ""
