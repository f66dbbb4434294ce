"""Tabela de campos do formulário de anúncio.

A ordem segue as colunas de conteúdo da tabela ads.
"""

from __future__ import annotations

from forms.fields import (
    Date,
    Email,
    FieldDescriptor,
    Option,
    Select,
    Text,
    Textarea,
    Url,
)

ZIPCODE_PATTERN = r"\d{5}-?\d{3}"
PHONE_PATTERN = r"[\d\s()+-]{8,20}"
STATE_PATTERN = r"[A-Za-z]{2}"

RADIUS_OPTIONS: tuple[Option, ...] = (
    Option("0", "Somente no endereço"),
    Option("1", "Até 1 km"),
    Option("5", "Até 5 km"),
    Option("10", "Até 10 km"),
    Option("50", "Até 50 km"),
    Option("100", "Até 100 km"),
    Option("brasil", "Todo o Brasil"),
)

AD_FIELDS: tuple[FieldDescriptor, ...] = (
    Text("title", "Título", required=True, min_length=3, max_length=100),
    Text("short", "Descrição curta", required=True, max_length=200),
    Textarea("description", "Descrição", required=True, max_length=4000, rows=6),
    Text("tags", "Tags", max_length=200),
    Text("zipcode", "CEP", pattern=ZIPCODE_PATTERN, pattern_error="CEP inválido"),
    Text("city", "Cidade", max_length=100),
    Text("state", "UF", pattern=STATE_PATTERN, pattern_error="UF inválida"),
    Text("address1", "Endereço", max_length=150),
    Text("streetnumber", "Número", max_length=20),
    Text("address2", "Complemento", max_length=100),
    Select("radius", "Raio de atendimento", options=RADIUS_OPTIONS),
    Text("phone1", "Telefone", pattern=PHONE_PATTERN, pattern_error="Telefone inválido"),
    Text("phone2", "Telefone 2", pattern=PHONE_PATTERN, pattern_error="Telefone inválido"),
    Text("whatsapp", "WhatsApp", pattern=PHONE_PATTERN, pattern_error="Telefone inválido"),
    Email("email", "Email"),
    Url("website", "Site"),
    Date("startdate", "Data de início"),
    Date("finishdate", "Data de término", not_before="startdate"),
    Textarea("timetext", "Horário de funcionamento", max_length=500, rows=3),
)
