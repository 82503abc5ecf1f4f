# === vigoedit/field_types.py ===
# Tipos de campo pré-definidos: máscara, tamanho, senha e validador de cada um.
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from vigoedit import validators as v
from vigoedit.masks import MaskLocale, PT_BR

Validator = Callable[[str, MaskLocale], bool]

PASSWORD_LENGTH = 50


class FieldType(Enum):
    NORMAL = "Normal"
    NUMERO = "Numero"
    DATA = "Data"
    VALOR = "Valor"
    EMAIL = "E-mail"
    IP = "IP"
    MAC = "MAC"
    CPF = "CPF"
    CNPJ = "CNPJ"
    CEP = "CEP"
    SENHA = "Senha"
    TELEFONE = "Telefone"
    CONTA = "Conta"
    HORA = "Hora"
    UF = "UF"
    IPV6 = "IPv6"

    @classmethod
    def parse(cls, tag: "str | FieldType") -> "FieldType":
        """Aceita o membro, o valor ("E-mail") ou o nome ("EMAIL"), sem diferenciar caixa."""
        if isinstance(tag, cls):
            return tag
        t = (tag or "").strip().lower()
        for ft in cls:
            if t in (ft.value.lower(), ft.name.lower()):
                return ft
        raise ValueError(f"Tipo de campo desconhecido: {tag!r}")

    @property
    def preset(self) -> "FieldPreset":
        return PRESETS[self]


@dataclass(frozen=True)
class FieldPreset:
    mask: str = ""              # "" = usa a máscara do usuário (se houver)
    max_length: int | None = None
    password_char: str = ""
    validator: Validator = lambda s, loc: True
    upper: bool = False
    user_mask: bool = True      # False = ignora a máscara informada pelo usuário


def _plain(fn: Callable[[str], bool]) -> Validator:
    return lambda s, loc: fn(s)


PRESETS: dict[FieldType, FieldPreset] = {
    FieldType.NORMAL:   FieldPreset(),
    FieldType.NUMERO:   FieldPreset(validator=_plain(v.is_integer)),
    FieldType.DATA:     FieldPreset(mask="&0/00/0000", validator=v.is_date),
    FieldType.VALOR:    FieldPreset(validator=v.is_decimal),
    FieldType.EMAIL:    FieldPreset(validator=_plain(v.is_email)),
    FieldType.IP:       FieldPreset(validator=_plain(v.is_ip)),
    FieldType.MAC:      FieldPreset(mask="AA:AA:AA:AA:AA:AA", validator=_plain(v.is_mac)),
    FieldType.CPF:      FieldPreset(mask="000,000,000-00", validator=_plain(v.is_cpf)),
    FieldType.CNPJ:     FieldPreset(mask="00,000,000/0000-00", validator=_plain(v.is_cnpj)),
    FieldType.CEP:      FieldPreset(mask="00000-000", validator=_plain(v.is_cep)),
    FieldType.SENHA:    FieldPreset(mask="&" * PASSWORD_LENGTH, max_length=PASSWORD_LENGTH, password_char="*"),
    FieldType.TELEFONE: FieldPreset(mask="(00)&0000-0000", validator=_plain(v.is_telefone)),
    FieldType.CONTA:    FieldPreset(mask="00,000,000-A", validator=_plain(v.is_conta)),
    FieldType.HORA:     FieldPreset(mask="00:00", validator=_plain(v.is_hora)),
    FieldType.UF:       FieldPreset(max_length=2, validator=_plain(v.is_uf), upper=True, user_mask=False),
    FieldType.IPV6:     FieldPreset(validator=_plain(v.is_ipv6)),
}


def validate(field_type: FieldType | str, text: str, locale: MaskLocale = PT_BR) -> bool:
    """Despacha para o validador do tipo. Qualquer falha vira False."""
    try:
        return bool(FieldType.parse(field_type).preset.validator(text, locale))
    except Exception:
        return False
