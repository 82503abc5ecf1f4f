from __future__ import annotations
import logging
import os
import flet as ft

from vigoedit.field import FocusResult
from vigoedit.field_types import FieldType
from vigoedit.inputs import VigoEdit, chain_fields
from vigoedit.masks import LOCALES, PT_BR

log = logging.getLogger(__name__)

# (legenda, tipo, extras)
DEMO_FIELDS = [
    ("Nome",          FieldType.NORMAL,   dict(allow_accents=False)),
    ("CPF",           FieldType.CPF,      dict(allow_empty=False)),
    ("CNPJ",          FieldType.CNPJ,     {}),
    ("Nascimento",    FieldType.DATA,     {}),
    ("Hora",          FieldType.HORA,     {}),
    ("CEP",           FieldType.CEP,      dict(show_button=True)),
    ("UF",            FieldType.UF,       {}),
    ("Telefone",      FieldType.TELEFONE, {}),
    ("E-mail",        FieldType.EMAIL,    {}),
    ("Quantidade",    FieldType.NUMERO,   dict(alignment="right")),
    ("Valor",         FieldType.VALOR,    dict(alignment="right")),
    ("Conta",         FieldType.CONTA,    {}),
    ("IP",            FieldType.IP,       {}),
    ("IPv6",          FieldType.IPV6,     {}),
    ("MAC",           FieldType.MAC,      {}),
    ("Senha",         FieldType.SENHA,    {}),
]


def current_locale():
    return LOCALES.get(os.environ.get("VIGOEDIT_LOCALE", ""), PT_BR)


def build(page: ft.Page) -> ft.Control:
    status = ft.Text("", size=12, color=ft.Colors.ON_SURFACE_VARIANT)
    locale = current_locale()

    def _validated(f: VigoEdit, res: FocusResult):
        status.value = f"{f.field.config.label}: {'ok' if res.is_valid else 'inválido'} ({res.real_text!r})"
        try:
            status.update()
        except Exception:
            pass

    def _cep_lookup(f: VigoEdit):
        status.value = f"Buscar CEP {f.real_value.strip()}"
        try:
            status.update()
        except Exception:
            pass

    fields = [
        VigoEdit(label, tipo, width=260, locale=locale, on_validated=_validated,
                 on_button_click=_cep_lookup if extra.get("show_button") else None, **extra)
        for label, tipo, extra in DEMO_FIELDS
    ]
    chain_fields(fields)
    log.info("demo com %d campos (%s)", len(fields), locale.name)

    return ft.Column(
        spacing=12,
        scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.Text("VigoEdit", size=20, weight=ft.FontWeight.BOLD),
            ft.Row(wrap=True, spacing=12, run_spacing=12, controls=[f.control() for f in fields]),
            status,
        ],
    )


def main(page: ft.Page):
    # “modo mínimo” de diagnóstico, se necessário
    if os.environ.get("APP_MINIMAL") == "1":
        page.add(ft.Container(padding=20, content=ft.Text("Minimal OK", size=20, weight=ft.FontWeight.W_700)))
        return

    page.title = "VigoEdit"
    page.padding = 20
    page.theme_mode = ft.ThemeMode.LIGHT
    page.add(build(page))
    page.update()
