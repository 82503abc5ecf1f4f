# vigoedit/inputs.py  (host Flet: legenda + caixa de texto + botão)
from __future__ import annotations
from typing import Callable, Iterable
import flet as ft

from vigoedit.controller import Key, edit_command_from_diff
from vigoedit.field import FocusResult, VigoField
from vigoedit.field_types import FieldType

# Cores do quadro: foco (azul clarinho), válido, inválido
FOCUS_BG   = ft.Colors.with_opacity(0.78, "#DCECF9")
VALID_BG   = ft.Colors.WHITE
INVALID_BG = "#FFE4E1"   # MistyRose

_ALIGN = {"left": ft.TextAlign.LEFT, "right": ft.TextAlign.RIGHT, "center": ft.TextAlign.CENTER}

_KEYBOARD = {
    FieldType.NUMERO: ft.KeyboardType.NUMBER,
    FieldType.VALOR: ft.KeyboardType.NUMBER,
    FieldType.CPF: ft.KeyboardType.NUMBER,
    FieldType.CNPJ: ft.KeyboardType.NUMBER,
    FieldType.CEP: ft.KeyboardType.NUMBER,
    FieldType.HORA: ft.KeyboardType.NUMBER,
    FieldType.DATA: ft.KeyboardType.DATETIME,
    FieldType.EMAIL: ft.KeyboardType.EMAIL,
    FieldType.TELEFONE: ft.KeyboardType.PHONE,
}

# ----------------- util -----------------
def _safe_update(ctrl: ft.Control) -> None:
    try:
        ctrl.update()
    except AssertionError:
        pass
    except Exception:
        pass


class VigoEdit:
    """
    Campo com legenda para Flet 0.28.x.
    - o TextField só avisa "mudou" (on_change): a edição é reconstruída por diff e passa pelo VigoField
    - Enter (on_submit) chama on_next, para pular ao próximo campo
    - ao sair do campo valida e pinta o quadro de branco ou vermelho
    """
    def __init__(
        self,
        label: str = "Legenda",
        field_type: FieldType | str = FieldType.NORMAL,
        value: str = "",
        width: int | None = None,
        on_next: Callable[[], None] | None = None,
        on_button_click: Callable[["VigoEdit"], None] | None = None,
        on_validated: Callable[["VigoEdit", FocusResult], None] | None = None,
        **config,
    ):
        self.field = VigoField(label=label, field_type=FieldType.parse(field_type), **config)
        self.on_next = on_next
        self.on_button_click = on_button_click
        self.on_validated = on_validated
        self._shown = ""

        cfg = self.field.config
        self._label = ft.Text(cfg.label, size=12, color=ft.Colors.ON_SURFACE_VARIANT)
        self._tf = ft.TextField(
            value="",
            dense=True,
            border=ft.InputBorder.NONE,
            on_change=self._on_change,
            on_focus=self._on_focus,
            on_blur=self._on_blur,
            on_submit=self._on_submit,
        )
        self._button = ft.IconButton(icon=ft.Icons.SEARCH, on_click=self._on_button, tooltip=cfg.label)
        self._container = ft.Container(
            width=width,
            bgcolor=VALID_BG,
            border=ft.border.all(1, ft.Colors.with_opacity(0.12, ft.Colors.ON_SURFACE)),
            border_radius=8,
            padding=ft.padding.only(left=5, top=1, right=5, bottom=5),
            content=ft.Row(
                spacing=4,
                vertical_alignment=ft.CrossAxisAlignment.END,
                controls=[
                    ft.Column(spacing=2, expand=True, controls=[self._label, self._tf]),
                    self._button,
                ],
            ),
        )
        self._apply_look()
        if value:
            self.field.set_text(value)
        self._sync()

    # -------- API pública --------
    def control(self) -> ft.Control:
        return self._container

    @property
    def value(self) -> str:
        return self.field.display_text

    @value.setter
    def value(self, text: str) -> None:
        self.field.set_text(text)
        self._sync()

    @property
    def real_value(self) -> str:
        return self.field.get_real_value()

    @property
    def is_valid(self) -> bool:
        return self.field.is_valid

    def configure(self, **changes) -> None:
        self.field.configure(**changes)
        self._apply_look()
        self._sync()

    def set_field_type(self, tag: FieldType | str) -> None:
        self.configure(field_type=tag)

    def set_mask(self, pattern: str) -> None:
        self.configure(mask=pattern)

    def focus(self) -> None:
        try:
            self._tf.focus()
        except Exception:
            pass

    # -------- interno --------
    def _apply_look(self) -> None:
        cfg = self.field.config
        self._label.value = cfg.label
        self._tf.text_align = _ALIGN.get(cfg.alignment, ft.TextAlign.LEFT)
        self._tf.max_length = None if self.field.masked or not self.field.max_length else self.field.max_length
        self._tf.keyboard_type = _KEYBOARD.get(cfg.field_type, ft.KeyboardType.TEXT)
        self._button.visible = cfg.show_button

    def _sync(self) -> None:
        self._shown = self.field.display_text
        self._tf.value = self._shown
        _safe_update(self._container)

    def _on_change(self, e=None):
        new = self._tf.value or ""
        if self.field.masked:
            cmd = edit_command_from_diff(self._shown, new)
            if cmd is not None:
                self.field.apply(cmd)
        else:
            self.field.set_text(new)
        self._sync()

    def _on_focus(self, e=None):
        self.field.on_focus_gained()
        self._container.bgcolor = FOCUS_BG
        self._sync()

    def _on_blur(self, e=None):
        res = self.field.on_focus_lost()
        self._container.bgcolor = VALID_BG if res.is_valid else INVALID_BG
        self._tf.error_text = "" if res.is_valid else "Conteúdo inválido"
        self._sync()
        if self.on_validated:
            self.on_validated(self, res)

    def _on_submit(self, e=None):
        res = self.field.on_key_down(Key.ENTER, self.field.cursor)
        if res.advance_focus and self.on_next:
            self.on_next()

    def _on_button(self, e=None):
        if self.on_button_click:
            self.on_button_click(self)


def chain_fields(fields: Iterable[VigoEdit]) -> list[VigoEdit]:
    """Enter em um campo leva ao próximo (o último volta ao primeiro)."""
    items = list(fields)
    for i, f in enumerate(items):
        nxt = items[(i + 1) % len(items)]
        f.on_next = nxt.focus
    return items
