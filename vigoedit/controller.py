# === vigoedit/controller.py ===
# Tradução de teclas/texto em operações do MaskEngine (cursor, seleção, Insert/Overwrite).
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum

from vigoedit.masks import MaskEngine

log = logging.getLogger(__name__)


class Key(Enum):
    BACKSPACE = "backspace"
    DELETE = "delete"
    SPACE = "space"
    ENTER = "enter"
    OTHER = "other"


@dataclass(frozen=True)
class EditCommand:
    anchor: int
    selection_length: int = 0
    text: str | None = None
    is_delete: bool = False
    is_backspace: bool = False


@dataclass(frozen=True)
class KeyResult:
    handled: bool
    cursor: int
    advance_focus: bool = False


@dataclass(frozen=True)
class TextResult:
    text: str
    cursor: int


def edit_command_from_diff(old: str, new: str, cursor: int | None = None) -> EditCommand | None:
    """
    Reconstrói a edição a partir do valor antigo e do novo (hosts que só avisam "mudou").
    Retorna None se não houve mudança.
    """
    old = old or ""
    new = new or ""
    if old == new:
        return None
    p = 0
    limit = min(len(old), len(new))
    while p < limit and old[p] == new[p]:
        p += 1
    s = 0
    while s < limit - p and old[len(old) - 1 - s] == new[len(new) - 1 - s]:
        s += 1
    removed = len(old) - p - s
    inserted = new[p:len(new) - s]
    if inserted:
        return EditCommand(anchor=p, selection_length=removed, text=inserted)
    # uma única remoção logo antes do cursor = backspace
    if removed == 1 and cursor is not None and cursor == p:
        return EditCommand(anchor=p + 1, is_backspace=True)
    return EditCommand(anchor=p, selection_length=removed, is_delete=True)


class MaskedInputController:
    """Sem máscara (engine=None) tudo passa direto: o host edita o texto nativamente."""

    def __init__(self, engine: MaskEngine | None = None):
        self.engine = engine
        self.overwrite = False
        self.text = ""
        self.cursor = 0
        if engine is not None:
            self.refresh(0)

    @property
    def masked(self) -> bool:
        return self.engine is not None

    # -------- texto exibido / real --------
    def refresh(self, position: int | None = None) -> str:
        if self.engine is not None:
            # senha sempre oculta, focado ou não
            self.text = self.engine.to_display_string()
        if position is not None:
            self.cursor = max(0, min(position, len(self.text)))
        return self.text

    def real_value(self) -> str:
        if self.engine is None:
            return self.text
        return self.engine.to_string(include_prompt=False)

    # -------- posições --------
    def edit_position_from(self, start: int) -> int:
        pos = self.engine.find_edit_position_from(start, True)
        return start if pos is None else pos

    def edit_position_to(self, end: int) -> int:
        while end >= 0 and not self.engine.is_edit_position(end):
            end -= 1
        return end

    def is_valid_char(self, ch: str | None, position: int) -> bool:
        return bool(ch) and self.engine.verify_char(ch, position)

    # -------- operações --------
    def _remove_range(self, position: int, length: int) -> None:
        if self.engine.remove_range(position, position + length - 1):
            self.refresh(position)

    def _remove_char(self, position: int) -> None:
        if self.engine.remove_at(position):
            self.refresh(position)

    def _update_text(self, text: str, position: int) -> int:
        if position < len(self.text):
            position = self.edit_position_from(position)
            if (self.overwrite and self.engine.replace(text, position)) or self.engine.insert_at(text, position):
                position = self.engine.last_position + 1
            else:
                log.debug("texto %r recusado na posição %d", text, position)
            position = self.edit_position_from(position)
        self.refresh(position)
        return position

    def on_key_down(self, key: Key, selection_start: int, selection_length: int = 0, char: str | None = None) -> KeyResult:
        # Enter vale como Tab SEMPRE, com ou sem máscara
        advance = key is Key.ENTER
        if self.engine is None:
            return KeyResult(False, selection_start, advance)

        position = selection_start
        self.cursor = position
        handled = True
        if key is Key.BACKSPACE:
            if selection_length == 0:
                self._remove_char(self.edit_position_to(position - 1))
            else:
                self._remove_range(position, selection_length)
        elif key is Key.DELETE:
            if selection_length == 0:
                self._remove_char(self.edit_position_from(position))
            else:
                self._remove_range(position, selection_length)
        elif key is Key.SPACE:
            if selection_length != 0 and self.is_valid_char(" ", position):
                self._remove_range(position, selection_length)
            else:
                self._update_text(" ", position)
        else:
            handled = False
            if selection_length != 0 and self.is_valid_char(char, position):
                self._remove_range(position, selection_length)
        return KeyResult(handled, self.cursor, advance)

    def on_text_input(self, text: str, selection_start: int) -> TextResult | None:
        if self.engine is None:
            return None
        if not text:
            return TextResult(self.text, selection_start)
        self._update_text(text, selection_start)
        return TextResult(self.text, self.cursor)

    def apply(self, cmd: EditCommand) -> TextResult | None:
        """Executa um EditCommand como se fosse a sequência de teclas equivalente."""
        if self.engine is None:
            return None
        if cmd.text == " ":
            self.on_key_down(Key.SPACE, cmd.anchor, cmd.selection_length)
            return TextResult(self.text, self.cursor)
        if cmd.text is not None:
            self.on_key_down(Key.OTHER, cmd.anchor, cmd.selection_length, cmd.text[:1])
            return self.on_text_input(cmd.text, cmd.anchor)
        key = Key.BACKSPACE if cmd.is_backspace else Key.DELETE
        anchor, length = cmd.anchor, cmd.selection_length
        if key is Key.DELETE and length == 1 and not self.engine.is_edit_position(anchor):
            # apagou só um literal (backspace logo após '-' ou '.'): recua até a posição editável anterior
            key, anchor, length = Key.BACKSPACE, anchor + 1, 0
        self.on_key_down(key, anchor, length)
        return TextResult(self.text, self.cursor)
