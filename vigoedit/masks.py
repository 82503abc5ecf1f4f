# === vigoedit/masks.py ===
# Motor de máscara: posições fixas (literais ou editáveis), valor real x valor exibido.
from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from enum import Enum

log = logging.getLogger(__name__)

_re_digits = re.compile(r"\D+")

def only_digits(s: str) -> str:
    return _re_digits.sub("", s or "")


class MaskCompileError(ValueError):
    """Padrão de máscara malformado (ex.: barra invertida no final)."""


# ----------------- locale -----------------
@dataclass(frozen=True)
class MaskLocale:
    name: str
    decimal_sep: str
    thousands_sep: str
    time_sep: str
    date_sep: str
    currency: str
    date_formats: tuple[str, ...] = ()

PT_BR = MaskLocale(
    name="pt-BR", decimal_sep=",", thousands_sep=".", time_sep=":", date_sep="/", currency="R$",
    date_formats=("%d/%m/%Y", "%d/%m/%y", "%d-%m-%Y", "%d.%m.%Y", "%Y-%m-%d", "%d/%m/%Y %H:%M", "%d/%m/%Y %H:%M:%S"),
)
EN_US = MaskLocale(
    name="en-US", decimal_sep=".", thousands_sep=",", time_sep=":", date_sep="/", currency="$",
    date_formats=("%m/%d/%Y", "%m/%d/%y", "%Y-%m-%d", "%m/%d/%Y %H:%M", "%m/%d/%Y %H:%M:%S"),
)
LOCALES = {PT_BR.name: PT_BR, EN_US.name: EN_US}


# ----------------- posições -----------------
class PositionKind(Enum):
    LITERAL = ""
    DIGIT = "0"
    DIGIT_OPTIONAL = "9"
    DIGIT_OR_SIGN = "#"
    LETTER = "L"
    LETTER_OPTIONAL = "?"
    ANY = "&"
    ANY_OPTIONAL = "C"
    ALNUM = "A"
    ALNUM_OPTIONAL = "a"

    @property
    def required(self) -> bool:
        return self in (PositionKind.DIGIT, PositionKind.LETTER, PositionKind.ANY, PositionKind.ALNUM)

_TOKENS = {k.value: k for k in PositionKind if k is not PositionKind.LITERAL}

def _accepts(kind: PositionKind, ch: str) -> bool:
    if len(ch) != 1 or ord(ch) < 32 or ord(ch) == 127:
        return False
    if kind is PositionKind.DIGIT:
        return ch.isdecimal()
    if kind is PositionKind.DIGIT_OPTIONAL:
        return ch.isdecimal() or ch == " "
    if kind is PositionKind.DIGIT_OR_SIGN:
        return ch.isdecimal() or ch in " +-"
    if kind is PositionKind.LETTER:
        return ch.isalpha()
    if kind is PositionKind.LETTER_OPTIONAL:
        return ch.isalpha() or ch == " "
    if kind is PositionKind.ALNUM:
        return ch.isalnum()
    if kind is PositionKind.ALNUM_OPTIONAL:
        return ch.isalnum() or ch == " "
    if kind in (PositionKind.ANY, PositionKind.ANY_OPTIONAL):
        return ch.isprintable()
    return False


@dataclass
class MaskPosition:
    kind: PositionKind
    literal: str = ""
    assigned: str | None = None

    @property
    def editable(self) -> bool:
        return self.kind is not PositionKind.LITERAL

    @property
    def is_prompt_shown(self) -> bool:
        return self.editable and self.assigned is None


@dataclass
class MaskPattern:
    source: str
    positions: list[MaskPosition] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)

    def __getitem__(self, i: int) -> MaskPosition:
        return self.positions[i]


def compile(pattern: str, locale: MaskLocale = PT_BR) -> MaskPattern:
    """Converte o texto da máscara em posições (tokens de um caractere, esquerda p/ direita)."""
    subst = {".": locale.decimal_sep, ",": locale.thousands_sep, ":": locale.time_sep,
             "/": locale.date_sep, "$": locale.currency}
    out: list[MaskPosition] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= len(pattern):
                raise MaskCompileError(f"Escape incompleto no fim da máscara: {pattern!r}")
            out.append(MaskPosition(PositionKind.LITERAL, pattern[i + 1]))
            i += 2
            continue
        if ch in _TOKENS:
            out.append(MaskPosition(_TOKENS[ch]))
        elif ch in subst:
            # moeda pode ter mais de um caractere ("R$")
            out.extend(MaskPosition(PositionKind.LITERAL, c) for c in subst[ch])
        else:
            out.append(MaskPosition(PositionKind.LITERAL, ch))
        i += 1
    return MaskPattern(pattern, out)


# ----------------- motor -----------------
class MaskEngine:
    """
    Estado de uma máscara compilada:
    - cada posição é um "slot" fixo (não há deslocamento de caracteres)
    - valor real (to_string) separado do valor exibido (to_display_string)
    """
    def __init__(self, pattern: str, locale: MaskLocale = PT_BR, prompt_char: str = "_", password_char: str = ""):
        self.locale = locale
        self.prompt_char = prompt_char
        self.password_char = password_char
        self.reset_on_space = False
        self.mask = compile(pattern, locale)
        self.last_position = -1

    # -------- consultas --------
    def __len__(self) -> int:
        return len(self.mask)

    @property
    def positions(self) -> list[MaskPosition]:
        return self.mask.positions

    @property
    def assigned_count(self) -> int:
        return sum(1 for p in self.positions if p.editable and p.assigned is not None)

    @property
    def is_complete(self) -> bool:
        return all(p.assigned is not None for p in self.positions if p.editable and p.kind.required)

    def _in_range(self, position: int) -> bool:
        return 0 <= position < len(self.positions)

    def is_edit_position(self, position: int) -> bool:
        return self._in_range(position) and self.positions[position].editable

    def find_edit_position_from(self, start: int, forward: bool = True) -> int | None:
        step = 1 if forward else -1
        i = start
        while self._in_range(i):
            if self.positions[i].editable:
                return i
            i += step
        return None

    def verify_char(self, ch: str, position: int) -> bool:
        return self.is_edit_position(position) and _accepts(self.positions[position].kind, ch)

    # -------- mutações --------
    def _assign_run(self, text: str, position: int) -> bool:
        if not (0 <= position <= len(self.positions)):
            return False
        snapshot = [p.assigned for p in self.positions]
        cursor = position
        last = -1
        for ch in text:
            here = self.positions[cursor] if self._in_range(cursor) else None
            if here is not None and not here.editable and here.literal == ch:
                # texto já formatado: literal igual ao da máscara é consumido
                last = cursor
                cursor += 1
                continue
            target = self.find_edit_position_from(cursor, True)
            if target is not None and ch == self.prompt_char and not self.password_char:
                # prompt como entrada: a posição volta a ficar vazia (senha aceita o espaço digitado)
                self.positions[target].assigned = None
                last = target
                cursor = target + 1
                continue
            if target is None or not _accepts(self.positions[target].kind, ch):
                for p, old in zip(self.positions, snapshot):
                    p.assigned = old
                log.debug("edição rejeitada: %r na posição %s", ch, target)
                return False
            self.positions[target].assigned = ch
            last = target
            cursor = target + 1
        self.last_position = last
        return True

    def insert_at(self, text: str, position: int) -> bool:
        return self._assign_run(text, position)

    def replace(self, text: str, position: int) -> bool:
        # modo sobrescrever: mesmos slots fixos, o valor ocupado é trocado
        return self._assign_run(text, position)

    def remove_at(self, position: int) -> bool:
        return self.remove_range(position, position)

    def remove_range(self, start: int, end: int) -> bool:
        if not (self._in_range(start) and self._in_range(end)) or end < start:
            return False
        for p in self.positions[start:end + 1]:
            if p.editable:
                p.assigned = None
        self.last_position = start
        return True

    def clear(self) -> None:
        for p in self.positions:
            p.assigned = None

    def set(self, text: str) -> bool:
        snapshot = [p.assigned for p in self.positions]
        self.clear()
        if self._assign_run(text or "", 0):
            return True
        for p, old in zip(self.positions, snapshot):
            p.assigned = old
        return False

    # -------- saída --------
    def to_string(self, include_prompt: bool = False, include_password: bool = False) -> str:
        out = []
        for p in self.positions:
            if not p.editable:
                out.append(p.literal)
            elif p.assigned is None:
                out.append(self.prompt_char if include_prompt else " ")
            elif include_password and self.password_char:
                out.append(self.password_char)
            else:
                out.append(p.assigned)
        return "".join(out)

    def to_display_string(self) -> str:
        return self.to_string(include_prompt=True, include_password=True)

    def __repr__(self) -> str:
        return f"MaskEngine({self.mask.source!r}, {self.to_display_string()!r})"
