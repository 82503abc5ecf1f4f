# === vigoedit/field.py ===
# Núcleo do campo: configuração pura + um único passo de recomputação (apply_configuration).
from __future__ import annotations
import logging
import unicodedata
from dataclasses import dataclass, field, replace

from vigoedit.controller import EditCommand, Key, KeyResult, MaskedInputController, TextResult
from vigoedit.field_types import FieldType, validate
from vigoedit.masks import MaskCompileError, MaskEngine, MaskLocale, PT_BR
from vigoedit.validators import format_valor

log = logging.getLogger(__name__)

_ACENTOS     = "ÄÅÁÂÀÃäáâàãÉÊËÈéêëèÍÎÏÌíîïìÖÓÔÒÕöóôòõÜÚÛüúûùÇç&"
_SEM_ACENTOS = "AAAAAAaaaaaEEEEeeeeIIIIiiiiOOOOOoooooUUUuuuuCce"
_TIRA_ACENTOS = str.maketrans(_ACENTOS, _SEM_ACENTOS)


def strip_accents(s: str) -> str:
    return (s or "").translate(_TIRA_ACENTOS)

def sanitize(s: str) -> str:
    """Remove o "lixo" invisível: fica só letra, dígito, espaço e pontuação. Travessão vira '-'."""
    keep = []
    for ch in (s or "").strip():
        cat = unicodedata.category(ch)
        if cat[0] in ("L", "P") or cat == "Nd" or ch.isspace():
            keep.append(ch)
    return "".join(keep).replace("–", "-")


@dataclass
class FieldConfig:
    label: str = "Legenda"
    field_type: FieldType = FieldType.NORMAL
    mask: str = ""
    max_length: int = 0
    alignment: str = "left"
    show_button: bool = False
    allow_empty: bool = True      # PodeSerNulo
    allow_shorter: bool = True    # PodeTerMenos
    allow_accents: bool = True    # PermiteAcentuacao
    locale: MaskLocale = field(default=PT_BR)


@dataclass(frozen=True)
class FocusResult:
    is_valid: bool
    real_text: str
    display_text: str
    select_all: bool = False


class VigoField:
    """
    Campo com legenda, máscara e validação (lado "core"; o host só desenha).
    - config: FieldConfig; qualquer mudança passa por apply_configuration()
    - get_real_value(): conteúdo verdadeiro (sem os '*' da senha)
    """
    def __init__(self, config: FieldConfig | None = None, **changes):
        self.config = config or FieldConfig()
        self.focused = False
        self.is_valid = True
        self.mask = ""
        self.max_length = 0
        self.password_char = ""
        self.controller = MaskedInputController()
        self.configure(**changes)

    # -------- configuração --------
    def configure(self, **changes) -> None:
        if "field_type" in changes:
            changes["field_type"] = FieldType.parse(changes["field_type"])
        self.config = replace(self.config, **changes)
        self.apply_configuration()

    def set_field_type(self, tag: FieldType | str) -> None:
        self.configure(field_type=tag)

    def set_mask_pattern(self, pattern: str) -> None:
        self.configure(mask=pattern or "")

    def apply_configuration(self) -> None:
        """Recalcula máscara/tamanho/senha a partir da config e recompila o motor."""
        cfg = self.config
        preset = cfg.field_type.preset
        old = self.controller.engine
        previous = old.to_string(include_prompt=True) if old is not None else self.controller.text
        real = self.get_real_value().rstrip()

        user_mask = cfg.mask if cfg.mask.strip() and preset.user_mask else ""
        self.mask = preset.mask or user_mask
        self.max_length = preset.max_length if preset.max_length is not None else cfg.max_length
        self.password_char = preset.password_char

        engine = None
        if self.mask:
            # máscara só de '&' usa espaço como prompt
            prompt = " " if not self.mask.replace("&", "") else "_"
            try:
                engine = MaskEngine(self.mask, cfg.locale, prompt_char=prompt, password_char=self.password_char)
            except MaskCompileError as ex:
                log.warning("máscara inválida %r, campo fica sem máscara: %s", self.mask, ex)
                self.mask = ""

        overwrite = self.controller.overwrite
        self.controller = MaskedInputController(engine)
        self.controller.overwrite = overwrite
        if engine is None:
            self.controller.text = self._clip(real)
        elif previous.strip() and not engine.set(previous.rstrip()):
            # texto antigo não cabe na máscara nova: tenta só o valor real
            if not engine.set(real):
                log.debug("valor %r descartado ao recompilar a máscara %r", real, self.mask)
        self.controller.refresh(0)

    def _clip(self, text: str) -> str:
        if self.max_length and len(text) > self.max_length:
            return text[:self.max_length]
        return text

    # -------- valores --------
    @property
    def display_text(self) -> str:
        return self.controller.text

    @property
    def cursor(self) -> int:
        return self.controller.cursor

    @property
    def masked(self) -> bool:
        return self.controller.masked

    def get_real_value(self) -> str:
        return self.controller.real_value()

    def set_text(self, text: str) -> str:
        """Texto vindo do código (ou do host, em campo sem máscara)."""
        engine = self.controller.engine
        if engine is None:
            self.controller.text = self._clip(text or "")
        elif not engine.set(text or ""):
            log.debug("texto %r recusado pela máscara %r", text, self.mask)
        self.controller.refresh(len(self.controller.text))
        return self.display_text

    # -------- eventos do host --------
    def on_key_down(self, key: Key, selection_start: int, selection_length: int = 0, char: str | None = None) -> KeyResult:
        return self.controller.on_key_down(key, selection_start, selection_length, char)

    def on_text_input(self, text: str, selection_start: int) -> TextResult | None:
        return self.controller.on_text_input(text, selection_start)

    def apply(self, cmd: EditCommand) -> TextResult | None:
        return self.controller.apply(cmd)

    def set_overwrite(self, on: bool) -> None:
        self.controller.overwrite = bool(on)

    def on_focus_gained(self) -> FocusResult:
        self.focused = True
        self.apply_configuration()
        text = self.display_text
        return FocusResult(self.is_valid, self.get_real_value(), text, select_all=bool(text.strip()))

    def on_focus_lost(self) -> FocusResult:
        self.focused = False
        self.is_valid = self.validate_content()
        if self.config.field_type is FieldType.VALOR:
            self.set_text(format_valor(self.get_real_value(), self.config.locale))
        return FocusResult(self.is_valid, sanitize(self.get_real_value()), self.display_text)

    # -------- validação --------
    def _fix(self, s: str) -> str:
        if not self.config.allow_accents:
            s = strip_accents(s)
        if self.config.field_type.preset.upper:
            s = s.upper()
        return s

    def _normalize(self) -> str:
        """Aplica acentuação/caixa ao conteúdo e devolve o texto a validar."""
        engine = self.controller.engine
        if engine is None:
            self.controller.text = self._clip(sanitize(self._fix(self.controller.text)))
            self.controller.refresh()
            return self.controller.text
        for i, p in enumerate(engine.positions):
            if p.assigned is not None:
                ch = self._fix(p.assigned)
                if ch != p.assigned and engine.verify_char(ch, i):
                    p.assigned = ch
        self.controller.refresh()
        return sanitize(engine.to_string(include_prompt=True))

    def required_length(self) -> int:
        engine = self.controller.engine
        return len(engine) if engine is not None else self.max_length

    def is_empty(self) -> bool:
        engine = self.controller.engine
        if engine is None:
            return not self.controller.text.replace("_", "").strip()
        # só literais na tela não contam como conteúdo
        return all(p.assigned is None or p.assigned.isspace() for p in engine.positions)

    def validate_content(self) -> bool:
        text = self._normalize()
        bare = text.replace("_", "").strip()
        if self.is_empty():
            return self.config.allow_empty
        if not self.config.allow_shorter and len(bare) < self.required_length():
            return False
        return validate(self.config.field_type, text, self.config.locale)

    def __repr__(self) -> str:
        return f"VigoField({self.config.field_type.value}, {self.display_text!r})"
