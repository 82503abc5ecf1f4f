# === vigoedit/validators.py ===
# Validadores por tipo de campo. Todos são totais: entrada malformada -> False, nunca exceção.
from __future__ import annotations
import re
from datetime import datetime
from decimal import Decimal, InvalidOperation

from vigoedit.masks import MaskLocale, PT_BR, only_digits

_email_rx    = re.compile(r"^[A-Za-z0-9_](([_\.\-]?[a-zA-Z0-9_-]+)*)@([A-Za-z0-9]+)(([\.\-]?[a-zA-Z0-9]+)*)\.([A-Za-z]{2,})$")
_ip_rx       = re.compile(r"\b(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\b")
_mac_rx      = re.compile(r"^([0-9a-fA-F][0-9a-fA-F]:){5}([0-9a-fA-F][0-9a-fA-F])$")
_cep_rx      = re.compile(r"^[0-9]{5}-[0-9]{3}$")
_telefone_rx = re.compile(r"^\(\d{2}\)[0-9 \s]\d{4}-\d{4}$")
_hora_rx     = re.compile(r"^(?:0?[0-9]|1[0-9]|2[0-3]):[0-5][0-9]$")
_conta_rx    = re.compile(r"^[0-9]{2}.[0-9]{3}.[0-9]{3}-[0-9XxPp]{1}$")
# \Z do Python equivale ao \z (fim absoluto) do .NET
_ipv6_rx     = re.compile(r"^(((?=.*(::))(?!.*\3.+\3))\3?|[0-9A-F]{1,4}:)([0-9A-F]{1,4}(\3|:\b)|\2){5}(([0-9A-F]{1,4}(\3|:\b|$)|\2){2}|(((2[0-4]|1[0-9]|[1-9])?[0-9]|25[0-5])\.?\b){4})\Z")

# pares de letras: só vale se o código começar em posição par
UF_CODES = "SPMGRJRSSCPRESDFMTMSGOTOBASEALPBPEMARNCEPIPAAMAPFNACRRRO"

_CPF_W1  = (10, 9, 8, 7, 6, 5, 4, 3, 2)
_CPF_W2  = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_W1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_W2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1
_int_rx = re.compile(r"^[+-]?\d+$", re.ASCII)


# ----------------- dígitos verificadores -----------------
def _check_digit(digits: str, weights: tuple[int, ...]) -> str:
    resto = sum(int(d) * w for d, w in zip(digits, weights)) % 11
    return "0" if resto < 2 else str(11 - resto)

def _check_digits(base: str, w1: tuple[int, ...], w2: tuple[int, ...]) -> str:
    d1 = _check_digit(base, w1)
    d2 = _check_digit(base + d1, w2)
    return d1 + d2

def _ascii_digits(s: str) -> bool:
    return s.isascii() and s.isdigit()

def _doc_digits(s: str) -> str:
    # pontuação de qualquer locale (. , / - espaço) sai; letra invalida o documento
    s = s or ""
    if any(ch.isalpha() for ch in s):
        return ""
    return only_digits(s)

def is_cpf(s: str) -> bool:
    cpf = _doc_digits(s)
    if len(cpf) != 11 or not _ascii_digits(cpf) or len(set(cpf)) == 1:
        return False
    return cpf[9:] == _check_digits(cpf[:9], _CPF_W1, _CPF_W2)

def is_cnpj(s: str) -> bool:
    cnpj = _doc_digits(s)
    if len(cnpj) != 14 or not _ascii_digits(cnpj):
        return False
    return cnpj[12:] == _check_digits(cnpj[:12], _CNPJ_W1, _CNPJ_W2)


# ----------------- números / datas -----------------
def parse_date(s: str, locale: MaskLocale = PT_BR) -> datetime | None:
    s = (s or "").strip()
    for fmt in locale.date_formats:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    return None

def parse_decimal(s: str, locale: MaskLocale = PT_BR) -> Decimal | None:
    t = (s or "").strip().replace(locale.currency, "").replace(" ", "")
    if not t:
        return None
    inteiro, _, frac = t.partition(locale.decimal_sep)
    inteiro = inteiro.replace(locale.thousands_sep, "")
    sinal = ""
    if inteiro and inteiro[0] in "+-":
        sinal, inteiro = inteiro[0], inteiro[1:]
    if not (inteiro or frac) or (inteiro and not _ascii_digits(inteiro)) or (frac and not _ascii_digits(frac)):
        return None
    try:
        return Decimal(f"{sinal}{inteiro or '0'}.{frac or '0'}")
    except InvalidOperation:
        return None

def format_valor(s: str, locale: MaskLocale = PT_BR) -> str:
    v = parse_decimal(s, locale)
    if v is None:
        return f"0{locale.decimal_sep}00"
    return f"{v:.2f}".replace(".", locale.decimal_sep)

def is_date(s: str, locale: MaskLocale = PT_BR) -> bool:
    return parse_date(s, locale) is not None

def is_integer(s: str) -> bool:
    t = (s or "").strip()
    if not _int_rx.match(t):
        return False
    return _INT64_MIN <= int(t) <= _INT64_MAX

def is_decimal(s: str, locale: MaskLocale = PT_BR) -> bool:
    return parse_decimal(s, locale) is not None


# ----------------- formatos -----------------
def is_uf(s: str) -> bool:
    return UF_CODES.find((s or "").upper()) % 2 == 0

def is_email(s: str) -> bool:
    return bool(_email_rx.search(s or ""))

def is_ip(s: str) -> bool:
    return bool(_ip_rx.search(s or ""))

def is_mac(s: str) -> bool:
    return bool(_mac_rx.search(s or ""))

def is_cep(s: str) -> bool:
    return bool(_cep_rx.search(s or ""))

def is_telefone(s: str) -> bool:
    return bool(_telefone_rx.search(s or ""))

def is_hora(s: str) -> bool:
    return bool(_hora_rx.search(s or ""))

def is_conta(s: str) -> bool:
    return bool(_conta_rx.search(s or ""))

def is_ipv6(s: str) -> bool:
    return bool(_ipv6_rx.search(s or ""))
