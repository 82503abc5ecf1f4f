"""Checksum and format validators."""

import pytest

from vigoedit import validators as v
from vigoedit.masks import EN_US


class TestCPF:
    def test_valid(self):
        assert v.is_cpf("529.982.247-25")

    def test_unformatted(self):
        assert v.is_cpf("52998224725")

    def test_bad_check_digit(self):
        assert not v.is_cpf("529.982.247-26")

    @pytest.mark.parametrize("d", "0123456789")
    def test_repeated_digits(self, d):
        assert not v.is_cpf(d * 11)

    def test_repeated_formatted(self):
        assert not v.is_cpf("111.111.111-11")

    def test_en_us_separators(self):
        assert v.is_cpf("529,982,247-25")
        assert v.is_cnpj("11,222,333/0001-81")

    @pytest.mark.parametrize("s", ["", "529.982.247-2", "529.982.247-2_", "abc.def.ghi-jk"])
    def test_malformed(self, s):
        assert not v.is_cpf(s)


class TestCNPJ:
    def test_valid(self):
        assert v.is_cnpj("11.222.333/0001-81")
        assert v.is_cnpj("11222333000181")

    def test_last_digit_altered(self):
        assert not v.is_cnpj("11.222.333/0001-82")

    @pytest.mark.parametrize("s", ["", "11.222.333/0001-8", "11.222.333/0001-8x"])
    def test_malformed(self, s):
        assert not v.is_cnpj(s)


class TestUF:
    @pytest.mark.parametrize("uf", ["SP", "MG", "RJ", "sp", "PR", "RO"])
    def test_valid(self, uf):
        assert v.is_uf(uf)

    @pytest.mark.parametrize("uf", ["XX", "P", "PM", "ZZ"])
    def test_invalid(self, uf):
        assert not v.is_uf(uf)


class TestNumbers:
    @pytest.mark.parametrize("s", ["123", " 42 ", "-9223372036854775808", "+7"])
    def test_integer(self, s):
        assert v.is_integer(s)

    @pytest.mark.parametrize("s", ["9223372036854775808", "12a", "1_000", "", "1,5", "٣"])
    def test_not_integer(self, s):
        assert not v.is_integer(s)

    @pytest.mark.parametrize("s", ["1.234,56", "1234,5", "-3", ",5", "R$ 10,00"])
    def test_decimal(self, s):
        assert v.is_decimal(s)

    @pytest.mark.parametrize("s", ["12,3,4", "abc", "NaN", "1e5", ",", "-", ""])
    def test_not_decimal(self, s):
        assert not v.is_decimal(s)

    def test_decimal_en_us(self):
        assert v.is_decimal("1,234.56", EN_US)

    def test_format_valor(self):
        assert v.format_valor("1234,5") == "1234,50"
        assert v.format_valor("1.000") == "1000,00"
        assert v.format_valor("x") == "0,00"
        assert v.format_valor("3.14159", EN_US) == "3.14"


class TestDate:
    @pytest.mark.parametrize("s", ["01/02/2024", " 1/02/2024", "29/02/2024", "2024-02-01"])
    def test_valid(self, s):
        assert v.is_date(s)

    @pytest.mark.parametrize("s", ["31/02/2024", "29/02/2023", "__/__/____", "abc", ""])
    def test_invalid(self, s):
        assert not v.is_date(s)

    def test_locale(self):
        assert v.is_date("12/31/2024", EN_US)
        assert not v.is_date("31/12/2024", EN_US)


class TestRegexValidators:
    @pytest.mark.parametrize(
        "fn,text,ok",
        [
            (v.is_email, "a@b.co", True),
            (v.is_email, "joao.silva@empresa.com.br", True),
            (v.is_email, "a@b", False),
            (v.is_email, "@b.com", False),
            (v.is_ip, "192.168.0.1", True),
            (v.is_ip, "1.2.3", False),
            (v.is_mac, "00:1A:2b:3C:4d:5E", True),
            (v.is_mac, "00-1A-2B-3C-4D-5E", False),
            (v.is_cep, "01310-100", True),
            (v.is_cep, "01310100", False),
            (v.is_cep, "01310-1__", False),
            (v.is_telefone, "(11)91234-5678", True),
            (v.is_telefone, "(11) 1234-5678", True),
            (v.is_telefone, "(11)1234-5678", False),
            (v.is_hora, "23:59", True),
            (v.is_hora, "9:05", True),
            (v.is_hora, "24:00", False),
            (v.is_conta, "12.345.678-X", True),
            (v.is_conta, "12.345.678-9", True),
            (v.is_conta, "12.345.678-Z", False),
            (v.is_ipv6, "2001:0DB8:0000:0000:0000:0000:1428:57AB", True),
            (v.is_ipv6, "FE80::0202:B3FF:FE1E:8329", True),
            (v.is_ipv6, "192.168.0.1", False),
            (v.is_ipv6, "hello", False),
        ],
    )
    def test_patterns(self, fn, text, ok):
        assert fn(text) is ok


@pytest.mark.parametrize(
    "fn",
    [v.is_cpf, v.is_cnpj, v.is_date, v.is_integer, v.is_decimal, v.is_uf, v.is_email, v.is_ip,
     v.is_mac, v.is_cep, v.is_telefone, v.is_hora, v.is_conta, v.is_ipv6],
)
@pytest.mark.parametrize("junk", ["", "\x00", "((((", "::::", "9" * 12, "ção", None])
def test_validators_never_raise(fn, junk):
    assert isinstance(fn(junk), bool)
