"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from vigoedit.masks import MaskEngine


@pytest.fixture
def cep_engine() -> MaskEngine:
    return MaskEngine("00000-000")


@pytest.fixture
def type_text():
    """Return a helper that types text one character at a time at the current cursor."""

    def _type(target, text: str):
        for ch in text:
            target.on_text_input(ch, target.cursor)
        return target

    return _type
