"""Flet host wiring: change/blur/submit events reach the field core."""

import flet as ft

from vigoedit.field_types import FieldType
from vigoedit.inputs import INVALID_BG, VALID_BG, VigoEdit, chain_fields


def _type(edit: VigoEdit, new_value: str) -> None:
    edit._tf.value = new_value
    edit._on_change(None)


def test_builds_container():
    edit = VigoEdit("CEP", "CEP")
    assert isinstance(edit.control(), ft.Container)
    assert edit.value == "_____-___"


def test_initial_value_is_masked():
    assert VigoEdit("CPF", FieldType.CPF, value="52998224725").value == "529.982.247-25"


def test_typed_char_goes_through_mask():
    edit = VigoEdit("CEP", "CEP")
    _type(edit, "0" + edit.value)
    assert edit.value == "0____-___"
    _type(edit, "0x" + edit.value[1:])
    assert edit.value == "0____-___"


def test_paste_fills_mask():
    edit = VigoEdit("CEP", "CEP")
    _type(edit, "01310100" + edit.value)
    assert edit.real_value == "01310-100"


def test_unmasked_change_is_stored():
    edit = VigoEdit("Nome")
    _type(edit, "Maria")
    assert edit.real_value == "Maria"


def test_blur_paints_invalid_and_valid():
    edit = VigoEdit("CPF", "CPF", value="52998224726")
    edit._on_blur(None)
    assert not edit.is_valid
    assert edit.control().bgcolor == INVALID_BG
    assert edit._tf.error_text

    edit.value = "52998224725"
    edit._on_blur(None)
    assert edit.is_valid
    assert edit.control().bgcolor == VALID_BG
    assert not edit._tf.error_text


def test_on_validated_callback():
    seen = []
    edit = VigoEdit("CEP", "CEP", value="01310100", on_validated=lambda f, res: seen.append(res))
    edit._on_blur(None)
    assert seen[0].is_valid
    assert seen[0].real_text == "01310-100"


def test_enter_calls_next():
    called = []
    edit = VigoEdit("Nome", on_next=lambda: called.append(True))
    edit._on_submit(None)
    assert called == [True]


def test_chain_fields_links_to_next():
    a, b = VigoEdit("A"), VigoEdit("B")
    chain_fields([a, b])
    assert a.on_next == b.focus
    assert b.on_next == a.focus


def test_button_visibility_and_click():
    clicked = []
    edit = VigoEdit("CEP", "CEP", show_button=True, on_button_click=clicked.append)
    assert edit._button.visible
    edit._on_button(None)
    assert clicked == [edit]
    assert not VigoEdit("Nome")._button.visible


def test_uf_limits_native_length():
    assert VigoEdit("UF", "UF")._tf.max_length == 2


def test_switch_type_updates_text():
    edit = VigoEdit("Campo")
    edit.set_field_type("Hora")
    assert edit.value == "__:__"
    edit.set_mask("")
    assert edit.value == "__:__"


def test_backspace_after_literal_clears_previous_slot():
    edit = VigoEdit("CEP", "CEP")
    _type(edit, "013101" + edit.value)
    assert edit.value == "01310-1__"
    _type(edit, "013101__")
    assert edit.value == "0131_-1__"
