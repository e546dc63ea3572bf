import pytest

from sibox.keys import KEY_COUNT, MOUSE_BUTTON_COUNT, MouseButton, Scancode


def test_letter_scancodes_follow_usb_usage_page():
    assert Scancode(4) is Scancode.A
    assert Scancode(29) is Scancode.Z


def test_letters_are_contiguous_and_ordered():
    names = [Scancode(value).name for value in range(4, 30)]
    assert names == [chr(c) for c in range(ord("A"), ord("Z") + 1)]


def test_digit_row_ends_with_zero():
    assert Scancode(30) is Scancode.DIGIT_1
    assert Scancode(38) is Scancode.DIGIT_9
    assert Scancode(39) is Scancode.DIGIT_0


def test_named_source_values():
    assert Scancode(40) is Scancode.RETURN
    assert Scancode(257) is Scancode.MODE
    assert Scancode(400) is Scancode.RESERVED


def test_every_scancode_fits_below_key_count():
    assert KEY_COUNT == 512
    for member in Scancode:
        assert 0 <= int(Scancode(int(member))) < KEY_COUNT


def test_scancode_values_are_unique():
    assert [Scancode(int(member)) for member in Scancode] == list(Scancode)


def test_scancode_lookup_by_value():
    assert Scancode(44) is Scancode.SPACE


def test_unknown_scancode_value_rejected():
    with pytest.raises(ValueError):
        Scancode(130)


def test_mouse_buttons():
    assert MouseButton(1) is MouseButton.LEFT
    assert MouseButton(3) is MouseButton.RIGHT
    assert MouseButton(MOUSE_BUTTON_COUNT) is max(MouseButton)
    assert MouseButton(0) is MouseButton.NONE