import pytest

from fnt2lua.core.emitter import (
    find_key_collisions, format_descriptor, format_output, is_scalar_value, lua_key,
)
from fnt2lua.core.parser import FontDescriptor, Glyph

from .conftest import MINIMAL_LUA


@pytest.mark.parametrize("codepoint,expected", [
    (65, "A"),
    (32, " "),
    (0xE9, "é"),
    (0x1F600, "😀"),
    (34, '\\"'),
    (92, '\\\\'),
    (10, "\\u{A}"),
    (9, "\\u{9}"),
    (0x7F, "\\u{7F}"),
    (0x85, "\\u{85}"),
    (0, ""),
    (13, ""),
])
def test_lua_key(codepoint, expected):
    assert lua_key(codepoint) == expected


@pytest.mark.parametrize("codepoint,expected", [
    (0xD800, "\\u{D800}"),
    (0xDFFF, "\\u{DFFF}"),
    (0x110000, "\\u{110000}"),
    (0xFFFFFFFF, "\\u{FFFFFFFF}"),
])
def test_lua_key_non_scalar_values_are_escaped(codepoint, expected):
    assert lua_key(codepoint) == expected


def test_is_scalar_value():
    assert is_scalar_value(0x10FFFF)
    assert is_scalar_value(0xE000)
    assert not is_scalar_value(0xD800)
    assert not is_scalar_value(0x110000)


def test_format_minimal():
    glyphs = {65: Glyph(codepoint=65, width=8, height=16, xadvance=8)}

    assert format_output(16, glyphs) == MINIMAL_LUA


def test_format_empty():
    assert format_output(0, {}) == (
        "return {\n"
        "    Size = 0,\n"
        "    Characters = {\n"
        "    }\n"
        "}\n"
    )


def test_entries_sorted_by_codepoint():
    glyphs = [Glyph(codepoint=66, xadvance=2), Glyph(codepoint=65, xadvance=1)]

    output = format_output(10, glyphs)

    lines = output.splitlines()
    assert lines[3] == '        ["A"] = { Vector2.new(0, 0), Vector2.new(0, 0), Vector2.new(0, 0), 1 },'
    assert lines[4] == '        ["B"] = { Vector2.new(0, 0), Vector2.new(0, 0), Vector2.new(0, 0), 2 },'


def test_field_order_and_negative_values():
    glyph = Glyph(codepoint=106, x=10, y=20, width=5, height=17, xoffset=-2, yoffset=-1, xadvance=-3)

    output = format_output(-1, {106: glyph})

    assert "    Size = -1,\n" in output
    assert '["j"] = { Vector2.new(5, 17), Vector2.new(10, 20), Vector2.new(-2, -1), -3 },' in output


def test_escaped_keys_in_output():
    glyphs = {cp: Glyph(codepoint=cp) for cp in (10, 34, 92)}

    output = format_output(0, glyphs)

    assert '["\\u{A}"] = {' in output
    assert '["\\""] = {' in output
    assert '["\\\\"] = {' in output


def test_custom_indent_and_constructor():
    glyphs = {65: Glyph(codepoint=65, width=1, height=2, xadvance=3)}

    output = format_output(4, glyphs, indent=2, vector_constructor="vec2")

    assert output == (
        "return {\n"
        "  Size = 4,\n"
        "  Characters = {\n"
        '    ["A"] = { vec2(1, 2), vec2(0, 0), vec2(0, 0), 3 },\n'
        "  }\n"
        "}\n"
    )


def test_format_descriptor():
    font = FontDescriptor(size=16)
    font.add_glyph(Glyph(codepoint=65, width=8, height=16, xadvance=8))

    assert format_descriptor(font) == MINIMAL_LUA


def test_find_key_collisions():
    assert find_key_collisions([65, 13, 0, 66]) == [[0, 13]]
    assert find_key_collisions([0, 65]) == []


def test_format_descriptor_orders_by_codepoint():
    font = FontDescriptor(size=8)
    for codepoint in (66, 300, 65):
        font.add_glyph(Glyph(codepoint=codepoint))

    keys = [line.split('"')[1] for line in format_descriptor(font).splitlines()[3:-2]]

    assert keys == ["A", "B", "Ĭ"]
