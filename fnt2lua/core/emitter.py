"""
Lua Emitter - Serializes decoded font metrics as a Lua return-table.

Output shape:

    return {
        Size = 16,
        Characters = {
            ["A"] = { Vector2.new(8, 16), Vector2.new(0, 0), Vector2.new(0, 0), 8 },
        }
    }

Each entry holds atlas size, atlas position, draw offset and advance.
Entries are always written in ascending codepoint order.
"""

import unicodedata
from collections.abc import Mapping
from typing import Dict, Iterable, List, Union

from .parser import FontDescriptor, Glyph

INDENT_WIDTH = 4
VECTOR_CONSTRUCTOR = "Vector2.new"

# Codepoints written as an empty key (NUL and carriage return)
EMPTY_KEY_CODEPOINTS = (0, 13)

MAX_CODEPOINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)


def is_scalar_value(codepoint: int) -> bool:
    """True if codepoint is a Unicode scalar value (no surrogates)."""
    return 0 <= codepoint <= MAX_CODEPOINT and codepoint not in SURROGATE_RANGE


def lua_key(codepoint: int) -> str:
    """
    Render a codepoint as the contents of a Lua string key.

    Quote and backslash are escaped, other control characters and
    non-scalar values become \\u{HEX} escapes, 0 and 13 give an empty key.
    """
    if codepoint in EMPTY_KEY_CODEPOINTS:
        return ""
    if not is_scalar_value(codepoint):
        return f"\\u{{{codepoint:X}}}"

    char = chr(codepoint)
    if char == '"':
        return '\\"'
    if char == '\\':
        return '\\\\'
    if unicodedata.category(char) == 'Cc':
        return f"\\u{{{codepoint:X}}}"
    return char


def find_key_collisions(codepoints: Iterable[int]) -> List[List[int]]:
    """Return groups of codepoints that render to the same Lua key."""
    by_key: Dict[str, List[int]] = {}
    for codepoint in sorted(set(codepoints)):
        by_key.setdefault(lua_key(codepoint), []).append(codepoint)
    return [group for group in by_key.values() if len(group) > 1]


def _format_entry(glyph: Glyph, spaces: str, vector: str) -> str:
    return (
        f'{spaces}{spaces}["{lua_key(glyph.codepoint)}"] = {{ '
        f'{vector}({glyph.width}, {glyph.height}), '
        f'{vector}({glyph.x}, {glyph.y}), '
        f'{vector}({glyph.xoffset}, {glyph.yoffset}), '
        f'{glyph.xadvance} }},\n'
    )


def format_output(font_size: int, glyphs: Union[Mapping[int, Glyph], Iterable[Glyph]],
                  indent: int = INDENT_WIDTH,
                  vector_constructor: str = VECTOR_CONSTRUCTOR) -> str:
    """
    Render font metrics as Lua source.

    Args:
        font_size: Nominal font size
        glyphs: Mapping of codepoint -> Glyph, or any iterable of Glyph
        indent: Spaces per indentation level
        vector_constructor: Lua expression called for each (x, y) pair

    Returns:
        Lua source text, newline terminated
    """
    if isinstance(glyphs, Mapping):
        glyphs = glyphs.values()
    ordered = sorted(glyphs, key=lambda g: g.codepoint)

    spaces = " " * indent
    parts = [f"return {{\n{spaces}Size = {font_size},\n{spaces}Characters = {{\n"]
    for glyph in ordered:
        parts.append(_format_entry(glyph, spaces, vector_constructor))
    parts.append(f"{spaces}}}\n}}\n")
    return "".join(parts)


def format_descriptor(font: FontDescriptor, **kwargs) -> str:
    """Render a FontDescriptor as Lua source."""
    return format_output(font.size, font.sorted_glyphs(), **kwargs)
