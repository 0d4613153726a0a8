"""
Converter - the .fnt -> .lua pipeline.

    read_fnt_text -> FNTParser.parse_text -> format_descriptor

convert() only reads its input; writing is left to save_output() so the
caller can ask for a destination first.
"""

import logging

from .emitter import find_key_collisions, format_descriptor, lua_key
from .files import read_fnt_text
from .parser import FNTParser, FontDescriptor

logger = logging.getLogger('FNT2LUA.converter')


def _warn_key_collisions(font: FontDescriptor) -> None:
    for group in find_key_collisions(font.glyphs):
        codes = ", ".join(str(code) for code in group)
        message = f'Codepoints {codes} share the Lua key "{lua_key(group[0])}"; only one survives in Lua'
        logger.warning(message)
        font.warnings.append(message)


def decode(text: str, strict: bool = False) -> FontDescriptor:
    """Decode BMFont XML text into a FontDescriptor."""
    font = FNTParser(strict=strict).parse_text(text)
    _warn_key_collisions(font)
    return font


def convert_text(text: str, strict: bool = False) -> str:
    """Convert BMFont XML text to Lua source."""
    font = decode(text, strict=strict)
    logger.info(f"Converted {len(font)} glyphs (size {font.size})")
    return format_descriptor(font)


def convert(input_path: str, strict: bool = False) -> str:
    """
    Convert a .fnt file to Lua source.

    Args:
        input_path: Path of the BMFont XML file
        strict: Fail on malformed XML instead of converting what was read

    Returns:
        Lua source text

    Raises:
        FntReadError: input could not be read or is not UTF-8
        FntParseError: attribute value (or, if strict, XML) is invalid
    """
    logger.info(f"Converting {input_path}")
    return convert_text(read_fnt_text(input_path), strict=strict)
