"""
Core module - BMFont parsing, Lua emitting, file I/O and status mapping.
"""

from .errors import (
    ConversionError, FntReadError, FntParseError, FntSyntaxError,
    FntAttributeError, OutputWriteError,
)
from .parser import FNTParser, FontDescriptor, Glyph, parse_fnt
from .emitter import format_output, format_descriptor, lua_key
from .files import read_fnt_text, save_output, default_output_path
from .converter import convert, convert_text, decode
from .status import Severity, StatusMessage

__all__ = [
    "ConversionError",
    "FntReadError",
    "FntParseError",
    "FntSyntaxError",
    "FntAttributeError",
    "OutputWriteError",
    "FNTParser",
    "FontDescriptor",
    "Glyph",
    "parse_fnt",
    "format_output",
    "format_descriptor",
    "lua_key",
    "read_fnt_text",
    "save_output",
    "default_output_path",
    "convert",
    "convert_text",
    "decode",
    "Severity",
    "StatusMessage",
]
