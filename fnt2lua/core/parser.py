"""
FNT Parser - BMFont XML descriptor parser

Parses AngelCode BMFont XML (.fnt) files, extracting the nominal font size
from the <info> element and per-glyph metrics from the <char> elements.
Every other element (common, pages, kernings, ...) is ignored.

Format reference: https://www.angelcode.com/products/bmfont/doc/file_format.html
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Tuple

from .errors import FntAttributeError, FntSyntaxError

logger = logging.getLogger('FNT2LUA.parser')

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
UINT32_MAX = 2 ** 32 - 1

_SIGNED_RE = re.compile(r'[+-]?[0-9]+')
_UNSIGNED_RE = re.compile(r'\+?[0-9]+')

# <char> attribute name -> Glyph field
CHAR_ATTRIBUTES = {
    'id': 'codepoint',
    'x': 'x',
    'y': 'y',
    'width': 'width',
    'height': 'height',
    'xoffset': 'xoffset',
    'yoffset': 'yoffset',
    'xadvance': 'xadvance',
}


class ParserState(Enum):
    """Decoder states. DONE is terminal."""
    SCANNING = 0
    DONE = 1


@dataclass
class Glyph:
    """Metrics for a single character."""
    codepoint: int = 0
    x: int = 0  # Atlas position of the top-left corner
    y: int = 0
    width: int = 0  # Size of the glyph's subrectangle in the atlas
    height: int = 0
    xoffset: int = 0  # Offset from the pen position when drawing
    yoffset: int = 0
    xadvance: int = 0  # Pen advance after drawing

    @property
    def atlas_position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def atlas_size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def draw_offset(self) -> Tuple[int, int]:
        return self.xoffset, self.yoffset

    @property
    def advance(self) -> int:
        return self.xadvance


@dataclass
class FontDescriptor:
    """Decoded font: nominal size plus glyphs keyed by codepoint."""
    size: int = 0
    glyphs: Dict[int, Glyph] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)  # Non-fatal diagnostics

    def __len__(self) -> int:
        return len(self.glyphs)

    def add_glyph(self, glyph: Glyph) -> None:
        """Insert a glyph. A later definition of the same codepoint wins."""
        if glyph.codepoint in self.glyphs:
            logger.debug(f"Duplicate codepoint {glyph.codepoint}, keeping last definition")
        self.glyphs[glyph.codepoint] = glyph

    def sorted_glyphs(self) -> Iterator[Glyph]:
        """Iterate glyphs in ascending codepoint order."""
        for codepoint in sorted(self.glyphs):
            yield self.glyphs[codepoint]


def parse_int(value: str, element: str, attribute: str, unsigned: bool = False) -> int:
    """
    Parse an attribute value as a decimal 32-bit integer.

    Only an optional sign followed by ASCII digits is accepted. Unsigned
    values may not carry a minus sign.

    Raises:
        FntAttributeError: value is malformed or out of range
    """
    pattern = _UNSIGNED_RE if unsigned else _SIGNED_RE
    if not pattern.fullmatch(value):
        raise FntAttributeError(element, attribute, value)

    # more than 10 significant digits never fits in 32 bits
    if len(value.lstrip("+-").lstrip("0")) > 10:
        raise FntAttributeError(element, attribute, value)
    try:
        number = int(value)
    except ValueError:
        raise FntAttributeError(element, attribute, value) from None
    low, high = (0, UINT32_MAX) if unsigned else (INT32_MIN, INT32_MAX)
    if not low <= number <= high:
        raise FntAttributeError(element, attribute, value)
    return number


def _local_name(tag: str) -> str:
    # "{namespace}char" -> "char"
    return tag.rsplit('}', 1)[-1]


class FNTParser:
    """Parser for BMFont XML descriptors."""

    def __init__(self, strict: bool = False):
        # strict: raise FntSyntaxError on malformed XML instead of
        # returning what was read up to the error
        self.strict = strict
        self.state = ParserState.DONE

    def parse(self, file_path: str) -> FontDescriptor:
        """Parse a .fnt file and return the decoded font."""
        from .files import read_fnt_text
        return self.parse_text(read_fnt_text(file_path))

    def parse_text(self, text: str) -> FontDescriptor:
        """Parse BMFont XML from a string."""
        font = FontDescriptor()
        self.state = ParserState.SCANNING

        # feed() queues syntax errors behind the events read so far;
        # close() raises its own (e.g. truncated document) directly
        pull = ET.XMLPullParser(events=('start',))
        pull.feed(text)
        close_error = None
        try:
            pull.close()
        except ET.ParseError as e:
            close_error = e

        try:
            error = self._consume(pull, font) or close_error
            if error is not None:
                self._on_syntax_error(error, font)
        finally:
            self.state = ParserState.DONE

        logger.debug(f"Parsed {len(font)} glyphs, font size {font.size}")
        return font

    def _consume(self, pull: ET.XMLPullParser, font: FontDescriptor):
        """Scan events until EOF or the first syntax error, which is returned."""
        events = pull.read_events()
        while self.state is ParserState.SCANNING:
            try:
                _event, elem = next(events)
            except StopIteration:
                self.state = ParserState.DONE
                return None
            except ET.ParseError as e:
                self.state = ParserState.DONE
                return e

            name = _local_name(elem.tag)
            if name == 'char':
                self._read_char(elem.attrib, font)
            elif name == 'info':
                self._read_info(elem.attrib, font)

    def _read_char(self, attrib: Mapping[str, str], font: FontDescriptor) -> None:
        values = {}
        for name, value in attrib.items():
            target = CHAR_ATTRIBUTES.get(name)
            if target is None:
                continue
            values[target] = parse_int(value, 'char', name, unsigned=(name == 'id'))
        font.add_glyph(Glyph(**values))

    def _read_info(self, attrib: Mapping[str, str], font: FontDescriptor) -> None:
        if 'size' in attrib:
            font.size = parse_int(attrib['size'], 'info', 'size')

    def _on_syntax_error(self, error: ET.ParseError, font: FontDescriptor) -> None:
        if self.strict:
            raise FntSyntaxError(
                f"Error parsing XML: {error}", getattr(error, 'position', None)
            ) from error

        message = f"Error parsing XML: {error}"
        logger.warning(message)
        font.warnings.append(message)


def parse_fnt(file_path: str) -> FontDescriptor:
    """Convenience function to parse a .fnt file."""
    parser = FNTParser()
    return parser.parse(file_path)
