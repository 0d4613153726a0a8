"""
Reading .fnt input and writing .lua output.

Both operations buffer the whole file in memory; BMFont descriptors are
only a few kilobytes.
"""

import logging
import os

from .errors import FntReadError, OutputWriteError

logger = logging.getLogger('FNT2LUA.files')

UTF8_BOM = b'\xef\xbb\xbf'


def read_fnt_text(file_path: str) -> str:
    """
    Load a .fnt file as text.

    Raises:
        FntReadError: file missing, unreadable or not valid UTF-8
    """
    try:
        with open(file_path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise FntReadError(file_path, e.strerror or str(e)) from e

    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM):]

    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise FntReadError(file_path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e

    logger.debug(f"Read {len(data)} bytes from {file_path}")
    return text


def save_output(output_path: str, lua_text: str) -> None:
    """
    Write generated Lua source, replacing any existing file.

    Raises:
        OutputWriteError: the file could not be written
    """
    try:
        # newline="" keeps "\n" line endings on every platform
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            f.write(lua_text)
    except OSError as e:
        raise OutputWriteError(output_path, e.strerror or str(e)) from e

    logger.info(f"Saved {len(lua_text)} characters to {output_path}")


def default_output_path(input_path: str) -> str:
    """Suggest an output path: same directory and name, .lua extension."""
    base, _ = os.path.splitext(input_path)
    return base + '.lua'
