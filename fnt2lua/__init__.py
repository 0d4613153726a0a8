"""
fnt2lua - Convert BMFont XML (.fnt) descriptors into Lua glyph tables.

Modules:
    core: FNT parsing, Lua emitting, reading/writing and status mapping
    gui: Graphical user interface
    ui_text: UI string catalog
"""

__version__ = "1.0.0"
__author__ = "Digote"
__license__ = "MIT"
