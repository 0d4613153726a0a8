"""
UI strings for the converter window.

Keys are grouped by area and looked up with dot notation, e.g.
tr("status.saved", path=...).
"""

STRINGS = {
    # Window
    "window": {
        "title": "Converter",
        "heading": "🎨 .fnt to .lua Converter",
    },

    # Buttons
    "button": {
        "select": "📂 Select .fnt file",
        "select_tooltip": "Choose a BMFont XML descriptor",
        "convert": "⚡ Convert",
        "convert_tooltip": "Convert the selected file and choose where to save it",
    },

    # File dialogs
    "dialog": {
        "open_title": "Open BMFont File",
        "open_filter": "FNT Files (*.fnt);;All Files (*.*)",
        "save_title": "Save Lua File",
        "save_filter": "Lua Files (*.lua);;All Files (*.*)",
    },

    # Labels
    "label": {
        "selected": "📄 Selected: {path}",
    },

    # Status messages
    "status": {
        "saved": "✅ Saved to {path}",
        "save_cancelled": "ℹ️ Save cancelled",
        "no_input": "⚠️ Please select a .fnt file first",
        "parse_error": "❌ Error parsing file!",
        "save_error": "❌ Error saving file: {reason}",
    },
}
