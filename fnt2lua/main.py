"""
fnt2lua Converter v1.0 - Main entry point.

Converts BMFont XML (.fnt) descriptors into Lua glyph tables.

Usage:
    python -m fnt2lua [font_file.fnt]
"""

import sys
import os


def main():
    """Main entry point."""
    # Preselect a file given on the command line
    file_path = None
    if len(sys.argv) > 1:
        file_path = sys.argv[1]
        if not os.path.exists(file_path):
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            sys.exit(1)

    # Import and run GUI
    from .gui.main_window import run_app
    run_app(file_path)


if __name__ == "__main__":
    main()
