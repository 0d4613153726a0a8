#!/usr/bin/env python
"""
fnt2lua Converter - Standalone entry point for PyInstaller.
"""
from fnt2lua.main import main

if __name__ == "__main__":
    main()
