#!/usr/bin/env python3
"""
Main entry point for the WakaTime editor plugin.
This allows running the module with: python -m wakatime_editor
"""

from .core import main

if __name__ == "__main__":
    main()
