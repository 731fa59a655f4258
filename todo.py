#!/usr/bin/env python3
"""Thin loader delegating to the interface layer."""

import sys

from core.desktop.devtools.interface.todo_app import main

if __name__ == "__main__":
    sys.exit(main())
