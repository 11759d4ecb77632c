#!/usr/bin/env python3
"""
Release Notes Viewer - Main Entry Point

Usage:
    python main.py list              # List releases with category counts
    python main.py show 1.0.0        # Show one release
    python main.py search "hooks"    # Search versions and changes
    python main.py stats             # Changelog statistics
    python main.py export -o out.md  # Export the parsed skeleton
    python main.py serve             # Start web interface

Add --file CHANGELOG.md before the command to read a local file.
"""

import sys
from pathlib import Path

# Allow running from a source checkout
sys.path.insert(0, str(Path(__file__).parent))

from relnotes.cli.commands import cli


if __name__ == '__main__':
    cli()
