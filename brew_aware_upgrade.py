#!/usr/bin/env python3
"""
brewup - Category-aware Homebrew upgrades.

Usage:
    brew_aware_upgrade.py                 # Upgrade all categories
    brew_aware_upgrade.py -P              # Priority categories only
    brew_aware_upgrade.py -c large_size   # Selected categories
    brew_aware_upgrade.py -D              # Dry run
"""

import os
import sys

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from brewup.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
