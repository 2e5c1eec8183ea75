#!/usr/bin/env python3
"""Entry point for `python -m lexkit`."""

import sys

from lexkit.cli import main

if __name__ == '__main__':
    sys.exit(main())
