#!/usr/bin/env python3
"""Check if rail_planner package is installed."""

import sys

try:
    import rail_planner  # noqa: F401
    sys.exit(0)
except ImportError:
    sys.exit(1)
