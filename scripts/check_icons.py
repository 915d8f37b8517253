#!/usr/bin/env python3
"""
Report icons whose SVG has no matching 1x_web PNG in black or white.

Writes:
  icon_report.csv

Exit codes:
  0 = every icon has all PNG colors
  1 = missing PNGs
"""
from __future__ import annotations
import sys
from iconset.tasks import main

if __name__ == "__main__":
    raise SystemExit(main(["check", *sys.argv[1:]]))
