#!/usr/bin/env python3
"""
Write iconfont/MaterialIcons-Regular.ijmap from iconfont/codepoints.

Usage:
  python scripts/make_ijmap.py [--root DIR]
"""
from __future__ import annotations
import sys
from iconset.tasks import main

if __name__ == "__main__":
    raise SystemExit(main(["iconjar", *sys.argv[1:]]))
