#!/usr/bin/env python3
"""
Run icon repository build tasks (see `python scripts/build.py --help`).

  python scripts/build.py                 # png-sprites, svg-sprites, iconjar
  python scripts/build.py svg-sprites -v
"""
from iconset.tasks import main

if __name__ == "__main__":
    raise SystemExit(main())
