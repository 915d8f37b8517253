#!/usr/bin/env python3
"""
Regenerate iconfont/codepoints from the icon font's ligature table.

Usage:
  python scripts/make_codepoints.py [--font PATH] [--out PATH]
"""
from __future__ import annotations
from pathlib import Path
import argparse
from iconset.config import CODEPOINTS_FILE, FONT_FILE
from iconset.fontcodepoints import write_codepoints

def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--font", type=Path, default=FONT_FILE, help="Path to the ligature icon font (.ttf/.otf)")
    ap.add_argument("--out", type=Path, default=CODEPOINTS_FILE, help="Where to write the codepoints file")
    args = ap.parse_args()

    out = write_codepoints(args.font, args.out)
    count = len(out.read_text(encoding="utf-8").splitlines())
    print(f"Wrote {out} ({count} icons).")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
