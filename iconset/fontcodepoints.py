"""Derive the codepoints file from a ligature-based icon font."""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterator, Tuple
import logging

from fontTools import ttLib

log = logging.getLogger(__name__)

# BMP private use area plus supplementary planes 15 and 16
PUA_RANGES = (
    range(0xE000, 0xF8FF + 1),
    range(0xF0000, 0xFFFFD + 1),
    range(0x100000, 0x10FFFD + 1),
)

LIGATURE_LOOKUP = 4


def is_pua(codepoint: int) -> bool:
    return any(codepoint in r for r in PUA_RANGES)


def _cmap(font: ttLib.TTFont) -> Dict[int, str]:
    merged: Dict[int, str] = {}
    for table in font["cmap"].tables:
        if table.isUnicode():
            merged.update(table.cmap)
    return merged


def _ligature_sets(font: ttLib.TTFont):
    for lookup in font["GSUB"].table.LookupList.Lookup:
        if lookup.LookupType != LIGATURE_LOOKUP:
            continue
        for subtable in lookup.SubTable:
            yield subtable.ligatures


def enumerate_icons(font_file: Path) -> Iterator[Tuple[str, int]]:
    """Yields (icon name, codepoint) for every ligature that lands in the PUA."""
    with ttLib.TTFont(font_file) as font:
        glyph_to_codepoint = {glyph: cp for cp, glyph in _cmap(font).items()}

        for ligature_set in _ligature_sets(font):
            for first_glyph, ligatures in ligature_set.items():
                for ligature in ligatures:
                    glyphs = (first_glyph,) + tuple(ligature.Component)
                    codepoint = glyph_to_codepoint.get(ligature.LigGlyph)
                    if codepoint is None or not is_pua(codepoint):
                        continue
                    name = "".join(chr(glyph_to_codepoint[g]) for g in glyphs)
                    yield name, codepoint


def write_codepoints(font_file: Path, dest: Path) -> Path:
    dest = Path(dest)
    entries = sorted(enumerate_icons(font_file))
    dest.parent.mkdir(parents=True, exist_ok=True)
    with dest.open("w", encoding="utf-8", newline="\n") as f:
        for name, codepoint in entries:
            f.write(f"{name} {codepoint:04x}\n")
    log.info("wrote %s (%d icons)", dest, len(entries))
    return dest
