"""
Convert the icon font's codepoints file into an IconJar catalog (.ijmap).

Input (one glyph per line, blank lines ignored):
  ic_play_arrow e037

Output:
  {"icons": {"e037": {"name": "Ic Play Arrow"}}}
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
import json
import logging
import re

log = logging.getLogger(__name__)

# Separator class for display names: digits are part of a word ("3d Rotation").
_SEPARATORS_RE = re.compile(r"[^0-9a-z]+")
_WORD_START_RE = re.compile(r"\b[a-z]")
_HEX_RE = re.compile(r"^[0-9A-Fa-f]+$")


class CodepointsFormatError(ValueError):
    """A non-blank codepoints line is not `<identifier> <hex>`."""

    def __init__(self, lineno: Optional[int], line: str, reason: str):
        self.lineno = lineno
        self.line = line
        where = f"line {lineno}" if lineno is not None else "line"
        super().__init__(f"{where}: {reason}: {line!r}")


def titleize(identifier: str) -> str:
    """'ic_play_arrow' -> 'Ic Play Arrow'."""
    spaced = _SEPARATORS_RE.sub(" ", identifier.lower()).strip()
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), spaced)


def parse_line(line: str, lineno: Optional[int] = None) -> Optional[Tuple[str, str]]:
    """Return (identifier, codepoint), or None for a blank line."""
    tokens = line.split()
    if not tokens:
        return None
    if len(tokens) != 2:
        raise CodepointsFormatError(lineno, line, f"expected 2 tokens, got {len(tokens)}")
    identifier, codepoint = tokens
    if not _HEX_RE.match(codepoint):
        raise CodepointsFormatError(lineno, line, "codepoint is not hexadecimal")
    return identifier, codepoint


def read_codepoints(lines: Iterable[str]) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for lineno, line in enumerate(lines, start=1):
        pair = parse_line(line, lineno)
        if pair is not None:
            pairs.append(pair)
    return pairs


def codepoints_to_ijmap(text: str) -> Dict[str, Dict[str, str]]:
    """Map codepoint -> {"name": display name}, in source order."""
    icons: Dict[str, Dict[str, str]] = {}
    for identifier, codepoint in read_codepoints(text.splitlines()):
        if codepoint in icons:
            log.warning("duplicate codepoint %s: %r replaces %r",
                        codepoint, identifier, icons[codepoint]["name"])
        icons[codepoint] = {"name": titleize(identifier)}
    return icons


def build_ijmap(text: str) -> dict:
    return {"icons": codepoints_to_ijmap(text)}


def dumps_ijmap(ijmap: dict) -> str:
    return json.dumps(ijmap, separators=(",", ":"), ensure_ascii=False)


def write_ijmap(codepoints_file: Path, dest: Path) -> Path:
    """Read `codepoints_file` and write the catalog to `dest`."""
    text = Path(codepoints_file).read_text(encoding="utf-8")
    ijmap = build_ijmap(text)
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(dumps_ijmap(ijmap), encoding="utf-8")
    log.info("wrote %s (%d icons)", dest, len(ijmap["icons"]))
    return dest
