from __future__ import annotations
from pathlib import Path
from typing import Union
import json
import re

import pandas as pd
import requests

_URL_RE = re.compile(r"^https?://", re.I)

COLUMNS = ["codepoint", "name", "glyph"]


def load_catalog(source: Union[str, Path], timeout: float = 30) -> dict:
    """Load an ijmap from a local path or an http(s) URL."""
    if isinstance(source, str) and _URL_RE.match(source):
        r = requests.get(source, timeout=timeout)
        r.raise_for_status()
        data = r.json()
    else:
        data = json.loads(Path(source).read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("icons"), dict):
        raise ValueError(f"{source}: not an ijmap (missing 'icons' mapping)")
    return data


def _glyph(codepoint: str) -> str:
    try:
        cp = int(codepoint, 16)
    except ValueError:
        return ""
    # lone surrogates cannot be encoded as UTF-8
    if 0xD800 <= cp <= 0xDFFF or cp > 0x10FFFF:
        return ""
    return chr(cp)


def catalog_frame(ijmap: dict) -> pd.DataFrame:
    rows = [
        {"codepoint": cp, "name": (entry or {}).get("name", ""), "glyph": _glyph(cp)}
        for cp, entry in ijmap["icons"].items()
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def search(frame: pd.DataFrame, query: str) -> pd.DataFrame:
    """Case-insensitive substring match on name or codepoint."""
    q = (query or "").strip().lower()
    if not q:
        return frame
    hit = (frame["name"].str.lower().str.contains(q, regex=False)
           | frame["codepoint"].str.lower().str.contains(q, regex=False))
    return frame[hit]
