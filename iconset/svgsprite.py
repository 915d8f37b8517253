"""
SVG sprites per icon category.

Two flavours are written for every category:
  css     svg-sprite-<category>.svg         shapes stacked top to bottom,
          svg-sprite-<category>.css         addressed by background-position
          svg-sprite-<category>.html
  symbol  svg-sprite-<category>-symbol.svg  one <symbol> per icon,
          svg-sprite-<category>-symbol.html addressed by #fragment
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field
from html import escape
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
import logging
import re
import xml.etree.ElementTree as ET

from .config import SHAPE_MAX_SIZE, SVG_GLOB

log = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

_LENGTH_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$")


@dataclass
class Shape:
    id: str
    view_box: Tuple[float, float, float, float]
    width: float
    height: float
    children: List[ET.Element] = field(default_factory=list)

    @property
    def view_box_attr(self) -> str:
        return " ".join(_num(v) for v in self.view_box)


@dataclass
class SvgSpriteFiles:
    category: str
    mode: str
    sprite: Path
    example: Path
    stylesheet: Optional[Path] = None


def _num(value: float) -> str:
    """24.0 -> '24', 10.5 -> '10.5'."""
    return f"{value:g}"


def _dimension(value: Optional[str], fallback: Optional[float], source: Path) -> float:
    """Plain or px length; anything else (%, em, missing) falls back to the viewBox."""
    m = _LENGTH_RE.match(value or "")
    if m:
        return float(m.group(1))
    if fallback is None:
        raise ValueError(f"{source}: unsupported length {value!r}")
    return fallback


def load_shape(path: Path, max_size: float = SHAPE_MAX_SIZE) -> Shape:
    """Parse one SVG file into a Shape scaled to fit max_size x max_size."""
    path = Path(path)
    root = ET.parse(path).getroot()

    view_box = root.get("viewBox")
    if view_box:
        parts = [float(p) for p in view_box.replace(",", " ").split()]
        if len(parts) != 4:
            raise ValueError(f"{path}: malformed viewBox {view_box!r}")
        vb = tuple(parts)
    else:
        vb = (0.0, 0.0,
              _dimension(root.get("width"), None, path),
              _dimension(root.get("height"), None, path))

    width = _dimension(root.get("width"), vb[2], path)
    height = _dimension(root.get("height"), vb[3], path)
    if width <= 0 or height <= 0:
        raise ValueError(f"{path}: non-positive size {_num(width)}x{_num(height)}")
    scale = min(1.0, max_size / width, max_size / height)

    return Shape(
        id=path.stem,
        view_box=vb,
        width=width * scale,
        height=height * scale,
        children=[deepcopy(child) for child in root],
    )


def load_shapes(root: Path, category: str, max_size: float = SHAPE_MAX_SIZE) -> List[Shape]:
    paths = sorted(Path(root).glob(SVG_GLOB.format(category=category)))
    return [load_shape(p, max_size) for p in paths]


def _write_svg(element: ET.Element, dest: Path) -> None:
    ET.ElementTree(element).write(dest, encoding="utf-8", xml_declaration=True)


def _example_page(title: str, head: str, items: List[str]) -> str:
    body = "\n".join(f"    <li>{item}</li>" for item in items)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8">\n'
        f"  <title>{escape(title)}</title>\n"
        f"{head}"
        "</head>\n"
        "<body>\n"
        f"  <h1>{escape(title)}</h1>\n"
        "  <ul>\n"
        f"{body}\n"
        "  </ul>\n"
        "</body>\n"
        "</html>\n"
    )

# ---- css mode ------------------------------------------------------------

def css_offsets(shapes: List[Shape]) -> Dict[str, float]:
    """Vertical offset of every shape in the stacked sprite."""
    offsets: Dict[str, float] = {}
    y = 0.0
    for shape in shapes:
        offsets[shape.id] = y
        y += shape.height
    return offsets


def build_css_sprite(shapes: List[Shape], category: str, dest_dir: Path) -> SvgSpriteFiles:
    dest_dir = Path(dest_dir)
    dest_dir.mkdir(parents=True, exist_ok=True)
    base = f"svg-sprite-{category}"
    sprite_path = dest_dir / f"{base}.svg"
    css_path = dest_dir / f"{base}.css"
    html_path = dest_dir / f"{base}.html"

    offsets = css_offsets(shapes)
    total_w = max((s.width for s in shapes), default=0)
    total_h = sum(s.height for s in shapes)

    root = ET.Element(f"{{{SVG_NS}}}svg", {
        "width": _num(total_w),
        "height": _num(total_h),
        "viewBox": f"0 0 {_num(total_w)} {_num(total_h)}",
    })
    for shape in shapes:
        nested = ET.SubElement(root, f"{{{SVG_NS}}}svg", {
            "id": shape.id,
            "x": "0",
            "y": _num(offsets[shape.id]),
            "width": _num(shape.width),
            "height": _num(shape.height),
            "viewBox": shape.view_box_attr,
        })
        nested.extend(deepcopy(c) for c in shape.children)
    _write_svg(root, sprite_path)

    rules = []
    for shape in shapes:
        rules.append(
            f".svg-{shape.id} {{\n"
            f"  background: url(\"{sprite_path.name}\") no-repeat;\n"
            f"  background-position: 0 -{_num(offsets[shape.id])}px;\n"
            f"  width: {_num(shape.width)}px;\n"
            f"  height: {_num(shape.height)}px;\n"
            f"}}\n"
        )
    css_path.write_text("\n".join(rules), encoding="utf-8")

    head = f'  <link rel="stylesheet" href="{css_path.name}">\n'
    items = [f'<div class="svg-{escape(s.id)}"></div> {escape(s.id)}' for s in shapes]
    html_path.write_text(_example_page(f"{category} (css sprite)", head, items), encoding="utf-8")

    log.info("wrote %s (%d shapes)", sprite_path, len(shapes))
    return SvgSpriteFiles(category, "css", sprite_path, html_path, css_path)

# ---- symbol mode ---------------------------------------------------------

def build_symbol_sprite(shapes: List[Shape], category: str, dest_dir: Path) -> SvgSpriteFiles:
    dest_dir = Path(dest_dir)
    dest_dir.mkdir(parents=True, exist_ok=True)
    base = f"svg-sprite-{category}-symbol"
    sprite_path = dest_dir / f"{base}.svg"
    html_path = dest_dir / f"{base}.html"

    root = ET.Element(f"{{{SVG_NS}}}svg")
    for shape in shapes:
        symbol = ET.SubElement(root, f"{{{SVG_NS}}}symbol", {
            "id": shape.id,
            "viewBox": shape.view_box_attr,
        })
        symbol.extend(deepcopy(c) for c in shape.children)
    _write_svg(root, sprite_path)

    items = [
        f'<svg width="{_num(s.width)}" height="{_num(s.height)}">'
        f'<use xlink:href="{sprite_path.name}#{escape(s.id)}"/></svg> {escape(s.id)}'
        for s in shapes
    ]
    html_path.write_text(_example_page(f"{category} (symbol sprite)", "", items), encoding="utf-8")

    log.info("wrote %s (%d symbols)", sprite_path, len(shapes))
    return SvgSpriteFiles(category, "symbol", sprite_path, html_path)

# ---- fan-out ---------------------------------------------------------------

def build_svg_sprites(root: Path, categories: Iterable[str], dest_dir: Path,
                      max_size: float = SHAPE_MAX_SIZE) -> List[SvgSpriteFiles]:
    built: List[SvgSpriteFiles] = []
    for category in categories:
        shapes = load_shapes(root, category, max_size)
        if not shapes:
            log.warning("no SVGs for category %r", category)
            continue
        built.append(build_css_sprite(shapes, category, dest_dir))
        built.append(build_symbol_sprite(shapes, category, dest_dir))
    return built
