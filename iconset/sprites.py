from __future__ import annotations
from dataclasses import dataclass, field
from itertools import product
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from PIL import Image

from .config import PNG_GLOB

log = logging.getLogger(__name__)

# ---------- data models ----------

@dataclass
class Frame:
    name: str
    x: int
    width: int
    height: int

@dataclass
class PngSprite:
    category: str
    color: str
    image: Path
    stylesheet: Path
    frames: List[Frame] = field(default_factory=list)

# ---------- helpers ----------

def category_color_pairs(categories: Iterable[str], colors: Sequence[str]) -> List[Tuple[str, str]]:
    """Cartesian product of categories and colors, category-major."""
    return list(product(categories, colors))

def sprite_name(category: str, color: str) -> str:
    return f"sprite-{category}-{color}"

def _sources(root: Path, category: str, color: str) -> List[Path]:
    return sorted(root.glob(PNG_GLOB.format(category=category, color=color)))

def _css(image_name: str, frames: List[Frame]) -> str:
    rules = []
    for f in frames:
        rules.append(
            f".icon-{f.name} {{\n"
            f"  background-image: url('{image_name}');\n"
            f"  background-position: -{f.x}px 0px;\n"
            f"  width: {f.width}px;\n"
            f"  height: {f.height}px;\n"
            f"}}\n"
        )
    return "\n".join(rules)

# ---------- build ----------

def build_png_sprite(root: Path, category: str, color: str, dest_dir: Path) -> Optional[PngSprite]:
    """Composite one category/color into a left-right PNG strip plus its CSS."""
    sources = _sources(Path(root), category, color)
    if not sources:
        log.warning("no %s PNGs for category %r", color, category)
        return None

    images = [Image.open(p).convert("RGBA") for p in sources]
    width = sum(im.width for im in images)
    height = max(im.height for im in images)
    sheet = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    frames: List[Frame] = []
    x = 0
    for path, im in zip(sources, images):
        sheet.paste(im, (x, 0), im)
        frames.append(Frame(path.stem, x, im.width, im.height))
        x += im.width

    name = sprite_name(category, color)
    dest_dir = Path(dest_dir)
    dest_dir.mkdir(parents=True, exist_ok=True)
    image_path = dest_dir / f"{name}.png"
    css_path = dest_dir / f"{name}.css"
    sheet.save(image_path, format="PNG")
    css_path.write_text(_css(image_path.name, frames), encoding="utf-8")

    log.info("wrote %s (%d icons, %dx%d)", image_path, len(frames), width, height)
    return PngSprite(category, color, image_path, css_path, frames)

def build_png_sprites(root: Path, categories: Iterable[str], colors: Sequence[str],
                      dest_dir: Path) -> List[PngSprite]:
    built: List[PngSprite] = []
    for category, color in category_color_pairs(categories, colors):
        sprite = build_png_sprite(root, category, color, dest_dir)
        if sprite is not None:
            built.append(sprite)
    return built
