from pathlib import Path
import logging

import pytest
from PIL import Image

CODEPOINTS = "ic_alarm e855\nic_home e88a\n\nic_3d_rotation e84d\n"

SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">'
    '<path d="M0 0h{w}v{h}H0z" fill="none"/><path d="{d}"/></svg>'
)

RGBA = {"black": (0, 0, 0, 255), "white": (255, 255, 255, 255)}


def make_png(path: Path, size=(24, 24), fill=(0, 0, 0, 255)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, fill).save(path, format="PNG")
    return path


def make_svg(path: Path, w=24, h=24, d="M12 2L2 22h20z") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SVG_TEMPLATE.format(w=w, h=h, d=d), encoding="utf-8")
    return path


@pytest.fixture
def icon_root(tmp_path):
    """
    A miniature icon repository:
      action: ic_alarm, ic_home  (svg + black + white PNGs)
      alert:  ic_error           (svg + black PNG only)
    """
    for icon in ("ic_alarm", "ic_home"):
        make_svg(tmp_path / "action" / "svg" / "production" / f"{icon}_24px.svg")
        for color, fill in RGBA.items():
            make_png(tmp_path / "action" / "1x_web" / f"{icon}_{color}_24dp.png", fill=fill)

    make_svg(tmp_path / "alert" / "svg" / "production" / "ic_error_24px.svg")
    make_png(tmp_path / "alert" / "1x_web" / "ic_error_black_24dp.png")

    codepoints = tmp_path / "iconfont" / "codepoints"
    codepoints.parent.mkdir(parents=True)
    codepoints.write_text(CODEPOINTS, encoding="utf-8")
    return tmp_path


def build_ligature_font(path: Path, ligatures: dict) -> Path:
    """Write a minimal TTF where each ligature name substitutes to its codepoint's glyph."""
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    letters = sorted({ch for name in ligatures for ch in name})
    icon_glyphs = {cp: f"icon{cp:04X}" for cp in ligatures.values()}
    glyph_order = [".notdef"] + letters + list(icon_glyphs.values())

    cmap = {ord(ch): ch for ch in letters}
    cmap.update(icon_glyphs)

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf({g: TTGlyphPen(None).glyph() for g in glyph_order})
    fb.setupHorizontalMetrics({g: (600, 0) for g in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Test Icons", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    rules = "".join(
        f"  sub {' '.join(name)} by {icon_glyphs[cp]};\n" for name, cp in ligatures.items()
    )
    fb.addOpenTypeFeatures(f"feature liga {{\n{rules}}} liga;\n")
    fb.save(str(path))
    return path


@pytest.fixture
def ligature_font(tmp_path):
    return build_ligature_font(
        tmp_path / "TestIcons.ttf",
        {"home": 0xE88A, "alarm": 0xE855, "sun": 0x2600},
    )


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("iconset")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
