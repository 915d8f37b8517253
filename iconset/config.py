"""Fixed build configuration for the icon repository tooling."""
from __future__ import annotations
from pathlib import Path

# ---- categories & colors --------------------------------------------------

# Names of directories containing icons.
ICON_CATEGORIES = (
    "action",
    "alert",
    "av",
    "communication",
    "content",
    "editor",
    "file",
    "hardware",
    "image",
    "maps",
    "navigation",
    "notification",
    "places",
    "social",
    "toggle",
)

# Standard PNG colors.
PNG_COLORS = ("black", "white")

# ---- inputs (relative to the repo root) -----------------------------------

PNG_GLOB = "{category}/1x_web/*_{color}_24dp.png"
SVG_GLOB = "{category}/svg/production/*_24px.svg"

ICONFONT_DIR    = Path("iconfont")
FONT_FILE       = ICONFONT_DIR / "MaterialIcons-Regular.ttf"
CODEPOINTS_FILE = ICONFONT_DIR / "codepoints"

# ---- outputs --------------------------------------------------------------

IJMAP_NAME     = "MaterialIcons-Regular.ijmap"
IJMAP_FILE     = ICONFONT_DIR / IJMAP_NAME
CSS_SPRITE_DIR = Path("sprites/css-sprite")
SVG_SPRITE_DIR = Path("sprites/svg-sprite")
REPORT_CSV     = Path("icon_report.csv")

# svg shapes are scaled down to fit this box
SHAPE_MAX_SIZE = 24
