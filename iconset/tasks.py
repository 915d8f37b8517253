"""
Named build tasks for the icon repository.

  codepoints   iconfont/MaterialIcons-Regular.ttf -> iconfont/codepoints
  iconjar      iconfont/codepoints -> iconfont/MaterialIcons-Regular.ijmap
  png-sprites  <category>/1x_web PNGs -> sprites/css-sprite/
  svg-sprites  <category>/svg/production SVGs -> sprites/svg-sprite/
  check        asset completeness report -> icon_report.csv
  default      png-sprites, svg-sprites, iconjar

Usage:
  python scripts/build.py [TASK ...] [--root DIR] [-v] [--log-file FILE]
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence
import argparse
import logging
import sys

from .audit import AuditReport, audit, write_report
from .codepoints import write_ijmap
from .config import (
    CODEPOINTS_FILE,
    CSS_SPRITE_DIR,
    FONT_FILE,
    ICON_CATEGORIES,
    IJMAP_FILE,
    PNG_COLORS,
    REPORT_CSV,
    SVG_SPRITE_DIR,
)
from .fontcodepoints import write_codepoints
from .logging_config import setup_logging
from .sprites import build_png_sprites
from .svgsprite import build_svg_sprites

log = logging.getLogger(__name__)

DEFAULT_TASKS = ("png-sprites", "svg-sprites", "iconjar")


class UnknownTaskError(KeyError):
    pass


@dataclass
class Task:
    name: str
    run: Callable[[Path], object]
    help: str = ""


TASKS: Dict[str, Task] = {}


def task(name: str, help: str = ""):
    def register(fn):
        TASKS[name] = Task(name, fn, help)
        return fn
    return register

# ---- tasks -------------------------------------------------------------------

@task("codepoints", "extract the codepoints file from the icon font")
def codepoints_task(root: Path) -> Path:
    return write_codepoints(root / FONT_FILE, root / CODEPOINTS_FILE)


@task("iconjar", "write the IconJar ijmap from the codepoints file")
def iconjar_task(root: Path) -> Path:
    return write_ijmap(root / CODEPOINTS_FILE, root / IJMAP_FILE)


@task("png-sprites", "PNG sprite sheets + CSS per category and color")
def png_sprites_task(root: Path):
    return build_png_sprites(root, ICON_CATEGORIES, PNG_COLORS, root / CSS_SPRITE_DIR)


@task("svg-sprites", "CSS and symbol SVG sprites per category")
def svg_sprites_task(root: Path):
    return build_svg_sprites(root, ICON_CATEGORIES, root / SVG_SPRITE_DIR)


@task("check", "report icons missing a PNG color variant")
def check_task(root: Path) -> AuditReport:
    report = audit(root, ICON_CATEGORIES, PNG_COLORS)
    write_report(report, root / REPORT_CSV)
    return report


@task("default", "run " + ", ".join(DEFAULT_TASKS))
def default_task(root: Path) -> Dict[str, object]:
    return {name: run_task(name, root) for name in DEFAULT_TASKS}

# ---- runner ------------------------------------------------------------------

def run_task(name: str, root: Path = Path(".")):
    try:
        t = TASKS[name]
    except KeyError:
        raise UnknownTaskError(name) from None
    log.info("running %s", name)
    return t.run(Path(root))


def _print_audit(report: AuditReport) -> None:
    if report.warnings:
        print("\n== WARNINGS ==")
        for w in report.warnings[:50]:
            print(" -", w)
        if len(report.warnings) > 50:
            print(f" ... and {len(report.warnings) - 50} more.")
    if report.errors:
        print("\n== ERRORS ==")
        for e in report.errors:
            print(" -", e)
        print("\nFAIL: missing icon files detected.")
    else:
        print(f"\n✓ {len(report.rows)} icons checked, no missing PNGs.")


def _task_list() -> str:
    return "\n".join(f"  {t.name:<12} {t.help}" for t in TASKS.values())


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="iconset-build",
        description="Build derived assets for the icon repository.",
        epilog="tasks:\n" + _task_list(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("tasks", nargs="*", metavar="TASK", default=["default"],
                    help="task(s) to run (default: default)")
    ap.add_argument("--root", type=Path, default=Path("."), help="icon repository root")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("--log-file", help="also write the log to this file")
    args = ap.parse_args(argv)

    unknown: List[str] = [name for name in args.tasks if name not in TASKS]
    if unknown:
        ap.error(f"unknown task(s): {', '.join(unknown)}")

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    status = 0
    for name in args.tasks:
        result = run_task(name, args.root)
        if isinstance(result, AuditReport):
            _print_audit(result)
            if not result.ok:
                status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
