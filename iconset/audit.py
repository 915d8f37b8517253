"""
Check that every SVG icon has a 1x_web PNG in each standard color.

Icons are discovered from <category>/svg/production/<base>_24px.svg; for each
color the matching <category>/1x_web/<base>_<color>_24dp.png must exist.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Sequence
import csv
import logging

log = logging.getLogger(__name__)

SVG_SUFFIX = "_24px.svg"

# ---------- data models ----------

@dataclass
class AuditRow:
    category: str
    icon: str
    svg: Path
    pngs: Dict[str, bool] = field(default_factory=dict)

    @property
    def complete(self) -> bool:
        return all(self.pngs.values())

@dataclass
class AuditReport:
    colors: Sequence[str]
    rows: List[AuditRow] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

# ---------- checks ----------

def audit_category(root: Path, category: str, colors: Sequence[str]) -> List[AuditRow]:
    root = Path(root)
    svg_dir = root / category / "svg" / "production"
    png_dir = root / category / "1x_web"
    rows: List[AuditRow] = []
    for svg in sorted(svg_dir.glob(f"*{SVG_SUFFIX}")):
        base = svg.name[: -len(SVG_SUFFIX)]
        pngs = {c: (png_dir / f"{base}_{c}_24dp.png").is_file() for c in colors}
        rows.append(AuditRow(category, base, svg.relative_to(root), pngs))
    return rows

def audit(root: Path, categories: Iterable[str], colors: Sequence[str]) -> AuditReport:
    report = AuditReport(colors=tuple(colors))
    for category in categories:
        if not (Path(root) / category).is_dir():
            report.warnings.append(f"[{category}] category directory is missing")
            continue
        rows = audit_category(root, category, report.colors)
        if not rows:
            report.warnings.append(f"[{category}] has no production SVGs")
        for row in rows:
            for color, exists in row.pngs.items():
                if not exists:
                    report.errors.append(f"[{category}] {row.icon} → missing {color} PNG")
        report.rows.extend(rows)
    return report

def write_report(report: AuditReport, dest: Path) -> Path:
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    fieldnames = ["category", "icon", "svg"] + [f"png_{c}" for c in report.colors] + ["complete"]
    with dest.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in report.rows:
            out = {"category": row.category, "icon": row.icon, "svg": row.svg.as_posix(),
                   "complete": row.complete}
            out.update({f"png_{c}": row.pngs[c] for c in report.colors})
            writer.writerow(out)
    log.info("report written to %s (%d rows)", dest, len(report.rows))
    return dest
