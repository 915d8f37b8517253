import csv

from iconset.audit import audit, audit_category, write_report
from iconset.config import ICON_CATEGORIES, PNG_COLORS


def test_audit_category(icon_root):
    rows = audit_category(icon_root, "alert", PNG_COLORS)
    assert len(rows) == 1
    row = rows[0]
    assert row.icon == "ic_error"
    assert row.svg.as_posix() == "alert/svg/production/ic_error_24px.svg"
    assert row.pngs == {"black": True, "white": False}
    assert not row.complete


def test_audit_flags_missing_pngs_and_categories(icon_root):
    report = audit(icon_root, ICON_CATEGORIES, PNG_COLORS)
    assert not report.ok
    assert report.errors == ["[alert] ic_error → missing white PNG"]
    assert [r.icon for r in report.rows] == ["ic_alarm", "ic_home", "ic_error"]
    # 13 of the 15 categories are absent from the fixture tree
    assert len(report.warnings) == 13
    assert "[toggle] category directory is missing" in report.warnings


def test_audit_complete_tree(icon_root):
    report = audit(icon_root, ["action"], PNG_COLORS)
    assert report.ok
    assert all(r.complete for r in report.rows)


def test_write_report(icon_root, tmp_path):
    report = audit(icon_root, ["action", "alert"], PNG_COLORS)
    dest = write_report(report, tmp_path / "reports" / "icon_report.csv")
    with dest.open(encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0]) == ["category", "icon", "svg", "png_black", "png_white", "complete"]
    assert rows[-1] == {
        "category": "alert",
        "icon": "ic_error",
        "svg": "alert/svg/production/ic_error_24px.svg",
        "png_black": "True",
        "png_white": "False",
        "complete": "False",
    }
