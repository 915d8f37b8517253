from pathlib import Path

import pytest

from iconset.tasks import run_task

AppTest = pytest.importorskip("streamlit.testing.v1").AppTest

APP = Path(__file__).resolve().parent.parent / "app.py"


@pytest.fixture(autouse=True)
def _clear_streamlit_cache():
    # st.cache_data persists across AppTest runs in one process
    import streamlit as st

    st.cache_data.clear()
    yield
    st.cache_data.clear()


@pytest.fixture
def built_root(icon_root, monkeypatch):
    run_task("png-sprites", icon_root)
    run_task("iconjar", icon_root)
    monkeypatch.chdir(icon_root)
    monkeypatch.delenv("ICONSET_CATALOG", raising=False)
    return icon_root


def _subheaders(at):
    return [s.value for s in at.subheader] + [s.value for s in at.sidebar.subheader]


def test_app_browses_catalog_and_sprites(built_root):
    at = AppTest.from_file(str(APP), default_timeout=60).run()
    assert not at.exception
    assert not at.error
    assert any("sprite-action-black.png" in s for s in _subheaders(at))
    assert not at.info  # the sprite exists, so no "not built yet" hint

    at.sidebar.radio[0].set_value("white").run()
    assert not at.exception
    assert any("sprite-action-white.png" in s for s in _subheaders(at))


def test_app_reports_missing_catalog(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ICONSET_CATALOG", raising=False)
    at = AppTest.from_file(str(APP), default_timeout=60).run()
    assert not at.exception
    assert at.error
