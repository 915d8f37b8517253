# app.py
# Icon catalog browser: ijmap search + generated sprite preview

import os
from io import BytesIO
from pathlib import Path

import streamlit as st
from PIL import Image

from iconset.catalog import catalog_frame, load_catalog, search
from iconset.config import CSS_SPRITE_DIR, ICON_CATEGORIES, IJMAP_FILE, PNG_COLORS
from iconset.sprites import sprite_name

# ───────────────────────────── Page setup ─────────────────────────────
st.set_page_config(page_title="Icon Catalog", layout="wide")
st.title("🔣 Icon Catalog")

# paths are relative to the icon repository root: run `streamlit run app.py` from there
ROOT = Path(".")
DEFAULT_SOURCE = os.getenv("ICONSET_CATALOG", str(ROOT / IJMAP_FILE))

# ─────────────────────────── Catalog loading ──────────────────────────
@st.cache_data(show_spinner=False, ttl=600)
def fetch_catalog(source: str) -> dict:
    return load_catalog(source)

with st.sidebar:
    st.subheader("Catalog")
    source = st.text_input("ijmap path or URL", value=DEFAULT_SOURCE)

try:
    ijmap = fetch_catalog(source)
except (OSError, ValueError) as e:
    st.error(f"Could not load catalog from {source}: {e}")
    st.stop()

frame = catalog_frame(ijmap)
st.write(f"✅ Loaded **{len(frame)}** icons from `{source}`.")

# ─────────────────────────────── Search ───────────────────────────────
query = st.text_input("Search by name or codepoint", placeholder="e.g. arrow, e037")
hits = search(frame, query)
st.caption(f"{len(hits)} match(es)")
st.dataframe(hits, use_container_width=True, hide_index=True)
st.download_button(
    "Download CSV",
    hits.to_csv(index=False).encode("utf-8"),
    file_name="icons.csv",
    mime="text/csv",
)

# ─────────────────────────── Sprite preview ───────────────────────────
def st_image_compat(data, caption: str = ""):
    """Call st.image using the arg name supported by the runtime."""
    try:
        st.image(data, caption=caption, use_container_width=True)
    except TypeError:
        st.image(data, caption=caption, use_column_width=True)

with st.sidebar:
    st.markdown("---")
    st.subheader("Sprites")
    category = st.selectbox("Category", ICON_CATEGORIES)
    color = st.radio("Color", PNG_COLORS, horizontal=True)

sheet = ROOT / CSS_SPRITE_DIR / f"{sprite_name(category, color)}.png"
st.subheader(f"🧩 {sheet.name}")
if not sheet.exists():
    st.info("Sprite not built yet. Run `python scripts/build.py png-sprites`.")
else:
    with Image.open(sheet) as src:
        img = src.convert("RGBA")
    # white icons are invisible on a white page
    if color == "white":
        bg = Image.new("RGBA", img.size, (60, 60, 60, 255))
        bg.alpha_composite(img)
        img = bg
    buf = BytesIO()
    img.save(buf, format="PNG")
    st_image_compat(buf.getvalue(), f"{img.width}×{img.height}px")
