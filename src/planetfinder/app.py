"""Rusty Planet Finder: Streamlit app matching a described planet against the catalog."""

import html
import json

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from planetfinder.catalog import CatalogLoadError, load_catalog  # noqa: E402
from planetfinder.config import configure_logging, load_settings  # noqa: E402
from planetfinder.i18n import field_label, t  # noqa: E402
from planetfinder.matching import match_bulk, match_single  # noqa: E402
from planetfinder.models import MalformedBulkInput  # noqa: E402
from planetfinder.renderers.plotly_2d import render_catalog_map  # noqa: E402
from planetfinder.schema import ATTRIBUTE_FIELDS, ATTRIBUTE_KEYS  # noqa: E402
from planetfinder.upload import parse_rows, results_csv, results_frame  # noqa: E402

_settings = load_settings()
configure_logging(_settings.log_level)

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
)

# --- Session state initialization ---

if "result" not in st.session_state:
    st.session_state.result = None
if "bulk_results" not in st.session_state:
    st.session_state.bulk_results = ()
if "bulk_error" not in st.session_state:
    st.session_state.bulk_error = None
if "upload_seq" not in st.session_state:
    st.session_state.upload_seq = 0
for _key in ATTRIBUTE_KEYS:
    if f"field_{_key}" not in st.session_state:
        st.session_state[f"field_{_key}"] = ""

_FORM_COLUMNS = 4

st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #050a1a !important;
        color: #eeeeee;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .result-box {
        background: rgba(255, 255, 255, 0.05);
        border-radius: 8px;
        padding: 1.2rem 1.6rem;
        margin-top: 1.2rem;
    }
    .result-error { color: orange; }
    .version { color: #888; font-size: 0.8rem; }
    </style>
    """,
    unsafe_allow_html=True,
)


@st.cache_resource
def _load_catalog(source: str) -> tuple[dict, ...]:
    return load_catalog(source)


def _reset() -> None:
    for key in ATTRIBUTE_KEYS:
        st.session_state[f"field_{key}"] = ""
    st.session_state.result = None
    st.session_state.bulk_results = ()
    st.session_state.bulk_error = None
    # New uploader key clears the selected file
    st.session_state.upload_seq += 1


st.markdown(
    f"<h1>{t('page_title', _lang)}</h1><div class='version'>v0.1.0</div>",
    unsafe_allow_html=True,
)

catalog: tuple[dict, ...] = ()
with st.spinner(t("loading_catalog", _lang)):
    try:
        catalog = _load_catalog(_settings.catalog_source)
    except CatalogLoadError as e:
        st.error(t("error_catalog", _lang).format(error=html.escape(str(e))))

# --- Input grid ---
cols = st.columns(_FORM_COLUMNS)
for i, field in enumerate(ATTRIBUTE_FIELDS):
    with cols[i % _FORM_COLUMNS]:
        st.text_input(
            field_label(field.key, field.label, _lang),
            key=f"field_{field.key}",
            placeholder=field.placeholder,
        )

bcol1, bcol2, _ = st.columns([1, 1, 6])
with bcol1:
    st.button(t("btn_reset", _lang), on_click=_reset, use_container_width=True)
with bcol2:
    calculate = st.button(
        t("btn_calculate", _lang), type="primary", use_container_width=True
    )

if calculate:
    values = {key: st.session_state[f"field_{key}"] for key in ATTRIBUTE_KEYS}
    st.session_state.result = match_single(
        catalog, values, min_score=_settings.min_score
    )
    st.session_state.bulk_results = ()
    st.session_state.bulk_error = None

# --- Bulk upload ---
_upload_key = f"upload_{st.session_state.upload_seq}"


def _on_upload(key: str, catalog: tuple[dict, ...]) -> None:
    uploaded = st.session_state.get(key)
    st.session_state.bulk_results = ()
    st.session_state.bulk_error = None
    if uploaded is None:
        return
    try:
        rows = parse_rows(uploaded)
        st.session_state.bulk_results = match_bulk(
            catalog, rows, min_score=_settings.min_score
        )
    except MalformedBulkInput as e:
        st.session_state.bulk_error = t("error_bulk", _lang).format(
            error=html.escape(str(e))
        )


st.file_uploader(
    t("label_bulk_upload", _lang),
    type=["csv"],
    help=t("help_bulk_upload", _lang),
    key=_upload_key,
    on_change=_on_upload,
    args=(_upload_key, catalog),
)

# --- Single result ---
_result = st.session_state.result
if _result is not None:
    if _result.ok:
        st.markdown(f"<h3>{t('heading_match', _lang)}</h3>", unsafe_allow_html=True)
        st.caption(f"{t('label_score', _lang)}: {_result.score} / {len(ATTRIBUTE_KEYS)}")
        st.code(json.dumps(_result.as_dict()["matchedRecord"], indent=2), language="json")
    else:
        st.markdown(
            f"<div class='result-box result-error'>{t(_result.error.value, _lang)}</div>",
            unsafe_allow_html=True,
        )

# --- Bulk results table ---
if st.session_state.bulk_error:
    st.error(st.session_state.bulk_error)
if st.session_state.bulk_results:
    _bulk = st.session_state.bulk_results
    st.markdown(
        f"<h3>{t('heading_bulk', _lang).format(count=len(_bulk))}</h3>",
        unsafe_allow_html=True,
    )
    st.dataframe(results_frame(_bulk), hide_index=True, use_container_width=True)
    st.download_button(
        t("btn_download", _lang),
        data=results_csv(_bulk),
        file_name="planet_matches.csv",
        mime="text/csv",
    )

# --- Catalog map ---
if catalog:
    st.markdown(f"<h3>{t('heading_map', _lang)}</h3>", unsafe_allow_html=True)
    _highlight = _result.matched_record if _result is not None and _result.ok else None
    st.plotly_chart(render_catalog_map(catalog, _highlight), use_container_width=True)
