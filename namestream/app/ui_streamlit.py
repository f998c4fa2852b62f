# -*- coding: utf-8 -*-
"""
Run on a free port, e.g.:
  python -m streamlit run namestream/app/ui_streamlit.py --server.port 8503

The API must be running (NAMESTREAM_API_URL, default http://localhost:8000).
"""

from __future__ import annotations
import html
import re
from typing import Any, Dict, List, Optional, Tuple

import httpx
import streamlit as st

from namestream.config.settings import AppConfig
from namestream.preprocessing.culture_catalog import CultureCatalog

UI_ERROR = "Failed to convert name. Please try again."
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>])")


class ConvertFailed(Exception):
    """The API call failed; message is safe to show in the UI."""


def call_convert_api(
    api_url: str,
    name: str,
    culture: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float = 60.0,
) -> Dict[str, Any]:
    """
    POST {name, culture} to the API and return the Result dict.

    Raises ConvertFailed on empty input, non-2xx status, network errors or a
    non-JSON body.
    """
    name = (name or "").strip()
    if not name:
        raise ConvertFailed("Please enter a name")

    owns_client = client is None
    http = client or httpx.Client(timeout=timeout)
    try:
        resp = http.post(f"{api_url.rstrip('/')}/convert-name", json={"name": name, "culture": culture})
        if resp.status_code != 200:
            raise ConvertFailed(UI_ERROR)
        data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise ConvertFailed(UI_ERROR) from exc
    finally:
        if owns_client:
            http.close()

    if not isinstance(data, dict):
        raise ConvertFailed(UI_ERROR)
    return data


def escape_markdown(value: Any) -> str:
    """Model text shown via st.markdown renders literally (no bold, links or headings)."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", str(value or ""))


def _culture_options() -> List[Tuple[str, str]]:
    return CultureCatalog().options()


def main() -> None:
    st.set_page_config(page_title="Name Creator", layout="centered")

    st.markdown(
        """
        <style>
            header {visibility: hidden;}
            div[data-testid="stHeader"] {display: none;}
            .native-name {
                font-size: 2.6rem;
                font-weight: 800;
                text-align: center;
                line-height: 1.2;
            }
            .romanized-name {
                font-size: 1.3rem;
                text-align: center;
                color: #555;
            }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.title("Name Creator")
    st.caption("Enter your name and pick a culture to get a culturally adapted version.")

    if "config" not in st.session_state:
        st.session_state.config = AppConfig.from_env()
    if "options" not in st.session_state:
        st.session_state.options = _culture_options()

    config: AppConfig = st.session_state.config
    options: List[Tuple[str, str]] = st.session_state.options
    labels = {tag: label for tag, label in options}

    with st.form("convert_form"):
        name = st.text_input("Name", placeholder="Enter your name")
        culture = st.selectbox(
            "Culture",
            options=[tag for tag, _ in options],
            format_func=lambda tag: labels.get(tag, tag),
        )
        submitted = st.form_submit_button("Convert", use_container_width=True)

    if not submitted:
        return

    try:
        with st.spinner("Converting..."):
            result = call_convert_api(config.api_url, name, culture)
    except ConvertFailed as exc:
        st.error(str(exc))
        return

    final_name = result.get("final_name") or {}
    st.markdown(f'<div class="native-name">{html.escape(str(final_name.get("native_script", "")))}</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="romanized-name">{html.escape(str(final_name.get("romanized", "")))}</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="romanized-name">{html.escape(str(final_name.get("pronunciation", "")))}</div>', unsafe_allow_html=True)

    st.divider()
    st.markdown(f"**Original Name:** {escape_markdown(result.get('original_name'))}")
    st.markdown(f"**Name Meaning:** {escape_markdown(result.get('name_meaning'))}")
    st.markdown(f"**{escape_markdown(labels.get(culture, culture))} Translation:** {escape_markdown(result.get('cultural_translation'))}")
    st.markdown(f"**Meaning in English:** {escape_markdown(final_name.get('meaning_in_english'))}")


if __name__ == "__main__":
    main()
