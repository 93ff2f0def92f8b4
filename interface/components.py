"""
Streamlit UI building blocks for the BOM merge tool.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st


def render_header() -> None:
    st.markdown('<div class="main-header">BOM Merge</div>', unsafe_allow_html=True)
    st.markdown(
        '<div class="sub-header">Combine vendor BOM exports into one master list keyed by MPN.</div>',
        unsafe_allow_html=True,
    )


def render_file_uploader():
    return st.file_uploader(
        "📂 Drop Excel or CSV files",
        type=["xlsx", "xls", "csv"],
        accept_multiple_files=True,
        help="Files are merged in the order they are listed.",
    )


def render_file_list(files: List) -> None:
    """Show file names and sizes (KB)."""
    for f in files:
        st.markdown(
            f'<div class="file-item"><span class="name">{f.name}</span>'
            f'<span class="size">{f.size / 1024:.1f} KB</span></div>',
            unsafe_allow_html=True,
        )


def render_action_buttons(disabled: bool) -> Optional[str]:
    """Render the three actions; returns "all", "condensed", "headers" or None."""
    c1, c2, c3 = st.columns(3)
    with c1:
        if st.button("⚙️ Process All Data", type="primary", disabled=disabled, width="stretch"):
            return "all"
    with c2:
        if st.button("📋 Condensed List", disabled=disabled, width="stretch"):
            return "condensed"
    with c3:
        if st.button("🏷️ Export Headers", disabled=disabled, width="stretch"):
            return "headers"
    return None


def render_status(message: str, ok: Optional[bool]) -> None:
    css = "status-muted" if ok is None else ("status-ok" if ok else "status-error")
    st.markdown(f'<div class="{css}">{message}</div>', unsafe_allow_html=True)


def render_preview(df: Optional[pd.DataFrame]) -> None:
    if df is None or df.empty:
        return
    st.dataframe(df, hide_index=True, width="stretch")


def render_download_button(file_name: str, payload: bytes) -> None:
    mime = (
        "text/plain"
        if file_name.endswith(".txt")
        else "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    st.download_button(
        label=f"📥 Download {file_name}",
        data=payload,
        file_name=file_name,
        mime=mime,
        type="primary",
        width="stretch",
        key="download_result",
    )


def render_reset_button() -> bool:
    return st.button("🔄 Start over", type="secondary")
