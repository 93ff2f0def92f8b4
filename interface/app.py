# interface/app.py
"""
BOM Merge Tool - Main Application

Streamlit interface for merging vendor BOM exports into a master list.
"""

import streamlit as st

from components import (
    render_action_buttons,
    render_download_button,
    render_file_list,
    render_file_uploader,
    render_header,
    render_preview,
    render_reset_button,
    render_status,
)
from processor import (
    export_headers,
    new_upload_dir,
    process_uploaded_files,
    reset_on_new_uploads,
    save_uploads,
)
from styles import get_custom_css

from domain.errors import NoValidFilesError
from pipeline import UploadBatch

# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="BOM Merge",
    page_icon="🧩",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ============================================================================
# APPLY STYLES
# ============================================================================
st.markdown(get_custom_css(), unsafe_allow_html=True)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "batch" not in st.session_state:
    st.session_state.batch = UploadBatch()
if "status" not in st.session_state:
    st.session_state.status = ("Ready", None)
if "result" not in st.session_state:
    st.session_state.result = None
if "df" not in st.session_state:
    st.session_state.df = None
if "upload_dir" not in st.session_state:
    st.session_state.upload_dir = new_upload_dir()

# ============================================================================
# MAIN APP FLOW
# ============================================================================
render_header()

uploaded_files = render_file_uploader()
reset_on_new_uploads(st.session_state, uploaded_files)

batch: UploadBatch = st.session_state.batch
batch.clear()

if uploaded_files:
    render_file_list(uploaded_files)
    try:
        batch.add_files(save_uploads(uploaded_files, st.session_state.upload_dir))
    except NoValidFilesError as e:
        st.session_state.status = (str(e), False)

action = render_action_buttons(disabled=not batch.files)

if action:
    label = {
        "all": "🔄 Processing All Data...",
        "condensed": "🔄 Generating Condensed List...",
        "headers": "🔄 Extracting headers...",
    }[action]

    with st.spinner(label):
        if action == "headers":
            outcome, message = export_headers(batch)
        else:
            outcome, message = process_uploaded_files(batch, condensed=(action == "condensed"))

    success, file_name, payload, df, error = outcome
    st.session_state.status = (message, success)
    st.session_state.result = (file_name, payload) if success else None
    st.session_state.df = df

# ============================================================================
# RESULTS SECTION
# ============================================================================
render_status(*st.session_state.status)

if st.session_state.result is not None:
    render_download_button(*st.session_state.result)
    render_preview(st.session_state.df)

if render_reset_button():
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    st.rerun()
