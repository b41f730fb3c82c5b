"""
Resume Contact Extractor Streamlit app.
Upload PDF resumes, extract contact information one file at a time, sort and export the results.
"""
from __future__ import annotations

import asyncio
import os

import streamlit as st

from app.core.backend_client import BackendExtractionClient
from app.core.batch import BatchProcessor, UploadItem, UploadQueue
from app.core.config import MAX_FILE_SIZE_MB
from app.core.results import ResultTable, SortState

from components.file_list import render_file_list
from components.results_view import render_results

DEFAULT_BACKEND = "http://localhost:8001"


def get_backend_url() -> str:
    return st.session_state.get("backend_url") or os.environ.get("BACKEND_URL") or DEFAULT_BACKEND


def init_session_state() -> None:
    st.session_state.setdefault("backend_url", (os.environ.get("BACKEND_URL") or DEFAULT_BACKEND).strip())
    st.session_state.setdefault("upload_queue", UploadQueue())
    st.session_state.setdefault("result_table", ResultTable())
    st.session_state.setdefault("sort_state", SortState())
    st.session_state.setdefault("uploader_key", 0)
    st.session_state.setdefault("batch_warning", None)
    st.session_state.setdefault("upload_errors", [])
    st.session_state.setdefault("extract_error", None)


def reset_uploads() -> None:
    """Clear the upload list and any banners tied to it."""
    st.session_state["upload_queue"].clear()
    st.session_state["batch_warning"] = None
    st.session_state["upload_errors"] = []
    st.session_state["extract_error"] = None


def render_sidebar(backend_ok: bool) -> None:
    """Backend URL override and connection status."""
    st.caption("Backend API")
    override = st.text_input(
        "URL",
        value=st.session_state["backend_url"],
        key="backend_url_input",
        label_visibility="collapsed",
        placeholder=DEFAULT_BACKEND,
    )
    st.session_state["backend_url"] = override.strip() or st.session_state["backend_url"]
    st.caption(f"Using: `{get_backend_url()}`")
    if backend_ok:
        st.success("Connected")
    else:
        st.error("Disconnected")


def add_uploaded_files(queue: UploadQueue) -> None:
    """Turn the uploader's files into queue items, then reset the widget so they are not added twice."""
    files = st.file_uploader(
        f"Drag & drop PDF resumes or click to select (multiple files, max {MAX_FILE_SIZE_MB}MB each)",
        type=["pdf"],
        accept_multiple_files=True,
        key=f"uploader_{st.session_state['uploader_key']}",
    )
    if not files:
        return
    items = [UploadItem(name=f.name, content=f.getvalue(), content_type=f.type) for f in files]
    outcome = queue.add_files(items)
    st.session_state["upload_errors"] = [f"{i.name}: {i.error}" for i in outcome.rejected]
    if outcome.warning:
        st.session_state["batch_warning"] = outcome.warning
    st.session_state["uploader_key"] += 1
    st.rerun()


def render_banners() -> None:
    warning = st.session_state.get("batch_warning")
    if warning:
        st.warning(warning)
        c1, c2 = st.columns(2)
        with c1:
            if st.button("Continue", key="warning_continue"):
                st.session_state["batch_warning"] = None
                st.rerun()
        with c2:
            if st.button("Clear Files", key="warning_clear"):
                reset_uploads()
                st.rerun()
    for err in st.session_state.get("upload_errors") or []:
        st.error(err)
    if st.session_state.get("extract_error"):
        st.error(st.session_state["extract_error"])


def run_batch(queue: UploadQueue, table: ResultTable, backend_url: str, list_slot) -> None:
    """Process every queued file, redrawing the file list in place as each status changes."""

    def redraw(_item: UploadItem) -> None:
        with list_slot.container():
            render_file_list(queue, is_processing=True)

    client = BackendExtractionClient(backend_url)
    processor = BatchProcessor(queue, table, client.extract_contact_info, on_change=redraw)
    with st.spinner("Extracting contact information..."):
        summary = asyncio.run(processor.run())
    st.session_state["extract_error"] = processor.last_error
    st.toast(f"Processed {summary.completed + summary.failed} file(s): {summary.failed} failed")


def upload_panel(backend_url: str) -> None:
    st.subheader("Upload Resumes")
    queue: UploadQueue = st.session_state["upload_queue"]
    table: ResultTable = st.session_state["result_table"]

    add_uploaded_files(queue)
    render_banners()

    list_slot = st.empty()
    with list_slot.container():
        removed = render_file_list(queue)
    if removed:
        queue.remove(removed)
        st.rerun()
    if not len(queue):
        return

    queued = queue.counts()["queued"]
    c1, c2 = st.columns(2)
    with c1:
        if queued and st.button(
            f"Process {queued} {'File' if queued == 1 else 'Files'}", type="primary", key="process_all"
        ):
            st.session_state["extract_error"] = None
            run_batch(queue, table, backend_url, list_slot)
            st.rerun()
    with c2:
        if st.button("Clear All", key="clear_files"):
            reset_uploads()
            st.rerun()


def main() -> None:
    st.set_page_config(page_title="Resume Contact Extractor", page_icon="📄", layout="wide")
    init_session_state()

    backend_url = get_backend_url()
    backend_ok = BackendExtractionClient(backend_url).is_reachable()

    st.title("Resume Contact Extractor")
    st.caption("Professional tool for extracting contact information from PDF resumes")
    st.divider()

    with st.sidebar:
        render_sidebar(backend_ok)

    if not backend_ok:
        st.error(
            f"Cannot reach the backend at **{backend_url}**. "
            "Ensure the API is running (e.g. `uvicorn app.main:app --port 8001`)."
        )

    left, right = st.columns([2, 3])
    with left:
        upload_panel(backend_url)
    with right:
        render_results(st.session_state["result_table"], st.session_state["sort_state"])


if __name__ == "__main__":
    main()
