"""Upload list component: status counts and one row per file."""
from __future__ import annotations

import streamlit as st

from app.core.batch import UploadItem, UploadQueue, UploadStatus
from app.core.utils import format_file_size

STATUS_LABELS = {
    UploadStatus.QUEUED: "⏳ Queued",
    UploadStatus.PROCESSING: "🔄 Processing",
    UploadStatus.COMPLETED: "✅ Completed",
    UploadStatus.FAILED: "❌ Failed",
}


def render_status_counts(queue: UploadQueue) -> None:
    counts = queue.counts()
    parts = [
        f"{status.value.capitalize()}: {counts[status.value]}"
        for status in UploadStatus
        if counts[status.value]
    ]
    st.caption(f"**Files ({len(queue)})**" + ("  ·  " + "  ·  ".join(parts) if parts else ""))


def render_item_row(item: UploadItem, show_remove: bool) -> bool:
    """Render one row. Returns True if Remove was clicked."""
    c1, c2, c3, c4 = st.columns([4, 2, 3, 2])
    with c1:
        st.write(item.name)
    with c2:
        st.caption(format_file_size(item.size))
    with c3:
        st.write(STATUS_LABELS[item.status])
        if item.error:
            st.caption(item.error)
    with c4:
        if show_remove and item.status != UploadStatus.PROCESSING:
            return st.button("Remove", key=f"rm_file_{item.id}")
    return False


def render_file_list(queue: UploadQueue, is_processing: bool = False) -> str | None:
    """Render the upload list. Returns the id of a file whose Remove button was clicked, or None."""
    if not len(queue):
        return None
    render_status_counts(queue)
    clicked = None
    for item in queue:
        if render_item_row(item, show_remove=not is_processing):
            clicked = item.id
    return clicked
