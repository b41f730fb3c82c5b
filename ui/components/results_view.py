"""Result table component: sortable columns, per-row actions, CSV/XLSX download."""
from __future__ import annotations

import pandas as pd
import streamlit as st

from app.core.config import CSV_EXPORT_FILENAME, XLSX_EXPORT_FILENAME
from app.core.export import EXPORT_HEADERS, export_rows, to_csv, to_xlsx
from app.core.results import COLUMN_LABELS, SORT_FIELDS, ResultTable, SortState, contact_info_json, copyable_fields

from components.preview import render_pdf_preview


def render_sort_header(sort_state: SortState) -> bool:
    """One button per column. Returns True when the sort changed."""
    changed = False
    cols = st.columns(len(SORT_FIELDS))
    for col, field in zip(cols, SORT_FIELDS):
        label = COLUMN_LABELS[field]
        if field == sort_state.field:
            label += " ↑" if sort_state.direction == "asc" else " ↓"
        with col:
            if st.button(label, key=f"sort_{field}", width="stretch"):
                sort_state.toggle(field)
                changed = True
    return changed


def render_downloads(table: ResultTable) -> None:
    c1, c2 = st.columns(2)
    with c1:
        st.download_button(
            "Download CSV",
            data=to_csv(table.rows),
            file_name=CSV_EXPORT_FILENAME,
            mime="text/csv",
            key="dl_csv",
            disabled=not len(table),
        )
    with c2:
        st.download_button(
            "Download XLSX",
            data=to_xlsx(table.rows) if len(table) else b"",
            file_name=XLSX_EXPORT_FILENAME,
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            key="dl_xlsx",
            disabled=not len(table),
        )


def render_results(table: ResultTable, sort_state: SortState) -> None:
    """Render the data table with sort header, row details and export buttons."""
    st.subheader("Data Table")
    if not len(table):
        st.info("No resumes processed yet. Upload PDF resumes to extract contact information.")
        return

    if render_sort_header(sort_state):
        st.rerun()

    rows = table.sorted_rows(sort_state)
    df = pd.DataFrame(export_rows(rows), columns=EXPORT_HEADERS)
    st.dataframe(df, hide_index=True, width="stretch")
    st.caption(f"{len(table)} record(s)")

    render_downloads(table)
    if st.button("Clear All", key="clear_results"):
        table.clear()
        st.rerun()

    st.divider()
    st.caption("Row details")
    for row in rows:
        with st.expander(f"{row.file_name} - {row.data.fullName or 'Unknown'}"):
            for label, value in copyable_fields(row):
                st.caption(label)
                st.code(value, language=None)
            st.code(contact_info_json(row), language="json")
            if st.checkbox("Show PDF", key=f"show_pdf_{row.id}"):
                render_pdf_preview(row)
            if st.button("Remove", key=f"rm_row_{row.id}"):
                table.remove(row.id)
                st.rerun()
