"""Original PDF preview component."""
import base64

import streamlit as st

from app.core.models import ExtractionResult

PREVIEW_HEIGHT = 600


def render_pdf_preview(result: ExtractionResult) -> None:
    """Embed the stored PDF in an iframe and offer it for download."""
    st.markdown(
        f'<iframe src="data:application/pdf;base64,{result.pdf_data}" '
        f'width="100%" height="{PREVIEW_HEIGHT}" type="application/pdf"></iframe>',
        unsafe_allow_html=True,
    )
    st.download_button(
        label=f"Download {result.file_name}",
        data=base64.b64decode(result.pdf_data),
        file_name=result.file_name,
        mime="application/pdf",
        key=f"dl_pdf_{result.id}",
    )
