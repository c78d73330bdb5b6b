"""
AI Cost Compass - Shared Tab Widgets
Export buttons and input-correction notices used by every calculator view.
"""

import streamlit as st

from config import EXPORT_FILENAMES, EXCEL_FILENAMES, TEXT_MIME, EXCEL_MIME
from utils.export_engine import build_report, create_report_workbook, BREAKDOWN_ROWS


def show_corrections(corrected):
    """Tell the user which inputs were replaced by a default."""
    if corrected:
        st.warning(f"⚠️ Invalid input replaced with a default value: {', '.join(corrected)}")


def render_export_buttons(calc_id: str, title: str, snapshot: dict):
    """Text and Excel downloads for the last calculation."""
    config = snapshot['config']
    result = snapshot['result']

    col1, col2 = st.columns(2)
    with col1:
        report = build_report(calc_id, config, result)
        if report is not None:
            st.download_button(
                label="📥 Export",
                data=report,
                file_name=EXPORT_FILENAMES[calc_id],
                mime=TEXT_MIME,
                key=f'{calc_id}_export_txt',
                use_container_width=True
            )
    with col2:
        try:
            workbook = create_report_workbook(title, config, BREAKDOWN_ROWS[calc_id](result))
        except Exception as e:
            st.error(f"Error building Excel report: {e}")
        else:
            st.download_button(
                label="📊 Export Excel",
                data=workbook,
                file_name=EXCEL_FILENAMES[calc_id],
                mime=EXCEL_MIME,
                key=f'{calc_id}_export_xlsx',
                use_container_width=True
            )
