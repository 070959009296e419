"""Streamlit front-end for the car inventory loader."""
from __future__ import annotations

import streamlit as st

from car_inventory import (
    LoadInventoryContext,
    LoadInventoryUseCase,
    RecordValidator,
    TextFileRejectionLog,
    TextRecordSource,
)
from car_inventory.config import SETTINGS
from car_inventory.domain.errors import InventoryLoadError
from car_inventory.domain.results import LoadResult
from car_inventory.logging_config import configure_logging
from car_inventory.presentation.reports import records_to_dataframe, rejections_to_dataframe


st.set_page_config(page_title="Car Inventory", layout="wide")
st.title("Car Inventory Validator")
configure_logging(SETTINGS.log_level)


def run_load(name: str, content: bytes, max_records: int) -> tuple[LoadResult, TextFileRejectionLog]:
    rejection_log = TextFileRejectionLog(SETTINGS.reject_log_path)
    context = LoadInventoryContext(
        source=TextRecordSource(content, name=name),
        rejection_log=rejection_log,
        validator=RecordValidator(SETTINGS.rules()),
        max_records=max_records,
    )
    return LoadInventoryUseCase(context).execute(), rejection_log


if "result" not in st.session_state:
    st.session_state["result"] = None

records_file = st.file_uploader("Upload car records", type=["txt"])
max_records = st.number_input("Maximum records", min_value=1, value=SETTINGS.max_records, step=1)

if st.button("Load", disabled=records_file is None) and records_file is not None:
    try:
        with st.spinner("Validating..."):
            result, rejection_log = run_load(records_file.name, records_file.read(), int(max_records))
    except InventoryLoadError as exc:
        st.error(str(exc))
        st.session_state["result"] = None
    else:
        st.session_state["result"] = {"load": result, "log_bytes": rejection_log.read_bytes()}

stored = st.session_state.get("result")
if not stored:
    st.info("Upload a records file and press Load.")
else:
    result: LoadResult = stored["load"]
    summary = result.summary

    if result.capacity_reached:
        st.warning(f"Storage full: only the first {summary.max_records} valid records were kept")

    col1, col2, col3 = st.columns(3)
    col1.metric("Lines read", summary.lines_read)
    col2.metric("Valid records", summary.accepted)
    col3.metric("Invalid records", summary.rejected)

    tabs = st.tabs(["Inventory", "Invalid records"])
    with tabs[0]:
        if result.accepted:
            st.dataframe(records_to_dataframe(result.accepted), hide_index=True)
        else:
            st.info("No valid records to display")
    with tabs[1]:
        if result.has_rejections():
            st.dataframe(rejections_to_dataframe(result.rejected), hide_index=True)
            st.download_button(
                "Download invalid records",
                data=stored["log_bytes"],
                file_name=SETTINGS.reject_log_path.name,
                mime="text/plain",
            )
        else:
            st.info("No invalid records found")
