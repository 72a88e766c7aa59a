"""
Streamlit web interface for the Product Selector.
"""
import streamlit as st
import traceback
import sys
import os

# Add the parent directory to the path so we can import the package
# This is only needed when running the script directly
parent_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

from product_selector.analysis.exporters.csv_exporter import CSVExporter
from product_selector.config.app_config import MAX_UPLOAD_MB
from product_selector.data.connectors.snowflake_connector import SnowflakeConnector
from product_selector.data.repositories.blacklist_repository import BlacklistRepository
from product_selector.exceptions import ProductSelectorError
from product_selector.main import ProductSelectionSession
from product_selector.ui.components.blacklist_editor import create_blacklist_editor
from product_selector.ui.components.filters import create_all_filters, create_reset_button
from product_selector.ui.components.product_list import create_metrics, create_product_list
from product_selector.utils.date_helpers import get_timestamp_str


# Set page configuration
st.set_page_config(
    page_title="Product Selector",
    page_icon="🛒",
    layout="wide"
)

# Page title and description
st.title("Product Selector")
st.markdown("Upload an Amazon product export (.xlsx) to filter products and manage blacklisted categories.")


# Initialize repositories
@st.cache_resource
def initialize_repository():
    """Initialize the blacklist store connection."""
    return BlacklistRepository(SnowflakeConnector())


# Initialize session state
if 'session' not in st.session_state:
    st.session_state.session = ProductSelectionSession(blacklist_repository=initialize_repository())
    st.session_state.loaded_file = None
    st.session_state.product_page = 1

session: ProductSelectionSession = st.session_state.session

if not session.blacklist_repository.is_available:
    st.warning("Blacklist store is not configured; no categories will be excluded.")


def toggle_category(category: str, is_blacklisted: bool) -> bool:
    if session.toggle_category(category, is_blacklisted):
        st.toast(f"{'Blacklisted' if is_blacklisted else 'Un-blacklisted'} '{category}'")
        return True
    st.error(f"Could not update '{category}'")
    return False


products_tab, editor_tab = st.tabs(["Products", "Blacklist Editor"])

with products_tab:
    uploaded = st.file_uploader(f"Product export (.xlsx, up to {MAX_UPLOAD_MB}MB)", type=["xlsx"])

    if uploaded is not None and uploaded.file_id != st.session_state.loaded_file:
        loading_text = st.empty()
        progress_bar = st.progress(0)

        def report_progress(percent: int) -> None:
            loading_text.text(f"Parsing spreadsheet... {percent}%")
            progress_bar.progress(percent)

        try:
            session.load(uploaded, on_progress=report_progress)
            loading_text.text("Looking up blacklisted categories...")
            session.refresh_blacklist()
            st.session_state.loaded_file = uploaded.file_id
            st.session_state.product_page = 1
            loading_text.text(f"Loaded {len(session.products)} products")

        except ProductSelectorError as e:
            st.session_state.loaded_file = None
            st.error(str(e))

        except Exception as e:
            st.session_state.loaded_file = None
            st.error(f"Error loading spreadsheet: {str(e)}")
            st.error(f"Detailed error: {traceback.format_exc()}")

    if session.products:
        if create_reset_button():
            session.reset_filters()
            for key in list(st.session_state.keys()):
                if key.startswith("range_") or key in ("shipping_methods", "seller_locations"):
                    del st.session_state[key]
            st.session_state.product_page = 1
            st.rerun()

        criteria = create_all_filters(session.options, session.criteria)
        if criteria != session.criteria:
            st.session_state.product_page = 1

        filtered = session.apply(criteria)
        create_metrics(session.statistics(filtered))

        st.download_button(
            "Download CSV",
            data=CSVExporter().prepare_dataframe(filtered).to_csv(index=False).encode("utf-8-sig"),
            file_name=f"filtered_products_{get_timestamp_str()}.csv",
            mime="text/csv",
            disabled=not filtered
        )

        create_product_list(filtered, session.blacklist, toggle_category)

with editor_tab:
    create_blacklist_editor(session.blacklist_repository)
