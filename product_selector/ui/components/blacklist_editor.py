"""
Blacklist editor component for the Streamlit UI.
"""
from typing import Dict, List
import streamlit as st
from product_selector.analysis.pagination import paginate
from product_selector.config.app_config import EDITOR_COLUMNS, EDITOR_PAGE_SIZE
from product_selector.data.models.filters import BatchUpdateResult, CategoryStatus
from product_selector.data.repositories.blacklist_repository import BlacklistRepository
from product_selector.utils.normalization import matches_category_search


def filter_categories(categories: List[CategoryStatus], term: str) -> List[CategoryStatus]:
    """
    Keep the categories matching a search term.

    Args:
        categories (List[CategoryStatus]): All categories
        term (str): Search term; empty keeps everything

    Returns:
        List[CategoryStatus]: Matching categories
    """
    if not term:
        return list(categories)
    return [category for category in categories if matches_category_search(category.id, term)]


def pending_updates(categories: List[CategoryStatus], edits: Dict[str, bool]) -> List[CategoryStatus]:
    """
    Collect the edits that differ from the stored flags.

    Args:
        categories (List[CategoryStatus]): Categories as loaded from the store
        edits (Dict[str, bool]): Category id to edited flag

    Returns:
        List[CategoryStatus]: Changed categories with their new flags
    """
    stored = {category.id: category.is_blacklisted for category in categories}
    return [
        CategoryStatus(id=category_id, is_blacklisted=flag)
        for category_id, flag in edits.items()
        if category_id in stored and stored[category_id] != flag
    ]


def create_blacklist_editor(repository: BlacklistRepository) -> None:
    """
    Display every known category with an editable blacklist flag.

    Args:
        repository (BlacklistRepository): Blacklist store access
    """
    st.write("#### Category Blacklist")

    reload = st.button("Reload Categories")
    if reload or 'editor_categories' not in st.session_state:
        st.session_state.editor_categories = repository.list_all_with_status()
        st.session_state.editor_edits = {}

    categories = st.session_state.editor_categories
    edits = st.session_state.editor_edits

    if not categories:
        st.info("No categories in the blacklist store.")
        return

    term = st.text_input("Search categories", key="editor_search")
    matches = filter_categories(categories, term)
    page = paginate(matches, st.session_state.get("editor_page", 1), EDITOR_PAGE_SIZE)

    st.caption(f"{len(matches)} of {len(categories)} categories · page {page.page} of {max(1, page.total_pages)}")

    columns = st.columns(EDITOR_COLUMNS)
    for index, category in enumerate(page.items):
        checked = columns[index % EDITOR_COLUMNS].checkbox(
            category.id,
            value=edits.get(category.id, category.is_blacklisted),
            key=f"editor_{category.id}_{int(category.is_blacklisted)}"
        )
        edits[category.id] = checked

    prev_col, next_col, save_col = st.columns(3)
    if prev_col.button("Previous", disabled=page.page <= 1):
        st.session_state.editor_page = page.page - 1
        st.rerun()
    if next_col.button("Next", disabled=page.page >= page.total_pages):
        st.session_state.editor_page = page.page + 1
        st.rerun()

    updates = pending_updates(categories, edits)
    if save_col.button(f"Save {len(updates)} Changes", type="primary", disabled=not updates):
        with st.spinner("Saving blacklist changes..."):
            result: BatchUpdateResult = repository.set_batch_status(updates)
        if result.failed:
            st.error(f"Saved {result.success} changes, {result.failed} failed: {', '.join(result.errors or [])}")
        else:
            st.success(f"Saved {result.success} changes")
        st.session_state.editor_categories = repository.list_all_with_status()
        st.session_state.editor_edits = {}
