"""
Product list components for the Streamlit UI.
"""
from typing import List
import streamlit as st
from product_selector.analysis.filter_engine import is_product_blacklisted
from product_selector.analysis.pagination import ELLIPSIS, paginate, page_numbers
from product_selector.config.app_config import (
    DEFAULT_PAGE_SIZE,
    HIGH_RATING_THRESHOLD,
    HIGH_SALES_THRESHOLD,
    PAGE_SIZE_OPTIONS,
)
from product_selector.data.models.filters import FilterStatistics
from product_selector.data.models.product import ProductRecord


def create_metrics(stats: FilterStatistics) -> None:
    """
    Display summary counts as Streamlit metrics.

    Args:
        stats (FilterStatistics): Statistics for the filtered view
    """
    metrics_container = st.container()
    col1, col2, col3, col4, col5 = metrics_container.columns(5)

    col1.metric("Total Products", f"{stats.total:,}")
    col2.metric("Matching Filters", f"{stats.filtered:,}")
    col3.metric("Blacklisted", f"{stats.excluded_by_blacklist:,}")
    col4.metric(f"Rating ≥ {HIGH_RATING_THRESHOLD}", f"{stats.high_rating:,}")
    col5.metric(f"Sales ≥ {HIGH_SALES_THRESHOLD}", f"{stats.high_sales:,}")


def create_product_card(product: ProductRecord, is_blacklisted: bool, key: str) -> bool:
    """
    Display one product with a blacklist toggle for its sub-category.

    Args:
        product (ProductRecord): Product to display
        is_blacklisted (bool): Current blacklist flag of its sub-category
        key (str): Unique widget key; exports may repeat an ASIN

    Returns:
        bool: The toggle value
    """
    with st.container(border=True):
        image_col, body_col = st.columns([1, 4])
        if product.main_image:
            image_col.image(product.main_image, width=120)

        if product.product_url:
            body_col.markdown(f"**[{product.title or product.asin}]({product.product_url})**")
        else:
            body_col.markdown(f"**{product.title or product.asin}**")
        body_col.caption(
            f"{product.asin} · {product.main_category} / {product.sub_category} · "
            f"{product.shipping_method} · {product.seller_location}"
        )
        body_col.write(
            f"${product.price:,.2f} · {product.monthly_sales:,} sold/month · "
            f"${product.monthly_revenue:,.2f}/month · ★ {product.rating} ({product.review_count:,}) · "
            f"launched {product.launch_date or 'n/a'}"
        )
        return body_col.checkbox(
            f"Blacklist '{product.sub_category}'",
            value=is_blacklisted,
            key=key,
            disabled=not product.sub_category
        )


def create_page_controls(current: int, total_pages: int, key: str) -> int:
    """
    Display the page number strip.

    Args:
        current (int): Current page
        total_pages (int): Total pages
        key (str): Key prefix for the buttons

    Returns:
        int: The page to show next
    """
    if total_pages <= 1:
        return current

    entries = page_numbers(current, total_pages)
    columns = st.columns(len(entries) + 2)
    selected = current

    if columns[0].button("‹", key=f"{key}_prev", disabled=current <= 1):
        selected = current - 1
    for column, entry in zip(columns[1:-1], entries):
        if entry == ELLIPSIS:
            column.write(ELLIPSIS)
        elif column.button(str(entry), key=f"{key}_page_{entry}", type="primary" if entry == current else "secondary"):
            selected = entry
    if columns[-1].button("›", key=f"{key}_next", disabled=current >= total_pages):
        selected = current + 1

    return selected


def create_product_list(products: List[ProductRecord], blacklist: dict, on_toggle) -> None:
    """
    Display the filtered products, one page at a time.

    Args:
        products (List[ProductRecord]): Filtered products
        blacklist (dict): Category name to blacklist flag
        on_toggle: Called with (category, flag) when a toggle changes; returns True on success
    """
    if not products:
        st.info("No products match the current filters.")
        return

    page_size = st.selectbox(
        "Products per page",
        options=PAGE_SIZE_OPTIONS,
        index=PAGE_SIZE_OPTIONS.index(DEFAULT_PAGE_SIZE) if DEFAULT_PAGE_SIZE in PAGE_SIZE_OPTIONS else 0,
        key="product_page_size"
    )
    page = paginate(products, st.session_state.get("product_page", 1), page_size)

    st.caption(f"Showing {page.start_index}-{page.end_index} of {page.total_items}")
    for offset, product in enumerate(page.items):
        current = is_product_blacklisted(product, blacklist)
        # Flag in the key resets cards sharing a sub-category once one of them is toggled
        key = f"blacklist_{page.start_index + offset}_{product.asin}_{int(current)}"
        toggled = create_product_card(product, current, key)
        if toggled != current and on_toggle(product.sub_category, toggled):
            st.rerun()

    next_page = create_page_controls(page.page, page.total_pages, "products")
    if next_page != page.page:
        st.session_state.product_page = next_page
        st.rerun()
