"""
Category name normalization for blacklist keys.
"""
from typing import Any

# Characters stripped from category names before they are used as store keys
_STRIPPED_CHARACTERS = (" ", "&", "'", ",")
_STRIP_TABLE = str.maketrans("", "", "".join(_STRIPPED_CHARACTERS))


def normalize_category_name(category: Any) -> str:
    """
    Canonicalize a category name for blacklist storage and lookup.

    Removes spaces, ampersands, apostrophes and commas. No case folding is
    applied, so "Table cloths" and "Tablecloths" collapse to the same key
    but "tablecloths" does not.

    Args:
        category (Any): Raw category name

    Returns:
        str: The normalized name, or an empty string for non-string input
    """
    if not category or not isinstance(category, str):
        return ""

    return category.translate(_STRIP_TABLE)


def matches_category_search(category_id: str, term: str) -> bool:
    """
    Check whether a category matches an editor search term.

    Both the raw id and its normalized form are compared, case-insensitively,
    so "home & kitchen" finds "HomeKitchen".

    Args:
        category_id (str): Category id as stored
        term (str): Search term typed by the operator

    Returns:
        bool: True if the category matches (an empty term matches everything)
    """
    if not term:
        return True

    if term.lower() in category_id.lower():
        return True

    normalized_term = normalize_category_name(term).lower()
    return bool(normalized_term) and normalized_term in normalize_category_name(category_id).lower()
