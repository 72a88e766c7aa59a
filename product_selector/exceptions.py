"""
Error taxonomy for the product selector.

Ingestion errors are all-or-nothing at the file level. Coercion and store
errors never leave the layer that raised them: they are logged and resolved
to a safe default.
"""


class ProductSelectorError(Exception):
    """Base class for errors surfaced to the caller."""


class ValidationError(ProductSelectorError):
    """The upload violates the pre-parse contract (extension or size)."""


class ParseError(ProductSelectorError):
    """The file cannot be decoded as a spreadsheet or has no usable header row."""


class FieldCoercionWarning(ValueError):
    """
    A single cell could not be coerced to its field type.

    Raised only by the strict converters in ``utils.conversion``; the
    permissive wrappers catch it and fall back to the field default.
    """

    def __init__(self, value, target: str):
        super().__init__(f"Cannot coerce {value!r} to {target}")
        self.value = value
        self.target = target


class StoreUnavailable(ProductSelectorError):
    """The blacklist store is unconfigured or unreachable."""
