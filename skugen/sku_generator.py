"""
SKU Generator - Composes a SKU code from the values selected for a row.
"""

from typing import List, Optional

from skugen.schemas import AppSettings, SelectedValues, Specification


def sort_specifications(specifications: List[Specification]) -> List[Specification]:
    """Return specifications ordered by their order field (stable, input untouched)."""
    return sorted(specifications or [], key=lambda spec: spec.order)


def generate_sku(
    selected: Optional[SelectedValues],
    specifications: List[Specification],
    settings: Optional[AppSettings] = None,
) -> str:
    """
    Generate a SKU code from selected specification values.

    Specifications without a selection, or whose selected label is not one of
    their values, contribute nothing. Prefix and suffix are only applied when
    at least one fragment was produced.

    Args:
        selected: Map of specification id to selected display value
        specifications: Catalog snapshot
        settings: Delimiter, prefix and suffix

    Returns:
        Generated SKU string, or empty string if nothing matched
    """
    if not selected:
        return ""
    settings = settings or AppSettings()

    fragments: List[str] = []
    for spec in sort_specifications(specifications):
        label = selected.get(spec.id)
        if label is None:
            continue
        value = spec.find_value(label)
        if value is not None:
            fragments.append(value.sku_fragment)

    if not fragments:
        return ""

    return f"{settings.prefix}{settings.delimiter.join(fragments)}{settings.suffix}"
