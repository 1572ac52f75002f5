"""
Config Sheet Parser - Reads the three-column specification table.

Layout: row 0 is the header, every following row binds one value label
and its SKU code to a specification name.

    Specification | Value | SKU Code
    Color         | Red   | R
    Color         | Blue  | B
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from skugen.schemas import CellData, Specification
from skugen.sheet_sku import cell_text, make_cell
from skugen.sku_generator import sort_specifications

logger = logging.getLogger(__name__)

CONFIG_SHEET_HEADERS = ["Specification", "Value", "SKU Code"]


@dataclass
class ParsedSpecValue:
    label: str
    sku_code: str


@dataclass
class ParsedSpec:
    """All values sharing one specification name, in row order."""
    name: str
    values: List[ParsedSpecValue] = field(default_factory=list)


def parse_config_sheet(data: Sequence[Sequence[Any]]) -> List[ParsedSpec]:
    """
    Parse config sheet rows into specifications grouped by name.

    Rows with fewer than three cells, an empty specification name or an empty
    value label are skipped. An empty SKU code is allowed.

    Args:
        data: Cell grid including the header row

    Returns:
        Parsed specifications in first-seen order (empty for header-only data)
    """
    if not data or len(data) <= 1:
        return []

    groups: Dict[str, ParsedSpec] = {}
    for row_idx in range(1, len(data)):
        row = data[row_idx]
        if not row or len(row) < 3:
            logger.debug(f"Skipping short config row {row_idx}")
            continue

        spec_name = cell_text(row[0])
        label = cell_text(row[1])
        sku_code = cell_text(row[2])

        if not spec_name or not label:
            logger.debug(f"Skipping config row {row_idx}: missing specification or value")
            continue

        if spec_name not in groups:
            groups[spec_name] = ParsedSpec(name=spec_name)
        groups[spec_name].values.append(ParsedSpecValue(label=label, sku_code=sku_code))

    return list(groups.values())


def get_spec_values(specs: List[ParsedSpec], spec_name: str) -> List[ParsedSpecValue]:
    for spec in specs:
        if spec.name == spec_name:
            return spec.values
    return []


def lookup_sku_code(specs: List[ParsedSpec], spec_name: str, label: str) -> str:
    """Return the SKU code for a specification/value pair, or empty string."""
    for value in get_spec_values(specs, spec_name):
        if value.label == label:
            return value.sku_code
    return ""


def get_spec_names(specs: List[ParsedSpec]) -> List[str]:
    return [spec.name for spec in specs]


def grid_from_dataframe(df: pd.DataFrame, include_header: bool = True) -> List[List[CellData]]:
    """
    Convert a DataFrame into a config cell grid.

    When ``include_header`` is set the DataFrame's column labels become row 0,
    which matches frames read with the default ``header=0``. Frames read with
    ``header=None`` already carry the header as their first row.
    """
    grid: List[List[CellData]] = []
    if include_header:
        grid.append([make_cell(str(col)) for col in df.columns])

    for _, row in df.iterrows():
        cells = []
        for val in row.tolist():
            if val is None or (pd.api.types.is_scalar(val) and pd.isna(val)):
                cells.append(CellData())
                continue
            # numpy scalars -> builtins; anything else non-scalar becomes text
            if hasattr(val, "item") and not isinstance(val, (str, bytes)):
                val = val.item()
            if not isinstance(val, (str, int, float, bool)):
                val = str(val)
            cells.append(make_cell(val))
        grid.append(cells)
    return grid


def catalog_to_config_grid(specifications: List[Specification]) -> List[List[CellData]]:
    """Render a catalog back into the three-column config layout."""
    grid = [[make_cell(header) for header in CONFIG_SHEET_HEADERS]]
    for spec in sort_specifications(specifications):
        for value in spec.values:
            grid.append([
                make_cell(spec.name),
                make_cell(value.display_value),
                make_cell(value.sku_fragment),
            ])
    return grid


def config_grid_to_dataframe(grid: Sequence[Sequence[Any]]) -> Optional[pd.DataFrame]:
    """Turn a config grid into a DataFrame with the standard column labels."""
    if not grid:
        return None
    rows = []
    for row in grid[1:]:
        if not row:
            continue
        texts = [cell_text(cell) for cell in row[:3]]
        rows.append(texts + [""] * (3 - len(texts)))
    return pd.DataFrame(rows, columns=CONFIG_SHEET_HEADERS)
