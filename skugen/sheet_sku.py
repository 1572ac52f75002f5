"""
Row-level SKU helpers: reading cells, mapping columns to specifications
and generating the SKU for a single sheet row.
"""

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from skugen.ids import IdGenerator, uuid_ids
from skugen.schemas import (
    AppSettings,
    CellData,
    CellValue,
    ColumnDef,
    ColumnType,
    SelectedValues,
    Specification,
)
from skugen.sku_generator import generate_sku

SKU_HEADER = "SKU"


def cell_text(cell: Any) -> str:
    """Extract the trimmed text of a cell (raw value first, then display text)."""
    if cell is None:
        return ""
    if isinstance(cell, CellData):
        raw, display = cell.v, cell.m
    elif isinstance(cell, dict):
        raw, display = cell.get("v"), cell.get("m")
    else:
        raw, display = cell, None

    value = raw if raw is not None else display
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value).strip()


def make_cell(value: CellValue) -> CellData:
    text = "" if value is None else str(value)
    return CellData(v=value, m=text)


def find_sku_column(columns: Sequence[ColumnDef]) -> int:
    for index, column in enumerate(columns):
        if column.type == ColumnType.SKU:
            return index
    return -1


def selected_values_for_row(row: Sequence[Any], columns: Sequence[ColumnDef]) -> SelectedValues:
    """Collect spec id -> label for every spec column holding a value."""
    selected: Dict[str, str] = {}
    for index, column in enumerate(columns):
        if column.type != ColumnType.SPEC or not column.spec_id:
            continue
        text = cell_text(row[index]) if index < len(row) else ""
        if text:
            selected[column.spec_id] = text
    return selected


def row_has_selection(row: Sequence[Any], columns: Sequence[ColumnDef]) -> bool:
    return bool(selected_values_for_row(row, columns))


def generate_row_sku(
    row: Sequence[Any],
    columns: Sequence[ColumnDef],
    specifications: List[Specification],
    settings: Optional[AppSettings] = None,
) -> str:
    """Generate the SKU for one sheet row; only spec columns contribute."""
    return generate_sku(selected_values_for_row(row, columns), specifications, settings)


def columns_from_header(
    header_row: Sequence[Any],
    specifications: List[Specification],
    new_id: IdGenerator = uuid_ids,
) -> List[ColumnDef]:
    """
    Build column definitions for a sheet that only carries a header row.

    Column 0 is the SKU column. Headers equal to a specification name are
    bound to that specification, everything else is free text.
    """
    by_name = {spec.name: spec for spec in specifications}
    columns: List[ColumnDef] = []
    for index, cell in enumerate(header_row):
        header = cell_text(cell)
        if index == 0:
            columns.append(ColumnDef(id=new_id(), type=ColumnType.SKU, header=header or SKU_HEADER))
            continue
        spec = by_name.get(header)
        if spec is not None:
            columns.append(ColumnDef(id=new_id(), type=ColumnType.SPEC, spec_id=spec.id, header=header))
        else:
            columns.append(ColumnDef(id=new_id(), type=ColumnType.FREE, header=header))
    return columns
