"""
SKU Recalculation - Regenerates the SKU column of data sheets.

Whenever the catalog or the settings are replaced every generated SKU may be
stale: fragments can change and the composition order can shift. The
controller therefore recomputes every row of every data sheet in one pass
and writes only the SKU column back through the sheet access port.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence

from skugen.schemas import AppSettings, CellData, ColumnDef, ColumnType, SheetConfig, SheetType, Specification
from skugen.sheet_sku import cell_text, find_sku_column, generate_row_sku, make_cell

logger = logging.getLogger(__name__)


class SheetDataAccess(Protocol):
    """Read/write access to sheets, implemented by the hosting application."""

    def get_data_sheets(self) -> List[SheetConfig]:
        ...

    def set_sheet_column_values(self, sheet_id: str, column_index: int, values: Sequence[Any]) -> None:
        ...


class InMemorySheetStore:
    """Sheet store keeping every sheet in a list, in insertion order."""

    def __init__(self, sheets: Optional[Iterable[SheetConfig]] = None):
        self.sheets: List[SheetConfig] = list(sheets or [])

    def add_sheet(self, sheet: SheetConfig) -> None:
        if self.get_sheet(sheet.id) is not None:
            raise ValueError(f"Sheet {sheet.id} already exists")
        self.sheets.append(sheet)

    def get_sheet(self, sheet_id: str) -> Optional[SheetConfig]:
        for sheet in self.sheets:
            if sheet.id == sheet_id:
                return sheet
        return None

    def _require_sheet(self, sheet_id: str) -> SheetConfig:
        sheet = self.get_sheet(sheet_id)
        if sheet is None:
            raise KeyError(f"Sheet {sheet_id} not found")
        return sheet

    def get_data_sheets(self) -> List[SheetConfig]:
        return [sheet for sheet in self.sheets if sheet.type == SheetType.DATA]

    def set_cell(self, sheet_id: str, row_index: int, column_index: int, value: Any) -> None:
        sheet = self._require_sheet(sheet_id)
        while len(sheet.data) <= row_index:
            sheet.data.append([])
        row = sheet.data[row_index]
        while len(row) <= column_index:
            row.append(None)
        row[column_index] = value if isinstance(value, CellData) else make_cell(value)

    def set_sheet_column_values(self, sheet_id: str, column_index: int, values: Sequence[Any]) -> None:
        """Replace one column's cells; values[i] goes to row i."""
        sheet = self._require_sheet(sheet_id)
        if len(values) != len(sheet.data):
            raise ValueError(
                f"Sheet {sheet_id} has {len(sheet.data)} rows but {len(values)} values were given"
            )
        for row_index, value in enumerate(values):
            self.set_cell(sheet_id, row_index, column_index, value)


def recalculate_sheet_codes(
    sheet: SheetConfig,
    specifications: List[Specification],
    settings: AppSettings,
) -> List[str]:
    """Compute the SKU of every row of a sheet without writing anything."""
    return [generate_row_sku(row or [], sheet.columns, specifications, settings) for row in sheet.data]


def recalculate_all(
    store: SheetDataAccess,
    specifications: List[Specification],
    settings: AppSettings,
) -> int:
    """
    Regenerate the SKU column of every data sheet.

    Args:
        store: Sheet access port
        specifications: Committed catalog snapshot
        settings: Committed settings snapshot

    Returns:
        Number of rows whose SKU cell was rewritten
    """
    rewritten = 0
    for sheet in store.get_data_sheets():
        if sheet.type != SheetType.DATA or not sheet.data:
            continue
        sku_column = find_sku_column(sheet.columns)
        if sku_column == -1:
            logger.warning(f"Sheet {sheet.name!r} has no SKU column, skipping recalculation")
            continue

        codes = recalculate_sheet_codes(sheet, specifications, settings)
        store.set_sheet_column_values(sheet.id, sku_column, codes)
        rewritten += len(codes)

    logger.info(f"Recalculated {rewritten} SKUs")
    return rewritten


def find_changed_rows(
    old_data: Sequence[Sequence[Any]],
    new_data: Sequence[Sequence[Any]],
    columns: Sequence[ColumnDef],
) -> List[int]:
    """
    Find rows whose non-SKU cells differ between two versions of a sheet.

    Added, removed and resized rows count as changed. Cell text is compared
    after trimming.
    """
    changed: List[int] = []
    for row_idx in range(max(len(old_data), len(new_data))):
        old_row = old_data[row_idx] if row_idx < len(old_data) else None
        new_row = new_data[row_idx] if row_idx < len(new_data) else None
        if old_row is None or new_row is None or len(old_row) != len(new_row):
            changed.append(row_idx)
            continue

        for col_idx in range(len(new_row)):
            if col_idx < len(columns) and columns[col_idx].type == ColumnType.SKU:
                continue
            if cell_text(old_row[col_idx]) != cell_text(new_row[col_idx]):
                changed.append(row_idx)
                break
    return changed


def process_auto_sku(
    old_data: Sequence[Sequence[Any]],
    new_data: List[List[Any]],
    columns: Sequence[ColumnDef],
    specifications: List[Specification],
    settings: AppSettings,
) -> List[int]:
    """
    Regenerate SKUs only for rows edited between ``old_data`` and ``new_data``.

    ``new_data`` is updated in place. Returns the rows that were regenerated.
    """
    sku_column = find_sku_column(columns)
    if sku_column == -1:
        return []

    updated = []
    for row_idx in find_changed_rows(old_data, new_data, columns):
        if row_idx >= len(new_data) or not new_data[row_idx]:
            continue
        row = new_data[row_idx]
        while len(row) <= sku_column:
            row.append(None)
        row[sku_column] = make_cell(generate_row_sku(row, columns, specifications, settings))
        updated.append(row_idx)
    return updated


@dataclass(frozen=True)
class ValueRename:
    spec_id: str
    value_id: str
    old_label: str
    new_label: str


def has_sku_fragment_changed(previous: List[Specification], current: List[Specification]) -> bool:
    """True when a value present in both snapshots got a different fragment."""
    before = {v.id: v.sku_fragment for spec in previous for v in spec.values}
    for spec in current:
        for value in spec.values:
            old = before.get(value.id)
            if old is not None and old != value.sku_fragment:
                return True
    return False


def find_value_renames(previous: List[Specification], current: List[Specification]) -> List[ValueRename]:
    """List values (matched by id) whose display label changed."""
    before: Dict[str, str] = {v.id: v.display_value for spec in previous for v in spec.values}
    renames = []
    for spec in current:
        for value in spec.values:
            old = before.get(value.id)
            if old is not None and old != value.display_value:
                renames.append(ValueRename(spec.id, value.id, old, value.display_value))
    return renames


def propagate_value_renames(store: InMemorySheetStore, renames: List[ValueRename]) -> int:
    """
    Rewrite cells still holding a renamed label to the new label.

    Only spec columns bound to the renamed value's specification are touched,
    so free text that happens to contain the old label is left alone.
    Returns the number of cells rewritten.
    """
    if not renames:
        return 0

    by_spec: Dict[str, Dict[str, str]] = {}
    for rename in renames:
        by_spec.setdefault(rename.spec_id, {})[rename.old_label] = rename.new_label

    rewritten = 0
    for sheet in store.get_data_sheets():
        for col_idx, column in enumerate(sheet.columns):
            if column.type != ColumnType.SPEC or column.spec_id not in by_spec:
                continue
            mapping = by_spec[column.spec_id]
            for row_idx, row in enumerate(sheet.data):
                if col_idx >= len(row):
                    continue
                label = cell_text(row[col_idx])
                if label in mapping:
                    store.set_cell(sheet.id, row_idx, col_idx, mapping[label])
                    rewritten += 1

    if rewritten:
        logger.info(f"Propagated {len(renames)} value renames to {rewritten} cells")
    return rewritten
