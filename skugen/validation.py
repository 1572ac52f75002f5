"""
Sheet Validation - Flags selections that no longer exist in the catalog
and rows whose generated SKUs collide.

Errors are returned in a fixed order: every missing-value error (by row,
then column) followed by every duplicate-sku error (by row). Consumers such
as the validation panel rely on that order.
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Set, Union

import pandas as pd

from skugen.schemas import ColumnDef, ColumnType, SheetConfig, Specification
from skugen.sheet_sku import cell_text, find_sku_column, row_has_selection

logger = logging.getLogger(__name__)


class ValidationErrorType(str, Enum):
    DUPLICATE_SKU = "duplicate-sku"
    MISSING_VALUE = "missing-value"


@dataclass
class ValidationError:
    """A problem located at a sheet row (and column, when cell-specific)."""
    type: ValidationErrorType
    message: str
    row: int
    column: Optional[int] = None


def _rows_in_scope(rows: Sequence[Sequence[Any]], columns: Optional[Sequence[ColumnDef]]) -> List[int]:
    if columns is None:
        return [i for i, row in enumerate(rows) if row]
    return [i for i, row in enumerate(rows) if row and row_has_selection(row, columns)]


def find_missing_values(
    rows: Sequence[Sequence[Any]],
    columns: Sequence[ColumnDef],
    specifications: List[Specification],
) -> List[ValidationError]:
    """Report every spec cell whose label is not a value of its specification."""
    specs_by_id = {spec.id: spec for spec in specifications}
    valid_labels = {spec.id: {v.display_value for v in spec.values} for spec in specifications}

    errors: List[ValidationError] = []
    for row_idx in _rows_in_scope(rows, columns):
        row = rows[row_idx]
        for col_idx, column in enumerate(columns):
            if column.type != ColumnType.SPEC or col_idx >= len(row):
                continue
            label = cell_text(row[col_idx])
            if not label:
                continue

            spec = specs_by_id.get(column.spec_id or "")
            if spec is None:
                message = f'Value "{label}" references a specification that no longer exists'
            elif label not in valid_labels[spec.id]:
                message = f'Value "{label}" does not exist in specification "{spec.name}"'
            else:
                continue

            errors.append(ValidationError(
                type=ValidationErrorType.MISSING_VALUE,
                message=message,
                row=row_idx,
                column=col_idx,
            ))
    return errors


def find_duplicate_skus(
    rows: Sequence[Sequence[Any]],
    sku_column: int = 0,
    columns: Optional[Sequence[ColumnDef]] = None,
) -> List[ValidationError]:
    """
    Report one error per row sharing a non-empty SKU with another row.

    Args:
        rows: Sheet data rows
        sku_column: Index of the generated SKU column
        columns: When given, rows without any selection are left out

    Returns:
        Duplicate errors in row order, each listing the full conflicting set
    """
    if sku_column < 0:
        return []

    groups: Dict[str, List[int]] = {}
    for row_idx in _rows_in_scope(rows, columns):
        row = rows[row_idx]
        sku = cell_text(row[sku_column]) if sku_column < len(row) else ""
        if sku:
            groups.setdefault(sku, []).append(row_idx)

    errors: List[ValidationError] = []
    for sku, members in groups.items():
        if len(members) < 2:
            continue
        listed = ", ".join(str(r) for r in members)
        for row_idx in members:
            errors.append(ValidationError(
                type=ValidationErrorType.DUPLICATE_SKU,
                message=f'Duplicate SKU "{sku}" found in rows {listed}',
                row=row_idx,
                column=sku_column,
            ))

    errors.sort(key=lambda e: e.row)
    return errors


def validate_sheet(
    sheet: Union[SheetConfig, Sequence[Sequence[Any]]],
    specifications: List[Specification],
    columns: Optional[Sequence[ColumnDef]] = None,
) -> List[ValidationError]:
    """
    Validate a sheet against the catalog.

    Args:
        sheet: A SheetConfig, or bare rows together with ``columns``
            (bare rows without ``columns`` cannot be validated)
        specifications: Catalog snapshot
        columns: Column definitions when ``sheet`` is bare rows

    Returns:
        Missing-value errors followed by duplicate-sku errors
    """
    if isinstance(sheet, SheetConfig):
        rows = sheet.data
        columns = sheet.columns if columns is None else columns
    else:
        rows = sheet or []
    columns = list(columns or [])

    if not rows:
        return []
    if not columns:
        logger.warning(f"Skipping validation of {len(rows)} rows without column definitions")
        return []

    missing = find_missing_values(rows, columns, specifications)
    duplicates = find_duplicate_skus(rows, find_sku_column(columns), columns)
    if missing or duplicates:
        logger.debug(f"Validation found {len(missing)} missing values and {len(duplicates)} duplicate SKUs")
    return missing + duplicates


def summarize_errors(errors: List[ValidationError]) -> Dict[str, int]:
    """Count errors by type for summary displays."""
    missing = sum(1 for e in errors if e.type == ValidationErrorType.MISSING_VALUE)
    duplicates = sum(1 for e in errors if e.type == ValidationErrorType.DUPLICATE_SKU)
    return {"missing_values": missing, "duplicate_skus": duplicates, "total": len(errors)}


def duplicate_rows(errors: List[ValidationError]) -> Set[int]:
    """Rows whose SKU cell should be highlighted as a duplicate."""
    return {e.row for e in errors if e.type == ValidationErrorType.DUPLICATE_SKU}


def errors_to_frame(errors: List[ValidationError]) -> pd.DataFrame:
    """Tabular report of validation errors, one row per error."""
    records = []
    for error in errors:
        record = asdict(error)
        record["type"] = error.type.value
        records.append(record)
    frame = pd.DataFrame(records, columns=["type", "row", "column", "message"])
    return frame.astype({"row": "Int64", "column": "Int64"})
