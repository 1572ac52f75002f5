"""
SKU specification engine: catalog migration, SKU generation, sheet
validation and bulk recalculation.
"""

from skugen.schemas import AppSettings, CellData, ColumnDef, ColumnType, SheetConfig, SheetType, Specification, SpecValue
from skugen.sku_generator import generate_sku
from skugen.migration import migrate_config_sheet_data
from skugen.validation import ValidationError, ValidationErrorType, validate_sheet
from skugen.recalculation import recalculate_all
from skugen.workbook import Workbook

__all__ = [
    "AppSettings",
    "CellData",
    "ColumnDef",
    "ColumnType",
    "SheetConfig",
    "SheetType",
    "Specification",
    "SpecValue",
    "ValidationError",
    "ValidationErrorType",
    "Workbook",
    "generate_sku",
    "migrate_config_sheet_data",
    "recalculate_all",
    "validate_sheet",
]
