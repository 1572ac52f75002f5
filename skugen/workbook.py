"""
Workbook - owns the committed catalog, settings and sheets.

Catalog and settings are replaced as whole snapshots. Each commit
recalculates every SKU against the new snapshot and re-validates the data
sheets, so callers never observe SKUs derived from a mix of old and new
configuration.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from skugen.config import load_default_settings
from skugen.ids import IdGenerator, uuid_ids
from skugen.migration import migrate_config_sheet_data
from skugen.recalculation import (
    InMemorySheetStore,
    find_value_renames,
    propagate_value_renames,
    recalculate_all,
)
from skugen.sample_data import create_sample_sheets, sample_config_grid
from skugen.schemas import AppSettings, ColumnType, SheetConfig, Specification
from skugen.validation import ValidationError, validate_sheet

logger = logging.getLogger(__name__)


class Workbook:
    def __init__(
        self,
        specifications: Optional[List[Specification]] = None,
        settings: Optional[AppSettings] = None,
        sheets: Optional[Iterable[SheetConfig]] = None,
    ):
        self.specifications: List[Specification] = list(specifications or [])
        self.settings: AppSettings = settings or load_default_settings()
        self.store = InMemorySheetStore(sheets)

    def validate_all(self) -> Dict[str, List[ValidationError]]:
        """Validate every data sheet; returns errors keyed by sheet id."""
        return {
            sheet.id: validate_sheet(sheet, self.specifications)
            for sheet in self.store.get_data_sheets()
        }

    def recalculate(self) -> Dict[str, List[ValidationError]]:
        recalculate_all(self.store, self.specifications, self.settings)
        return self.validate_all()

    def commit_catalog(
        self,
        specifications: List[Specification],
        propagate_renames: bool = True,
    ) -> Dict[str, List[ValidationError]]:
        """
        Replace the catalog, then recalculate and re-validate.

        With ``propagate_renames`` a value whose label changed keeps its
        selections: cells holding the old label are rewritten to the new one.
        Without it those cells are reported as missing values.
        """
        previous = self.specifications
        self.specifications = list(specifications)

        if propagate_renames:
            propagate_value_renames(self.store, find_value_renames(previous, self.specifications))

        return self.recalculate()

    def save_settings(self, settings: AppSettings) -> Dict[str, List[ValidationError]]:
        self.settings = settings
        return self.recalculate()

    def update_settings(self, **changes: str) -> Dict[str, List[ValidationError]]:
        """Apply a partial settings change; raises pydantic.ValidationError on bad input."""
        settings = AppSettings.model_validate({**self.settings.model_dump(), **changes})
        return self.save_settings(settings)

    def import_config_sheet(self, data: Sequence[Sequence[Any]], new_id: IdGenerator = uuid_ids) -> Optional[Dict[str, List[ValidationError]]]:
        """
        Replace the catalog with one migrated from a config table.

        Returns None and leaves the catalog untouched when the table is empty.
        """
        specifications = migrate_config_sheet_data(data, new_id)
        if specifications is None:
            return None
        self._rebind_columns(specifications)
        # Fresh ids never match the old ones, so there is nothing to propagate
        return self.commit_catalog(specifications, propagate_renames=False)

    def _rebind_columns(self, specifications: List[Specification]) -> None:
        """Point spec columns whose specification vanished at the same-named one."""
        known = {spec.id for spec in specifications}
        by_name = {spec.name: spec.id for spec in specifications}
        for sheet in self.store.get_data_sheets():
            for column in sheet.columns:
                if column.type != ColumnType.SPEC or column.spec_id in known:
                    continue
                if column.header in by_name:
                    column.spec_id = by_name[column.header]

    def load_sample_data(self, new_id: IdGenerator = uuid_ids) -> Dict[str, List[ValidationError]]:
        """Populate an empty workbook with the sample catalog and sheets."""
        specifications = migrate_config_sheet_data(sample_config_grid(), new_id) or []
        config_sheet, product_sheet = create_sample_sheets(specifications, new_id)
        self.store.add_sheet(config_sheet)
        self.store.add_sheet(product_sheet)
        logger.info("Loaded sample catalog and products")
        return self.commit_catalog(specifications, propagate_renames=False)
