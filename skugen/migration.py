"""
Migration of config sheet tables into the specification catalog.
"""

import logging
from typing import Any, List, Optional, Sequence

import pandas as pd

from skugen.config_sheet import ParsedSpec, grid_from_dataframe, parse_config_sheet
from skugen.ids import IdGenerator, uuid_ids
from skugen.schemas import Specification, SpecValue

logger = logging.getLogger(__name__)


def convert_parsed_specs(parsed_specs: List[ParsedSpec], new_id: IdGenerator = uuid_ids) -> List[Specification]:
    """Convert parsed specs to catalog format, assigning order by position."""
    return [
        Specification(
            id=new_id(),
            name=spec.name,
            order=index,
            values=[
                SpecValue(id=new_id(), display_value=value.label, sku_fragment=value.sku_code)
                for value in spec.values
            ],
        )
        for index, spec in enumerate(parsed_specs)
    ]


def migrate_config_sheet_data(
    data: Sequence[Sequence[Any]],
    new_id: IdGenerator = uuid_ids,
) -> Optional[List[Specification]]:
    """
    Migrate config sheet data to the catalog format.

    Returns:
        The migrated specifications, or None when the table has no usable rows
    """
    parsed = parse_config_sheet(data)
    if not parsed:
        logger.info("Config sheet has no data rows, nothing to migrate")
        return None

    specifications = convert_parsed_specs(parsed, new_id)
    logger.info(
        f"Migrated {len(specifications)} specifications "
        f"({sum(len(s.values) for s in specifications)} values) from config sheet"
    )
    return specifications


def migrate_config_frame(
    df: pd.DataFrame,
    new_id: IdGenerator = uuid_ids,
    include_header: bool = True,
) -> Optional[List[Specification]]:
    """Migrate a config table that was loaded into a DataFrame."""
    return migrate_config_sheet_data(grid_from_dataframe(df, include_header), new_id)
