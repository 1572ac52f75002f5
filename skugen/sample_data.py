"""
Sample data for first launch: a config table with Color, Size and Material
and a product sheet demonstrating the generated SKUs.
"""

from typing import List, Tuple

from skugen.config_sheet import CONFIG_SHEET_HEADERS
from skugen.ids import IdGenerator, uuid_ids
from skugen.schemas import CellData, ColumnDef, ColumnType, SheetConfig, SheetType, Specification
from skugen.sheet_sku import SKU_HEADER, make_cell

SAMPLE_CONFIG_ROWS = [
    ("Color", "Red", "R"),
    ("Color", "Blue", "B"),
    ("Color", "Green", "G"),
    ("Size", "Small", "S"),
    ("Size", "Medium", "M"),
    ("Size", "Large", "L"),
    ("Material", "Cotton", "COT"),
    ("Material", "Polyester", "POL"),
    ("Material", "Wool", "WOL"),
]

# SKU, Color, Size, Material
SAMPLE_PRODUCTS = [
    ("R-S-COT", "Red", "Small", "Cotton"),
    ("B-M-POL", "Blue", "Medium", "Polyester"),
    ("G-L-WOL", "Green", "Large", "Wool"),
    ("R-L-COT", "Red", "Large", "Cotton"),
    ("B-S-POL", "Blue", "Small", "Polyester"),
]


def sample_config_grid() -> List[List[CellData]]:
    """Header row plus nine specification entries (three per specification)."""
    grid = [[make_cell(h) for h in CONFIG_SHEET_HEADERS]]
    grid.extend([make_cell(c) for c in row] for row in SAMPLE_CONFIG_ROWS)
    return grid


def sample_product_rows() -> List[List[CellData]]:
    return [[make_cell(c) for c in product] for product in SAMPLE_PRODUCTS]


def sample_product_columns(specifications: List[Specification], new_id: IdGenerator = uuid_ids) -> List[ColumnDef]:
    """SKU column first, then one spec column per sample specification."""
    by_name = {spec.name: spec for spec in specifications}
    columns = [ColumnDef(id=new_id(), type=ColumnType.SKU, header=SKU_HEADER)]
    for name in ("Color", "Size", "Material"):
        spec = by_name.get(name)
        if spec is None:
            columns.append(ColumnDef(id=new_id(), type=ColumnType.FREE, header=name))
        else:
            columns.append(ColumnDef(id=new_id(), type=ColumnType.SPEC, spec_id=spec.id, header=name))
    return columns


def create_sample_sheets(
    specifications: List[Specification],
    new_id: IdGenerator = uuid_ids,
) -> Tuple[SheetConfig, SheetConfig]:
    """Create the Config sheet and the Sample Products data sheet."""
    config_sheet = SheetConfig(
        id=new_id(),
        name="Config",
        type=SheetType.CONFIG,
        data=sample_config_grid(),
    )
    product_sheet = SheetConfig(
        id=new_id(),
        name="Sample Products",
        type=SheetType.DATA,
        data=sample_product_rows(),
        columns=sample_product_columns(specifications, new_id),
    )
    return config_sheet, product_sheet
