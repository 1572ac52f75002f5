import pytest

from skugen.ids import SequentialIds
from skugen.schemas import AppSettings, ColumnDef, ColumnType, SheetConfig, Specification, SpecValue
from skugen.sheet_sku import make_cell


def build_spec(spec_id, name, order, values):
    return Specification(
        id=spec_id,
        name=name,
        order=order,
        values=[SpecValue(id=vid, display_value=label, sku_fragment=code) for vid, label, code in values],
    )


def cells(*values):
    return [make_cell(v) for v in values]


@pytest.fixture
def new_id():
    return SequentialIds("id")


@pytest.fixture
def settings():
    return AppSettings(delimiter="-", prefix="", suffix="")


@pytest.fixture
def product_specs():
    """Temperature, Color and Type, ordered temp=0, color=1, type=2."""
    return [
        build_spec("temp", "Temperature", 0, [("v-29", "29deg C", "29C"), ("v-35", "35deg C", "35C")]),
        build_spec("color", "Color", 1, [("v-red", "Red", "R"), ("v-blue", "Blue", "B")]),
        build_spec("type", "Type", 2, [("v-std", "Standard", "STD"), ("v-pro", "Pro", "PRO")]),
    ]


@pytest.fixture
def color_size_specs():
    return [
        build_spec("spec-color", "Color", 0, [("v1", "Red", "R"), ("v2", "Blue", "B"), ("v3", "Green", "G")]),
        build_spec("spec-size", "Size", 1, [("v4", "Small", "S"), ("v5", "Medium", "M"), ("v6", "Large", "L")]),
    ]


@pytest.fixture
def color_size_columns():
    return [
        ColumnDef(id="col-0", type=ColumnType.SKU, header="SKU"),
        ColumnDef(id="col-1", type=ColumnType.SPEC, spec_id="spec-color", header="Color"),
        ColumnDef(id="col-2", type=ColumnType.SPEC, spec_id="spec-size", header="Size"),
        ColumnDef(id="col-3", type=ColumnType.FREE, header="Notes"),
    ]


@pytest.fixture
def make_sheet(color_size_columns):
    def _make(rows, sheet_id="sheet-1", columns=None):
        return SheetConfig(
            id=sheet_id,
            name="Products",
            data=[cells(*row) for row in rows],
            columns=columns if columns is not None else color_size_columns,
        )
    return _make
