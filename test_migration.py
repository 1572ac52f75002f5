"""
Tests for migrating config tables into the specification catalog.
"""

import pandas as pd

from conftest import cells
from skugen.config_sheet import CONFIG_SHEET_HEADERS, ParsedSpec, ParsedSpecValue, catalog_to_config_grid
from skugen.ids import SequentialIds, uuid_ids
from skugen.migration import convert_parsed_specs, migrate_config_frame, migrate_config_sheet_data
from skugen.sample_data import SAMPLE_CONFIG_ROWS, sample_config_grid
from skugen.schemas import AppSettings
from skugen.sheet_sku import cell_text
from skugen.sku_generator import generate_sku

HEADER = cells(*CONFIG_SHEET_HEADERS)


def test_converts_parsed_specs_with_sequential_order(new_id):
    parsed = [
        ParsedSpec("Color", [ParsedSpecValue("Red", "R"), ParsedSpecValue("Blue", "B")]),
        ParsedSpec("Size", [ParsedSpecValue("Small", "S")]),
        ParsedSpec("Empty"),
    ]
    specs = convert_parsed_specs(parsed, new_id)

    assert [(s.name, s.order) for s in specs] == [("Color", 0), ("Size", 1), ("Empty", 2)]
    assert specs[0].id == "id-1"
    assert [(v.id, v.display_value, v.sku_fragment) for v in specs[0].values] == [
        ("id-2", "Red", "R"),
        ("id-3", "Blue", "B"),
    ]
    assert specs[2].values == []


def test_convert_handles_empty_list():
    assert convert_parsed_specs([]) == []


def test_empty_table_returns_none():
    assert migrate_config_sheet_data([]) is None


def test_header_only_returns_none():
    assert migrate_config_sheet_data([HEADER]) is None


def test_all_rows_invalid_returns_none():
    assert migrate_config_sheet_data([HEADER, cells("", "", "")]) is None


def test_groups_repeated_specification_into_one():
    data = [
        HEADER,
        cells("Type", "Standard", "STD"),
        cells("Type", "Pro", "PRO"),
        cells("Type", "Lite", "LT"),
    ]
    specs = migrate_config_sheet_data(data, SequentialIds("m"))

    assert len(specs) == 1
    assert specs[0].name == "Type"
    assert specs[0].order == 0
    assert [v.display_value for v in specs[0].values] == ["Standard", "Pro", "Lite"]


def test_order_follows_first_appearance():
    data = [
        HEADER,
        cells("Size", "Small", "S"),
        cells("Color", "Red", "R"),
        cells("Size", "Large", "L"),
        cells("Material", "Wool", "WOL"),
    ]
    specs = migrate_config_sheet_data(data)
    assert [(s.name, s.order) for s in specs] == [("Size", 0), ("Color", 1), ("Material", 2)]


def test_fresh_unique_ids_with_default_generator():
    specs = migrate_config_sheet_data(sample_config_grid(), uuid_ids)
    ids = [s.id for s in specs] + [v.id for s in specs for v in s.values]
    assert len(ids) == len(set(ids)) == 12


def test_migrates_dataframe():
    df = pd.DataFrame(
        [["Color", "Red", "R"], ["Color", "Blue", "B"], ["Size", "Small", "S"]],
        columns=CONFIG_SHEET_HEADERS,
    )
    specs = migrate_config_frame(df, SequentialIds("df"))
    assert [s.name for s in specs] == ["Color", "Size"]
    assert specs[1].values[0].sku_fragment == "S"


def test_migrated_catalog_reproduces_source_codes():
    specs = migrate_config_sheet_data(sample_config_grid())
    settings = AppSettings(delimiter="-")
    by_name = {s.name: s for s in specs}

    for spec_name, label, code in SAMPLE_CONFIG_ROWS:
        selected = {by_name[spec_name].id: label}
        assert generate_sku(selected, specs, settings) == code


def test_round_trip_through_config_grid():
    specs = migrate_config_sheet_data(sample_config_grid(), SequentialIds("a"))
    again = migrate_config_sheet_data(catalog_to_config_grid(specs), SequentialIds("b"))

    def shape(catalog):
        return [(s.name, s.order, [(v.display_value, v.sku_fragment) for v in s.values]) for s in catalog]

    assert shape(again) == shape(specs)
    texts = [[cell_text(c) for c in row] for row in catalog_to_config_grid(specs)[1:]]
    assert [tuple(t) for t in texts] == SAMPLE_CONFIG_ROWS
