from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CellValue = Union[str, int, float, bool, None]

# Specification id -> selected display value
SelectedValues = Dict[str, str]


# Catalog Schemas
class SpecValue(BaseModel):
    id: str
    display_value: str = Field(alias="displayValue")
    sku_fragment: str = Field(default="", alias="skuFragment")

    model_config = ConfigDict(populate_by_name=True)


class Specification(BaseModel):
    id: str
    name: str
    order: int = 0
    values: List[SpecValue] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    def find_value(self, display_value: str) -> Optional[SpecValue]:
        for value in self.values:
            if value.display_value == display_value:
                return value
        return None


# Settings Schemas
class AppSettings(BaseModel):
    delimiter: str = "-"
    prefix: str = ""
    suffix: str = ""

    model_config = ConfigDict(extra="forbid")


# Sheet Schemas
class CellData(BaseModel):
    v: CellValue = None  # raw value
    m: Optional[str] = None  # display text


class ColumnType(str, Enum):
    SKU = "sku"
    SPEC = "spec"
    FREE = "free"


class SheetType(str, Enum):
    CONFIG = "config"
    DATA = "data"


class ColumnDef(BaseModel):
    id: str
    type: ColumnType
    spec_id: Optional[str] = Field(default=None, alias="specId")
    header: str = ""
    width: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True)


class SheetConfig(BaseModel):
    id: str
    name: str
    type: SheetType = SheetType.DATA
    data: List[List[Optional[CellData]]] = Field(default_factory=list)
    columns: List[ColumnDef] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
