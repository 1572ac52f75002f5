"""
Catalog editing operations.

Every operation takes the current catalog snapshot and returns a new list;
the input list and its specifications are never modified. Callers commit the
result through ``Workbook.commit_catalog`` so derived SKUs are recomputed.
"""

import logging
from typing import List, Optional

from skugen.ids import IdGenerator, uuid_ids
from skugen.schemas import Specification, SpecValue
from skugen.sku_generator import sort_specifications

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for rejected catalog edits."""


class DuplicateSpecificationError(CatalogError):
    pass


class DuplicateValueError(CatalogError):
    pass


class SpecificationNotFoundError(CatalogError):
    pass


class ValueNotFoundError(CatalogError):
    pass


def get_specification(catalog: List[Specification], spec_id: str) -> Optional[Specification]:
    for spec in catalog:
        if spec.id == spec_id:
            return spec
    return None


def _require_spec(catalog: List[Specification], spec_id: str) -> Specification:
    spec = get_specification(catalog, spec_id)
    if spec is None:
        raise SpecificationNotFoundError(f"Specification {spec_id} not found")
    return spec


def _check_name_available(catalog: List[Specification], name: str, ignore_id: Optional[str] = None) -> None:
    wanted = name.strip().lower()
    for spec in catalog:
        if spec.id != ignore_id and spec.name.strip().lower() == wanted:
            raise DuplicateSpecificationError(f'Specification "{name}" already exists')


def _replace(catalog: List[Specification], updated: Specification) -> List[Specification]:
    return [updated if spec.id == updated.id else spec for spec in catalog]


def add_specification(
    catalog: List[Specification],
    name: str,
    new_id: IdGenerator = uuid_ids,
) -> List[Specification]:
    """Append a specification placed after every existing one."""
    name = name.strip()
    if not name:
        raise CatalogError("Specification name cannot be empty")
    _check_name_available(catalog, name)

    order = max((spec.order for spec in catalog), default=-1) + 1
    logger.info(f"Adding specification {name!r} at order {order}")
    return [*catalog, Specification(id=new_id(), name=name, order=order, values=[])]


def rename_specification(catalog: List[Specification], spec_id: str, name: str) -> List[Specification]:
    spec = _require_spec(catalog, spec_id)
    name = name.strip()
    if not name:
        raise CatalogError("Specification name cannot be empty")
    _check_name_available(catalog, name, ignore_id=spec_id)
    return _replace(catalog, spec.model_copy(update={"name": name}))


def remove_specification(catalog: List[Specification], spec_id: str) -> List[Specification]:
    """Remove a specification and renumber the remaining orders contiguously."""
    _require_spec(catalog, spec_id)
    remaining = sort_specifications([spec for spec in catalog if spec.id != spec_id])
    return [spec.model_copy(update={"order": index}) for index, spec in enumerate(remaining)]


def reorder_specification(catalog: List[Specification], spec_id: str, new_order: int) -> List[Specification]:
    """
    Move a specification to ``new_order``, shifting the ones in between.

    Moving down shifts the specifications between the old and new position
    up by one; moving up shifts them down by one.
    """
    spec = _require_spec(catalog, spec_id)
    old_order = spec.order
    if old_order == new_order:
        return list(catalog)

    updated = []
    for s in catalog:
        if s.id == spec_id:
            updated.append(s.model_copy(update={"order": new_order}))
        elif old_order < new_order and old_order < s.order <= new_order:
            updated.append(s.model_copy(update={"order": s.order - 1}))
        elif old_order > new_order and new_order <= s.order < old_order:
            updated.append(s.model_copy(update={"order": s.order + 1}))
        else:
            updated.append(s)
    return updated


def add_spec_value(
    catalog: List[Specification],
    spec_id: str,
    display_value: str,
    sku_fragment: str,
    new_id: IdGenerator = uuid_ids,
) -> List[Specification]:
    spec = _require_spec(catalog, spec_id)
    display_value = display_value.strip()
    sku_fragment = sku_fragment.strip()
    if not display_value:
        raise CatalogError("Value label cannot be empty")
    if spec.find_value(display_value) is not None:
        raise DuplicateValueError(f'Value "{display_value}" already exists in specification "{spec.name}"')

    value = SpecValue(id=new_id(), display_value=display_value, sku_fragment=sku_fragment)
    return _replace(catalog, spec.model_copy(update={"values": [*spec.values, value]}))


def update_spec_value(
    catalog: List[Specification],
    spec_id: str,
    value_id: str,
    display_value: Optional[str] = None,
    sku_fragment: Optional[str] = None,
) -> List[Specification]:
    """Change a value's label and/or fragment; omitted fields are kept."""
    spec = _require_spec(catalog, spec_id)
    if not any(v.id == value_id for v in spec.values):
        raise ValueNotFoundError(f"Value {value_id} not found in specification {spec.name!r}")

    if display_value is not None:
        display_value = display_value.strip()
        if not display_value:
            raise CatalogError("Value label cannot be empty")
        clash = spec.find_value(display_value)
        if clash is not None and clash.id != value_id:
            raise DuplicateValueError(f'Value "{display_value}" already exists in specification "{spec.name}"')

    changes = {}
    if display_value is not None:
        changes["display_value"] = display_value
    if sku_fragment is not None:
        changes["sku_fragment"] = sku_fragment.strip()

    values = [v.model_copy(update=changes) if v.id == value_id else v for v in spec.values]
    return _replace(catalog, spec.model_copy(update={"values": values}))


def remove_spec_value(catalog: List[Specification], spec_id: str, value_id: str) -> List[Specification]:
    spec = _require_spec(catalog, spec_id)
    values = [v for v in spec.values if v.id != value_id]
    if len(values) == len(spec.values):
        raise ValueNotFoundError(f"Value {value_id} not found in specification {spec.name!r}")
    return _replace(catalog, spec.model_copy(update={"values": values}))
