"""Layout catalog merge for the layout picker."""
from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping, Set, Union

from pydantic import BaseModel

from confkit.layout_catalog.models import Layout, RawLayout, RawLayoutGroup

logger = logging.getLogger(__name__)

_LABEL_SEPARATORS = re.compile(r"[-_]")

LayoutInput = Union[RawLayout, Mapping[str, Any]]
LayoutGroupInput = Union[RawLayoutGroup, Mapping[str, Any]]


def layout_label(layout: RawLayout) -> str:
    """Display name when set, else the name with dashes and underscores as spaces."""
    return layout.display_name or _LABEL_SEPARATORS.sub(" ", layout.name)


def label_sort_key(layout: Layout) -> bytes:
    # UTF-16 big-endian bytes order exactly like UTF-16 code units.
    return layout.label.lower().encode("utf-16-be", "surrogatepass")


def to_catalog_entry(layout: RawLayout, belongs_to_a_group: bool = False) -> Layout:
    return Layout(
        id=layout.name,
        label=layout_label(layout),
        type=layout.type,
        reservation_ids=list(layout.reservation_ids or []),
        belongs_to_a_group=belongs_to_a_group,
    )


def _coerce(item: Any, model_cls):
    if isinstance(item, model_cls):
        return item
    if isinstance(item, BaseModel):
        item = item.model_dump()
    return model_cls.model_validate(item)


def grouped_layout_ids(layout_groups: Iterable[RawLayoutGroup]) -> Set[str]:
    members: Set[str] = set()
    for group in layout_groups:
        members.update(group.group_layouts or [])
    return members


def merge_layout_catalog(
    layouts: Iterable[LayoutInput],
    layout_groups: Iterable[LayoutGroupInput],
) -> List[Layout]:
    """Flatten layouts and layout groups into one catalog sorted by label.

    Groups come first before the sort, so equal labels keep group-then-layout
    order. Groups themselves are never flagged as belonging to a group.
    """
    raw_layouts = [_coerce(item, RawLayout) for item in layouts]
    raw_groups = [_coerce(item, RawLayoutGroup) for item in layout_groups]

    members = grouped_layout_ids(raw_groups)
    normal_list = [to_catalog_entry(layout, layout.name in members) for layout in raw_layouts]
    group_list = [to_catalog_entry(group) for group in raw_groups]

    catalog = sorted(group_list + normal_list, key=label_sort_key)
    logger.debug(
        "Merged layout catalog: %d layouts, %d groups, %d grouped ids",
        len(normal_list),
        len(group_list),
        len(members),
    )
    return catalog
