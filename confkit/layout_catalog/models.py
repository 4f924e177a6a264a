from __future__ import annotations

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawLayout(BaseModel):
    """A selectable canvas arrangement as listed by the conference server."""
    type: Any = None
    name: str
    display_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("displayName", "display_name"),
    )
    reservation_ids: Optional[List[str]] = Field(
        default=None,
        validation_alias=AliasChoices("resIDS", "reservationIds", "reservation_ids"),
    )

    model_config = ConfigDict(extra="ignore")


class RawLayoutGroup(RawLayout):
    """A named group of layouts; ``group_layouts`` holds member layout names."""
    group_layouts: Optional[List[str]] = Field(
        default=None,
        validation_alias=AliasChoices("groupLayouts", "group_layouts"),
    )


class Layout(BaseModel):
    """Catalog entry offered to the layout picker."""
    id: str
    label: str
    type: Any = None
    reservation_ids: List[str] = Field(default_factory=list)
    belongs_to_a_group: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
