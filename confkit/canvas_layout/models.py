from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawParticipantLayout(BaseModel):
    """One participant slot of a canvas as sent by the conference server.

    Geometry values share the unit space of the owning canvas ``scale``.
    They are kept exactly as received; the normaliser validates them.
    """
    member_id: Union[int, str] = Field(validation_alias=AliasChoices("memberID", "memberId", "member_id"))
    audio_pos: Any = Field(default=None, validation_alias=AliasChoices("audioPOS", "audioPos", "audio_pos"))
    x_pos: Any = Field(default=None, validation_alias=AliasChoices("xPOS", "xPos", "x_pos"))
    y_pos: Any = Field(default=None, validation_alias=AliasChoices("yPOS", "yPos", "y_pos"))
    x: Any = None
    y: Any = None
    scale: Any = None
    hscale: Any = None
    overlap: Any = 0

    model_config = ConfigDict(extra="allow")


class RawCanvasInfo(BaseModel):
    """Canvas description as sent by the conference server."""
    canvas_id: Union[int, str] = Field(validation_alias=AliasChoices("canvasID", "canvasId", "canvas_id"))
    layout_floor_id: Optional[Union[int, str]] = Field(
        default=None,
        validation_alias=AliasChoices("layoutFloorID", "layoutFloorId", "layout_floor_id"),
    )
    scale: Any
    canvas_layouts: List[RawParticipantLayout] = Field(
        validation_alias=AliasChoices("canvasLayouts", "canvas_layouts"),
    )

    model_config = ConfigDict(extra="allow")


class NormalizedParticipantLayout(BaseModel):
    """UI-ready participant slot, positions and sizes as percentages of the canvas."""
    start_x: str
    start_y: str
    percentage_width: str
    percentage_height: str
    participant_id: str
    audio_pos: Any = None
    x_pos: Any = None
    y_pos: Any = None

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)


class NormalizedCanvasInfo(BaseModel):
    canvas_id: Union[int, str]
    layout_floor_id: Optional[Union[int, str]] = None
    scale: Any
    layout_overlap: bool = False
    canvas_layouts: List[NormalizedParticipantLayout] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)
