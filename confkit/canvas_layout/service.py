"""Canvas geometry normaliser.

Turns the absolute canvas description pushed by the conference server into
percentage-based slots the UI can lay out directly. Pure logic, no side
effects (except logging); inputs are never written to.
"""
from __future__ import annotations

import copy
import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from confkit.canvas_layout.models import (
    NormalizedCanvasInfo,
    NormalizedParticipantLayout,
    RawCanvasInfo,
    RawParticipantLayout,
)
from confkit.common.errors import InvalidArgument, invalid_scale_error, non_finite_percentage_error
from confkit.config import runtime_config

logger = logging.getLogger(__name__)

# Raw participant fields consumed under a new name.
_RENAMED_LAYOUT_FIELDS = {"member_id", "audio_pos", "x_pos", "y_pos"}
# (output key, raw attribute) pairs scaled against the canvas.
_SCALED_FIELDS = (
    ("startX", "x"),
    ("startY", "y"),
    ("percentageWidth", "scale"),
    ("percentageHeight", "hscale"),
)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_overlapping(layout: RawParticipantLayout) -> bool:
    """Only the number 1 flags an overlap; True, "1" and 2 do not."""
    return _is_number(layout.overlap) and layout.overlap == 1


def round_percentage(value: float, precision: Optional[int] = None) -> str:
    """Round half away from zero and render without trailing zeros.

    >>> round_percentage(100 / 3)
    '33.33'
    >>> round_percentage(25.0)
    '25'
    """
    if precision is None:
        precision = runtime_config.get_percent_precision()
    with localcontext() as ctx:
        # wide enough for any finite float at the requested precision
        ctx.prec = 400 + precision
        quantum = Decimal(1).scaleb(-precision)
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "0"
    return format(rounded.normalize(), "f")


def _percentage(value: Any, scale: Union[int, float], field: str, index: int, precision: int) -> str:
    if not _is_number(value):
        raise InvalidArgument(
            f"Layout {index} field {field!r} must be a number, got {value!r}",
            code="canvas.non_numeric_value",
            details={"field": field, "index": index, "value": repr(value)},
        )
    try:
        ratio = value / scale * 100
    except OverflowError:
        raise non_finite_percentage_error(field, index, value)
    if not math.isfinite(ratio):
        raise non_finite_percentage_error(field, index, value)
    return f"{round_percentage(ratio, precision)}%"


def _passthrough(fields: Dict[str, Any], reserved: Iterable[str]) -> Dict[str, Any]:
    blocked = set(reserved)
    return {key: copy.deepcopy(value) for key, value in fields.items() if key not in blocked}


def _reserved_keys(model_cls) -> set:
    keys = set()
    for name, info in model_cls.model_fields.items():
        keys.add(name)
        if info.alias:
            keys.add(info.alias)
    return keys


def _attribute_names(model_cls) -> set:
    # snake_case names that differ from their client alias; keeping them out
    # avoids feeding one field under two spellings
    return {name for name, info in model_cls.model_fields.items() if info.alias and info.alias != name}


def normalize_participant_layout(
    layout: RawParticipantLayout,
    canvas_scale: Union[int, float],
    index: int = 0,
    precision: Optional[int] = None,
) -> NormalizedParticipantLayout:
    if precision is None:
        precision = runtime_config.get_percent_precision()
    # Only keys the server actually sent travel along; defaults stay behind.
    rest: Dict[str, Any] = {
        name: getattr(layout, name)
        for name in layout.model_fields_set
        if name in RawParticipantLayout.model_fields and name not in _RENAMED_LAYOUT_FIELDS
    }
    rest.update(layout.model_extra or {})

    payload: Dict[str, Any] = {}
    for key, attr in _SCALED_FIELDS:
        payload[key] = _percentage(getattr(layout, attr), canvas_scale, attr, index, precision)
    payload["participantId"] = str(layout.member_id)
    payload["audioPos"] = copy.deepcopy(layout.audio_pos)
    payload["xPos"] = copy.deepcopy(layout.x_pos)
    payload["yPos"] = copy.deepcopy(layout.y_pos)
    # Server-sent keys override computed ones of the same name.
    payload.update(_passthrough(rest, _attribute_names(NormalizedParticipantLayout)))
    return NormalizedParticipantLayout.model_validate(payload)


def normalize_canvas_info(canvas: Union[RawCanvasInfo, Mapping[str, Any]]) -> NormalizedCanvasInfo:
    """Convert a raw canvas into percentage geometry plus an overlap flag.

    Slots keep their input order. Raises InvalidArgument when the canvas scale
    is not a finite positive number or a slot value cannot be scaled.
    """
    if not isinstance(canvas, RawCanvasInfo):
        canvas = RawCanvasInfo.model_validate(canvas)

    scale = canvas.scale
    if not _is_number(scale) or not math.isfinite(scale) or scale <= 0:
        raise invalid_scale_error(scale)

    precision = runtime_config.get_percent_precision()
    layouts = []
    layout_overlap = False
    for index, layout in enumerate(canvas.canvas_layouts):
        layout_overlap = layout_overlap or is_overlapping(layout)
        layouts.append(normalize_participant_layout(layout, scale, index, precision))

    payload = _passthrough(canvas.model_extra or {}, _reserved_keys(NormalizedCanvasInfo))
    payload.update(
        canvasId=canvas.canvas_id,
        layoutFloorId=canvas.layout_floor_id,
        scale=scale,
        canvasLayouts=layouts,
        layoutOverlap=layout_overlap,
    )
    logger.debug(
        "Normalized canvas %s: %d layouts, overlap=%s",
        canvas.canvas_id,
        len(layouts),
        layout_overlap,
    )
    return NormalizedCanvasInfo.model_validate(payload)
