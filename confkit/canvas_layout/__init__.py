"""Canvas geometry normalisation for conference layouts."""
from confkit.canvas_layout.models import (
    NormalizedCanvasInfo,
    NormalizedParticipantLayout,
    RawCanvasInfo,
    RawParticipantLayout,
)
from confkit.canvas_layout.service import normalize_canvas_info, round_percentage

__all__ = [
    "NormalizedCanvasInfo",
    "NormalizedParticipantLayout",
    "RawCanvasInfo",
    "RawParticipantLayout",
    "normalize_canvas_info",
    "round_percentage",
]
