"""Media constraint negotiation and local track controls."""
from confkit.media_constraints.models import (
    DeviceIdResolver,
    DeviceType,
    MediaCallOptions,
    MediaStreamConstraints,
)
from confkit.media_constraints.service import get_media_constraints

__all__ = [
    "DeviceIdResolver",
    "DeviceType",
    "MediaCallOptions",
    "MediaStreamConstraints",
    "get_media_constraints",
]
