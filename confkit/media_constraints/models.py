from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# True/False or a MediaTrackConstraints-shaped dict, e.g. {"deviceId": {"exact": "..."}}
TrackConstraint = Union[bool, Dict[str, Any]]


class DeviceType(str, Enum):
    AUDIO_IN = "audioinput"
    AUDIO_OUT = "audiooutput"
    VIDEO = "videoinput"


class MediaCallOptions(BaseModel):
    """Caller intent for a call's local media.

    ``audio``/``video`` left unset fall back to the runtime defaults
    (audio on, video off).
    """
    audio: Optional[TrackConstraint] = None
    mic_id: Optional[str] = None
    mic_label: Optional[str] = None
    video: Optional[TrackConstraint] = None
    cam_id: Optional[str] = None
    cam_label: Optional[str] = None

    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class MediaStreamConstraints(BaseModel):
    """Constraints ready for the device acquisition layer."""
    audio: TrackConstraint = True
    video: TrackConstraint = False


class DeviceIdResolver(Protocol):
    async def resolve(self, requested_id: str, label: str, kind: DeviceType) -> str:
        """Return a usable device id, raising when no device matches."""
        ...
