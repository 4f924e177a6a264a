"""Media constraint resolution for call setup.

Preferred microphone/camera ids are narrowed to exact device ids through a
DeviceIdResolver. Narrowing is best effort: a lookup that fails leaves the
track unconstrained so the call still starts on the default device.
"""
from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Mapping, Optional, Union

from confkit.common.errors import DeviceResolutionFailure
from confkit.config import runtime_config
from confkit.media_constraints.models import (
    DeviceIdResolver,
    DeviceType,
    MediaCallOptions,
    MediaStreamConstraints,
    TrackConstraint,
)

logger = logging.getLogger(__name__)


async def _lookup_device(
    resolver: DeviceIdResolver,
    device_id: str,
    label: str,
    kind: DeviceType,
) -> Optional[str]:
    try:
        return await resolver.resolve(device_id, label, kind)
    except Exception as exc:
        raise DeviceResolutionFailure(
            f"Could not resolve {kind.value} device {device_id!r}",
            details={"device_id": device_id, "label": label, "kind": kind.value},
        ) from exc


async def assure_device_id(
    resolver: DeviceIdResolver,
    device_id: Optional[str],
    label: str,
    kind: DeviceType,
) -> Optional[str]:
    """Resolve ``device_id`` or return None; resolver errors never escape."""
    if not device_id:
        return None
    try:
        resolved = await _lookup_device(resolver, device_id, label, kind)
    except DeviceResolutionFailure as failure:
        logger.warning("%s, using default device", failure.message, exc_info=failure)
        return None
    return resolved or None


def narrow_to_device(constraint: TrackConstraint, device_id: Optional[str]) -> TrackConstraint:
    """Pin a track constraint to an exact device id, returning a new value."""
    if not device_id:
        return copy.deepcopy(constraint)
    narrowed = {} if isinstance(constraint, bool) else copy.deepcopy(constraint)
    narrowed["deviceId"] = {"exact": device_id}
    return narrowed


async def get_media_constraints(
    options: Union[MediaCallOptions, Mapping[str, Any], None],
    resolver: DeviceIdResolver,
) -> MediaStreamConstraints:
    if options is None:
        options = MediaCallOptions()
    elif not isinstance(options, MediaCallOptions):
        options = MediaCallOptions.model_validate(options)

    audio = options.audio if options.audio is not None else runtime_config.get_default_audio()
    video = options.video if options.video is not None else runtime_config.get_default_video()

    mic_id, cam_id = await asyncio.gather(
        assure_device_id(resolver, options.mic_id, options.mic_label or "", DeviceType.AUDIO_IN),
        assure_device_id(resolver, options.cam_id, options.cam_label or "", DeviceType.VIDEO),
    )
    constraints = MediaStreamConstraints(
        audio=narrow_to_device(audio, mic_id),
        video=narrow_to_device(video, cam_id),
    )
    logger.debug("Resolved media constraints: %s", constraints.model_dump())
    return constraints
