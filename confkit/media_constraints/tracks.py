"""Local track controls and guarded media acquisition."""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Iterable, List, Mapping, Optional, Protocol, Union, runtime_checkable

from confkit.media_constraints.models import MediaStreamConstraints

logger = logging.getLogger(__name__)

AUDIO = "audio"
VIDEO = "video"


class MediaTrackLike(Protocol):
    enabled: bool


@runtime_checkable
class MediaStreamLike(Protocol):
    def get_tracks(self) -> List[MediaTrackLike]:
        ...

    def get_audio_tracks(self) -> List[MediaTrackLike]:
        ...

    def get_video_tracks(self) -> List[MediaTrackLike]:
        ...


MediaAcquirer = Callable[[MediaStreamConstraints], Awaitable[Any]]


def _requested(constraint: Any) -> bool:
    # an empty constraint dict still asks for the track
    return isinstance(constraint, dict) or constraint is True


def stream_is_valid(stream: Any) -> bool:
    return isinstance(stream, MediaStreamLike)


def _tracks_of_kind(stream: MediaStreamLike, kind: Optional[str]) -> List[MediaTrackLike]:
    if kind == AUDIO:
        return list(stream.get_audio_tracks())
    if kind == VIDEO:
        return list(stream.get_video_tracks())
    return list(stream.get_tracks())


def update_stream_tracks(
    stream: Any,
    kind: Optional[str] = None,
    enabled: Optional[bool] = None,
) -> Optional[List[MediaTrackLike]]:
    """Enable, disable or (enabled=None) toggle the stream's tracks of ``kind``.

    ``kind`` is "audio", "video" or None for every track. Returns the tracks
    touched, or None when ``stream`` is not a usable media stream.
    """
    if not stream_is_valid(stream):
        logger.debug("Ignoring track update on invalid stream %r", stream)
        return None
    tracks = _tracks_of_kind(stream, kind)
    for track in tracks:
        track.enabled = (not track.enabled) if enabled is None else enabled
    return tracks


def enable_audio_tracks(stream: Any) -> Optional[List[MediaTrackLike]]:
    return update_stream_tracks(stream, AUDIO, True)


def disable_audio_tracks(stream: Any) -> Optional[List[MediaTrackLike]]:
    return update_stream_tracks(stream, AUDIO, False)


def toggle_audio_tracks(stream: Any) -> Optional[List[MediaTrackLike]]:
    return update_stream_tracks(stream, AUDIO, None)


def enable_video_tracks(stream: Any) -> Optional[List[MediaTrackLike]]:
    return update_stream_tracks(stream, VIDEO, True)


def disable_video_tracks(stream: Any) -> Optional[List[MediaTrackLike]]:
    return update_stream_tracks(stream, VIDEO, False)


def toggle_video_tracks(stream: Any) -> Optional[List[MediaTrackLike]]:
    return update_stream_tracks(stream, VIDEO, None)


def remove_unsupported_constraints(constraints: Mapping[str, Any], supported: Iterable[str]) -> dict:
    """Copy of ``constraints`` without unsupported keys or None values."""
    allowed = set(supported)
    return {key: value for key, value in constraints.items() if key in allowed and value is not None}


async def get_user_media(
    constraints: Union[MediaStreamConstraints, Mapping[str, Any]],
    acquire: MediaAcquirer,
) -> Any:
    """Hand constraints to ``acquire`` unless neither audio nor video is wanted."""
    if not isinstance(constraints, MediaStreamConstraints):
        constraints = MediaStreamConstraints.model_validate(constraints)
    logger.info("get_user_media %s", constraints.model_dump())
    if not _requested(constraints.audio) and not _requested(constraints.video):
        return None
    try:
        return await acquire(constraints)
    except Exception:
        logger.exception("get_user_media failed for %s", constraints.model_dump())
        raise
