"""Decoders for conference-level signaling payloads.

Every field read here has one documented default; see confkit.common.decoders
for the coercion rules.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from confkit.common.decoders import js_truthy, number_or, or_none, string_flag
from confkit.conference_state.models import ConferenceInfo, SubscribeResult

logger = logging.getLogger(__name__)

DIRECT_CALL_VARIABLE = "verto_svar_direct_call"

SUBSCRIBE_BUCKETS = (
    ("subscribed", "subscribedChannels"),
    ("already_subscribed", "alreadySubscribedChannels"),
    ("unauthorized", "unauthorizedChannels"),
    ("unsubscribed", "unsubscribedChannels"),
    ("not_subscribed", "notSubscribedChannels"),
)


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _or_false(value: Any) -> Any:
    return value if js_truthy(value) else False


def check_is_direct_call(payload: Mapping[str, Any]) -> bool:
    variables = payload.get("variables")
    return isinstance(variables, Mapping) and DIRECT_CALL_VARIABLE in variables


def destruct_conference_state(conf_state: Mapping[str, Any]) -> ConferenceInfo:
    """Decode a raw conference state into ConferenceInfo.

    ``md5`` and ``domain`` are interpolated into the channel names as received.
    """
    variables = _mapping(conf_state.get("variables"))
    flags = _mapping(conf_state.get("flags"))
    suffix = f"{conf_state.get('md5')}@{conf_state.get('domain')}"

    info = ConferenceInfo(
        uuid=conf_state.get("uuid"),
        md5=conf_state.get("md5"),
        domain=conf_state.get("domain"),
        running=js_truthy(conf_state.get("running")),
        la_channel=f"conference-liveArray.{suffix}",
        info_channel=f"conference-info.{suffix}",
        mod_channel=f"conference-mod.{suffix}",
        conf_name=conf_state.get("name"),
        num_members=number_or(conf_state.get("members"), 0),
        is_private=string_flag(variables.get("is_private")),
        moh_playing=js_truthy(conf_state.get("mohPlaying")),
        files_playing=js_truthy(conf_state.get("filesPlaying")),
        files_playing_name=or_none(conf_state.get("filesPlayingName")),
        async_files_playing=js_truthy(conf_state.get("asyncFilesPlaying")),
        async_files_playing_name=or_none(conf_state.get("asyncFilesPlayingName")),
        async_files_playing_paused=js_truthy(conf_state.get("asyncFilesPlayingPaused")),
        async_files_playing_volume=number_or(conf_state.get("asyncFilesPlayingVolume"), None),
        files_seekable=js_truthy(conf_state.get("filesSeekable")),
        async_files_seekable=js_truthy(conf_state.get("asyncFilesSeekable")),
        performer_delay=conf_state.get("performerDelay"),
        vol_audience=conf_state.get("vol-audience"),
        files_full_screen=js_truthy(conf_state.get("filesFullScreen")),
        silent_mode=_or_false(flags.get("silent-mode")),
        meeting_mode=_or_false(flags.get("meeting-mode")),
        vid_mute_hide=_or_false(flags.get("vid-mute-hide")),
        personal_canvas=js_truthy(flags.get("personalCanvas")),
        personal_canvas_tp=or_none(flags.get("personalCanvasTP")),
        locked=js_truthy(flags.get("locked")),
        recording=js_truthy(flags.get("recording")),
        live_music=js_truthy(flags.get("liveMusic")),
        public_clipeeze=string_flag(variables.get("public_clipeeze")),
        conf_quality=variables.get("conf_quality"),
        access_pin=or_none(variables.get("access_pin")),
        moderator_pin=or_none(variables.get("moderator_pin")),
        speaker_highlight=string_flag(variables.get("speaker_highlight")),
        disable_intercom=variables.get("disable_intercom") is True,
        last_layout_group=variables.get("lastLayoutGroup"),
        last_layout=variables.get("lastLayout"),
    )
    logger.debug("Decoded conference state %s (%s members)", info.conf_name, info.num_members)
    return info


def destruct_subscribe_response(response: Mapping[str, Any]) -> SubscribeResult:
    """Bucket channel names of a subscription acknowledgement; absent buckets are empty."""
    buckets = {name: list(response.get(key) or []) for name, key in SUBSCRIBE_BUCKETS}
    return SubscribeResult(**buckets)
