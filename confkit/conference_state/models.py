from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ConferenceInfo(BaseModel):
    """Client view of the conference state pushed on the liveArray channel."""
    uuid: Any = None
    md5: Any = None
    domain: Any = None
    running: bool = False
    la_channel: str
    info_channel: str
    mod_channel: str
    conf_name: Any = None
    num_members: Union[int, float] = 0
    is_private: bool = False
    moh_playing: bool = False
    files_playing: bool = False
    files_playing_name: Any = None
    async_files_playing: bool = False
    async_files_playing_name: Any = None
    async_files_playing_paused: bool = False
    async_files_playing_volume: Optional[Union[int, float]] = None
    files_seekable: bool = False
    async_files_seekable: bool = False
    performer_delay: Any = None
    vol_audience: Any = None
    files_full_screen: bool = False
    # flags
    silent_mode: Any = False
    meeting_mode: Any = False
    vid_mute_hide: Any = False
    personal_canvas: bool = False
    personal_canvas_tp: Any = Field(default=None, alias="personalCanvasTP")
    locked: bool = False
    recording: bool = False
    live_music: bool = False
    # variables
    public_clipeeze: bool = False
    conf_quality: Any = None
    access_pin: Any = None
    moderator_pin: Any = None
    speaker_highlight: bool = False
    disable_intercom: bool = False
    last_layout_group: Any = None
    last_layout: Any = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubscribeResult(BaseModel):
    """Channel names of a subscribe/unsubscribe acknowledgement, bucketed by outcome."""
    subscribed: List[str] = Field(default_factory=list)
    already_subscribed: List[str] = Field(default_factory=list)
    unauthorized: List[str] = Field(default_factory=list)
    unsubscribed: List[str] = Field(default_factory=list)
    not_subscribed: List[str] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
