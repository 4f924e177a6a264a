"""Conference state and subscription payload decoders."""
from confkit.conference_state.models import ConferenceInfo, SubscribeResult
from confkit.conference_state.service import (
    check_is_direct_call,
    destruct_conference_state,
    destruct_subscribe_response,
)

__all__ = [
    "ConferenceInfo",
    "SubscribeResult",
    "check_is_direct_call",
    "destruct_conference_state",
    "destruct_subscribe_response",
]
