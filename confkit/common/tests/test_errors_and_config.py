from confkit.common.errors import (
    ErrorEnvelope,
    InvalidArgument,
    build_error_envelope,
    invalid_scale_error,
)
from confkit.config import runtime_config


def test_build_error_envelope_defaults():
    envelope = build_error_envelope(code="canvas.invalid_scale", message="bad scale")
    assert envelope.model_dump() == {
        "error": {
            "code": "canvas.invalid_scale",
            "message": "bad scale",
            "resource_kind": None,
            "details": {},
        }
    }


def test_invalid_argument_envelope():
    err = invalid_scale_error(0)
    assert isinstance(err, InvalidArgument)
    assert isinstance(err, ValueError)
    envelope = err.to_envelope()
    assert isinstance(envelope, ErrorEnvelope)
    assert envelope.error.code == "canvas.invalid_scale"
    assert envelope.error.resource_kind == "canvas"
    assert envelope.error.details == {"scale": "0"}


def test_invalid_argument_default_code():
    assert InvalidArgument("boom").code == "canvas.invalid_argument"


def test_percent_precision(monkeypatch):
    monkeypatch.delenv("CONFKIT_PERCENT_PRECISION", raising=False)
    assert runtime_config.get_percent_precision() == 2
    monkeypatch.setenv("CONFKIT_PERCENT_PRECISION", "4")
    assert runtime_config.get_percent_precision() == 4
    monkeypatch.setenv("CONFKIT_PERCENT_PRECISION", "lots")
    assert runtime_config.get_percent_precision() == 2
    monkeypatch.setenv("CONFKIT_PERCENT_PRECISION", "-1")
    assert runtime_config.get_percent_precision() == 2


def test_default_tracks(monkeypatch):
    monkeypatch.delenv("CONFKIT_DEFAULT_AUDIO", raising=False)
    monkeypatch.delenv("CONFKIT_DEFAULT_VIDEO", raising=False)
    assert runtime_config.get_default_audio() is True
    assert runtime_config.get_default_video() is False
    monkeypatch.setenv("CONFKIT_DEFAULT_VIDEO", "yes")
    monkeypatch.setenv("CONFKIT_DEFAULT_AUDIO", "maybe")
    assert runtime_config.get_default_video() is True
    assert runtime_config.get_default_audio() is True


def test_config_snapshot(monkeypatch):
    monkeypatch.setenv("CONFKIT_ENV", "dev")
    snapshot = runtime_config.config_snapshot()
    assert snapshot["env"] == "dev"
    assert set(snapshot) == {"env", "percent_precision", "default_audio", "default_video"}
