import enum
from datetime import timedelta

import pytest

from obswire import requests_inputs as ri
from obswire.codecs import CodecError
from obswire.protocol import Request


@pytest.mark.parametrize(
    ("builder", "request_type"),
    [
        (ri.get_input_settings, "GetInputSettings"),
        (ri.get_input_mute, "GetInputMute"),
        (ri.toggle_input_mute, "ToggleInputMute"),
        (ri.get_input_volume, "GetInputVolume"),
        (ri.remove_input, "RemoveInput"),
        (ri.get_input_audio_balance, "GetInputAudioBalance"),
        (ri.get_input_audio_sync_offset, "GetInputAudioSyncOffset"),
        (ri.get_input_audio_monitor_type, "GetInputAudioMonitorType"),
        (ri.get_input_audio_tracks, "GetInputAudioTracks"),
    ],
)
def test_input_name_requests(builder, request_type):
    assert builder("Mic").to_json() == {
        "requestType": request_type,
        "requestData": {"inputName": "Mic"},
    }


def test_input_list_without_kind_has_empty_data():
    assert ri.get_input_list().to_json() == {"requestType": "GetInputList", "requestData": {}}


def test_input_list_with_kind():
    payload = ri.get_input_list("ffmpeg_source")
    assert payload.request_data == {"inputKind": "ffmpeg_source"}


def test_input_kind_list():
    assert ri.get_input_kind_list(True).request_data == {"unversioned": True}


def test_special_inputs_has_no_data():
    assert ri.get_special_inputs().to_json() == {"requestType": "GetSpecialInputs"}


def test_default_settings_by_kind():
    assert ri.get_input_default_settings("image_source").request_data == {
        "inputKind": "image_source"
    }


def test_set_input_settings_overlay_optional():
    settings = {"file": "a.png"}
    without = ri.set_input_settings("Img", settings)
    assert without.request_data == {"inputName": "Img", "inputSettings": settings}
    with_overlay = ri.set_input_settings("Img", settings, overlay=False)
    assert with_overlay.request_data["overlay"] is False


def test_set_input_mute():
    assert ri.set_input_mute("Mic", True).request_data == {
        "inputName": "Mic",
        "inputMuted": True,
    }


def test_set_input_volume_mul_and_db():
    assert ri.set_input_volume("Mic", mul=0.5).request_data == {
        "inputName": "Mic",
        "inputVolumeMul": 0.5,
    }
    assert ri.set_input_volume("Mic", db=-6).request_data == {
        "inputName": "Mic",
        "inputVolumeDb": -6.0,
    }


@pytest.mark.parametrize("kwargs", [{}, {"mul": 1.0, "db": 0.0}])
def test_set_input_volume_needs_exactly_one(kwargs):
    with pytest.raises(ValueError):
        ri.set_input_volume("Mic", **kwargs)


def test_set_input_name():
    assert ri.set_input_name("Old", "New").to_json() == {
        "requestType": "SetInputName",
        "requestData": {"inputName": "Old", "newInputName": "New"},
    }


def test_create_input_minimal_and_full():
    minimal = ri.create_input("Scene", "Cam", "av_capture_input_v2")
    assert minimal.request_data == {
        "sceneName": "Scene",
        "inputName": "Cam",
        "inputKind": "av_capture_input_v2",
    }
    full = ri.create_input("Scene", "Cam", "av_capture_input_v2", {"device": "x"}, True)
    assert full.request_data["inputSettings"] == {"device": "x"}
    assert full.request_data["sceneItemEnabled"] is True


def test_set_audio_balance():
    assert ri.set_input_audio_balance("Mic", 0.25).request_data["inputAudioBalance"] == 0.25


def test_set_audio_sync_offset_in_millis():
    payload = ri.set_input_audio_sync_offset("Mic", timedelta(milliseconds=150))
    assert payload.request_data == {"inputName": "Mic", "inputAudioSyncOffset": 150}


def test_set_monitor_type_accepts_enum_and_string():
    class Monitor(enum.Enum):
        ONLY = "OBS_MONITORING_TYPE_MONITOR_ONLY"

    from_enum = ri.set_input_audio_monitor_type("Mic", Monitor.ONLY)
    from_text = ri.set_input_audio_monitor_type("Mic", "OBS_MONITORING_TYPE_MONITOR_ONLY")
    assert from_enum == from_text
    assert from_text.request_data["monitorType"] == "OBS_MONITORING_TYPE_MONITOR_ONLY"


def test_set_audio_tracks_skips_unset():
    payload = ri.set_input_audio_tracks("Mic", [True, True, None, None, False, True])
    assert payload.request_data["inputAudioTracks"] == {
        "1": True,
        "2": True,
        "5": False,
        "6": True,
    }


def test_set_audio_tracks_wrong_length():
    with pytest.raises(CodecError):
        ri.set_input_audio_tracks("Mic", [True])


def test_property_requests():
    expected = {"inputName": "Browser", "propertyName": "refreshnocache"}
    assert ri.press_input_properties_button("Browser", "refreshnocache").request_data == expected
    items = ri.get_input_properties_list_property_items("Browser", "refreshnocache")
    assert items.request_type == "GetInputPropertiesListPropertyItems"
    assert items.request_data == expected


def test_filter_list_and_defaults():
    assert ri.get_source_filter_list("Cam").request_data == {"sourceName": "Cam"}
    assert ri.get_source_filter_default_settings("color_filter").request_data == {
        "filterKind": "color_filter"
    }


def test_create_filter_without_settings():
    payload = ri.create_source_filter("Cam", "Blur", "blur_filter")
    assert payload.request_data == {
        "sourceName": "Cam",
        "filterName": "Blur",
        "filterKind": "blur_filter",
    }
    with_settings = ri.create_source_filter("Cam", "Blur", "blur_filter", {"size": 3})
    assert with_settings.request_data["filterSettings"] == {"size": 3}


def test_filter_name_and_index_and_enabled():
    assert ri.set_source_filter_name("Cam", "A", "B").request_data["newFilterName"] == "B"
    assert ri.set_source_filter_index("Cam", "A", 2).request_data["filterIndex"] == 2
    assert ri.set_source_filter_enabled("Cam", "A", False).request_data == {
        "sourceName": "Cam",
        "filterName": "A",
        "filterEnabled": False,
    }
    assert ri.remove_source_filter("Cam", "A").request_type == "RemoveSourceFilter"
    assert ri.get_source_filter("Cam", "A").request_type == "GetSourceFilter"


def test_filter_index_must_be_unsigned():
    with pytest.raises(ValueError):
        ri.set_source_filter_index("Cam", "A", -1)


def test_filter_settings_always_sends_overlay():
    payload = ri.set_source_filter_settings("Cam", "A", {"x": 1})
    assert "overlay" in payload.request_data
    assert payload.request_data["overlay"] is None


def test_wrapped_in_request_message():
    message = Request("id-1", ri.toggle_input_mute("Mic")).to_message()
    assert message == {
        "op": 6,
        "d": {
            "requestId": "id-1",
            "requestType": "ToggleInputMute",
            "requestData": {"inputName": "Mic"},
        },
    }