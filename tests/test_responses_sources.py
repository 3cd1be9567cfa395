from datetime import timedelta

import pytest

from obswire import responses_sources as rs
from obswire.protocol import ProtocolError


def test_input_list():
    data = {
        "inputs": [
            {
                "inputName": "Mic",
                "inputKind": "wasapi_input_capture",
                "unversionedInputKind": "wasapi_input_capture",
            }
        ]
    }
    inputs = rs.parse_input_list(data)
    assert inputs == [rs.Input("Mic", "wasapi_input_capture", "wasapi_input_capture")]


def test_input_missing_field():
    with pytest.raises(ProtocolError, match="missing field `unversionedInputKind`"):
        rs.Input.from_json({"inputName": "Mic", "inputKind": "k"})


def test_input_kinds_and_groups():
    assert rs.parse_input_kinds({"inputKinds": ["a", "b"]}) == ["a", "b"]
    assert rs.parse_group_list({"groups": ["g"]}) == ["g"]
    with pytest.raises(ProtocolError):
        rs.parse_group_list({"groups": [1]})


def test_special_inputs_missing_are_none():
    specials = rs.SpecialInputs.from_json({"desktop1": "Desktop Audio", "mic1": None})
    assert specials.desktop1 == "Desktop Audio"
    assert specials.mic1 is None
    assert specials.mic4 is None


def test_input_settings_and_defaults():
    settings = {"url": "x"}
    parsed = rs.InputSettings.from_json({"inputSettings": settings, "inputKind": "browser_source"})
    assert parsed == rs.InputSettings(settings, "browser_source")
    assert rs.parse_default_input_settings({"defaultInputSettings": settings}) == settings
    assert rs.parse_default_filter_settings({"defaultFilterSettings": settings}) == settings


def test_input_volume_accepts_ints():
    volume = rs.InputVolume.from_json({"inputVolumeMul": 1, "inputVolumeDb": 0.0})
    assert volume == rs.InputVolume(1.0, 0.0)
    with pytest.raises(ProtocolError):
        rs.InputVolume.from_json({"inputVolumeMul": True, "inputVolumeDb": 0.0})


def test_simple_parsers():
    assert rs.parse_input_muted({"inputMuted": True}) is True
    assert rs.parse_audio_balance({"inputAudioBalance": 0.5}) == 0.5
    assert rs.parse_audio_monitor_type({"monitorType": "OBS_MONITORING_TYPE_NONE"}) == (
        "OBS_MONITORING_TYPE_NONE"
    )
    assert rs.parse_scene_item_id({"sceneItemId": 7}) == 7
    assert rs.parse_current_program_scene({"currentProgramSceneName": "Main"}) == "Main"
    assert rs.parse_current_preview_scene({"currentPreviewSceneName": "Next"}) == "Next"


def test_audio_sync_offset():
    assert rs.parse_audio_sync_offset({"inputAudioSyncOffset": 150}) == timedelta(
        milliseconds=150
    )
    with pytest.raises(ProtocolError, match="too large for an i64"):
        rs.parse_audio_sync_offset({"inputAudioSyncOffset": 2**64 - 1})


def test_audio_tracks():
    data = {
        "inputAudioTracks": {
            "1": True,
            "2": True,
            "3": False,
            "4": False,
            "5": False,
            "6": True,
        }
    }
    assert rs.parse_audio_tracks(data) == [True, True, False, False, False, True]


def test_audio_tracks_out_of_range():
    with pytest.raises(ProtocolError, match="track index `10` is out of range"):
        rs.parse_audio_tracks({"inputAudioTracks": {"10": True}})


def test_property_items():
    items = rs.parse_property_items(
        {"propertyItems": [{"itemName": "A", "itemEnabled": True, "itemValue": 3}]}
    )
    assert items == [rs.ListPropertyItem("A", True, 3)]


def test_filter_list_with_default_name():
    data = {
        "filters": [
            {
                "filterEnabled": True,
                "filterIndex": 0,
                "filterKind": "color_filter",
                "filterSettings": {},
            }
        ]
    }
    (flt,) = rs.parse_filter_list(data)
    assert flt == rs.SourceFilter(True, 0, "color_filter", "", {})


def test_filter_negative_index_rejected():
    with pytest.raises(ProtocolError):
        rs.SourceFilter.from_json(
            {
                "filterEnabled": True,
                "filterIndex": -1,
                "filterKind": "k",
                "filterSettings": {},
            }
        )


def test_scenes():
    data = {
        "currentProgramSceneName": "Main",
        "scenes": [{"sceneName": "Main", "sceneIndex": 0}, {"sceneName": "B", "sceneIndex": 1}],
    }
    scenes = rs.Scenes.from_json(data)
    assert scenes.current_program_scene_name == "Main"
    assert scenes.current_preview_scene_name is None
    assert [scene.name for scene in scenes.scenes] == ["Main", "B"]
    assert [scene.index for scene in scenes.scenes] == [0, 1]


def test_transition_override():
    parsed = rs.SceneTransitionOverride.from_json(
        {"transitionName": "Fade", "transitionDuration": 150}
    )
    assert parsed == rs.SceneTransitionOverride("Fade", timedelta(milliseconds=150))
    cleared = rs.SceneTransitionOverride.from_json(
        {"transitionName": None, "transitionDuration": None}
    )
    assert cleared == rs.SceneTransitionOverride(None, None)


def test_transition_override_duration_field_required():
    with pytest.raises(ProtocolError, match="missing field `transitionDuration`"):
        rs.SceneTransitionOverride.from_json({"transitionName": None})


def test_non_mapping_rejected():
    with pytest.raises(ProtocolError):
        rs.parse_input_muted([True])