# obswire

`obswire` works with the OBS Studio WebSocket (v5) protocol at the message level.
It builds the JSON-ready dictionaries a client sends, and it parses the messages and
response data the server sends back. It opens no connections of its own, so you can
use it with any WebSocket client.

## Installation

```
pip install obswire
```

To install the test dependencies as well, use `pip install "obswire[test]"`.
The test suite runs under pytest.

## Modules

### `obswire.protocol`: message envelopes

- Client messages. Each has a `to_message()` method that returns `{"op": ..., "d": ...}`.
  - `Identify(rpc_version, authentication=None, event_subscriptions=None)`
  - `Reidentify(event_subscriptions=None)`
  - `Request(request_id, payload)`
  - `RequestBatch(request_id, requests=(), halt_on_failure=None, execution_type=None)`
- Optional fields that are `None` are left out of the message.
- `RequestPayload(request_type, request_data=None)` is a request type together with its data. Every request builder returns one.
- `EventSubscription` is an `IntFlag` of event categories. `ALL` covers every category that is not high-volume. The high-volume flags, such as `INPUT_VOLUME_METERS`, have to be added explicitly.
- `ExecutionType` holds the batch execution modes.
- `parse_server_message(message)` accepts JSON text, bytes or an already decoded mapping. It returns one of:
  - `Hello`
  - `Identified`
  - `RequestResponse`, which carries a `Status`
  - `RequestBatchResponse`
  - `EventMessage`
- `StatusCode` and `WebSocketCloseCode` are `IntEnum`s of the protocol's result codes and close codes.

### Request builders

Each builder is a plain function that returns a `RequestPayload`.

- `obswire.requests_general`: configuration, general, hotkeys, outputs, profiles, recording, replay buffer, scene collections, streaming, virtual camera, transitions and media inputs. It also provides:
  - `Realm` for the persistent data realms.
  - `VideoSettingsUpdate`, which can be built from existing settings with `from_settings`.
  - `KeyModifiers`.
- `obswire.requests_scenes`: scenes, transition overrides, source state and screenshots.
- `obswire.requests_inputs`: inputs and filters.
  - `set_input_volume(name, mul=...)` and `set_input_volume(name, db=...)` each take exactly one of the two keywords.
  - `set_input_audio_tracks` takes six states. A state of `None` leaves that track unchanged.
- `obswire.requests_ui`: studio mode, the input dialogs, the monitor list and projectors.
  - The location of a projector is a monitor index, or a `QtGeometry`.
  - `QtGeometry` is built from a `QtRect` and a `QtWindowState`.
  - `QtGeometry.serialize()` encodes the geometry as base64 in Qt's saved-geometry format.

Durations are passed as `datetime.timedelta` and sent as whole milliseconds.

### Response models

Each model is a frozen dataclass with a `from_json(data)` class method. Single-field answers have `parse_*` helpers.

- `obswire.responses_general`:
  - `VideoSettings`, `StreamServiceSettings`
  - `Version`, `Stats`, `VendorResponse`
  - `Profiles`, `ProfileParameter`, `SceneCollections`
  - `SourceActive`, `Monitor`
  - `parse_record_directory`, `parse_hotkeys`, `parse_image_data`, `parse_studio_mode_enabled`, `parse_monitor_list`
- `obswire.responses_sources`:
  - `Input`, `SpecialInputs`, `InputSettings`, `InputVolume`, `ListPropertyItem`
  - `SourceFilter`
  - `Scene`, `Scenes`, `SceneTransitionOverride`
  - parsers for input lists, mute state, audio balance, sync offset, monitor type, audio tracks, filters, groups and the current scenes
- `obswire.responses_outputs`:
  - `Output`, `OutputStatus`
  - `RecordStatus`, `StreamStatus`
  - `MediaStatus` with `MediaState`, where unknown states become `MediaState.UNKNOWN`
  - `Transition`, `SceneTransitionList`, `CurrentSceneTransition`
  - parsers for output state, paths, transition kinds and the transition cursor

### `obswire.transition_settings`

Typed settings for transitions. Each has a `to_json()` method.

- `Swipe` and `Slide`, which use `Direction`.
- `Stinger`, which uses `TransitionPointType`, `AudioMonitoring` and `AudioFadeStyle`.
- `FadeToColor`.
- `Wipe`, which uses `LumaImage`.

The module also defines the kind identifiers `TYPE_SWIPE`, `TYPE_SLIDE`, `TYPE_STINGER`, `TYPE_FADE_TO_COLOR` and `TYPE_WIPE`.

### `obswire.codecs`

The value encodings used on the wire:

- Durations in milliseconds: `millis_to_json`, `millis_from_json` and their `optional_` forms.
- `HH:MM:SS.mmm` timecodes: `timecode_to_json`, `timecode_from_json`.
- Audio track maps keyed `"1"` to `"6"`: `audio_tracks_to_json`, `audio_tracks_from_json`.
- JSON held in strings: `json_string_to_json`, `json_string_from_json`.
- Colours packed as ABGR integers: `Rgba`, `rgba_to_abgr`, `rgba_from_abgr`.

## Example

```python
import json
from datetime import timedelta

from obswire.protocol import (
    EventSubscription, Identify, Request, RequestResponse, parse_server_message,
)
from obswire.requests_general import set_current_scene_transition_duration
from obswire.requests_scenes import get_scene_list
from obswire.responses_sources import Scenes

identify = Identify(rpc_version=1, event_subscriptions=EventSubscription.ALL)
outgoing = json.dumps(identify.to_message())

request = Request("req-1", get_scene_list())
outgoing = json.dumps(request.to_message())

payload = set_current_scene_transition_duration(timedelta(milliseconds=300))
# payload.to_json() == {"requestType": "SetCurrentSceneTransitionDuration",
#                       "requestData": {"transitionDuration": 300}}

incoming = {
    "op": 7,
    "d": {
        "requestType": "GetSceneList",
        "requestId": "req-1",
        "requestStatus": {"result": True, "code": 100},
        "responseData": {
            "currentProgramSceneName": "Main",
            "currentPreviewSceneName": None,
            "scenes": [{"sceneName": "Main", "sceneIndex": 0}],
        },
    },
}
message = parse_server_message(incoming)
if isinstance(message, RequestResponse) and message.status.result:
    scenes = Scenes.from_json(message.data)
```

## Errors

- `obswire.codecs.CodecError` is raised when a value cannot be encoded or decoded.
- `obswire.protocol.ProtocolError` is raised when a server message or response data is malformed. Codec failures inside response data are raised as `ProtocolError`. Both error classes derive from `ValueError`.
- Request builders raise `ValueError` or `TypeError` for arguments that are out of range or of the wrong kind.

## What it does not do

- It sends and receives nothing. Connecting, keeping the session alive and matching responses to request ids are left to the caller.
- It does not compute the authentication string. `Hello.authentication` exposes the server's challenge and salt, and the string built from them is passed to `Identify` as `authentication`.
- Events are not decoded into typed objects. `EventMessage.data` holds the raw event payload.
- There are no builders or models for scene item requests.
- There are no typed settings objects for input kinds. Input settings are passed as plain mappings.
- Media actions and audio monitor types are given and returned as their wire identifier strings. An enum whose values are those strings is also accepted.