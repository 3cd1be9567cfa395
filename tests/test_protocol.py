import json

import pytest

from obswire.protocol import (
    Authentication,
    EventMessage,
    EventSubscription,
    ExecutionType,
    Hello,
    Identified,
    Identify,
    ProtocolError,
    Reidentify,
    Request,
    RequestBatch,
    RequestBatchResponse,
    RequestPayload,
    RequestResponse,
    Status,
    StatusCode,
    WebSocketCloseCode,
    parse_server_message,
)


def test_event_subscription_all_combines_normal_categories():
    combined = EventSubscription.NONE
    for flag in (
        EventSubscription.GENERAL,
        EventSubscription.CONFIG,
        EventSubscription.SCENES,
        EventSubscription.INPUTS,
        EventSubscription.TRANSITIONS,
        EventSubscription.FILTERS,
        EventSubscription.OUTPUTS,
        EventSubscription.SCENE_ITEMS,
        EventSubscription.MEDIA_INPUTS,
        EventSubscription.VENDORS,
        EventSubscription.UI,
    ):
        combined |= flag
    combined_message = Identify(rpc_version=1, event_subscriptions=combined).to_message()
    all_message = Identify(
        rpc_version=1, event_subscriptions=EventSubscription.ALL
    ).to_message()
    assert combined_message == all_message
    assert all_message["d"]["eventSubscriptions"] == 0b111_1111_1111
    assert not all_message["d"]["eventSubscriptions"] & (1 << 16)


def test_high_volume_bits():
    meters = Reidentify(EventSubscription.INPUT_VOLUME_METERS).to_message()
    assert meters == {"op": 3, "d": {"eventSubscriptions": 1 << 16}}
    transform = Reidentify(EventSubscription.SCENE_ITEM_TRANSFORM_CHANGED).to_message()
    assert transform == {"op": 3, "d": {"eventSubscriptions": 1 << 19}}


def test_payload_without_data_has_only_type():
    assert RequestPayload("GetVersion").to_json() == {"requestType": "GetVersion"}


def test_payload_with_data():
    payload = RequestPayload("SetCurrentProgramScene", {"sceneName": "Main"})
    assert payload.to_json() == {
        "requestType": "SetCurrentProgramScene",
        "requestData": {"sceneName": "Main"},
    }


def test_identify_minimal():
    message = Identify(rpc_version=1).to_message()
    assert message == {"op": 1, "d": {"rpcVersion": 1}}


def test_identify_full():
    message = Identify(
        rpc_version=1,
        authentication="token",
        event_subscriptions=EventSubscription.GENERAL | EventSubscription.UI,
    ).to_message()
    assert message["op"] == 1
    assert message["d"]["authentication"] == "token"
    assert message["d"]["eventSubscriptions"] == int(
        EventSubscription.GENERAL | EventSubscription.UI
    )
    json.dumps(message)


def test_reidentify():
    assert Reidentify().to_message() == {"op": 3, "d": {}}
    message = Reidentify(EventSubscription.NONE).to_message()
    assert message == {"op": 3, "d": {"eventSubscriptions": 0}}


def test_request_flattens_payload():
    message = Request("abc", RequestPayload("GetStats")).to_message()
    assert message == {"op": 6, "d": {"requestId": "abc", "requestType": "GetStats"}}


def test_request_batch():
    batch = RequestBatch(
        "batch",
        [RequestPayload("GetVersion"), RequestPayload("CreateScene", {"sceneName": "x"})],
        halt_on_failure=True,
        execution_type=ExecutionType.SERIAL_FRAME,
    )
    message = batch.to_message()
    assert message["op"] == 8
    assert message["d"]["haltOnFailure"] is True
    assert message["d"]["executionType"] == 1
    assert message["d"]["requests"][1] == {
        "requestType": "CreateScene",
        "requestData": {"sceneName": "x"},
    }


def test_request_batch_omits_unset_options():
    data = RequestBatch("b", []).to_message()["d"]
    assert data == {"requestId": "b", "requests": []}


def test_execution_type_none_is_negative():
    data = RequestBatch("b", [], execution_type=ExecutionType.NONE).to_message()["d"]
    assert data["executionType"] == -1
    assert json.loads(json.dumps(data))["executionType"] == -1


def test_parse_hello_text():
    text = json.dumps(
        {
            "op": 0,
            "d": {
                "obsWebSocketVersion": "5.1.0",
                "rpcVersion": 1,
                "authentication": {"challenge": "c", "salt": "s"},
            },
        }
    )
    hello = parse_server_message(text)
    assert isinstance(hello, Hello)
    assert str(hello.obs_web_socket_version) == "5.1.0"
    assert hello.rpc_version == 1
    assert hello.authentication == Authentication(challenge="c", salt="s")


def test_parse_hello_without_auth():
    hello = parse_server_message(
        {"op": 0, "d": {"obsWebSocketVersion": "5.0.0", "rpcVersion": 1}}
    )
    assert hello.authentication is None


def test_parse_hello_bad_version():
    with pytest.raises(ProtocolError):
        parse_server_message({"op": 0, "d": {"obsWebSocketVersion": "five", "rpcVersion": 1}})


def test_parse_identified():
    msg = parse_server_message({"op": 2, "d": {"negotiatedRpcVersion": 1}})
    assert msg == Identified(negotiated_rpc_version=1)


def test_parse_event_keeps_data():
    msg = parse_server_message({"op": 5, "d": {"eventType": "X"}})
    assert msg == EventMessage(data={"eventType": "X"})


def test_parse_request_response():
    msg = parse_server_message(
        {
            "op": 7,
            "d": {
                "requestType": "GetVersion",
                "requestId": "1",
                "requestStatus": {"result": False, "code": 600, "comment": "gone"},
            },
        }
    )
    assert isinstance(msg, RequestResponse)
    assert msg.status == Status(False, StatusCode.RESOURCE_NOT_FOUND, "gone")
    assert msg.data is None


def test_parse_request_response_with_data():
    msg = parse_server_message(
        {
            "op": 7,
            "d": {
                "requestType": "GetStats",
                "requestId": "2",
                "requestStatus": {"result": True, "code": 100},
                "responseData": {"a": 1},
            },
        }
    )
    assert msg.status.code is StatusCode.SUCCESS
    assert msg.status.comment is None
    assert msg.data == {"a": 1}


def test_parse_batch_response():
    msg = parse_server_message({"op": 9, "d": {"requestId": "b", "results": [{}, {}]}})
    assert msg == RequestBatchResponse(id="b", results=[{}, {}])


def test_unknown_op_code():
    with pytest.raises(ProtocolError):
        parse_server_message({"op": 1, "d": {}})


def test_unknown_status_code():
    with pytest.raises(ProtocolError):
        Status.from_json({"result": True, "code": 101})


def test_missing_field():
    with pytest.raises(ProtocolError, match="missing field `negotiatedRpcVersion`"):
        parse_server_message({"op": 2, "d": {}})


def test_missing_envelope_field():
    with pytest.raises(ProtocolError, match="missing field `d`"):
        parse_server_message({"op": 2})


def test_invalid_json_text():
    with pytest.raises(ProtocolError):
        parse_server_message("{not json")


def test_close_codes():
    assert WebSocketCloseCode(4011) is WebSocketCloseCode.SESSION_INVALIDATED
    assert int(WebSocketCloseCode.UNKNOWN_REASON) == 4000