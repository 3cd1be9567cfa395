"""Message envelopes exchanged with the obs-websocket server.

Client messages (``Identify``, ``Reidentify``, ``Request`` and
``RequestBatch``) are turned into JSON-ready dictionaries carrying their
op code. Server messages are parsed from JSON text or decoded mappings
into typed objects.
"""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from semver import Version as SemVer

__all__ = [
    "ProtocolError",
    "EventSubscription",
    "ExecutionType",
    "RequestPayload",
    "Identify",
    "Reidentify",
    "Request",
    "RequestBatch",
    "StatusCode",
    "WebSocketCloseCode",
    "Authentication",
    "Hello",
    "Identified",
    "Status",
    "RequestResponse",
    "RequestBatchResponse",
    "EventMessage",
    "parse_server_message",
]

_U16_MAX = 2**16 - 1
_U32_MAX = 2**32 - 1


class ProtocolError(ValueError):
    """Raised when a server message cannot be decoded."""


class _ClientOpCode(enum.IntEnum):
    IDENTIFY = 1
    REIDENTIFY = 3
    REQUEST = 6
    REQUEST_BATCH = 8


class _ServerOpCode(enum.IntEnum):
    HELLO = 0
    IDENTIFIED = 2
    EVENT = 5
    REQUEST_RESPONSE = 7
    REQUEST_BATCH_RESPONSE = 9


class EventSubscription(enum.IntFlag):
    """Event categories a client may subscribe to."""

    NONE = 0
    GENERAL = 1 << 0
    CONFIG = 1 << 1
    SCENES = 1 << 2
    INPUTS = 1 << 3
    TRANSITIONS = 1 << 4
    FILTERS = 1 << 5
    OUTPUTS = 1 << 6
    SCENE_ITEMS = 1 << 7
    MEDIA_INPUTS = 1 << 8
    VENDORS = 1 << 9
    UI = 1 << 10
    ALL = (
        GENERAL
        | CONFIG
        | SCENES
        | INPUTS
        | TRANSITIONS
        | FILTERS
        | OUTPUTS
        | SCENE_ITEMS
        | MEDIA_INPUTS
        | VENDORS
        | UI
    )
    INPUT_VOLUME_METERS = 1 << 16
    INPUT_ACTIVE_STATE_CHANGED = 1 << 17
    INPUT_SHOW_STATE_CHANGED = 1 << 18
    SCENE_ITEM_TRANSFORM_CHANGED = 1 << 19


class ExecutionType(enum.IntEnum):
    """How the server processes a request batch."""

    NONE = -1
    SERIAL_REALTIME = 0
    SERIAL_FRAME = 1
    PARALLEL = 2


class StatusCode(enum.IntEnum):
    """Result status of a request."""

    UNKNOWN = 0
    NO_ERROR = 10
    SUCCESS = 100
    MISSING_REQUEST_TYPE = 203
    UNKNOWN_REQUEST_TYPE = 204
    GENERIC_ERROR = 205
    UNSUPPORTED_REQUEST_BATCH_EXECUTION_TYPE = 206
    MISSING_REQUEST_FIELD = 300
    MISSING_REQUEST_DATA = 301
    INVALID_REQUEST_FIELD = 400
    INVALID_REQUEST_FIELD_TYPE = 401
    REQUEST_FIELD_OUT_OF_RANGE = 402
    REQUEST_FIELD_EMPTY = 403
    TOO_MANY_REQUEST_FIELDS = 404
    OUTPUT_RUNNING = 500
    OUTPUT_NOT_RUNNING = 501
    OUTPUT_PAUSED = 502
    OUTPUT_NOT_PAUSED = 503
    OUTPUT_DISABLED = 504
    STUDIO_MODE_ACTIVE = 505
    STUDIO_MODE_NOT_ACTIVE = 506
    RESOURCE_NOT_FOUND = 600
    RESOURCE_ALREADY_EXISTS = 601
    INVALID_RESOURCE_TYPE = 602
    NOT_ENOUGH_RESOURCES = 603
    INVALID_RESOURCE_STATE = 604
    INVALID_INPUT_KIND = 605
    RESOURCE_NOT_CONFIGURABLE = 606
    INVALID_FILTER_KIND = 607
    RESOURCE_CREATION_FAILED = 700
    RESOURCE_ACTION_FAILED = 701
    REQUEST_PROCESSING_FAILED = 702
    CANNOT_ACT = 703


class WebSocketCloseCode(enum.IntEnum):
    """Close codes the server uses when ending the web-socket session."""

    UNKNOWN_REASON = 4000
    MESSAGE_DECODE_ERROR = 4002
    MISSING_DATA_FIELD = 4003
    INVALID_DATA_FIELD_TYPE = 4004
    INVALID_DATA_FIELD_VALUE = 4005
    UNKNOWN_OP_CODE = 4006
    NOT_IDENTIFIED = 4007
    ALREADY_IDENTIFIED = 4008
    AUTHENTICATION_FAILED = 4009
    UNSUPPORTED_RPC_VERSION = 4010
    SESSION_INVALIDATED = 4011
    UNSUPPORTED_FEATURE = 4012


def _envelope(op: _ClientOpCode, data: dict[str, Any]) -> dict[str, Any]:
    return {"op": int(op), "d": data}


@dataclass(frozen=True)
class RequestPayload:
    """A request type together with its optional request data."""

    request_type: str
    request_data: Mapping[str, Any] | None = None

    def to_json(self) -> dict[str, Any]:
        """Return the ``requestType``/``requestData`` pair as a dictionary."""
        payload: dict[str, Any] = {"requestType": self.request_type}
        if self.request_data is not None:
            payload["requestData"] = dict(self.request_data)
        return payload


@dataclass(frozen=True)
class Identify:
    """First client message, answering the server's ``Hello``."""

    rpc_version: int
    authentication: str | None = None
    event_subscriptions: EventSubscription | None = None

    def to_message(self) -> dict[str, Any]:
        data: dict[str, Any] = {"rpcVersion": self.rpc_version}
        if self.authentication is not None:
            data["authentication"] = self.authentication
        if self.event_subscriptions is not None:
            data["eventSubscriptions"] = int(self.event_subscriptions)
        return _envelope(_ClientOpCode.IDENTIFY, data)


@dataclass(frozen=True)
class Reidentify:
    """Updates session parameters after identification."""

    event_subscriptions: EventSubscription | None = None

    def to_message(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.event_subscriptions is not None:
            data["eventSubscriptions"] = int(self.event_subscriptions)
        return _envelope(_ClientOpCode.REIDENTIFY, data)


@dataclass(frozen=True)
class Request:
    """A single request to the server."""

    request_id: str
    payload: RequestPayload

    def to_message(self) -> dict[str, Any]:
        data: dict[str, Any] = {"requestId": self.request_id}
        data.update(self.payload.to_json())
        return _envelope(_ClientOpCode.REQUEST, data)


@dataclass(frozen=True)
class RequestBatch:
    """A batch of requests processed in order by the server."""

    request_id: str
    requests: Sequence[RequestPayload] = field(default_factory=tuple)
    halt_on_failure: bool | None = None
    execution_type: ExecutionType | None = None

    def to_message(self) -> dict[str, Any]:
        data: dict[str, Any] = {"requestId": self.request_id}
        if self.halt_on_failure is not None:
            data["haltOnFailure"] = self.halt_on_failure
        data["requests"] = [request.to_json() for request in self.requests]
        if self.execution_type is not None:
            data["executionType"] = int(self.execution_type)
        return _envelope(_ClientOpCode.REQUEST_BATCH, data)


def _object(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ProtocolError(f"invalid type: {type(data).__name__}, expected {what}")
    return data


def _field(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ProtocolError(f"missing field `{key}`")
    return data[key]


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ProtocolError(f"field `{key}`: expected a string")
    return value


def _optional_string(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ProtocolError(f"field `{key}`: expected a string")
    return value


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = _field(data, key)
    if not isinstance(value, bool):
        raise ProtocolError(f"field `{key}`: expected a boolean")
    return value


def _unsigned(data: Mapping[str, Any], key: str, maximum: int) -> int:
    value = _field(data, key)
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= maximum:
        raise ProtocolError(f"field `{key}`: expected an integer in 0..={maximum}")
    return value


@dataclass(frozen=True)
class Authentication:
    """Challenge and salt the server sends when authentication is required."""

    challenge: str
    salt: str

    @classmethod
    def from_json(cls, data: Any) -> Authentication:
        data = _object(data, "struct Authentication")
        return cls(challenge=_string(data, "challenge"), salt=_string(data, "salt"))


@dataclass(frozen=True)
class Hello:
    """First message the server sends on connection."""

    obs_web_socket_version: SemVer
    rpc_version: int
    authentication: Authentication | None = None

    @classmethod
    def from_json(cls, data: Any) -> Hello:
        data = _object(data, "struct Hello")
        text = _string(data, "obsWebSocketVersion")
        try:
            version = SemVer.parse(text)
        except (ValueError, TypeError) as exc:
            raise ProtocolError(f"field `obsWebSocketVersion`: {exc}") from exc
        raw_auth = data.get("authentication")
        return cls(
            obs_web_socket_version=version,
            rpc_version=_unsigned(data, "rpcVersion", _U32_MAX),
            authentication=None if raw_auth is None else Authentication.from_json(raw_auth),
        )


@dataclass(frozen=True)
class Identified:
    """Confirms identification; the session is ready."""

    negotiated_rpc_version: int

    @classmethod
    def from_json(cls, data: Any) -> Identified:
        data = _object(data, "struct Identified")
        return cls(negotiated_rpc_version=_unsigned(data, "negotiatedRpcVersion", _U32_MAX))


@dataclass(frozen=True)
class Status:
    """Outcome of a request."""

    result: bool
    code: StatusCode
    comment: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> Status:
        data = _object(data, "struct Status")
        raw_code = _unsigned(data, "code", _U16_MAX)
        try:
            code = StatusCode(raw_code)
        except ValueError as exc:
            raise ProtocolError(f"invalid value: unknown status code {raw_code}") from exc
        return cls(
            result=_boolean(data, "result"),
            code=code,
            comment=_optional_string(data, "comment"),
        )


@dataclass(frozen=True)
class RequestResponse:
    """The server's answer to a single request."""

    type: str
    id: str
    status: Status
    data: Any = None

    @classmethod
    def from_json(cls, data: Any) -> RequestResponse:
        data = _object(data, "struct RequestResponse")
        return cls(
            type=_string(data, "requestType"),
            id=_string(data, "requestId"),
            status=Status.from_json(_field(data, "requestStatus")),
            data=data.get("responseData"),
        )


@dataclass(frozen=True)
class RequestBatchResponse:
    """The server's answer to a request batch."""

    id: str
    results: list[Any]

    @classmethod
    def from_json(cls, data: Any) -> RequestBatchResponse:
        data = _object(data, "struct RequestBatchResponse")
        results = _field(data, "results")
        if not isinstance(results, list):
            raise ProtocolError("field `results`: expected a sequence")
        return cls(id=_string(data, "requestId"), results=list(results))


@dataclass(frozen=True)
class EventMessage:
    """An event emitted by the server, kept as its raw payload."""

    data: Any


ServerMessage = Hello | Identified | EventMessage | RequestResponse | RequestBatchResponse


def parse_server_message(message: str | bytes | Mapping[str, Any]) -> ServerMessage:
    """Decode a server message from JSON text or an already decoded mapping."""
    if isinstance(message, (str, bytes, bytearray)):
        try:
            message = json.loads(message)
        except json.JSONDecodeError as exc:
            raise ProtocolError(f"invalid JSON: {exc}") from exc
    raw = _object(message, "struct RawServerMessage")
    op_value = _field(raw, "op")
    data = _field(raw, "d")
    try:
        if isinstance(op_value, bool) or not isinstance(op_value, int):
            raise ValueError
        op = _ServerOpCode(op_value)
    except ValueError as exc:
        raise ProtocolError(f"invalid value: unknown op code {op_value!r}") from exc

    if op is _ServerOpCode.HELLO:
        return Hello.from_json(data)
    if op is _ServerOpCode.IDENTIFIED:
        return Identified.from_json(data)
    if op is _ServerOpCode.EVENT:
        return EventMessage(data=data)
    if op is _ServerOpCode.REQUEST_RESPONSE:
        return RequestResponse.from_json(data)
    return RequestBatchResponse.from_json(data)