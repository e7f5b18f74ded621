"""Wire types of the General Message Passing API: tasks, events and responses."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Optional, TypeVar

_U64_MAX = 2**64 - 1

_T = TypeVar("_T")


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _object(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"invalid type for {what}: expected an object")
    return data


def _required(data: dict, key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _optional(data: dict, key: str, convert: Callable[[Any, str], _T]) -> Optional[_T]:
    value = data.get(key)
    return None if value is None else convert(value, key)


def _expect_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{key}`: expected a string")
    return value


def _expect_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"invalid type for `{key}`: expected a boolean")
    return value


def _expect_uint(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
        raise ValueError(f"invalid value for `{key}`: expected an unsigned integer")
    return value


def _expect_list(value: Any, key: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"invalid type for `{key}`: expected an array")
    return value


def _expect_str_map(value: Any, key: str) -> dict[str, str]:
    mapping = _object(value, f"`{key}`")
    for name, item in mapping.items():
        _expect_str(item, f"{key}.{name}")
    return dict(mapping)


def _req_str(data: dict, key: str) -> str:
    return _expect_str(_required(data, key), key)


def _opt_str(data: dict, key: str) -> Optional[str]:
    return _optional(data, key, _expect_str)


def _req_uint(data: dict, key: str) -> int:
    return _expect_uint(_required(data, key), key)


_E = TypeVar("_E", bound=Enum)


def _enum(enum_cls: type[_E], value: Any, key: str) -> _E:
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        raise ValueError(f"unknown variant {value!r} for `{key}`") from None


class VerificationStatus(str, Enum):
    SUCCEEDED_ON_SOURCE_CHAIN = "succeeded_on_source_chain"
    FAILED_ON_SOURCE_CHAIN = "failed_on_source_chain"
    FAILED_ON_DESTINATION_CHAIN = "failed_on_destination_chain"
    NOT_FOUND_ON_SOURCE_CHAIN = "not_found_on_source_chain"
    FAILED_TO_VERIFY = "failed_to_verify"
    IN_PROGRESS = "in_progress"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        # The JSON encoding of the status, quoted and escaped once more.
        return json.dumps(json.dumps(self.value))


class MessageExecutionStatus(str, Enum):
    SUCCESSFUL = "SUCCESSFUL"
    REVERTED = "REVERTED"


class CannotExecuteMessageReason(str, Enum):
    INSUFFICIENT_GAS = "INSUFFICIENT_GAS"
    ERROR = "ERROR"


class EventType(str, Enum):
    CALL = "CALL"
    GAS_REFUNDED = "GAS_REFUNDED"
    GAS_CREDIT = "GAS_CREDIT"
    MESSAGE_EXECUTED = "MESSAGE_EXECUTED"
    CANNOT_EXECUTE_MESSAGE_V2 = "CANNOT_EXECUTE_MESSAGE_V2"
    ITS_INTERCHAIN_TRANSFER = "ITS_INTERCHAIN_TRANSFER"


class TaskKind(str, Enum):
    VERIFY = "VERIFY"
    EXECUTE = "EXECUTE"
    GATEWAY_TX = "GATEWAY_TX"
    CONSTRUCT_PROOF = "CONSTRUCT_PROOF"
    REACT_TO_WASM_EVENT = "REACT_TO_WASM_EVENT"
    REFUND = "REFUND"
    REACT_TO_EXPIRED_SIGNING_SESSION = "REACT_TO_EXPIRED_SIGNING_SESSION"
    REACT_TO_RETRIABLE_POLL = "REACT_TO_RETRIABLE_POLL"
    UNKNOWN = "UNKNOWN"


@dataclass
class GatewayV2Message:
    message_id: str
    source_chain: str
    source_address: str
    destination_address: str
    payload_hash: str

    @classmethod
    def from_json(cls, text: str) -> GatewayV2Message:
        return cls.from_dict(json.loads(text))

    @classmethod
    def from_dict(cls, data: Any) -> GatewayV2Message:
        data = _object(data, "message")
        return cls(
            message_id=_req_str(data, "messageID"),
            source_chain=_req_str(data, "sourceChain"),
            source_address=_req_str(data, "sourceAddress"),
            destination_address=_req_str(data, "destinationAddress"),
            payload_hash=_req_str(data, "payloadHash"),
        )

    def to_dict(self) -> dict:
        return {
            "messageID": self.message_id,
            "sourceChain": self.source_chain,
            "sourceAddress": self.source_address,
            "destinationAddress": self.destination_address,
            "payloadHash": self.payload_hash,
        }


@dataclass
class Amount:
    token_id: Optional[str]
    amount: str

    @classmethod
    def from_dict(cls, data: Any) -> Amount:
        data = _object(data, "amount")
        return cls(token_id=_opt_str(data, "tokenID"), amount=_req_str(data, "amount"))

    def to_dict(self) -> dict:
        return {"tokenID": self.token_id, "amount": self.amount}


@dataclass
class ScopedMessage:
    message_id: str
    source_chain: str

    @classmethod
    def from_dict(cls, data: Any) -> ScopedMessage:
        data = _object(data, "scoped message")
        return cls(
            message_id=_req_str(data, "messageID"),
            source_chain=_req_str(data, "sourceChain"),
        )

    def to_dict(self) -> dict:
        return {"messageID": self.message_id, "sourceChain": self.source_chain}


@dataclass
class TaskMetadata:
    tx_id: Optional[str] = None
    from_address: Optional[str] = None
    finalized: Optional[bool] = None
    source_context: Optional[dict[str, str]] = None
    scoped_messages: Optional[list[ScopedMessage]] = None

    @classmethod
    def from_dict(cls, data: Any) -> TaskMetadata:
        data = _object(data, "meta")
        scoped = _optional(data, "scopedMessages", _expect_list)
        return cls(
            tx_id=_opt_str(data, "txID"),
            from_address=_opt_str(data, "fromAddress"),
            finalized=_optional(data, "finalized", _expect_bool),
            source_context=_optional(data, "sourceContext", _expect_str_map),
            scoped_messages=None if scoped is None else [ScopedMessage.from_dict(m) for m in scoped],
        )

    def to_dict(self) -> dict:
        return {
            "txID": self.tx_id,
            "fromAddress": self.from_address,
            "finalized": self.finalized,
            "sourceContext": self.source_context,
            "scopedMessages": None
            if self.scoped_messages is None
            else [m.to_dict() for m in self.scoped_messages],
        }


@dataclass
class EventMetadata:
    timestamp: str
    tx_id: Optional[str] = None
    from_address: Optional[str] = None
    finalized: Optional[bool] = None
    source_context: Optional[dict[str, str]] = None

    @classmethod
    def from_dict(cls, data: Any) -> EventMetadata:
        data = _object(data, "meta")
        return cls(
            timestamp=_req_str(data, "timestamp"),
            tx_id=_opt_str(data, "txID"),
            from_address=_opt_str(data, "fromAddress"),
            finalized=_optional(data, "finalized", _expect_bool),
            source_context=_optional(data, "sourceContext", _expect_str_map),
        )

    def to_dict(self) -> dict:
        return {
            "txID": self.tx_id,
            "fromAddress": self.from_address,
            "finalized": self.finalized,
            "sourceContext": self.source_context,
            "timestamp": self.timestamp,
        }


@dataclass
class MessageExecutedEventMetadata:
    common_meta: EventMetadata
    command_id: Optional[str] = None
    child_message_ids: Optional[list[str]] = None
    revert_reason: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> MessageExecutedEventMetadata:
        data = _object(data, "meta")
        children = _optional(data, "childMessageIDs", _expect_list)
        return cls(
            common_meta=EventMetadata.from_dict(data),
            command_id=_opt_str(data, "commandID"),
            child_message_ids=None
            if children is None
            else [_expect_str(c, "childMessageIDs") for c in children],
            revert_reason=_opt_str(data, "revertReason"),
        )

    def to_dict(self) -> dict:
        return {
            **self.common_meta.to_dict(),
            "commandID": self.command_id,
            "childMessageIDs": None if self.child_message_ids is None else list(self.child_message_ids),
            "revertReason": self.revert_reason,
        }


@dataclass
class EventAttribute:
    key: str
    value: str

    @classmethod
    def from_dict(cls, data: Any) -> EventAttribute:
        data = _object(data, "attribute")
        return cls(key=_req_str(data, "key"), value=_req_str(data, "value"))

    def to_dict(self) -> dict:
        return {"key": self.key, "value": self.value}


@dataclass
class WasmEvent:
    attributes: list[EventAttribute]
    type: str

    @classmethod
    def from_dict(cls, data: Any) -> WasmEvent:
        data = _object(data, "event")
        attributes = _expect_list(_required(data, "attributes"), "attributes")
        return cls(
            attributes=[EventAttribute.from_dict(a) for a in attributes],
            type=_req_str(data, "type"),
        )

    def to_dict(self) -> dict:
        return {"attributes": [a.to_dict() for a in self.attributes], "type": self.type}


@dataclass
class QuorumReachedEvent:
    status: VerificationStatus
    content: Any

    @classmethod
    def from_dict(cls, data: Any) -> QuorumReachedEvent:
        data = _object(data, "quorum reached event")
        return cls(
            status=_enum(VerificationStatus, _required(data, "status"), "status"),
            content=_required(data, "content"),
        )

    def to_dict(self) -> dict:
        return {"status": self.status.value, "content": self.content}


@dataclass
class CommonTaskFields:
    id: str
    chain: str
    timestamp: str
    type: str
    meta: Optional[TaskMetadata] = None

    @classmethod
    def from_dict(cls, data: Any) -> CommonTaskFields:
        data = _object(data, "task")
        meta = data.get("meta")
        return cls(
            id=_req_str(data, "id"),
            chain=_req_str(data, "chain"),
            timestamp=_req_str(data, "timestamp"),
            type=_req_str(data, "type"),
            meta=None if meta is None else TaskMetadata.from_dict(meta),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "chain": self.chain,
            "timestamp": self.timestamp,
            "type": self.type,
            "meta": None if self.meta is None else self.meta.to_dict(),
        }


@dataclass
class Task:
    """A task: common header fields plus a kind-specific ``task`` section."""

    common: CommonTaskFields

    KIND: ClassVar[TaskKind] = TaskKind.UNKNOWN
    _has_payload: ClassVar[bool] = True

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """Parse a task; on ``Task`` itself the ``type`` header picks the kind."""
        data = _object(data, "task")
        common = CommonTaskFields.from_dict(data)
        target = _TASK_TYPES.get(common.type, UnknownTask) if cls is Task else cls
        if not target._has_payload:
            return target(common)
        payload = _object(_required(data, "task"), "`task`")
        return target(common, **target._payload_from_dict(payload))

    @classmethod
    def from_json(cls, text: str) -> Task:
        return cls.from_dict(json.loads(text))

    @classmethod
    def _payload_from_dict(cls, payload: dict) -> dict:
        return {}

    def _payload_to_dict(self) -> dict:
        return {}

    def to_dict(self) -> dict:
        out = self.common.to_dict()
        if self._has_payload:
            out["task"] = self._payload_to_dict()
        return out

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def id(self) -> str:
        return self.common.id

    def kind(self) -> TaskKind:
        return self.KIND


def _message(payload: dict) -> GatewayV2Message:
    return GatewayV2Message.from_dict(_required(payload, "message"))


@dataclass
class VerifyTask(Task):
    message: GatewayV2Message
    payload: str

    KIND: ClassVar[TaskKind] = TaskKind.VERIFY

    @classmethod
    def _payload_from_dict(cls, payload: dict) -> dict:
        return {"message": _message(payload), "payload": _req_str(payload, "payload")}

    def _payload_to_dict(self) -> dict:
        return {"message": self.message.to_dict(), "payload": self.payload}


@dataclass
class ExecuteTask(Task):
    message: GatewayV2Message
    payload: str
    available_gas_balance: Amount

    KIND: ClassVar[TaskKind] = TaskKind.EXECUTE

    @classmethod
    def _payload_from_dict(cls, payload: dict) -> dict:
        return {
            "message": _message(payload),
            "payload": _req_str(payload, "payload"),
            "available_gas_balance": Amount.from_dict(_required(payload, "availableGasBalance")),
        }

    def _payload_to_dict(self) -> dict:
        return {
            "message": self.message.to_dict(),
            "payload": self.payload,
            "availableGasBalance": self.available_gas_balance.to_dict(),
        }


@dataclass
class GatewayTxTask(Task):
    execute_data: str

    KIND: ClassVar[TaskKind] = TaskKind.GATEWAY_TX

    @classmethod
    def _payload_from_dict(cls, payload: dict) -> dict:
        return {"execute_data": _req_str(payload, "executeData")}

    def _payload_to_dict(self) -> dict:
        return {"executeData": self.execute_data}


@dataclass
class ConstructProofTask(Task):
    message: GatewayV2Message
    payload: str

    KIND: ClassVar[TaskKind] = TaskKind.CONSTRUCT_PROOF

    @classmethod
    def _payload_from_dict(cls, payload: dict) -> dict:
        return {"message": _message(payload), "payload": _req_str(payload, "payload")}

    def _payload_to_dict(self) -> dict:
        return {"message": self.message.to_dict(), "payload": self.payload}


@dataclass
class ReactToWasmEventTask(Task):
    event: WasmEvent
    height: int

    KIND: ClassVar[TaskKind] = TaskKind.REACT_TO_WASM_EVENT

    @classmethod
    def _payload_from_dict(cls, payload: dict) -> dict:
        return {
            "event": WasmEvent.from_dict(_required(payload, "event")),
            "height": _req_uint(payload, "height"),
        }

    def _payload_to_dict(self) -> dict:
        return {"event": self.event.to_dict(), "height": self.height}


@dataclass
class RefundTask(Task):
    message: GatewayV2Message
    refund_recipient_address: str
    remaining_gas_balance: Amount

    KIND: ClassVar[TaskKind] = TaskKind.REFUND

    @classmethod
    def _payload_from_dict(cls, payload: dict) -> dict:
        return {
            "message": _message(payload),
            "refund_recipient_address": _req_str(payload, "refundRecipientAddress"),
            "remaining_gas_balance": Amount.from_dict(_required(payload, "remainingGasBalance")),
        }

    def _payload_to_dict(self) -> dict:
        return {
            "message": self.message.to_dict(),
            "refundRecipientAddress": self.refund_recipient_address,
            "remainingGasBalance": self.remaining_gas_balance.to_dict(),
        }


@dataclass
class ReactToExpiredSigningSessionTask(Task):
    session_id: int
    broadcast_id: str
    invoked_contract_address: str
    request_payload: str

    KIND: ClassVar[TaskKind] = TaskKind.REACT_TO_EXPIRED_SIGNING_SESSION

    @classmethod
    def _payload_from_dict(cls, payload: dict) -> dict:
        return {
            "session_id": _req_uint(payload, "sessionID"),
            "broadcast_id": _req_str(payload, "broadcastID"),
            "invoked_contract_address": _req_str(payload, "invokedContractAddress"),
            "request_payload": _req_str(payload, "requestPayload"),
        }

    def _payload_to_dict(self) -> dict:
        return {
            "sessionID": self.session_id,
            "broadcastID": self.broadcast_id,
            "invokedContractAddress": self.invoked_contract_address,
            "requestPayload": self.request_payload,
        }


@dataclass
class ReactToRetriablePollTask(Task):
    poll_id: int
    broadcast_id: str
    invoked_contract_address: str
    request_payload: str
    quorum_reached_events: Optional[list[QuorumReachedEvent]] = None

    KIND: ClassVar[TaskKind] = TaskKind.REACT_TO_RETRIABLE_POLL

    @classmethod
    def _payload_from_dict(cls, payload: dict) -> dict:
        events = _optional(payload, "quorumReachedEvents", _expect_list)
        return {
            "poll_id": _req_uint(payload, "pollID"),
            "broadcast_id": _req_str(payload, "broadcastID"),
            "invoked_contract_address": _req_str(payload, "invokedContractAddress"),
            "request_payload": _req_str(payload, "requestPayload"),
            "quorum_reached_events": None
            if events is None
            else [QuorumReachedEvent.from_dict(e) for e in events],
        }

    def _payload_to_dict(self) -> dict:
        return {
            "pollID": self.poll_id,
            "broadcastID": self.broadcast_id,
            "invokedContractAddress": self.invoked_contract_address,
            "requestPayload": self.request_payload,
            "quorumReachedEvents": None
            if self.quorum_reached_events is None
            else [e.to_dict() for e in self.quorum_reached_events],
        }


@dataclass
class UnknownTask(Task):
    KIND: ClassVar[TaskKind] = TaskKind.UNKNOWN
    _has_payload: ClassVar[bool] = False


_TASK_TYPES: dict[str, type[Task]] = {
    cls.KIND.value: cls
    for cls in (
        VerifyTask,
        ExecuteTask,
        GatewayTxTask,
        ConstructProofTask,
        ReactToWasmEventTask,
        RefundTask,
        ReactToExpiredSigningSessionTask,
        ReactToRetriablePollTask,
    )
}


@dataclass
class CommonEventFields:
    type: str
    event_id: str
    meta: Optional[Any] = None

    @classmethod
    def _from_dict(cls, data: dict, meta_cls: Any) -> CommonEventFields:
        meta = data.get("meta")
        return cls(
            type=_req_str(data, "type"),
            event_id=_req_str(data, "eventID"),
            meta=None if meta is None else meta_cls.from_dict(meta),
        )

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "eventID": self.event_id,
            "meta": None if self.meta is None else self.meta.to_dict(),
        }


@dataclass
class Event:
    """An event reported by a relayer; the variant is decided by its shape."""

    common: CommonEventFields

    _meta_cls: ClassVar[Any] = EventMetadata

    @classmethod
    def _from_dict(cls, data: dict) -> Event:
        common = CommonEventFields._from_dict(data, cls._meta_cls)
        return cls(common, **cls._body_from_dict(data))

    @classmethod
    def _body_from_dict(cls, data: dict) -> dict:
        return {}

    def _body_to_dict(self) -> dict:
        return {}

    def to_dict(self) -> dict:
        return {**self.common.to_dict(), **self._body_to_dict()}

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def common_fields(self) -> tuple[str, str, str]:
        """Return the event ID, its type and its timestamp (``"unknown"`` without meta)."""
        meta = self.common.meta
        if meta is None:
            timestamp = "unknown"
        elif isinstance(meta, MessageExecutedEventMetadata):
            timestamp = meta.common_meta.timestamp
        else:
            timestamp = meta.timestamp
        return self.common.event_id, self.common.type, timestamp

    def message_id(self) -> str:
        return getattr(self, "msg_id")


@dataclass
class CallEvent(Event):
    message: GatewayV2Message
    destination_chain: str
    payload: str

    @classmethod
    def _body_from_dict(cls, data: dict) -> dict:
        return {
            "message": _message(data),
            "destination_chain": _req_str(data, "destinationChain"),
            "payload": _req_str(data, "payload"),
        }

    def _body_to_dict(self) -> dict:
        return {
            "message": self.message.to_dict(),
            "destinationChain": self.destination_chain,
            "payload": self.payload,
        }

    def message_id(self) -> str:
        return self.message.message_id


@dataclass
class GasRefundedEvent(Event):
    msg_id: str
    recipient_address: str
    refunded_amount: Amount
    cost: Amount

    @classmethod
    def _body_from_dict(cls, data: dict) -> dict:
        return {
            "msg_id": _req_str(data, "messageID"),
            "recipient_address": _req_str(data, "recipientAddress"),
            "refunded_amount": Amount.from_dict(_required(data, "refundedAmount")),
            "cost": Amount.from_dict(_required(data, "cost")),
        }

    def _body_to_dict(self) -> dict:
        return {
            "messageID": self.msg_id,
            "recipientAddress": self.recipient_address,
            "refundedAmount": self.refunded_amount.to_dict(),
            "cost": self.cost.to_dict(),
        }


@dataclass
class GasCreditEvent(Event):
    msg_id: str
    refund_address: str
    payment: Amount

    @classmethod
    def _body_from_dict(cls, data: dict) -> dict:
        return {
            "msg_id": _req_str(data, "messageID"),
            "refund_address": _req_str(data, "refundAddress"),
            "payment": Amount.from_dict(_required(data, "payment")),
        }

    def _body_to_dict(self) -> dict:
        return {
            "messageID": self.msg_id,
            "refundAddress": self.refund_address,
            "payment": self.payment.to_dict(),
        }


@dataclass
class MessageExecutedEvent(Event):
    msg_id: str
    source_chain: str
    status: MessageExecutionStatus
    cost: Amount

    _meta_cls: ClassVar[Any] = MessageExecutedEventMetadata

    @classmethod
    def _body_from_dict(cls, data: dict) -> dict:
        return {
            "msg_id": _req_str(data, "messageID"),
            "source_chain": _req_str(data, "sourceChain"),
            "status": _enum(MessageExecutionStatus, _required(data, "status"), "status"),
            "cost": Amount.from_dict(_required(data, "cost")),
        }

    def _body_to_dict(self) -> dict:
        return {
            "messageID": self.msg_id,
            "sourceChain": self.source_chain,
            "status": self.status.value,
            "cost": self.cost.to_dict(),
        }


@dataclass
class CannotExecuteMessageV2Event(Event):
    msg_id: str
    source_chain: str
    reason: CannotExecuteMessageReason
    details: str

    @classmethod
    def _body_from_dict(cls, data: dict) -> dict:
        return {
            "msg_id": _req_str(data, "messageID"),
            "source_chain": _req_str(data, "sourceChain"),
            "reason": _enum(CannotExecuteMessageReason, _required(data, "reason"), "reason"),
            "details": _req_str(data, "details"),
        }

    def _body_to_dict(self) -> dict:
        return {
            "messageID": self.msg_id,
            "sourceChain": self.source_chain,
            "reason": self.reason.value,
            "details": self.details,
        }


@dataclass
class ITSInterchainTransferEvent(Event):
    msg_id: str
    destination_chain: str
    token_spent: Amount
    source_address: str
    destination_address: str
    data_hash: str

    @classmethod
    def _body_from_dict(cls, data: dict) -> dict:
        return {
            "msg_id": _req_str(data, "messageID"),
            "destination_chain": _req_str(data, "destinationChain"),
            "token_spent": Amount.from_dict(_required(data, "tokenSpent")),
            "source_address": _req_str(data, "sourceAddress"),
            "destination_address": _req_str(data, "destinationAddress"),
            "data_hash": _req_str(data, "dataHash"),
        }

    def _body_to_dict(self) -> dict:
        return {
            "messageID": self.msg_id,
            "destinationChain": self.destination_chain,
            "tokenSpent": self.token_spent.to_dict(),
            "sourceAddress": self.source_address,
            "destinationAddress": self.destination_address,
            "dataHash": self.data_hash,
        }


_EVENT_VARIANTS: tuple[type[Event], ...] = (
    CallEvent,
    GasRefundedEvent,
    GasCreditEvent,
    MessageExecutedEvent,
    CannotExecuteMessageV2Event,
    ITSInterchainTransferEvent,
)


def parse_event(data: Any) -> Event:
    """Parse an event as the first variant whose fields it carries."""
    data = _object(data, "event")
    for variant in _EVENT_VARIANTS:
        try:
            return variant._from_dict(data)
        except ValueError:
            continue
    raise ValueError("data did not match any variant of untagged enum Event")


@dataclass
class PostEventResult:
    status: str
    index: int
    error: Optional[str] = None
    retriable: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Any) -> PostEventResult:
        data = _object(data, "result")
        return cls(
            status=_req_str(data, "status"),
            index=_req_uint(data, "index"),
            error=_opt_str(data, "error"),
            retriable=_optional(data, "retriable", _expect_bool),
        )

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "index": self.index,
            "error": self.error,
            "retriable": self.retriable,
        }


@dataclass
class PostEventResponse:
    results: list[PostEventResult]

    @classmethod
    def from_dict(cls, data: Any) -> PostEventResponse:
        data = _object(data, "response")
        results = _expect_list(_required(data, "results"), "results")
        return cls(results=[PostEventResult.from_dict(r) for r in results])

    def to_dict(self) -> dict:
        return {"results": [r.to_dict() for r in self.results]}


@dataclass
class StorePayloadResult:
    keccak256: str

    @classmethod
    def from_dict(cls, data: Any) -> StorePayloadResult:
        data = _object(data, "result")
        return cls(keccak256=_req_str(data, "keccak256"))

    def to_dict(self) -> dict:
        return {"keccak256": self.keccak256}