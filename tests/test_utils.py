import json
import logging

import pytest

from gmpmock.gmp_types import (
    GatewayTxTask,
    ReactToExpiredSigningSessionTask,
    TaskKind,
    UnknownTask,
    VerifyTask,
)
from gmpmock.utils import TaskParseError, parse_task, setup_logging

MESSAGE = {
    "messageID": "0xabc-1",
    "sourceChain": "xrpl",
    "sourceAddress": "rSourceAddress",
    "destinationAddress": "0xDestination",
    "payloadHash": "00ff",
}


def _header(task_type, meta=None):
    return {
        "id": "0197159e-a704-7cce-b89b-e7eba3e9d7d7",
        "chain": "xrpl",
        "timestamp": "2025-05-28T06:40:08.453075Z",
        "type": task_type,
        "meta": meta,
    }


def test_parse_verify_task_round_trips():
    data = {**_header("VERIFY"), "task": {"message": MESSAGE, "payload": "deadbeef"}}
    task = parse_task(data)
    assert isinstance(task, VerifyTask)
    assert task.kind() is TaskKind.VERIFY
    assert task.message.message_id == "0xabc-1"
    assert task.to_dict() == data


def test_parse_gateway_tx_task():
    data = {**_header("GATEWAY_TX"), "task": {"executeData": "cafe"}}
    task = parse_task(data)
    assert isinstance(task, GatewayTxTask)
    assert task.execute_data == "cafe"
    assert task.id() == data["id"]


def test_parse_expired_signing_session_task_serializes_compactly():
    text = """{
        "id": "0197159e-a704-7cce-b89b-e7eba3e9d7d7",
        "chain": "xrpl",
        "timestamp": "2025-05-28T06:40:08.453075Z",
        "type": "REACT_TO_EXPIRED_SIGNING_SESSION",
        "meta": null,
        "task": {
            "sessionID": 874302,
            "broadcastID": "01971594-4e05-7ef5-869f-716616729956",
            "invokedContractAddress": "axelar1k82qfzu3l6rvc7twlp9lpwsnav507czl6xyrk0xv287t4439ymvsl6n470",
            "requestPayload": "{}"
        }
    }"""
    task = parse_task(json.loads(text))
    assert isinstance(task, ReactToExpiredSigningSessionTask)
    assert task.session_id == 874302
    assert task.to_json() == "".join(text.split())


def test_unknown_type_becomes_unknown_task():
    data = _header("SOMETHING_NEW")
    task = parse_task(data)
    assert isinstance(task, UnknownTask)
    assert task.kind() is TaskKind.UNKNOWN
    assert task.to_dict() == data


def test_missing_header_field_raises():
    data = _header("VERIFY")
    del data["id"]
    with pytest.raises(TaskParseError, match="missing field `id`"):
        parse_task(data)


def test_known_type_with_bad_body_raises():
    data = {**_header("VERIFY"), "task": {"payload": "deadbeef"}}
    with pytest.raises(TaskParseError, match="missing field `message`"):
        parse_task(data)


def test_non_object_raises():
    with pytest.raises(TaskParseError):
        parse_task(["not", "a", "task"])


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_task({"id": 5})


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_setup_logging_configures_once(clean_root_logger):
    before = len(clean_root_logger.handlers)
    setup_logging()
    assert clean_root_logger.level == logging.DEBUG
    assert len(clean_root_logger.handlers) == before + 1
    with pytest.raises(RuntimeError):
        setup_logging()
    assert len(clean_root_logger.handlers) == before + 1