# gmpmock

Typed Python models for General Message Passing (GMP) tasks and events, and a
small asynchronous client for a GMP API serving the `xrpl` chain.

## Installation

```
pip install gmpmock
```

To run the test suite, install the test extra:

```
pip install "gmpmock[test]"
pytest
```

## Models

`gmpmock.gmp_types` holds dataclasses for the tasks, events and responses the
API exchanges. They read and write the API's camelCase JSON with the fields in
the API's order, so a task survives a round trip unchanged.

### Tasks

`Task.from_dict` and `Task.from_json` read the `type` header and build the
matching subclass: `VerifyTask`, `ExecuteTask`, `GatewayTxTask`,
`ConstructProofTask`, `ReactToWasmEventTask`, `RefundTask`,
`ReactToExpiredSigningSessionTask` or `ReactToRetriablePollTask`. A type that
is not one of these gives an `UnknownTask`, which keeps only the header
fields. Called on a subclass, `from_dict` parses the input as that subclass.

```python
from gmpmock.gmp_types import Task, TaskKind

task = Task.from_json(text)
if task.kind() == TaskKind.REACT_TO_RETRIABLE_POLL:
    print(task.id(), task.poll_id)
print(task.to_json())   # compact JSON
```

The header fields live in `task.common` (`CommonTaskFields`, with optional
`TaskMetadata`). Missing fields, values of the wrong type, negative or
oversized integers and unknown enum values raise `ValueError`.

### Events

`parse_event(data)` takes a decoded JSON object and returns the first of
`CallEvent`, `GasRefundedEvent`, `GasCreditEvent`, `MessageExecutedEvent`,
`CannotExecuteMessageV2Event` and `ITSInterchainTransferEvent` whose fields
it carries, trying them in that order; if none fits it raises `ValueError`.

- `Event.common_fields()` returns `(event_id, type, timestamp)`; the
  timestamp is `"unknown"` when the event has no `meta`.
- `Event.message_id()` returns the ID of the message the event belongs to.
- `Event.to_dict()` and `Event.to_json()` write the event back out.

### Other types

`PostEventResult`, `PostEventResponse` and `StorePayloadResult` model API
responses. The enums `VerificationStatus`, `MessageExecutionStatus`,
`CannotExecuteMessageReason`, `EventType` and `TaskKind` hold the string
values used on the wire.

## Utilities

`gmpmock.utils.parse_task(value)` parses a decoded JSON task like
`Task.from_dict`, but raises `TaskParseError` (a `ValueError`) on malformed
input.

`gmpmock.utils.setup_logging()` adds a stderr handler to the root logger and
sets it to `DEBUG`. Calling it a second time raises `RuntimeError`.

## Client

```python
import asyncio
from gmpmock.client import Client

async def main():
    async with Client("http://localhost:8080") as client:
        print(await client.get_tasks())
        await client.post_task(task.to_dict())
        await client.post_events({"events": []})

asyncio.run(main())
```

All requests go to the `xrpl` chain: `GET /chains/xrpl/tasks`,
`POST /chains/xrpl/task` and `POST /chains/xrpl/events`, and each method
returns the response body as text. `get_tasks` raises `ClientError` when the
answer is not a success status. All three raise `ClientError` when the
request itself fails. Without `async with`, call `await client.aclose()` when
done.

## What this package does not do

It has no server and no storage: it does not serve the task and event
endpoints, keep tasks or events anywhere, or build tasks from incoming
events. It models the data and talks to a server that runs elsewhere.