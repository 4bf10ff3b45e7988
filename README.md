# uplink_ipc

A small publish/subscribe transport for uProtocol-style messages. Each message
carries a payload holding a fixed-layout `TransmissionData` record (two 32-bit
signed integers and a double, in native C layout). A `Transport` decodes the
payload on a background worker thread and publishes it on a named service
together with a `CustomHeader`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Messages and statuses

`uplink_ipc.message` defines the message types:

- `UCode`: an `IntEnum` of canonical status codes (`OK`, `INVALID_ARGUMENT`,
  `INTERNAL`, ...).
- `UStatus`: an exception carrying a `code` (`UCode`) and a `message`. Every
  failure in the package is raised as a `UStatus`.
- `UUri`: a frozen dataclass with `authority_name`, `ue_id`,
  `ue_version_major` and `resource_id`.
- `UAttributes`: a dataclass with optional `source` and `sink` URIs.
- `UMessage`: a dataclass with optional `attributes`, an optional `payload`
  (`bytes`) and an `extra` dict of strings.

## Payloads

```python
from uplink_ipc.transmission_data import TransmissionData

data = TransmissionData(x=42, y=-7, funky=3.14)
raw = data.to_bytes()
assert len(raw) == TransmissionData.SIZE
assert TransmissionData.from_bytes(raw) == data
```

`TransmissionData.from_bytes` raises `UStatus` with code
`UCode.INVALID_ARGUMENT` when the byte length is not `TransmissionData.SIZE`.
`TransmissionData.from_message` decodes a message's payload, treating a
missing payload as empty (and so failing the same way). Building a
`TransmissionData` with `x` or `y` outside the 32-bit signed range raises
`ValueError`.

## Headers

`CustomHeader` holds a `version` (32-bit signed) and a `timestamp` (64-bit
unsigned); values out of range raise `ValueError`.
`CustomHeader.from_user_header` copies a header. `CustomHeader.from_message`
gives the default header (`version=0`, `timestamp=0`) for any message.
`CustomHeader.to_attributes` gives default `UAttributes`.

## Sending messages

```python
import asyncio

from uplink_ipc.message import UMessage
from uplink_ipc.transmission_data import TransmissionData
from uplink_ipc.transport import Transport


async def main():
    with Transport("My/Funk/ServiceName") as transport:
        message = UMessage(payload=TransmissionData(x=1, y=10, funky=1.5).to_bytes())
        await transport.send(message)

asyncio.run(main())
```

`Transport(service_name)` starts a daemon worker thread that opens the service
(the default name is `"My/Funk/ServiceName"`). `await transport.send(message)`
decodes the payload and publishes it; a message with no payload, or with a
payload of the wrong size, makes it raise `UStatus` with
`UCode.INVALID_ARGUMENT`.

`Transport.close()` stops the worker thread; using the transport as a context
manager closes it on exit. After closing, or when the service could not be
opened (an empty name, or one longer than 255 characters), every request
raises `UStatus` with `UCode.INTERNAL` ("Background task has died").

`Transport.register_listener(source_filter, sink_filter, listener)` and
`Transport.unregister_listener(source_filter, sink_filter, listener)` record
and remove a listener for a `UUri` source filter and an optional sink filter.

## Services

`open_or_create(name)` in `uplink_ipc.transport` returns the
`PublishSubscribeService` for a name, creating it if it does not exist yet;
the same name always gives the same service within a process.
`PublishSubscribeService.subscribe()` returns a `queue.Queue` that receives
`(TransmissionData, CustomHeader)` pairs published from then on.
`PublishSubscribeService.publish(data, header)` puts the pair on every
subscriber's queue and returns how many subscribers there were.

```python
from uplink_ipc.custom_header import CustomHeader
from uplink_ipc.transmission_data import TransmissionData
from uplink_ipc.transport import open_or_create

service = open_or_create("example/service")
inbox = service.subscribe()
service.publish(TransmissionData(x=1, y=2, funky=0.5), CustomHeader())
data, header = inbox.get_nowait()
```

## What this package does not do

- Services live in the memory of one Python process. Nothing is shared between
  processes or machines.
- Registered listeners are only recorded; the transport never calls them and
  delivers no incoming messages to them. To receive samples, subscribe to the
  service directly.
- The header published with each message is always the default
  `CustomHeader`; message attributes are not turned into header fields, and
  headers are not turned into attributes.
- There is no command-line program.