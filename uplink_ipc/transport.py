"""Publish-subscribe transport driven by a background worker thread."""

from __future__ import annotations

import asyncio
import logging
import queue
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from .custom_header import CustomHeader
from .message import UCode, UMessage, UStatus, UUri
from .transmission_data import TransmissionData

log = logging.getLogger(__name__)

DEFAULT_SERVICE_NAME = "My/Funk/ServiceName"
_MAX_SERVICE_NAME_LENGTH = 255


class PublishSubscribeService:
    """An in-process publish-subscribe service shared by name."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._lock = threading.Lock()
        self._subscribers: list[queue.Queue] = []

    def publish(self, data: TransmissionData, header: CustomHeader) -> int:
        """Deliver a sample to every subscriber; return how many received it."""
        with self._lock:
            subscribers = list(self._subscribers)
        for subscriber in subscribers:
            subscriber.put((data, header))
        return len(subscribers)

    def subscribe(self) -> queue.Queue:
        """Return a queue receiving (data, header) pairs published from now on."""
        subscriber: queue.Queue = queue.Queue()
        with self._lock:
            self._subscribers.append(subscriber)
        return subscriber


_services: dict[str, PublishSubscribeService] = {}
_services_lock = threading.Lock()


def open_or_create(name: str) -> PublishSubscribeService:
    """Open the service with this name, creating it if needed."""
    if not name:
        raise UStatus(UCode.INVALID_ARGUMENT, "Service name must not be empty")
    if len(name) > _MAX_SERVICE_NAME_LENGTH:
        raise UStatus(UCode.INVALID_ARGUMENT, "Service name is too long")
    with _services_lock:
        service = _services.get(name)
        if service is None:
            service = _services[name] = PublishSubscribeService(name)
        return service


class _Kind(Enum):
    SEND = auto()
    REGISTER = auto()
    UNREGISTER = auto()


@dataclass
class _Command:
    kind: _Kind
    args: tuple
    response: Future


_STOP = object()


class Transport:
    """Sends messages through a publish-subscribe service from a worker thread."""

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME) -> None:
        self.service_name = service_name
        self._commands: queue.Queue = queue.Queue()
        self._running = threading.Event()
        self._started = threading.Event()
        self._submit_lock = threading.Lock()
        self._listeners: dict[tuple[UUri, UUri | None], list[Any]] = {}
        self._thread = threading.Thread(
            target=self._background_task, name="transport-worker", daemon=True
        )
        self._thread.start()
        self._started.wait()

    def _background_task(self) -> None:
        try:
            service = open_or_create(self.service_name)
        except UStatus as exc:
            log.error("Failed to create service: %s", exc)
            self._started.set()
            return
        self._running.set()
        self._started.set()

        while True:
            command = self._commands.get()
            if command is _STOP:
                break
            if not command.response.set_running_or_notify_cancel():
                continue
            try:
                result = self._handle(service, command)
            except UStatus as exc:
                command.response.set_exception(exc)
            except Exception as exc:  # failures inside a handler become statuses
                command.response.set_exception(
                    UStatus(UCode.INTERNAL, f"Failed to send: {exc}")
                )
            else:
                command.response.set_result(result)

    def _handle(self, service: PublishSubscribeService, command: _Command) -> None:
        if command.kind is _Kind.SEND:
            (message,) = command.args
            data = TransmissionData.from_message(message)
            header = CustomHeader.from_message(message)
            service.publish(data, header)
        elif command.kind is _Kind.REGISTER:
            key, listener = command.args
            self._listeners.setdefault(key, []).append(listener)
        else:
            key, listener = command.args
            registered = self._listeners.get(key, [])
            if listener in registered:
                registered.remove(listener)
            if not registered:
                self._listeners.pop(key, None)

    def _submit(self, kind: _Kind, *args: Any) -> Future:
        with self._submit_lock:
            if not self._running.is_set():
                raise UStatus(UCode.INTERNAL, "Background task has died")
            response: Future = Future()
            self._commands.put(_Command(kind, args, response))
            return response

    async def _request(self, kind: _Kind, *args: Any) -> None:
        response = self._submit(kind, *args)
        try:
            return await asyncio.wrap_future(response)
        except UStatus:
            raise
        except Exception as exc:
            raise UStatus(UCode.INTERNAL, "Background task response failed") from exc

    async def send(self, message: UMessage) -> None:
        """Publish a message's payload; raise UStatus on failure."""
        await self._request(_Kind.SEND, message)

    async def register_listener(
        self, source_filter: UUri, sink_filter: UUri | None, listener: Any
    ) -> None:
        """Register a listener for the given filters."""
        await self._request(_Kind.REGISTER, (source_filter, sink_filter), listener)

    async def unregister_listener(
        self, source_filter: UUri, sink_filter: UUri | None, listener: Any
    ) -> None:
        """Remove a listener for the given filters, if registered."""
        await self._request(_Kind.UNREGISTER, (source_filter, sink_filter), listener)

    def close(self) -> None:
        """Stop the worker thread; further requests fail."""
        with self._submit_lock:
            if self._running.is_set():
                self._running.clear()
                self._commands.put(_STOP)
        self._thread.join()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()