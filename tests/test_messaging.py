import logging

import pytest

from kdesdk.messaging import (
    KDEMessage,
    KDEWindow,
    MessageEvent,
    MessagePayload,
    MessageType,
    make_message,
)


class FakeHost:
    def __init__(self):
        self.listeners = []
        self.posted = []

    def add_listener(self, callback):
        self.listeners.append(callback)

    def remove_listener(self, callback):
        self.listeners.remove(callback)

    def post_to_parent(self, data, target_origin):
        self.posted.append((data, target_origin))

    def dispatch(self, event):
        for listener in list(self.listeners):
            listener(event)


@pytest.fixture
def host():
    return FakeHost()


def test_registers_listener_on_construction(host):
    KDEWindow(["https://parent.test"], host)
    assert len(host.listeners) == 1


def test_accepts_allowed_origin(host):
    received = []
    window = KDEWindow(["https://parent.test"], host, on_message=received.append)

    host.dispatch(MessageEvent(origin="https://parent.test", data={"type": "OPEN_FILE"}))

    assert received == [{"type": "OPEN_FILE"}]
    assert window.handle_message(MessageEvent("https://parent.test", "ping")) is True


def test_rejects_unknown_origin(host, caplog):
    received = []
    window = KDEWindow(["https://parent.test"], host, on_message=received.append)

    with caplog.at_level(logging.ERROR, logger="kdesdk.window"):
        accepted = window.handle_message(MessageEvent("https://evil.test", {"type": "OPEN_FILE"}))

    assert accepted is False
    assert received == []
    assert "Invalid origin: https://evil.test" in caplog.text


def test_send_message_posts_to_parent(host):
    window = KDEWindow([], host)
    message = KDEMessage(
        type=MessageType.FILE_OPENED,
        payload=MessagePayload(message_id="m-1", timestamp=1700000000000, path="/docs/a.txt"),
    )

    window.send_message(message)

    assert host.posted == [
        (
            {
                "type": "FILE_OPENED",
                "payload": {"messageId": "m-1", "timestamp": 1700000000000, "path": "/docs/a.txt"},
            },
            "*",
        )
    ]


def test_cleanup_removes_the_registered_listener(host):
    window = KDEWindow(["https://parent.test"], host)
    window.cleanup()
    assert host.listeners == []


def test_make_message():
    first = make_message(MessageType.ERROR, error="boom")
    second = make_message("OPEN_FILE", path="/a")

    assert first.type is MessageType.ERROR
    assert first.payload.error == "boom"
    assert first.payload.path is None
    assert first.payload.timestamp > 0
    assert first.payload.message_id != second.payload.message_id
    assert second.type is MessageType.OPEN_FILE


def test_message_from_dict():
    data = {"type": "ERROR", "payload": {"messageId": "x", "timestamp": 5, "error": "bad"}}
    message = KDEMessage.from_dict(data)
    assert message.type is MessageType.ERROR
    assert message.payload.error == "bad"
    assert message.to_dict() == data


def test_message_from_dict_rejects_unknown_type():
    with pytest.raises(ValueError):
        KDEMessage.from_dict({"type": "CLOSE", "payload": {"messageId": "x", "timestamp": 1}})
