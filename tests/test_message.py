import pytest

from uplink_ipc.message import UAttributes, UCode, UMessage, UStatus, UUri


def test_ustatus_carries_code_and_message():
    status = UStatus(UCode.INTERNAL, "Background task has died")
    assert status.code is UCode.INTERNAL
    assert status.message == "Background task has died"


def test_ustatus_accepts_integer_code():
    status = UStatus(int(UCode.INVALID_ARGUMENT), "bad")
    assert status.code is UCode.INVALID_ARGUMENT


def test_ustatus_rejects_unknown_code():
    with pytest.raises(ValueError):
        UStatus(999, "nope")


def test_ustatus_is_raisable():
    status = UStatus(UCode.NOT_FOUND, "missing")
    assert status.message == "missing"
    with pytest.raises(UStatus) as info:
        raise status
    assert info.value is status
    assert info.value.code is UCode.NOT_FOUND
    assert "missing" in str(info.value)


@pytest.mark.parametrize(
    "number, expected",
    [(0, UCode.OK), (3, UCode.INVALID_ARGUMENT), (13, UCode.INTERNAL)],
)
def test_ucode_protocol_values(number, expected):
    status = UStatus(number, "code check")
    assert status.code is expected
    assert status.code == number


def test_message_defaults():
    msg = UMessage()
    assert msg.payload is None
    assert msg.attributes is None
    assert msg.extra == {}


def test_uuri_is_hashable_and_equal_by_value():
    a = UUri("vehicle", 1, 2, 3)
    b = UUri("vehicle", 1, 2, 3)
    assert a == b
    assert len({a, b}) == 1


def test_attributes_default_equality():
    assert UAttributes() == UAttributes(source=None, sink=None)
    assert UAttributes(source=UUri("x")) != UAttributes()