import pytest

from uplink_ipc.custom_header import CustomHeader
from uplink_ipc.message import UAttributes, UMessage


def test_custom_header_from_user_header():
    header = CustomHeader(version=2, timestamp=1000)
    new_header = CustomHeader.from_user_header(header)
    assert new_header.version == 2
    assert new_header.timestamp == 1000


def test_custom_header_missing_fields():
    header = CustomHeader.from_message(UMessage())
    assert header == CustomHeader(version=0, timestamp=0)


def test_from_message_ignores_payload_and_attributes():
    msg = UMessage(attributes=UAttributes(), payload=b"\x01\x02\x03\x04")
    assert CustomHeader.from_message(msg) == CustomHeader()


def test_to_attributes_is_default():
    header = CustomHeader(version=1, timestamp=123456789)
    assert header.to_attributes() == UAttributes()


@pytest.mark.parametrize(
    "version,timestamp",
    [(2**31, 0), (-(2**31) - 1, 0), (0, -1), (0, 2**64)],
)
def test_out_of_range_rejected(version, timestamp):
    with pytest.raises(ValueError):
        CustomHeader(version=version, timestamp=timestamp)