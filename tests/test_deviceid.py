import pytest

from rtdata.xbus.deviceid import (
    DeviceFunction,
    function_description,
    get_function,
    is_mt_mk4_x,
)


@pytest.mark.parametrize("device_id", [0x00800000, 0x00C00000, 0x03812345, 0x01C0FFFF])
def test_mti_1_series_detected(device_id):
    assert is_mt_mk4_x(device_id) is True


@pytest.mark.parametrize("device_id", [0, 0x00400000, 0x00F00000, 0x0070FFFF])
def test_other_series_rejected(device_id):
    assert is_mt_mk4_x(device_id) is False


@pytest.mark.parametrize(
    "device_id, expected",
    [
        (0x01000000, DeviceFunction.IMU),
        (0x02800000, DeviceFunction.VRU),
        (0x03C12345, DeviceFunction.AHRS),
        (0xF3000000, DeviceFunction.AHRS),
    ],
)
def test_get_function(device_id, expected):
    assert get_function(device_id) is expected


def test_unknown_function_code_is_returned_raw():
    function = get_function(0x07000000)
    assert not isinstance(function, DeviceFunction)
    assert function == 7


@pytest.mark.parametrize(
    "function, text",
    [
        (DeviceFunction.IMU, "Inertial Measurement Unit"),
        (DeviceFunction.VRU, "Vertical Reference Unit"),
        (DeviceFunction.AHRS, "Attitude Heading Reference System"),
    ],
)
def test_function_description(function, text):
    assert function_description(function) == text


def test_description_accepts_plain_int():
    assert function_description(2) == "Vertical Reference Unit"


def test_unknown_function_description():
    assert function_description(get_function(0x0F000000)) == "Unknown device function"