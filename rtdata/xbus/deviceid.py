"""Decoding of motion tracker device identifiers."""

from __future__ import annotations

from enum import IntEnum


class DeviceFunction(IntEnum):
    """The function a motion tracker performs."""

    IMU = 1
    VRU = 2
    AHRS = 3


_DESCRIPTIONS = {
    DeviceFunction.IMU: "Inertial Measurement Unit",
    DeviceFunction.VRU: "Vertical Reference Unit",
    DeviceFunction.AHRS: "Attitude Heading Reference System",
}


def is_mt_mk4_x(device_id: int) -> bool:
    """Whether the device ID belongs to an MTi-1 series device."""
    series = (device_id >> 20) & 0xF
    return series in (0x8, 0xC)


def get_function(device_id: int) -> DeviceFunction | int:
    """The function encoded in the device ID, or the raw code if it is not a known one."""
    code = (device_id >> 24) & 0xF
    try:
        return DeviceFunction(code)
    except ValueError:
        return code


def function_description(function: DeviceFunction | int) -> str:
    """A human-readable description of a device function."""
    try:
        return _DESCRIPTIONS[DeviceFunction(function)]
    except ValueError:
        return "Unknown device function"