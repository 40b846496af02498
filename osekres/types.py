"""Common data types, status codes and constants of the OS interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "StatusType",
    "TaskState",
    "ScheduleTableStatus",
    "FaultyContext",
    "ProtectionReturn",
    "AlarmBase",
    "OsError",
    "count_sz",
    "round_sz",
    "E_OK",
    "E_NOT_OK",
    "STD_HIGH",
    "STD_LOW",
    "STD_ACTIVE",
    "STD_IDLE",
    "STD_ON",
    "STD_OFF",
    "ERRCODE_NUM",
    "UINT32_INVALID",
    "UINT8_INVALID",
    "INVALID_TASK",
    "INVALID_ISR",
    "INVALID_APPMODETYPE",
    "OS_SW_VERSION",
    "OS_AR_RELEASE_VERSION",
]


class StatusType(IntEnum):
    """Status codes returned by system services."""

    E_OK = 0x00
    E_OS_ACCESS = 1
    E_OS_CALLEVEL = 2
    E_OS_ID = 3
    E_OS_LIMIT = 4
    E_OS_NOFUNC = 5
    E_OS_RESOURCE = 6
    E_OS_STATE = 7
    E_OS_VALUE = 8
    E_OS_SERVICEID = 9
    E_OS_ILLEGAL_ADDRESS = 10
    E_OS_MISSINGEND = 11
    E_OS_DISABLEDINT = 12
    E_OS_STACKFAULT = 13
    E_OS_PROTECTION_MEMORY = 14
    E_OS_PROTECTION_TIME_TASK = 15
    E_OS_PROTECTION_TIME_ISR = 16
    E_OS_PROTECTION_ARRIVAL_TASK = 17
    E_OS_PROTECTION_ARRIVAL_ISR = 18
    E_OS_PROTECTION_LOCKED_RESOURCE = 19
    E_OS_PROTECTION_LOCKED_OSINT = 20
    E_OS_PROTECTION_LOCKED_ALLINT = 21
    E_OS_PROTECTION_EXCEPTION = 22
    E_OS_PROTECTION_FATAL = 23
    E_OS_MODE = 24
    E_OS_SHUTDOWN_FATAL = 25
    E_OS_PARAM_POINTER = 26
    E_OS_SYS_ASSERT_FATAL = 27
    E_OS_STACKINSUFFICIENT = 28
    E_OS_CORE = 29
    E_OS_SPINLOCK = 30
    E_OS_INTERFERENCE_DEADLOCK = 31
    E_OS_NESTING_DEADLOCK = 32
    E_OS_SHUTDOWN_OTHER_CORE = 33
    E_OS_TIMEINSUFFICIENT = 34
    E_OS_PROTECTION_TIMEWINDOW = 35
    E_OS_PROTECTION_COUNT_ISR = 36
    # Compatibility name from release 4.0.3 of the specification.
    OS_E_PARAM_POINTER = 26


class TaskState(IntEnum):
    """States a task can be in."""

    SUSPENDED = 0
    RUNNING = 1
    READY = 2
    WAITING = 3


class ScheduleTableStatus(IntEnum):
    """States of a schedule table."""

    STOPPED = 0x01
    NEXT = 0x02
    WAITING = 0x04
    RUNNING = 0x08
    RUNNING_AND_SYNCHRONOUS = 0x10


class FaultyContext(IntEnum):
    """Kind of processing unit that caused a protection violation."""

    INVALID = 0x00
    TASK = 0x01
    C2ISR = 0x02
    SYSTEM_HOOK = 0x03


class ProtectionReturn(IntEnum):
    """Values a protection hook may return."""

    PRO_IGNORE = 0x00
    PRO_SHUTDOWN = 0x01


@dataclass(frozen=True)
class AlarmBase:
    """Characteristics of the counter an alarm is based on."""

    maxallowedvalue: int
    ticksperbase: int
    mincycle: int


class OsError(Exception):
    """A system service reported an error status."""

    def __init__(self, status, service=None):
        self.status = StatusType(status)
        self.service = service
        if service is None:
            message = self.status.name
        else:
            message = f"{self.status.name} in service {service!r}"
        super().__init__(message)


E_OK = StatusType.E_OK
E_NOT_OK = 0x01

STD_HIGH = 1
STD_LOW = 0
STD_ACTIVE = 1
STD_IDLE = 0
STD_ON = 1
STD_OFF = 0

ERRCODE_NUM = 36

UINT32_INVALID = 0xFFFFFFFF
UINT8_INVALID = 0xFF

INVALID_TASK = UINT32_INVALID
INVALID_ISR = UINT32_INVALID
INVALID_APPMODETYPE = UINT32_INVALID

OS_SW_VERSION = (1, 4, 2)
OS_AR_RELEASE_VERSION = (4, 0, 3)


def _check_unit(unit: int) -> None:
    if unit <= 0 or unit & (unit - 1):
        raise ValueError(f"unit must be a positive power of two, got {unit}")


def count_sz(size: int, unit: int) -> int:
    """Number of ``unit``-sized cells needed to hold ``size`` bytes."""
    _check_unit(unit)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return (size + unit - 1) // unit


def round_sz(size: int, unit: int) -> int:
    """Round ``size`` up to a multiple of ``unit``."""
    _check_unit(unit)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return (size + unit - 1) & ~(unit - 1)