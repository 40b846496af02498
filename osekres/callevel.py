"""Call levels, system states and the checks made on them by system services."""

from __future__ import annotations

from enum import IntFlag
from typing import Dict, Union

from .services import ServiceId, service_name
from .types import OsError, StatusType

__all__ = [
    "CallLevel",
    "allowed_callevel",
    "enter_callevel",
    "leave_callevel",
    "check_callevel",
    "check_disabled_int",
    "check_disallint",
    "TCLMASK",
    "TSYSMASK",
    "APPMODE_NONE",
    "TIPM_ENAALL",
    "ENABLE",
    "DISABLE",
    "OS_SERVICE_ID_INVALID",
    "STACK_MAGIC_NUMBER",
]


class CallLevel(IntFlag):
    """Bits of the call level state.

    The low twelve bits name the running context, the high four bits
    record system states such as interrupts being disabled.
    """

    NULL = 0x0000
    TASK = 0x0001
    ISR2 = 0x0002
    PROTECT = 0x0004
    PREPOST = 0x0008
    STARTUP = 0x0010
    SHUTDOWN = 0x0020
    ERROR = 0x0040
    ALRMCBAK = 0x0080
    DISALLINT = 0x1000
    SUSALLINT = 0x2000
    SUSOSINT = 0x4000
    ISR1 = 0x8000


TCLMASK = 0x0FFF
TSYSMASK = 0xF000
_STAT_MASK = 0xFFFF

APPMODE_NONE = 0
TIPM_ENAALL = 0
ENABLE = 0x01
DISABLE = 0x00
OS_SERVICE_ID_INVALID = 0xFF
STACK_MAGIC_NUMBER = 0x4E434553

_C = CallLevel
_INT_STATES = _C.DISALLINT | _C.SUSALLINT | _C.SUSOSINT

_ALLOWED: Dict[str, CallLevel] = {
    "ActivateTask": _C.TASK | _C.ISR2,
    "TerminateTask": _C.TASK,
    "ChainTask": _C.TASK,
    "Schedule": _C.TASK,
    "GetTaskID": _INT_STATES | _C.TASK | _C.ISR2 | _C.ERROR | _C.PREPOST | _C.PROTECT,
    "GetTaskState": _INT_STATES | _C.TASK | _C.ISR2 | _C.ERROR | _C.PREPOST,
    "GetResource": _C.TASK | _C.ISR2,
    "ReleaseResource": _C.TASK | _C.ISR2,
    "SetEvent": _C.TASK | _C.ISR2,
    "ClearEvent": _C.TASK,
    "GetEvent": _C.TASK | _C.ISR2 | _C.ERROR | _C.PREPOST,
    "WaitEvent": _C.TASK,
    "GetAlarmBase": _C.TASK | _C.ISR2 | _C.ERROR | _C.PREPOST,
    "GetAlarm": _C.TASK | _C.ISR2 | _C.ERROR | _C.PREPOST,
    "SetRelAlarm": _C.TASK | _C.ISR2,
    "SetAbsAlarm": _C.TASK | _C.ISR2,
    "CancelAlarm": _C.TASK | _C.ISR2,
    "GetActiveApplicationMode": (
        _C.TASK | _C.ISR2 | _C.ERROR | _C.PREPOST | _C.STARTUP | _C.SHUTDOWN
    ),
    "ShutdownOS": _C.TASK | _C.ISR2 | _C.ERROR | _C.STARTUP,
    "GetISRID": _INT_STATES | _C.TASK | _C.ISR2 | _C.ERROR | _C.PROTECT,
    "IncrementCounter": _C.TASK | _C.ISR2,
    "GetCounterValue": _C.TASK | _C.ISR2,
    "GetElapsedValue": _C.TASK | _C.ISR2,
    "StartScheduleTableRel": _C.TASK | _C.ISR2,
    "StartScheduleTableAbs": _C.TASK | _C.ISR2,
    "StopScheduleTable": _C.TASK | _C.ISR2,
    "NextScheduleTable": _C.TASK | _C.ISR2,
    "GetScheduleTableStatus": _C.TASK | _C.ISR2,
    "DisableInterruptSource": (
        _C.TASK | _C.ISR2 | _C.ERROR | _C.PREPOST | _C.STARTUP | _C.SHUTDOWN
        | _C.PROTECT | _INT_STATES
    ),
    "EnableInterruptSource": (
        _C.TASK | _C.ISR2 | _C.ERROR | _C.PREPOST | _C.STARTUP | _C.SHUTDOWN
        | _C.PROTECT | _INT_STATES
    ),
    "GetFaultyContext": _C.PROTECT,
}


def allowed_callevel(service: Union[int, str]) -> CallLevel:
    """Call levels and system states from which ``service`` may be called.

    ``service`` is a :class:`ServiceId` value or the service's API name.
    """
    name = service if isinstance(service, str) else service_name(ServiceId(service) if isinstance(service, ServiceId) else service)
    try:
        return _ALLOWED[name]
    except KeyError:
        raise ValueError(f"service {name!r} has no call level restriction") from None


def _stat(value: int) -> int:
    value = int(value)
    if not 0 <= value <= _STAT_MASK:
        raise ValueError(f"call level state must fit in 16 bits, got {value:#x}")
    return value


def enter_callevel(stat: int, bits: int) -> CallLevel:
    """State ``stat`` with ``bits`` set."""
    return CallLevel(_stat(stat) | _stat(bits))


def leave_callevel(stat: int, bits: int) -> CallLevel:
    """State ``stat`` with ``bits`` cleared."""
    return CallLevel(_stat(stat) & ~_stat(bits) & _STAT_MASK)


def check_callevel(stat: int, allowed: int) -> None:
    """Raise E_OS_CALLEVEL unless every bit of ``stat`` lies within ``allowed``."""
    stat = _stat(stat)
    allowed = _stat(allowed)
    if (stat | allowed) != allowed:
        raise OsError(StatusType.E_OS_CALLEVEL)


def check_disabled_int(stat: int) -> None:
    """Raise E_OS_DISABLEDINT if interrupts are disabled or suspended."""
    if _stat(stat) & _INT_STATES:
        raise OsError(StatusType.E_OS_DISABLEDINT)


def check_disallint(stat: int) -> None:
    """Raise E_OS_DISABLEDINT if DisableAllInterrupts is in effect."""
    if _stat(stat) & CallLevel.DISALLINT:
        raise OsError(StatusType.E_OS_DISABLEDINT)