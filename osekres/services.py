"""System service identifiers, function codes and error hook parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

__all__ = [
    "ServiceId",
    "FunctionCode",
    "ErrorHookInfo",
    "service_name",
    "function_code_for",
    "TMAX_SVCID",
]


class ServiceId(IntEnum):
    """Identifiers reported to the error hook for each system service."""

    GET_ISR_ID = 0x01
    START_SCHEDULE_TABLE_REL = 0x07
    START_SCHEDULE_TABLE_ABS = 0x08
    STOP_SCHEDULE_TABLE = 0x09
    NEXT_SCHEDULE_TABLE = 0x0A
    GET_SCHEDULE_TABLE_STATUS = 0x0E
    INCREMENT_COUNTER = 0x0F
    GET_COUNTER_VALUE = 0x10
    GET_ELAPSED_VALUE = 0x11

    ENABLE_INTERRUPT_SOURCE = 0xA0
    DISABLE_INTERRUPT_SOURCE = 0xA1
    TASK_MISSING_END = 0xAF
    ISR_MISSING_END = 0xB0
    HOOK_MISSING_END = 0xB1

    ACTIVATE_TASK = 0xE0
    TERMINATE_TASK = 0xE1
    CHAIN_TASK = 0xE2
    SCHEDULE = 0xE3
    GET_TASK_ID = 0xE4
    GET_TASK_STATE = 0xE5
    ENABLE_ALL_INTERRUPTS = 0xE6
    DISABLE_ALL_INTERRUPTS = 0xE7
    RESUME_ALL_INTERRUPTS = 0xE8
    SUSPEND_ALL_INTERRUPTS = 0xE9
    RESUME_OS_INTERRUPTS = 0xEA
    SUSPEND_OS_INTERRUPTS = 0xEB
    GET_RESOURCE = 0xEC
    RELEASE_RESOURCE = 0xED
    SET_EVENT = 0xEE
    CLEAR_EVENT = 0xEF
    GET_EVENT = 0xF0
    WAIT_EVENT = 0xF1
    GET_ALARM_BASE = 0xF2
    GET_ALARM = 0xF3
    SET_REL_ALARM = 0xF4
    SET_ABS_ALARM = 0xF5
    CANCEL_ALARM = 0xF6
    GET_ACTIVE_APPLICATION_MODE = 0xF7
    START_OS = 0xF8
    SHUTDOWN_OS = 0xF9


class FunctionCode(IntEnum):
    """Function codes numbering the system services."""

    START_OS = 0
    SHUTDOWN_OS = 1
    ACTIVATE_TASK = 2
    TERMINATE_TASK = 3
    CHAIN_TASK = 4
    SCHEDULE = 5
    GET_TASK_ID = 6
    GET_TASK_STATE = 7
    ENABLE_ALL_INTERRUPTS = 8
    DISABLE_ALL_INTERRUPTS = 9
    RESUME_ALL_INTERRUPTS = 10
    SUSPEND_ALL_INTERRUPTS = 11
    RESUME_OS_INTERRUPTS = 12
    SUSPEND_OS_INTERRUPTS = 13
    GET_ISR_ID = 14
    GET_RESOURCE = 15
    RELEASE_RESOURCE = 16
    SET_EVENT = 17
    CLEAR_EVENT = 18
    GET_EVENT = 19
    WAIT_EVENT = 20
    GET_ALARM_BASE = 21
    GET_ALARM = 22
    SET_REL_ALARM = 23
    SET_ABS_ALARM = 24
    CANCEL_ALARM = 25
    INCREMENT_COUNTER = 26
    GET_COUNTER_VALUE = 27
    GET_ELAPSED_VALUE = 28
    GET_ACTIVE_APPLICATION_MODE = 29
    START_SCHEDULE_TABLE_REL = 30
    START_SCHEDULE_TABLE_ABS = 31
    STOP_SCHEDULE_TABLE = 32
    NEXT_SCHEDULE_TABLE = 33
    GET_SCHEDULE_TABLE_STATUS = 34
    DISABLE_INTERRUPT_SOURCE = 35
    ENABLE_INTERRUPT_SOURCE = 36


TMAX_SVCID = max(FunctionCode)

_API_NAMES: Dict[ServiceId, str] = {
    ServiceId.GET_ISR_ID: "GetISRID",
    ServiceId.START_SCHEDULE_TABLE_REL: "StartScheduleTableRel",
    ServiceId.START_SCHEDULE_TABLE_ABS: "StartScheduleTableAbs",
    ServiceId.STOP_SCHEDULE_TABLE: "StopScheduleTable",
    ServiceId.NEXT_SCHEDULE_TABLE: "NextScheduleTable",
    ServiceId.GET_SCHEDULE_TABLE_STATUS: "GetScheduleTableStatus",
    ServiceId.INCREMENT_COUNTER: "IncrementCounter",
    ServiceId.GET_COUNTER_VALUE: "GetCounterValue",
    ServiceId.GET_ELAPSED_VALUE: "GetElapsedValue",
    ServiceId.ENABLE_INTERRUPT_SOURCE: "EnableInterruptSource",
    ServiceId.DISABLE_INTERRUPT_SOURCE: "DisableInterruptSource",
    ServiceId.TASK_MISSING_END: "TaskMissingEnd",
    ServiceId.ISR_MISSING_END: "ISRMissingEnd",
    ServiceId.HOOK_MISSING_END: "HookMissingEnd",
    ServiceId.ACTIVATE_TASK: "ActivateTask",
    ServiceId.TERMINATE_TASK: "TerminateTask",
    ServiceId.CHAIN_TASK: "ChainTask",
    ServiceId.SCHEDULE: "Schedule",
    ServiceId.GET_TASK_ID: "GetTaskID",
    ServiceId.GET_TASK_STATE: "GetTaskState",
    ServiceId.ENABLE_ALL_INTERRUPTS: "EnableAllInterrupts",
    ServiceId.DISABLE_ALL_INTERRUPTS: "DisableAllInterrupts",
    ServiceId.RESUME_ALL_INTERRUPTS: "ResumeAllInterrupts",
    ServiceId.SUSPEND_ALL_INTERRUPTS: "SuspendAllInterrupts",
    ServiceId.RESUME_OS_INTERRUPTS: "ResumeOSInterrupts",
    ServiceId.SUSPEND_OS_INTERRUPTS: "SuspendOSInterrupts",
    ServiceId.GET_RESOURCE: "GetResource",
    ServiceId.RELEASE_RESOURCE: "ReleaseResource",
    ServiceId.SET_EVENT: "SetEvent",
    ServiceId.CLEAR_EVENT: "ClearEvent",
    ServiceId.GET_EVENT: "GetEvent",
    ServiceId.WAIT_EVENT: "WaitEvent",
    ServiceId.GET_ALARM_BASE: "GetAlarmBase",
    ServiceId.GET_ALARM: "GetAlarm",
    ServiceId.SET_REL_ALARM: "SetRelAlarm",
    ServiceId.SET_ABS_ALARM: "SetAbsAlarm",
    ServiceId.CANCEL_ALARM: "CancelAlarm",
    ServiceId.GET_ACTIVE_APPLICATION_MODE: "GetActiveApplicationMode",
    ServiceId.START_OS: "StartOS",
    ServiceId.SHUTDOWN_OS: "ShutdownOS",
}

# Names of the parameters the error hook can read back for each service.
_PARAMETER_NAMES: Dict[ServiceId, Tuple[str, ...]] = {
    ServiceId.START_OS: ("Mode",),
    ServiceId.ACTIVATE_TASK: ("TaskID",),
    ServiceId.CHAIN_TASK: ("TaskID",),
    ServiceId.GET_TASK_ID: ("TaskID",),
    ServiceId.GET_TASK_STATE: ("TaskID", "State"),
    ServiceId.GET_RESOURCE: ("ResID",),
    ServiceId.RELEASE_RESOURCE: ("ResID",),
    ServiceId.SET_EVENT: ("TaskID", "Mask"),
    ServiceId.CLEAR_EVENT: ("Mask",),
    ServiceId.GET_EVENT: ("TaskID", "Event"),
    ServiceId.WAIT_EVENT: ("Mask",),
    ServiceId.GET_ALARM_BASE: ("AlarmID", "Info"),
    ServiceId.GET_ALARM: ("AlarmID", "Tick"),
    ServiceId.SET_REL_ALARM: ("AlarmID", "increment", "cycle"),
    ServiceId.SET_ABS_ALARM: ("AlarmID", "start", "cycle"),
    ServiceId.CANCEL_ALARM: ("AlarmID",),
    ServiceId.INCREMENT_COUNTER: ("CounterID",),
    ServiceId.GET_COUNTER_VALUE: ("CounterID", "Value"),
    ServiceId.GET_ELAPSED_VALUE: ("CounterID", "Value", "ElapsedValue"),
    ServiceId.START_SCHEDULE_TABLE_REL: ("ScheduleTableID", "Offset"),
    ServiceId.START_SCHEDULE_TABLE_ABS: ("ScheduleTableID", "Start"),
    ServiceId.STOP_SCHEDULE_TABLE: ("ScheduleTableID",),
    ServiceId.NEXT_SCHEDULE_TABLE: ("ScheduleTableID_From", "ScheduleTableID_To"),
    ServiceId.GET_SCHEDULE_TABLE_STATUS: ("ScheduleTableID", "ScheduleStatus"),
    ServiceId.DISABLE_INTERRUPT_SOURCE: ("DisableISR",),
    ServiceId.ENABLE_INTERRUPT_SOURCE: ("EnableISR",),
}


def _to_service(svcid: int) -> ServiceId:
    try:
        return ServiceId(svcid)
    except ValueError:
        raise ValueError(f"unknown service id {svcid!r}") from None


def service_name(svcid: int) -> str:
    """API name of the system service with identifier ``svcid``."""
    return _API_NAMES[_to_service(svcid)]


def function_code_for(svcid: int) -> FunctionCode:
    """Function code of the system service with identifier ``svcid``."""
    service = _to_service(svcid)
    try:
        return FunctionCode[service.name]
    except KeyError:
        raise ValueError(
            f"service {_API_NAMES[service]} has no function code"
        ) from None


@dataclass(frozen=True)
class ErrorHookInfo:
    """Service identifier and parameters recorded for the error hook."""

    service: ServiceId
    par1: Optional[Any] = None
    par2: Optional[Any] = None
    par3: Optional[Any] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "service", _to_service(self.service))
        count = len(self.parameter_names)
        extra = [p for p in (self.par1, self.par2, self.par3)[count:] if p is not None]
        if extra:
            raise ValueError(
                f"{service_name(self.service)} takes {count} parameter(s) "
                f"for the error hook"
            )

    @property
    def name(self) -> str:
        """API name of the service that failed."""
        return _API_NAMES[self.service]

    @property
    def parameter_names(self) -> Tuple[str, ...]:
        """Names of the parameters recorded for this service."""
        return _PARAMETER_NAMES.get(self.service, ())

    @property
    def parameters(self) -> Dict[str, Any]:
        """Recorded parameters keyed by their API name."""
        values = (self.par1, self.par2, self.par3)
        return dict(zip(self.parameter_names, values))

    def __getitem__(self, name: str) -> Any:
        try:
            return self.parameters[name]
        except KeyError:
            raise KeyError(
                f"{self.name} has no error hook parameter {name!r}"
            ) from None