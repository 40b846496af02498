"""Resource management with the priority ceiling protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .callevel import (
    TIPM_ENAALL,
    CallLevel,
    allowed_callevel,
    check_callevel,
    check_disabled_int,
)
from .services import ErrorHookInfo, ServiceId, service_name
from .types import OsError, StatusType

__all__ = [
    "ResourceInit",
    "ResourceControlBlock",
    "RunningTask",
    "RunningIsr",
    "ResourceManager",
]

ErrorHook = Callable[[StatusType, ErrorHookInfo], None]


@dataclass(frozen=True)
class ResourceInit:
    """Static configuration of a resource: its ceiling priority.

    Smaller priority values mean higher priority.
    """

    ceilpri: int


@dataclass(eq=False)
class ResourceControlBlock:
    """Run-time state of one resource."""

    resinib: ResourceInit
    prevpri: int = 0
    prevrescb: Optional["ResourceControlBlock"] = None
    lockflg: bool = False


@dataclass(eq=False)
class RunningTask:
    """The part of a running task's state that resources change."""

    inipri: int
    curpri: Optional[int] = None
    lastrescb: Optional[ResourceControlBlock] = None

    def __post_init__(self) -> None:
        if self.curpri is None:
            self.curpri = self.inipri


@dataclass(eq=False)
class RunningIsr:
    """The part of a running category 2 ISR's state that resources change."""

    intpri: int
    lastrescb: Optional[ResourceControlBlock] = None


class ResourceManager:
    """Standard resources shared between tasks and category 2 ISRs.

    The kernel context the services act on is held in attributes:
    ``callevel_stat`` (call level and system state bits), ``running_task``,
    ``running_isr``, ``nextpri`` (priority of the highest ready task, or
    ``None`` when no task is ready) and ``ipm`` (interrupt priority mask).
    """

    def __init__(
        self,
        resinibs: Iterable[ResourceInit],
        tpri_minisr: int,
        extended_status: bool = True,
        error_hook: Optional[ErrorHook] = None,
        preempt: Optional[Callable[[], None]] = None,
    ) -> None:
        self.resinibs: List[ResourceInit] = list(resinibs)
        self.tpri_minisr = tpri_minisr
        self.extended_status = extended_status
        self.error_hook = error_hook
        self.preempt = preempt
        self.callevel_stat: int = CallLevel.NULL
        self.running_task: Optional[RunningTask] = None
        self.running_isr: Optional[RunningIsr] = None
        self.nextpri: Optional[int] = None
        self.ipm: int = TIPM_ENAALL
        self.control_blocks: List[ResourceControlBlock] = []
        self.initialize()

    def initialize(self) -> None:
        """Reset every resource to the unlocked state."""
        self.control_blocks = [
            ResourceControlBlock(resinib=resinib) for resinib in self.resinibs
        ]

    def __len__(self) -> int:
        return len(self.control_blocks)

    def _fail(self, status: StatusType, service: ServiceId, resid: int) -> OsError:
        if self.error_hook is not None:
            self.error_hook(status, ErrorHookInfo(service, resid))
        return OsError(status, service_name(service))

    def _check(self, service: ServiceId, resid: int) -> ResourceControlBlock:
        if not self.extended_status:
            if not 0 <= resid < len(self.control_blocks):
                raise IndexError(f"resource id {resid} out of range")
            return self.control_blocks[resid]
        try:
            check_disabled_int(self.callevel_stat)
            check_callevel(self.callevel_stat, allowed_callevel(service))
        except OsError as exc:
            raise self._fail(exc.status, service, resid) from None
        if not 0 <= resid < len(self.control_blocks):
            raise self._fail(StatusType.E_OS_ID, service, resid)
        return self.control_blocks[resid]

    def _task(self) -> RunningTask:
        if self.running_task is None:
            raise RuntimeError("no task is running")
        return self.running_task

    def _isr(self) -> RunningIsr:
        if self.running_isr is None:
            raise RuntimeError("no ISR is running")
        return self.running_isr

    def get_resource(self, resid: int) -> None:
        """Lock resource ``resid`` for the running task or ISR."""
        service = ServiceId.GET_RESOURCE
        rescb = self._check(service, resid)
        ceilpri = rescb.resinib.ceilpri

        if self.callevel_stat == CallLevel.TASK:
            task = self._task()
            if self.extended_status:
                if task.inipri < ceilpri or rescb.lockflg:
                    raise self._fail(StatusType.E_OS_ACCESS, service, resid)
            curpri = task.curpri
            rescb.prevpri = curpri
            rescb.lockflg = True
            rescb.prevrescb = task.lastrescb
            task.lastrescb = rescb
            if ceilpri < curpri:
                task.curpri = ceilpri
                if ceilpri <= self.tpri_minisr:
                    self.ipm = ceilpri
        else:
            isr = self._isr()
            if self.extended_status:
                if isr.intpri < ceilpri or rescb.lockflg:
                    raise self._fail(StatusType.E_OS_ACCESS, service, resid)
            curpri = self.ipm
            rescb.prevpri = curpri
            rescb.lockflg = True
            rescb.prevrescb = isr.lastrescb
            isr.lastrescb = rescb
            if ceilpri < curpri:
                self.ipm = ceilpri

    def release_resource(self, resid: int) -> None:
        """Release resource ``resid``, which must be the last one locked."""
        service = ServiceId.RELEASE_RESOURCE
        rescb = self._check(service, resid)

        if self.callevel_stat == CallLevel.TASK:
            task = self._task()
            if self.extended_status and task.lastrescb is not rescb:
                raise self._fail(StatusType.E_OS_NOFUNC, service, resid)
            if rescb.prevpri <= self.tpri_minisr:
                self.ipm = rescb.prevpri
            elif task.curpri <= self.tpri_minisr:
                self.ipm = TIPM_ENAALL
            task.curpri = rescb.prevpri
            task.lastrescb = rescb.prevrescb
            rescb.lockflg = False
            if self.nextpri is not None and task.curpri > self.nextpri:
                if self.preempt is not None:
                    self.preempt()
        else:
            isr = self._isr()
            if self.extended_status and isr.lastrescb is not rescb:
                raise self._fail(StatusType.E_OS_NOFUNC, service, resid)
            self.ipm = rescb.prevpri
            isr.lastrescb = rescb.prevrescb
            rescb.lockflg = False