"""System log records, log types and priority masks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Tuple

__all__ = [
    "LogType",
    "LogPriority",
    "SyslogRecord",
    "log_mask",
    "log_upto",
    "make_record",
    "make_comment",
    "LOG_ENTER",
    "LOG_LEAVE",
    "TMAX_LOGINFO",
]

LOG_ENTER = 0x00
LOG_LEAVE = 0x80

TMAX_LOGINFO = 6

_PRIO_BITS = 32


class LogType(IntEnum):
    """Kinds of log information."""

    COMMENT = 0x01
    ASSERT = 0x02
    ISR = 0x11
    ALM = 0x12
    TSKSTAT = 0x13
    DSP = 0x14
    SVC = 0x15
    SCHTBL = 0x16
    STAHOOK = 0x17
    ERRHOOK = 0x18
    PROHOOK = 0x19
    SHUTHOOK = 0x1A
    STAHOOKOSAP = 0x1B
    ERRHOOKOSAP = 0x1C
    SHUTHOOKOSAP = 0x1D
    TFN = 0x1E


class LogPriority(IntEnum):
    """Importance of a log entry, most severe first."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


@dataclass(frozen=True)
class SyslogRecord:
    """One entry of the system log.

    ``logtype`` is a :class:`LogType` value, optionally combined with
    :data:`LOG_LEAVE` to mark the exit of the traced unit.
    """

    logtype: int
    loginfo: Tuple[Any, ...] = ()
    logtim: int = 0

    def __post_init__(self) -> None:
        info = tuple(self.loginfo)
        if len(info) > TMAX_LOGINFO:
            raise ValueError(
                f"a log record holds at most {TMAX_LOGINFO} items, got {len(info)}"
            )
        object.__setattr__(self, "loginfo", info)
        # Validates the base type; raises ValueError for unknown kinds.
        LogType(self.logtype & ~LOG_LEAVE)

    @property
    def kind(self) -> LogType:
        """The log type without the enter/leave bit."""
        return LogType(self.logtype & ~LOG_LEAVE)

    @property
    def leaving(self) -> bool:
        """True if the record marks the exit of the traced unit."""
        return bool(self.logtype & LOG_LEAVE)


def _check_prio(prio: int) -> int:
    prio = int(prio)
    if not 0 <= prio < _PRIO_BITS:
        raise ValueError(f"priority must be in 0..{_PRIO_BITS - 1}, got {prio}")
    return prio


def log_mask(prio: int) -> int:
    """Bitmap holding only the priority ``prio``."""
    return 1 << _check_prio(prio)


def log_upto(prio: int) -> int:
    """Bitmap holding every priority from the most severe up to ``prio``."""
    return (1 << (_check_prio(prio) + 1)) - 1


def make_record(logtype: int, *args: Any) -> SyslogRecord:
    """Build a log record of ``logtype`` carrying ``args`` as its information."""
    if not args:
        raise ValueError("a log record needs at least one item of information")
    return SyslogRecord(logtype=logtype, loginfo=args)


def make_comment(fmt: str, *args: Any) -> SyslogRecord:
    """Build a comment record from a format string and up to five arguments."""
    if len(args) > TMAX_LOGINFO - 1:
        raise ValueError(
            f"a comment takes at most {TMAX_LOGINFO - 1} arguments, got {len(args)}"
        )
    return make_record(LogType.COMMENT, fmt, *args)