# osekres

`osekres` is a pure-Python model of the resource-management part of an
OSEK/AUTOSAR operating-system kernel. You can use it to test and reason
about priority-ceiling logic on a workstation, with no target hardware.

## Modules

- `osekres.types` holds the status codes (`StatusType`), `TaskState`,
  `ScheduleTableStatus`, `FaultyContext`, `ProtectionReturn`, the
  `AlarmBase` dataclass and the `OsError` exception. It also has the size
  helpers `count_sz` and `round_sz`. Both helpers require `unit` to be a
  positive power of two and `size` to be non-negative. Otherwise they raise
  `ValueError`.
- `osekres.queue` is a ring-structured doubly linked queue with a header
  node (`Queue`, `QueueNode`). `Queue.delete_next` raises `IndexError` on an
  empty queue.
- `osekres.services` holds the service identifiers (`ServiceId`), the
  function codes (`FunctionCode`) and `ErrorHookInfo`. `ErrorHookInfo`
  records a service and up to three parameters, which you can read back by
  their API names. The module also provides two lookups:
  - `service_name(svcid)` gives the API name, such as `"GetResource"`.
  - `function_code_for(svcid)` maps a service to its function code.
- `osekres.syslog` holds the log types (`LogType`), log priorities
  (`LogPriority`), the `SyslogRecord` dataclass and these helpers:
  - `log_mask` and `log_upto` build priority bitmaps.
  - `make_record` and `make_comment` build log records.
- `osekres.callevel` holds the call-level and system-state bits
  (`CallLevel`) and a few related functions:
  - `allowed_callevel(service)` gives the call levels each service may be
    called from. `service` is a `ServiceId` or an API name.
  - `enter_callevel` and `leave_callevel` set and clear bits in a call-level
    state.
  - `check_callevel`, `check_disabled_int` and `check_disallint` raise
    `OsError` when a check fails.
- `osekres.resource` holds `ResourceManager`, which implements
  `get_resource` and `release_resource` under the priority-ceiling protocol,
  for tasks (`RunningTask`) and category-2 ISRs (`RunningIsr`).

## Installation

```
pip install .
```

## Example

```python
from osekres.callevel import CallLevel
from osekres.resource import ResourceInit, ResourceManager, RunningTask

manager = ResourceManager([ResourceInit(ceilpri=2)], tpri_minisr=-1)
task = RunningTask(inipri=5)
manager.callevel_stat = CallLevel.TASK
manager.running_task = task

manager.get_resource(0)      # task.curpri is now 2
manager.release_resource(0)  # task.curpri is back to 5
```

A lower number means a higher priority.

The manager keeps the kernel context in plain attributes, which you set
yourself:

- `callevel_stat`
- `running_task`
- `running_isr`
- `nextpri`: the priority of the highest ready task, or `None`
- `ipm`: the interrupt priority mask

Which path a call takes depends on `callevel_stat`. When it equals
`CallLevel.TASK`, the call works on `running_task`. Otherwise it works on
`running_isr`.

When `release_resource` drops the task's priority below `nextpri`, the
manager calls the `preempt` callback, if one was given.

### Errors

With `extended_status=True` (the default), the manager checks each call
first:

- interrupts must not be disabled or suspended;
- the call level must be allowed for the service;
- the resource id must be in range;
- for `get_resource`: the ceiling must not be exceeded and the resource must
  not be locked already;
- for `release_resource`: the resource must be the last one locked.

A failed check raises `OsError`. Its `status` is the `StatusType` and its
`service` is the API name of the service. If you passed an `error_hook`, the
manager first calls it with the status and an `ErrorHookInfo` that holds the
service and the resource id.

With `extended_status=False`, none of these checks are made, and an
out-of-range id raises `IndexError`.

## What this package does not do

- It has no scheduler, and no task, alarm, counter, event, schedule-table or
  interrupt management. Those are present only as identifiers, status codes
  and call-level rules.
- Preemption is left to the `preempt` callback.
- The syslog module only builds records. It does not store, format or print
  them.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```