import pytest

from osekres.services import (
    TMAX_SVCID,
    ErrorHookInfo,
    FunctionCode,
    ServiceId,
    function_code_for,
    service_name,
)

_MISSING_END = (
    ServiceId.TASK_MISSING_END,
    ServiceId.ISR_MISSING_END,
    ServiceId.HOOK_MISSING_END,
)


@pytest.mark.parametrize(
    "svcid, name",
    [
        (0xE0, "ActivateTask"),
        (0xEC, "GetResource"),
        (0xED, "ReleaseResource"),
        (0xF9, "ShutdownOS"),
    ],
)
def test_documented_service_ids(svcid, name):
    assert service_name(svcid) == name


@pytest.mark.parametrize(
    "svcid, code",
    [
        (ServiceId.START_OS, 0),
        (ServiceId.GET_RESOURCE, 15),
        (0xA0, 36),
    ],
)
def test_documented_function_codes(svcid, code):
    assert int(function_code_for(svcid)) == code


def test_function_codes_are_contiguous_up_to_tmax():
    codes = sorted(int(function_code_for(s)) for s in ServiceId if s not in _MISSING_END)
    assert codes == list(range(TMAX_SVCID + 1))
    assert codes[-1] == 36


def test_service_names_unique():
    names = [service_name(s) for s in ServiceId]
    assert len(set(names)) == len(names)


@pytest.mark.parametrize(
    "svcid, name",
    [
        (ServiceId.GET_RESOURCE, "GetResource"),
        (0xED, "ReleaseResource"),
        (ServiceId.GET_ISR_ID, "GetISRID"),
        (ServiceId.START_OS, "StartOS"),
    ],
)
def test_service_name(svcid, name):
    assert service_name(svcid) == name


def test_service_name_unknown():
    with pytest.raises(ValueError):
        service_name(0x55)


def test_function_code_for_known():
    assert function_code_for(ServiceId.GET_RESOURCE) is FunctionCode.GET_RESOURCE
    assert function_code_for(0xE0) is FunctionCode.ACTIVATE_TASK


def test_every_code_has_a_service():
    mapped = {function_code_for(s) for s in ServiceId if s not in _MISSING_END}
    assert mapped == set(FunctionCode)


@pytest.mark.parametrize("svcid", list(_MISSING_END))
def test_missing_end_has_no_function_code(svcid):
    with pytest.raises(ValueError):
        function_code_for(svcid)


def test_function_code_for_unknown_id():
    with pytest.raises(ValueError):
        function_code_for(0x02)


def test_error_hook_info_resource():
    info = ErrorHookInfo(ServiceId.GET_RESOURCE, 3)
    assert info.name == "GetResource"
    assert info.parameters == {"ResID": 3}
    assert info["ResID"] == 3


def test_error_hook_info_three_parameters():
    info = ErrorHookInfo(0xF4, 1, 10, 20)
    assert info.service is ServiceId.SET_REL_ALARM
    assert info.parameters == {"AlarmID": 1, "increment": 10, "cycle": 20}


def test_error_hook_info_no_parameters():
    info = ErrorHookInfo(ServiceId.TERMINATE_TASK)
    assert info.parameters == {}
    assert info.parameter_names == ()


def test_error_hook_info_too_many_parameters():
    with pytest.raises(ValueError):
        ErrorHookInfo(ServiceId.TERMINATE_TASK, 1)
    with pytest.raises(ValueError):
        ErrorHookInfo(ServiceId.GET_RESOURCE, 1, 2)


def test_error_hook_info_unknown_parameter():
    info = ErrorHookInfo(ServiceId.GET_RESOURCE, 0)
    assert "TaskID" not in info.parameters
    with pytest.raises(KeyError):
        _ = info["TaskID"]


def test_error_hook_info_unknown_service():
    with pytest.raises(ValueError):
        ErrorHookInfo(0x42)


def test_next_schedule_table_parameter_names():
    info = ErrorHookInfo(ServiceId.NEXT_SCHEDULE_TABLE, 4, 5)
    assert info["ScheduleTableID_From"] == 4
    assert info["ScheduleTableID_To"] == 5