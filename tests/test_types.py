import pytest

from osekres.types import (
    ERRCODE_NUM,
    AlarmBase,
    OsError,
    StatusType,
    count_sz,
    round_sz,
)


def test_param_pointer_alias():
    err = OsError(StatusType.OS_E_PARAM_POINTER, None)
    assert err.status is StatusType.E_OS_PARAM_POINTER
    assert int(err.status) == 26


@pytest.mark.parametrize("code", range(1, ERRCODE_NUM + 1))
def test_every_error_code_is_accepted(code):
    err = OsError(code, None)
    assert int(err.status) == code


def test_last_error_code_value():
    err = OsError(ERRCODE_NUM, None)
    assert err.status is StatusType.E_OS_PROTECTION_COUNT_ISR
    assert int(err.status) == 36


def test_alarm_base_is_frozen():
    base = AlarmBase(maxallowedvalue=100, ticksperbase=10, mincycle=5)
    assert base.maxallowedvalue == 100
    with pytest.raises(AttributeError):
        base.mincycle = 7


def test_os_error_carries_status_and_service():
    err = OsError(StatusType.E_OS_ID, "GetResource")
    assert err.status is StatusType.E_OS_ID
    assert err.service == "GetResource"
    assert "E_OS_ID" in str(err)


def test_os_error_converts_int_status():
    err = OsError(int(StatusType.E_OS_ACCESS), None)
    assert err.status is StatusType.E_OS_ACCESS
    assert str(err) == "E_OS_ACCESS"


def test_os_error_rejects_unknown_status():
    with pytest.raises(ValueError):
        OsError(ERRCODE_NUM + 100, "x")


@pytest.mark.parametrize("size", [0, 1, 7, 8, 9, 63, 64, 65, 1000])
@pytest.mark.parametrize("unit", [1, 2, 4, 8, 16])
def test_round_and_count_agree(size, unit):
    rounded = round_sz(size, unit)
    assert rounded % unit == 0
    assert size <= rounded < size + unit
    assert count_sz(size, unit) * unit == rounded


def test_round_of_multiple_is_identity():
    assert round_sz(32, 8) == 32
    assert count_sz(32, 8) == 4


@pytest.mark.parametrize("unit", [0, 3, 6, -4])
def test_bad_unit_rejected(unit):
    with pytest.raises(ValueError):
        round_sz(10, unit)
    with pytest.raises(ValueError):
        count_sz(10, unit)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        round_sz(-1, 4)