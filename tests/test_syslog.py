import pytest

from osekres.syslog import (
    LOG_LEAVE,
    TMAX_LOGINFO,
    LogPriority,
    LogType,
    SyslogRecord,
    log_mask,
    log_upto,
    make_comment,
    make_record,
)


def test_documented_log_type_values():
    assert make_record(0x15, 1).kind is LogType.SVC
    assert make_record(0x02, "file").kind is LogType.ASSERT
    leaving = make_record(0x1E | 0x80, 1)
    assert leaving.kind is LogType.TFN
    assert leaving.leaving is True
    assert make_comment("x").logtype == 0x01


def test_priority_extremes():
    assert log_mask(LogPriority.EMERG) == 0x01
    assert log_mask(LogPriority.DEBUG) == 0x80
    assert log_upto(LogPriority.DEBUG) == 0xFF


def test_log_mask_single_bit():
    for prio in LogPriority:
        mask = log_mask(prio)
        assert mask & (mask - 1) == 0
        assert mask.bit_length() - 1 == prio


def test_log_mask_emerg_is_lowest_bit():
    assert log_mask(LogPriority.EMERG) == 1


def test_log_upto_is_union_of_masks():
    for prio in LogPriority:
        combined = 0
        for lower in range(prio + 1):
            combined |= log_mask(lower)
        assert log_upto(prio) == combined


def test_log_upto_excludes_higher_priorities():
    upto = log_upto(LogPriority.WARNING)
    assert upto == 0x1F
    assert upto & log_mask(LogPriority.ERROR) == log_mask(LogPriority.ERROR)
    assert upto & log_mask(LogPriority.NOTICE) == 0


def test_log_upto_full_width():
    assert log_upto(31) == 0xFFFFFFFF


@pytest.mark.parametrize("prio", [-1, 32])
def test_priority_out_of_range(prio):
    with pytest.raises(ValueError):
        log_mask(prio)
    with pytest.raises(ValueError):
        log_upto(prio)


def test_make_record_keeps_arguments():
    record = make_record(LogType.SVC, 10, 20, 30)
    assert record.logtype == LogType.SVC
    assert record.loginfo == (10, 20, 30)
    assert record.kind is LogType.SVC
    assert record.leaving is False


def test_make_record_leave_bit():
    record = make_record(LogType.DSP | LOG_LEAVE, "task")
    assert record.kind is LogType.DSP
    assert record.leaving is True


def test_make_record_maximum_items():
    args = tuple(range(TMAX_LOGINFO))
    assert make_record(LogType.ISR, *args).loginfo == args
    with pytest.raises(ValueError):
        make_record(LogType.ISR, *range(TMAX_LOGINFO + 1))


def test_make_record_needs_information():
    with pytest.raises(ValueError):
        make_record(LogType.ISR)


def test_unknown_log_type_rejected():
    with pytest.raises(ValueError):
        SyslogRecord(logtype=0x7F, loginfo=(1,))


def test_make_comment_format_first():
    record = make_comment("value %d", 5)
    assert record.kind is LogType.COMMENT
    assert record.loginfo == ("value %d", 5)


def test_make_comment_argument_limit():
    record = make_comment("%d %d %d %d %d", 1, 2, 3, 4, 5)
    assert len(record.loginfo) == TMAX_LOGINFO
    with pytest.raises(ValueError):
        make_comment("too many", 1, 2, 3, 4, 5, 6)


def test_record_is_immutable():
    record = make_comment("hello")
    with pytest.raises(AttributeError):
        record.logtype = LogType.ASSERT
    assert record.logtim == 0