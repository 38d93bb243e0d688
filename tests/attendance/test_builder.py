from datetime import date

import pytest
from helpers import punch

from guard_payroll.attendance.builder import DailyWorkRecordBuilder, infer_check_in_out
from guard_payroll.attendance.grouper import group_daily
from guard_payroll.core.enums import DayStatus
from guard_payroll.punches.classifier import classify_punches

MONDAY = date(2025, 1, 6)
SUNDAY = date(2025, 1, 5)


def build(day, *events):
    punches = group_daily(classify_punches(events), "A").get(day, [])
    return DailyWorkRecordBuilder().build_day("A", day, punches)


@pytest.mark.parametrize(
    "hour,minute,is_late,late_minutes,deduction,status",
    [
        (6, 0, False, 0, 0, DayStatus.ON_TIME),
        (6, 30, False, 0, 0, DayStatus.ON_TIME),
        (6, 45, False, 0, 0, DayStatus.LATE_GRACE),
        (6, 46, True, 16, 17.5, DayStatus.LATE_HALF_DEDUCT),
        (7, 0, True, 30, 17.5, DayStatus.LATE_HALF_DEDUCT),
        (7, 1, True, 31, 35, DayStatus.LATE_FULL_DEDUCT),
    ],
)
def test_lateness_boundaries(hour, minute, is_late, late_minutes, deduction, status):
    rec = build(MONDAY, punch("A", MONDAY, hour, minute))

    assert rec.status is status
    assert rec.is_late is is_late
    assert rec.late_minutes == late_minutes
    assert rec.deduction == deduction
    assert rec.wage == 420
    assert rec.net_wage == 420 - deduction
    assert rec.is_absent is False


def test_workday_without_punches_is_absent():
    rec = build(MONDAY)

    assert rec.status is DayStatus.ABSENT
    assert rec.is_absent is True
    assert rec.note == "ขาดงาน"
    assert (rec.wage, rec.deduction, rec.net_wage, rec.total_work_hours) == (0, 0, 0, 0)
    assert rec.check_in is None and rec.check_out is None


def test_sunday_without_punches_is_rest_day():
    rec = build(SUNDAY)

    assert rec.status is DayStatus.REST_DAY
    assert rec.is_absent is False
    assert rec.note == "วันหยุด"
    assert rec.wage == 0


def test_sunday_with_punch_is_paid_presence():
    rec = build(SUNDAY, punch("A", SUNDAY, 9, 0, label="ตรวจตรา"))

    assert rec.is_absent is False
    assert rec.wage == 420
    assert rec.note == ""
    assert rec.check_in is not None


def test_single_afternoon_punch_is_check_out_only():
    rec = build(MONDAY, punch("A", MONDAY, 13, 0, label="สแกน"))

    assert rec.check_in is None
    assert rec.check_out is not None
    assert rec.is_late is False
    assert rec.wage == 420
    assert rec.total_work_hours == 12


def test_single_morning_check_out_label_is_check_in_only():
    p = punch("A", MONDAY, 8, 0, label="เลิกงาน")
    rec = build(MONDAY, p)

    assert rec.check_in == p.timestamp
    assert rec.check_out is None
    assert rec.is_late is True
    assert rec.deduction == 35


def test_labelled_check_in_wins_over_earlier_punch():
    rec = build(
        MONDAY,
        punch("A", MONDAY, 5, 50, label="ตรวจตรา"),
        punch("A", MONDAY, 6, 50, label="Check-in"),
        punch("A", MONDAY, 18, 30, label="Check-out"),
    )

    assert rec.late_minutes == 20
    assert rec.deduction == 17.5
    assert rec.check_out.startswith("2025-01-06T11:30")


def test_fallbacks_use_first_and_last_punch():
    first = punch("A", MONDAY, 6, 10, label="scan")
    last = punch("A", MONDAY, 18, 40, label="scan")
    rec = build(MONDAY, last, first)

    assert rec.check_in == first.timestamp
    assert rec.check_out == last.timestamp
    assert rec.status is DayStatus.ON_TIME


def test_afternoon_check_in_label_is_never_check_out():
    punches = classify_punches(
        [punch("A", MONDAY, 6, 0, label="เข้างาน"), punch("A", MONDAY, 14, 0, label="เข้างาน")]
    )
    check_in, check_out = infer_check_in_out(sorted(punches, key=lambda p: p.instant))

    assert check_in is not None
    assert check_out is None


def test_afternoon_labelled_check_in_is_still_assessed():
    rec = build(MONDAY, punch("A", MONDAY, 12, 5, label="scan"), punch("A", MONDAY, 15, 0, label="เข้างาน"))

    assert rec.check_in is not None
    assert rec.check_out is None
    assert rec.is_late is True
    assert rec.deduction == 35
    assert rec.wage == 420


def test_build_range_covers_every_day():
    builder = DailyWorkRecordBuilder()
    records = builder.build_range("A", {}, SUNDAY, date(2025, 1, 11))

    assert [r.date.day for r in records] == [5, 6, 7, 8, 9, 10, 11]
    assert [r.status for r in records].count(DayStatus.ABSENT) == 6
    assert builder.build_range("A", {}, MONDAY, SUNDAY) == []
