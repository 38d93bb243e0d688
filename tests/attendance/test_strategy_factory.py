from guard_payroll.attendance.factory import LatenessStrategyFactory
from guard_payroll.attendance.strategies.grace_strategy import GraceStrategy
from guard_payroll.attendance.strategies.late_strategy import FullHourDeductionStrategy, HalfHourDeductionStrategy
from guard_payroll.attendance.strategies.on_time_strategy import OnTimeStrategy
from guard_payroll.core.enums import DayStatus


def test_factory_tiers_by_late_minutes():
    factory = LatenessStrategyFactory()

    assert isinstance(factory.for_late_minutes(0), OnTimeStrategy)
    assert isinstance(factory.for_late_minutes(1), GraceStrategy)
    assert isinstance(factory.for_late_minutes(15), GraceStrategy)
    assert isinstance(factory.for_late_minutes(16), HalfHourDeductionStrategy)
    assert isinstance(factory.for_late_minutes(30), HalfHourDeductionStrategy)
    assert isinstance(factory.for_late_minutes(31), FullHourDeductionStrategy)


def test_late_minutes_measured_from_0630():
    factory = LatenessStrategyFactory()

    assert factory.late_minutes(6 * 60 + 30) == 0
    assert factory.late_minutes(6 * 60) == 0
    assert factory.late_minutes(7 * 60 + 1) == 31


def test_grace_decision_is_not_late_and_free():
    decision = GraceStrategy().decide(late_minutes=10, hourly_rate=35)

    assert decision.status is DayStatus.LATE_GRACE
    assert decision.is_late is False
    assert decision.late_minutes == 0
    assert decision.deduction == 0


def test_deduction_strategies():
    half = HalfHourDeductionStrategy().decide(late_minutes=16, hourly_rate=35)
    full = FullHourDeductionStrategy().decide(late_minutes=31, hourly_rate=35)

    assert (half.is_late, half.late_minutes, half.deduction) == (True, 16, 17.5)
    assert (full.is_late, full.late_minutes, full.deduction) == (True, 31, 35)
