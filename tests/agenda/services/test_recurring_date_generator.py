"""Testes deterministas do gerador de datas recorrentes."""

from __future__ import annotations

from datetime import date, datetime
from itertools import islice

import pytest

from agenda.domain.recurrence import RecurrenceErrorKind, RepeatType
from agenda.services.recurring_date_generator import (
    generate_occurrences,
    generate_recurring_dates,
    generate_recurring_dates_until,
    iter_recurring_dates,
)
from config.settings.recurrence import RecurrenceSettings
from utils.errors import InvalidAnchorDateError, InvalidDateInputError, InvalidRecurrenceRuleError


class TestDailyAndWeekly:
    def test_daily_includes_anchor(self) -> None:
        assert generate_recurring_dates("2024-01-30", "daily", 3) == [
            "2024-01-30",
            "2024-01-31",
            "2024-02-01",
        ]

    def test_daily_interval_is_the_step(self) -> None:
        dates = generate_recurring_dates("2024-01-01", "daily", 3, interval=2)
        assert dates == ["2024-01-01", "2024-01-03", "2024-01-05"]

    def test_weekly_keeps_weekday(self) -> None:
        dates = generate_recurring_dates("2024-02-26", RepeatType.WEEKLY, 3)
        assert dates == ["2024-02-26", "2024-03-04", "2024-03-11"]
        assert {date.fromisoformat(value).weekday() for value in dates} == {0}

    def test_weekly_interval(self) -> None:
        dates = generate_recurring_dates("2024-12-25", "weekly", 3, interval=2)
        assert dates == ["2024-12-25", "2025-01-08", "2025-01-22"]


class TestMonthly:
    def test_day_31_skips_short_months(self) -> None:
        dates = generate_recurring_dates("2024-01-31", "monthly", 5)
        assert dates == [
            "2024-01-31",
            "2024-03-31",
            "2024-05-31",
            "2024-07-31",
            "2024-08-31",
        ]

    def test_day_31_never_clamps_to_last_day(self) -> None:
        dates = generate_recurring_dates("2024-01-31", "monthly", 12)
        assert all(value.endswith("-31") for value in dates)
        assert len(dates) == 12

    def test_day_30_skips_february_only(self) -> None:
        dates = generate_recurring_dates("2024-01-30", "monthly", 3)
        assert dates == ["2024-01-30", "2024-03-30", "2024-04-30"]

    def test_day_29_uses_leap_february(self) -> None:
        dates = generate_recurring_dates("2024-01-29", "monthly", 3)
        assert dates == ["2024-01-29", "2024-02-29", "2024-03-29"]

    def test_interval_advances_cursor_before_skip(self) -> None:
        # Jan, Mar, May... todos com 31 dias
        dates = generate_recurring_dates("2024-01-31", "monthly", 4, interval=2)
        assert dates == ["2024-01-31", "2024-03-31", "2024-05-31", "2024-07-31"]

    def test_skipped_cycles_do_not_count(self) -> None:
        # Mar, Jun(30) pula, Set(30) pula, Dez, Mar, Jun pula...
        dates = generate_recurring_dates("2024-03-31", "monthly", 3, interval=3)
        assert dates == ["2024-03-31", "2024-12-31", "2025-03-31"]

    def test_crosses_year_boundary(self) -> None:
        dates = generate_recurring_dates("2024-11-15", "monthly", 3)
        assert dates == ["2024-11-15", "2024-12-15", "2025-01-15"]


class TestYearly:
    def test_leap_day_only_on_leap_years(self) -> None:
        dates = generate_recurring_dates("2024-02-29", "yearly", 4)
        assert dates == ["2024-02-29", "2028-02-29", "2032-02-29", "2036-02-29"]

    def test_leap_day_never_substitutes(self) -> None:
        dates = generate_recurring_dates("2024-02-29", "yearly", 10)
        assert all(value.endswith("-02-29") for value in dates)

    def test_leap_day_across_century(self) -> None:
        # 2100 nao e bissexto; 2104 e
        dates = generate_recurring_dates("2096-02-29", "yearly", 2)
        assert dates == ["2096-02-29", "2104-02-29"]

    def test_leap_day_with_interval_counts_skipped_years_as_attempts(self) -> None:
        # 2024, 2026(x), 2028, 2030(x), 2032
        dates = generate_recurring_dates("2024-02-29", "yearly", 3, interval=2)
        assert dates == ["2024-02-29", "2028-02-29", "2032-02-29"]

    def test_regular_day(self) -> None:
        dates = generate_recurring_dates("2024-07-04", "yearly", 3, interval=5)
        assert dates == ["2024-07-04", "2029-07-04", "2034-07-04"]


class TestCountMode:
    def test_zero_count_is_empty(self) -> None:
        assert generate_recurring_dates("2024-01-01", "daily", 0) == []

    def test_negative_count_raises(self) -> None:
        with pytest.raises(InvalidRecurrenceRuleError) as exc_info:
            generate_recurring_dates("2024-01-01", "daily", -1)
        assert exc_info.value.kind is RecurrenceErrorKind.INVALID_RULE_PARAMETERS

    def test_exclusive_sequence_starts_after_anchor(self) -> None:
        dates = generate_recurring_dates("2024-01-31", "monthly", 2, include_anchor=False)
        assert dates == ["2024-03-31", "2024-05-31"]

    def test_output_is_strictly_increasing(self) -> None:
        for repeat_type in RepeatType:
            dates = generate_recurring_dates("2024-02-29", repeat_type, 20, interval=3)
            assert dates == sorted(set(dates))
            assert dates[0] == "2024-02-29"


class TestEndDateMode:
    def test_end_date_is_inclusive(self) -> None:
        dates = generate_recurring_dates_until("2024-01-01", "weekly", "2024-01-29")
        assert dates == [
            "2024-01-01",
            "2024-01-08",
            "2024-01-15",
            "2024-01-22",
            "2024-01-29",
        ]

    def test_monthly_until_skips_missing_days(self) -> None:
        dates = generate_recurring_dates_until("2024-01-31", "monthly", "2024-06-30")
        assert dates == ["2024-01-31", "2024-03-31", "2024-05-31"]

    def test_yearly_leap_day_until(self) -> None:
        dates = generate_recurring_dates_until("2024-02-29", "yearly", date(2031, 12, 31))
        assert dates == ["2024-02-29", "2028-02-29"]

    def test_end_before_anchor_is_empty(self) -> None:
        assert generate_recurring_dates_until("2024-05-10", "daily", "2024-05-01") == []

    def test_end_as_datetime_string_uses_calendar_day(self) -> None:
        dates = generate_recurring_dates_until("2024-01-01", "daily", "2024-01-03T08:00:00+09:00")
        assert dates == ["2024-01-01", "2024-01-02", "2024-01-03"]

    def test_end_datetime_object(self) -> None:
        dates = generate_recurring_dates_until("2024-01-01", "daily", datetime(2024, 1, 2, 23, 59))
        assert dates == ["2024-01-01", "2024-01-02"]

    def test_invalid_end_date(self) -> None:
        with pytest.raises(InvalidDateInputError) as exc_info:
            generate_recurring_dates_until("2024-01-01", "daily", "2023-02-29")
        assert exc_info.value.kind is RecurrenceErrorKind.INVALID_CALENDAR_DATE

    def test_series_records_bound(self) -> None:
        series = generate_occurrences("2024-01-01", "daily", end_date="2024-01-02")
        assert series.end_date == date(2024, 1, 2)
        assert series.requested is None
        assert series.truncated is False


class TestSafetyCeiling:
    def test_count_above_max_occurrences_is_truncated(self) -> None:
        settings = RecurrenceSettings(max_occurrences=10)
        series = generate_occurrences("2024-01-01", "daily", count=25, settings=settings)
        assert len(series.dates) == 10
        assert series.requested == 25
        assert series.truncated is True

    def test_default_ceiling_is_1000(self) -> None:
        series = generate_occurrences("2024-01-01", "daily", count=1500)
        assert len(series.dates) == 1000
        assert series.truncated is True

    def test_attempt_ceiling_truncates_sparse_rules(self) -> None:
        # 29/02 anual precisa de ~4 tentativas por ocorrencia; 3 x 2 = 6 ciclos
        settings = RecurrenceSettings(attempts_per_occurrence=2)
        series = generate_occurrences("2024-02-29", "yearly", count=3, settings=settings)
        assert series.dates == ("2024-02-29", "2028-02-29")
        assert series.truncated is True

    def test_until_mode_truncates_at_max_occurrences(self) -> None:
        settings = RecurrenceSettings(max_occurrences=5)
        series = generate_occurrences(
            "2024-01-01", "daily", end_date="2024-12-31", settings=settings
        )
        assert len(series.dates) == 5
        assert series.truncated is True

    def test_calendar_end_stops_generation(self) -> None:
        series = generate_occurrences("9998-12-31", "yearly", count=5)
        assert series.dates == ("9998-12-31", "9999-12-31")
        assert series.truncated is True

    def test_full_series_is_not_truncated(self) -> None:
        series = generate_occurrences("2024-01-31", "monthly", count=5)
        assert series.truncated is False


class TestRuleErrors:
    @pytest.mark.parametrize("interval", [0, -1, 1.5, True])
    def test_invalid_interval(self, interval: object) -> None:
        with pytest.raises(InvalidRecurrenceRuleError):
            generate_recurring_dates("2024-01-01", "daily", 3, interval=interval)  # type: ignore[arg-type]

    @pytest.mark.parametrize("repeat_type", ["none", "hourly", "", "Daily"])
    def test_invalid_repeat_type(self, repeat_type: str) -> None:
        with pytest.raises(InvalidRecurrenceRuleError) as exc_info:
            generate_recurring_dates("2024-01-01", repeat_type, 3)
        assert exc_info.value.kind is RecurrenceErrorKind.INVALID_RULE_PARAMETERS

    def test_both_bounds_rejected(self) -> None:
        with pytest.raises(InvalidRecurrenceRuleError):
            generate_occurrences("2024-01-01", "daily", count=3, end_date="2024-02-01")

    def test_no_bound_rejected(self) -> None:
        with pytest.raises(InvalidRecurrenceRuleError):
            generate_occurrences("2024-01-01", "daily")

    @pytest.mark.parametrize(
        ("anchor", "kind"),
        [
            ("2024/01/01", RecurrenceErrorKind.INVALID_FORMAT),
            ("2024-01-01T10:00:00", RecurrenceErrorKind.INVALID_FORMAT),
            ("not-a-date", RecurrenceErrorKind.INVALID_FORMAT),
            ("2023-02-29", RecurrenceErrorKind.INVALID_CALENDAR_DATE),
            ("2024-04-31", RecurrenceErrorKind.INVALID_CALENDAR_DATE),
            ("", RecurrenceErrorKind.MISSING_INPUT),
        ],
    )
    def test_invalid_anchor(self, anchor: str, kind: RecurrenceErrorKind) -> None:
        with pytest.raises(InvalidAnchorDateError) as exc_info:
            generate_recurring_dates(anchor, "daily", 1)
        assert exc_info.value.kind is kind

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError, match="count cannot be negative"):
            generate_recurring_dates("2024-01-01", "daily", -5)


class TestIterator:
    def test_lazy_iteration(self) -> None:
        occurrences = iter_recurring_dates("2024-01-31", "monthly")
        assert list(islice(occurrences, 3)) == [
            date(2024, 1, 31),
            date(2024, 3, 31),
            date(2024, 5, 31),
        ]

    def test_accepts_date_anchor(self) -> None:
        occurrences = iter_recurring_dates(date(2024, 2, 29), "yearly", interval=4)
        assert next(occurrences) == date(2024, 2, 29)
        assert next(occurrences) == date(2028, 2, 29)

    def test_validates_eagerly(self) -> None:
        with pytest.raises(InvalidRecurrenceRuleError):
            iter_recurring_dates("2024-01-01", "daily", interval=0)
