"""
Tests for the ReminderResolver.

Validates:
- Reminder records for working days, weekends and holidays
- Cheque creation with reminder fields filled in
- Input validation
- Notification text
- Warnings for years without variable holiday data
"""
import logging

import pytest
from dataclasses import replace
from datetime import date
from decimal import Decimal

from chequeflow.calendars import NoHolidayCalendar
from chequeflow.engine import ReminderResolver, describe_adjustment, get_reminder_date
from chequeflow.exceptions import ChequeValidationError
from chequeflow.models import ChequeStatus, ReminderResult

from tests.conftest import make_cheque


class TestGetReminderDate:
    """Tests for ReminderResolver.get_reminder_date()."""

    def test_poya_day(self, resolver):
        result = resolver.get_reminder_date(date(2025, 1, 13))

        assert result == ReminderResult(
            reminder_date=date(2025, 1, 14),
            is_adjusted=True,
            original_date=date(2025, 1, 13),
            skipped_days=("Duruthu Full Moon Poya Day",),
        )

    def test_saturday(self, resolver):
        result = resolver.get_reminder_date(date(2025, 3, 15))

        assert result.reminder_date == date(2025, 3, 17)
        assert result.is_adjusted is True
        assert result.skipped_days == ("Saturday", "Sunday")

    def test_plain_weekday(self, resolver):
        result = resolver.get_reminder_date(date(2025, 3, 14))

        assert result.reminder_date == date(2025, 3, 14)
        assert result.is_adjusted is False
        assert result.original_date == date(2025, 3, 14)
        assert result.skipped_days == ()

    def test_fixed_holiday(self, resolver):
        result = resolver.get_reminder_date(date(2025, 12, 25))

        assert result.reminder_date == date(2025, 12, 26)
        assert result.skipped_days == ("Christmas Day",)

    def test_adjusted_iff_labels(self, resolver):
        for due in (date(2025, 1, 13), date(2025, 3, 14), date(2026, 5, 1)):
            result = resolver.get_reminder_date(due)
            assert result.is_adjusted == bool(result.skipped_days)
            assert result.is_adjusted == (result.reminder_date != due)

    def test_injected_calendar(self):
        resolver = ReminderResolver(calendar=NoHolidayCalendar())

        result = resolver.get_reminder_date(date(2025, 1, 13))

        assert result.is_adjusted is False

    def test_to_dict(self, resolver):
        data = resolver.get_reminder_date(date(2025, 2, 8)).to_dict()

        assert data == {
            "reminder_date": "2025-02-10",
            "is_adjusted": True,
            "original_date": "2025-02-08",
            "skipped_days": ["Saturday", "Sunday"],
        }

    def test_resolve_many_keeps_order(self, resolver):
        results = resolver.resolve_many([date(2025, 3, 14), date(2025, 1, 13)])

        assert [r.original_date for r in results] == [date(2025, 3, 14), date(2025, 1, 13)]
        assert [r.is_adjusted for r in results] == [False, True]

    def test_convenience_function(self):
        result = get_reminder_date(date(2025, 2, 8))

        assert result.reminder_date == date(2025, 2, 10)


class TestUncoveredYearWarning:
    """Years without variable holidays still resolve, with a warning."""

    def test_warns_for_uncovered_year(self, resolver, caplog):
        with caplog.at_level(logging.WARNING, logger="chequeflow"):
            result = resolver.get_reminder_date(date(2027, 1, 15))

        assert result.reminder_date == date(2027, 1, 18)
        assert result.skipped_days == ("Thai Pongal", "Saturday", "Sunday")
        assert any("2027" in r.getMessage() for r in caplog.records)

    def test_no_warning_for_covered_year(self, resolver, caplog):
        with caplog.at_level(logging.WARNING, logger="chequeflow"):
            resolver.get_reminder_date(date(2025, 1, 15))

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestCreateCheque:
    """Tests for ReminderResolver.create_cheque()."""

    def test_reminder_fields_filled(self, resolver):
        cheque = resolver.create_cheque(
            cheque_number="000123",
            bank_name="Commercial Bank",
            payee_name="Lanka Traders",
            amount=Decimal("150000"),
            due_date=date(2025, 1, 13),
            branch="Colombo 03",
        )

        assert cheque.id
        assert cheque.status == ChequeStatus.PENDING
        assert cheque.reminder_date == date(2025, 1, 14)
        assert cheque.is_holiday_adjusted is True
        assert cheque.holiday_skipped == ("Duruthu Full Moon Poya Day",)

    def test_unadjusted_cheque(self, resolver):
        cheque = resolver.create_cheque(
            cheque_number="000124",
            bank_name="Sampath Bank",
            payee_name="Ceylon Supplies",
            amount=5000,
            due_date=date(2025, 3, 14),
            branch="Kandy",
            notes="Second instalment",
        )

        assert cheque.reminder_date == date(2025, 3, 14)
        assert cheque.is_holiday_adjusted is False
        assert cheque.holiday_skipped == ()
        assert cheque.amount == Decimal("5000")
        assert cheque.notes == "Second instalment"

    def test_ids_are_unique(self, resolver):
        kwargs = dict(
            cheque_number="1", bank_name="BOC", payee_name="A",
            amount=1, due_date=date(2025, 3, 14), branch="Galle",
        )

        assert resolver.create_cheque(**kwargs).id != resolver.create_cheque(**kwargs).id

    @pytest.mark.parametrize("amount", [0, Decimal("-10")])
    def test_non_positive_amount_rejected(self, resolver, amount):
        with pytest.raises(ChequeValidationError) as exc_info:
            resolver.create_cheque(
                cheque_number="000123",
                bank_name="Commercial Bank",
                payee_name="Lanka Traders",
                amount=amount,
                due_date=date(2025, 1, 13),
                branch="Colombo 03",
            )

        assert exc_info.value.code == "CF_CHEQUE_VALIDATION_ERROR"

    @pytest.mark.parametrize("amount", [Decimal("NaN"), Decimal("Infinity"), "abc", None])
    def test_non_numeric_amount_rejected(self, resolver, amount):
        """Amounts that are not finite numbers raise the domain error."""
        with pytest.raises(ChequeValidationError) as exc_info:
            resolver.create_cheque(
                cheque_number="000123",
                bank_name="Commercial Bank",
                payee_name="Lanka Traders",
                amount=amount,
                due_date=date(2025, 1, 13),
                branch="Colombo 03",
            )

        assert exc_info.value.code == "CF_CHEQUE_VALIDATION_ERROR"
        assert exc_info.value.details == {"amount": str(amount)}

    def test_blank_fields_rejected(self, resolver):
        with pytest.raises(ChequeValidationError) as exc_info:
            resolver.create_cheque(
                cheque_number="000123",
                bank_name=" ",
                payee_name="",
                amount=Decimal("100"),
                due_date=date(2025, 1, 13),
                branch="Colombo 03",
            )

        assert exc_info.value.details["fields"] == ["bank_name", "payee_name"]


class TestRecalculate:
    """Tests for ReminderResolver.recalculate()."""

    def test_stored_fields_not_refreshed_by_edit(self, resolver):
        """Editing the due date leaves the stored reminder untouched."""
        cheque = resolver.create_cheque(
            cheque_number="000123",
            bank_name="Commercial Bank",
            payee_name="Lanka Traders",
            amount=Decimal("150000"),
            due_date=date(2025, 1, 13),
            branch="Colombo 03",
        )

        edited = replace(cheque, due_date=date(2025, 3, 14))

        assert edited.reminder_date == date(2025, 1, 14)

    def test_recalculate_refreshes_fields(self, resolver):
        cheque = make_cheque(
            due_date=date(2025, 3, 14),
            reminder_date=date(2025, 1, 14),
            is_holiday_adjusted=True,
            holiday_skipped=("Duruthu Full Moon Poya Day",),
        )

        refreshed = resolver.recalculate(cheque)

        assert refreshed.reminder_date == date(2025, 3, 14)
        assert refreshed.is_holiday_adjusted is False
        assert refreshed.holiday_skipped == ()
        assert refreshed.id == cheque.id
        # Original untouched
        assert cheque.reminder_date == date(2025, 1, 14)


class TestDescribeAdjustment:
    """Tests for describe_adjustment()."""

    def test_unadjusted(self, resolver):
        result = resolver.get_reminder_date(date(2025, 3, 14))

        assert describe_adjustment(result) == "Cheque has been saved successfully."

    def test_adjusted_lists_days(self, resolver):
        result = resolver.get_reminder_date(date(2025, 2, 8))

        assert describe_adjustment(result) == (
            "Due date falls on Saturday, Sunday. Reminder set for next working day."
        )
