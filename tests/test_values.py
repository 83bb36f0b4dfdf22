"""Tests for transaction value objects."""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

from cashtrack.domain.errors import ValidationError
from cashtrack.domain.values import Amount, Description, TransactionDate, TransactionId


class TestAmount:
    """Tests for Amount value object."""

    def test_create_amount(self):
        amount = Amount(Decimal("100.00"))
        assert amount.value == Decimal("100.00")

    def test_create_amount_from_string_and_int(self):
        assert Amount("12.50").value == Decimal("12.50")
        assert Amount(7).value == Decimal("7")

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="Amount cannot be null"):
            Amount(None)

    @pytest.mark.parametrize("value", ["0", "0.00", "-0.01", "-100"])
    def test_zero_and_negative_rejected(self, value):
        with pytest.raises(ValidationError, match="Amount must be positive"):
            Amount(Decimal(value))

    def test_float_rejected(self):
        with pytest.raises(ValidationError):
            Amount(10.5)

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity"])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(ValidationError, match="Invalid amount"):
            Amount(value)

    def test_add(self):
        result = Amount(Decimal("100.00")).add(Amount(Decimal("50.00")))
        assert result.value == Decimal("150.00")

    def test_add_returns_new_instance(self):
        a = Amount(Decimal("1"))
        b = Amount(Decimal("2"))
        result = a.add(b)
        assert result is not a
        assert a.value == Decimal("1")

    def test_add_none_rejected(self):
        with pytest.raises(ValidationError, match="Other amount cannot be null"):
            Amount(Decimal("100")).add(None)

    def test_subtract(self):
        result = Amount(Decimal("100.00")).subtract(Amount(Decimal("50.00")))
        assert result.value == Decimal("50.00")

    @pytest.mark.parametrize(
        "left,right", [("100.00", "100.00"), ("50.00", "100.00"), ("0.01", "0.02")]
    )
    def test_subtract_to_zero_or_below_rejected(self, left, right):
        with pytest.raises(ValidationError, match="Subtraction result must be positive"):
            Amount(Decimal(left)).subtract(Amount(Decimal(right)))

    def test_subtract_none_rejected(self):
        with pytest.raises(ValidationError, match="Other amount cannot be null"):
            Amount(Decimal("100")).subtract(None)

    def test_is_greater_than(self):
        greater = Amount(Decimal("100.00"))
        lesser = Amount(Decimal("50.00"))
        assert greater.is_greater_than(lesser)
        assert not lesser.is_greater_than(greater)

    def test_is_greater_than_equal_amounts(self):
        assert not Amount(Decimal("100.00")).is_greater_than(Amount(Decimal("100")))

    def test_is_greater_than_none_rejected(self):
        with pytest.raises(ValidationError, match="Other amount cannot be null"):
            Amount(Decimal("100")).is_greater_than(None)

    def test_equality_by_value(self):
        assert Amount(Decimal("100.00")) == Amount(Decimal("100.00"))
        assert hash(Amount(Decimal("100.00"))) == hash(Amount(Decimal("100.00")))
        assert Amount(Decimal("100.00")) != Amount(Decimal("50.00"))

    def test_immutability(self):
        amount = Amount(Decimal("100.00"))
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            amount.value = Decimal("1")

    def test_repr_contains_value(self):
        text = repr(Amount(Decimal("100.00")))
        assert "Amount" in text
        assert "100.00" in text


class TestDescription:
    """Tests for Description value object."""

    def test_create_trims(self):
        description = Description("  Grocery run  ")
        assert description.value == "Grocery run"
        assert len(description) == len("Grocery run")

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="Description cannot be null"):
            Description(None)

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_rejected(self, value):
        with pytest.raises(ValidationError, match="Description cannot be empty"):
            Description(value)

    def test_max_length(self):
        assert len(Description("x" * 255)) == 255
        # Trimming happens before the length check
        assert len(Description("  " + "x" * 255 + "  ")) == 255

    def test_too_long_rejected(self):
        with pytest.raises(ValidationError, match="longer than 255"):
            Description("x" * 256)

    def test_contains_is_case_insensitive(self):
        description = Description("Monthly RENT payment")
        assert description.contains("rent")
        assert description.contains("Monthly")
        assert not description.contains("salary")

    def test_contains_none_is_false(self):
        assert Description("Rent").contains(None) is False

    def test_equality_by_value(self):
        assert Description("Rent") == Description("  Rent ")
        assert Description("Rent") != Description("rent")


class TestTransactionDate:
    """Tests for TransactionDate value object."""

    def test_today_accepted(self):
        assert TransactionDate(date.today()).value == date.today()

    def test_past_accepted(self):
        assert TransactionDate(date(2020, 2, 29)).value == date(2020, 2, 29)

    def test_future_rejected(self):
        with pytest.raises(ValidationError, match="cannot be in the future"):
            TransactionDate(date.today() + timedelta(days=1))

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="Transaction date cannot be null"):
            TransactionDate(None)

    def test_datetime_truncated_to_date(self):
        assert TransactionDate(datetime(2024, 3, 1, 13, 45)).value == date(2024, 3, 1)

    def test_non_date_rejected(self):
        with pytest.raises(ValidationError):
            TransactionDate("2024-01-01")

    def test_now(self):
        assert TransactionDate.now().value == date.today()

    def test_ordering(self):
        earlier = TransactionDate(date(2024, 1, 1))
        later = TransactionDate(date(2024, 6, 1))
        assert earlier.is_before(later)
        assert not later.is_before(earlier)
        assert later.is_after(earlier)
        assert not earlier.is_after(earlier)
        assert not earlier.is_before(earlier)

    def test_ordering_against_none_rejected(self):
        d = TransactionDate(date(2024, 1, 1))
        with pytest.raises(ValidationError):
            d.is_before(None)
        with pytest.raises(ValidationError):
            d.is_after(None)


class TestTransactionId:
    """Tests for TransactionId value object."""

    def test_generate_is_unique(self):
        ids = {TransactionId.generate() for _ in range(100)}
        assert len(ids) == 100

    def test_from_string_round_trip(self):
        original = TransactionId.generate()
        assert TransactionId.from_string(str(original)) == original

    def test_from_string_accepts_upper_case_and_whitespace(self):
        value = uuid4()
        parsed = TransactionId.from_string(f"  {str(value).upper()} ")
        assert parsed.value == value

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_from_string_blank_rejected(self, text):
        with pytest.raises(ValidationError, match="cannot be null or empty"):
            TransactionId.from_string(text)

    @pytest.mark.parametrize(
        "text",
        [
            "not-a-uuid",
            "12345",
            # valid UUID, but not in canonical hyphenated form
            "{12345678-1234-5678-1234-567812345678}",
            "12345678123456781234567812345678",
        ],
    )
    def test_from_string_malformed_rejected(self, text):
        with pytest.raises(ValidationError, match="Invalid transaction ID format"):
            TransactionId.from_string(text)

    def test_none_value_rejected(self):
        with pytest.raises(ValidationError, match="Transaction ID cannot be null"):
            TransactionId(None)

    def test_equality_and_hash_by_value(self):
        value = UUID("12345678-1234-5678-1234-567812345678")
        assert TransactionId(value) == TransactionId(value)
        assert hash(TransactionId(value)) == hash(TransactionId(value))
        assert TransactionId(value) != TransactionId.generate()

    def test_str_is_canonical(self):
        value = UUID("12345678-1234-5678-1234-567812345678")
        assert str(TransactionId(value)) == "12345678-1234-5678-1234-567812345678"
