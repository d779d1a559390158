"""
Unit tests for the add/edit form buffer
"""
from decimal import Decimal
import pytest

from stock_manager.draft import DraftBuffer
from stock_manager.schemas import DraftItem


class TestSetField:
    def test_text_fields_stored_as_typed(self):
        buffer = DraftBuffer()
        buffer.set_field("name", "  Widget  ")
        buffer.set_field("category", "Tools")

        assert buffer.draft.name == "  Widget  "
        assert buffer.draft.category == "Tools"

    def test_quantity_parses_integer(self):
        buffer = DraftBuffer()

        assert buffer.set_field("quantity", "42") is True
        assert buffer.draft.quantity == 42

    def test_quantity_takes_leading_integer(self):
        buffer = DraftBuffer()
        buffer.set_field("quantity", "12abc")
        assert buffer.draft.quantity == 12

        buffer.set_field("quantity", "7.9")
        assert buffer.draft.quantity == 7

    def test_invalid_quantity_keeps_prior_value(self):
        buffer = DraftBuffer()
        buffer.set_field("quantity", "5")

        assert buffer.set_field("quantity", "abc") is False
        assert buffer.draft.quantity == 5

    def test_empty_input_clears_numeric_field(self):
        buffer = DraftBuffer()
        buffer.set_field("quantity", "5")
        buffer.set_field("price", "1.5")

        assert buffer.set_field("quantity", "") is True
        assert buffer.set_field("price", "") is True
        assert buffer.draft.quantity == ""
        assert buffer.draft.price == ""

    def test_price_parses_decimal(self):
        buffer = DraftBuffer()
        buffer.set_field("price", "19.99")

        assert buffer.draft.price == Decimal("19.99")
        assert isinstance(buffer.draft.price, Decimal)

    def test_invalid_price_keeps_prior_value(self):
        buffer = DraftBuffer()
        buffer.set_field("price", "2.5")

        assert buffer.set_field("price", "-") is False
        assert buffer.set_field("price", "x1") is False
        assert buffer.draft.price == Decimal("2.5")

    def test_unknown_field_raises(self):
        with pytest.raises(KeyError):
            DraftBuffer().set_field("colour", "red")


class TestCompleteness:
    def test_new_buffer_is_empty(self):
        buffer = DraftBuffer()

        assert buffer.draft == DraftItem()
        assert buffer.is_complete() is False
        assert buffer.missing_fields() == ["name", "quantity", "price", "category"]

    def test_zero_counts_as_present(self):
        buffer = DraftBuffer()
        for field, text in [("name", "Free"), ("quantity", "0"), ("price", "0"), ("category", "Samples")]:
            buffer.set_field(field, text)

        assert buffer.draft.quantity == 0
        assert buffer.is_complete() is True

    def test_missing_fields_lists_only_empty_ones(self):
        buffer = DraftBuffer()
        buffer.set_field("name", "Widget")
        buffer.set_field("price", "3")

        assert buffer.missing_fields() == ["quantity", "category"]


class TestLoadAndReset:
    def test_load_copies_item(self, seed_items):
        item = seed_items[0]
        buffer = DraftBuffer(item)

        assert buffer.draft.name == "Widget A"
        assert buffer.draft.quantity == 50
        assert buffer.draft.price == Decimal("9.99")
        assert buffer.draft.category == "Electronics"

    def test_editing_draft_does_not_touch_item(self, seed_items):
        item = seed_items[0]
        buffer = DraftBuffer(item)
        buffer.set_field("name", "Changed")

        assert item.name == "Widget A"

    def test_reset(self, seed_items):
        buffer = DraftBuffer(seed_items[0])
        buffer.reset()

        assert buffer.draft == DraftItem()


class TestOversizedInput:
    def test_too_many_digits_keeps_prior_quantity(self):
        buffer = DraftBuffer()
        buffer.set_field("quantity", "7")

        assert buffer.set_field("quantity", "9" * 5000) is False
        assert buffer.draft.quantity == 7
