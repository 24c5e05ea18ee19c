"""
Unit Tests for the Rate Client

Tests quote pricing, board readiness and INR formatting.
"""

import pytest

from clients.rate_client import RateBoard, Direction, format_currency
from tests import TEST_RATES


@pytest.fixture
def board():
    """Fixture providing a board with predictable rates."""
    return RateBoard(TEST_RATES)


class TestRateBoard:
    """Test RateBoard state and lookups."""

    def test_ready_with_rates(self, board):
        assert board.is_ready is True
        assert board.supported_currencies == ["USD", "SGD", "GBP"]

    def test_empty_board_not_ready(self):
        board = RateBoard()

        assert board.is_ready is False
        assert board.get_quote(1000, "USD") is None

    def test_update_rates_skips_invalid(self):
        board = RateBoard()
        board.update_rates({"usd": 80.0, "EUR": 0, "GBP": None})

        assert board.supported_currencies == ["USD"]
        assert board.get_rate("usd") == 80.0

    def test_from_fallback(self):
        board = RateBoard.from_fallback()

        assert board.is_ready is True
        assert "USD" in board.supported_currencies


class TestGetQuote:
    """Test wholesale vs bank pricing."""

    def test_outflow(self, board):
        """Importers pay spread and the bank's fixed fee on top."""
        quote = board.get_quote(1000, "USD", Direction.OUTFLOW)

        assert quote.mid_rate == 80.0
        assert quote.bank_rate == pytest.approx(82.0)
        assert quote.wholesale_rate == pytest.approx(80.16)
        assert quote.bank_total == pytest.approx(84_500)
        assert quote.wholesale_total == pytest.approx(80_160)
        assert quote.savings == pytest.approx(4_340)

    def test_inflow(self, board):
        """Exporters receive less through the bank: spread and fee deducted."""
        quote = board.get_quote(1000, "USD", "INFLOW")

        assert quote.direction is Direction.INFLOW
        assert quote.bank_rate == pytest.approx(78.0)
        assert quote.wholesale_rate == pytest.approx(79.84)
        assert quote.bank_total == pytest.approx(75_500)
        assert quote.wholesale_total == pytest.approx(79_840)
        assert quote.savings == pytest.approx(4_340)

    def test_default_direction_is_outflow(self, board):
        assert board.get_quote(10, "GBP").direction is Direction.OUTFLOW

    def test_unsupported_currency(self, board):
        assert board.get_quote(1000, "JPY") is None

    def test_lowercase_currency(self, board):
        assert board.get_quote(1000, "sgd").currency == "SGD"


class TestFormatCurrency:
    """Test Indian-grouped INR formatting."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0, "₹0"),
            (999, "₹999"),
            (1000, "₹1,000"),
            (100000, "₹1,00,000"),
            (1234567.6, "₹12,34,568"),
            (84500.4, "₹84,500"),
            (-2500, "-₹2,500"),
        ],
    )
    def test_format(self, amount, expected):
        assert format_currency(amount) == expected
