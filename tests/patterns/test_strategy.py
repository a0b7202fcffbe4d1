"""Tests for the Strategy demo."""

from unittest.mock import Mock

from pattern_catalog.patterns import strategy
from pattern_catalog.patterns.strategy import (
    Checkout,
    CreditCardPayment,
    PaymentStrategy,
    PayPalPayment,
)


class TestCheckout:
    """Test delegation to the bound strategy."""

    def test_delegates_to_bound_strategy(self):
        payment = Mock(spec=PaymentStrategy)
        payment.pay.return_value = "paid"

        assert Checkout(payment).checkout(10.0) == "paid"
        payment.pay.assert_called_once_with(10.0)

    def test_rebinding_affects_subsequent_calls(self):
        checkout = Checkout(CreditCardPayment("1234567812345678"))
        assert "credit card ending in 5678" in checkout.checkout(5.0)

        checkout.set_strategy(PayPalPayment("a@b.c"))

        assert checkout.checkout(5.0) == "Paid 5.00 via PayPal account a@b.c"
        assert isinstance(checkout.strategy, PayPalPayment)

    def test_rebinding_during_call_does_not_affect_it(self):
        """Test a call in progress keeps the strategy it started with."""
        checkout = Checkout(CreditCardPayment("0000"))
        replacement = PayPalPayment("late@example.com")

        class RebindingPayment(PaymentStrategy):
            def pay(self, amount):
                checkout.set_strategy(replacement)
                return "original"

        checkout.set_strategy(RebindingPayment())

        assert checkout.checkout(1.0) == "original"
        assert checkout.checkout(1.0) == "Paid 1.00 via PayPal account late@example.com"


class TestStrategyDemo:

    def test_run_output(self):
        assert strategy.run() == [
            "Paid 100.00 with credit card ending in 3456",
            "Paid 250.50 via PayPal account user@example.com",
            "Paid 75.25 in crypto from wallet 0xABC123",
        ]
