"""Strategy pattern - a checkout delegating payment to a swappable strategy."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.demo import PatternCategory, PatternDemo


class PaymentStrategy(ABC):
    """Interchangeable way of paying an amount."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Pay ``amount`` and describe what happened."""


class CreditCardPayment(PaymentStrategy):

    def __init__(self, card_number: str):
        self.card_number = card_number

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} with credit card ending in {self.card_number[-4:]}"


class PayPalPayment(PaymentStrategy):

    def __init__(self, email: str):
        self.email = email

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} via PayPal account {self.email}"


class CryptoPayment(PaymentStrategy):

    def __init__(self, wallet: str):
        self.wallet = wallet

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} in crypto from wallet {self.wallet}"


class Checkout:
    """Context holding the currently bound payment strategy."""

    def __init__(self, strategy: PaymentStrategy):
        self._strategy = strategy

    @property
    def strategy(self) -> PaymentStrategy:
        return self._strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        self._strategy = strategy

    def checkout(self, amount: float) -> str:
        # Bind once so a concurrent rebind cannot change a call in progress
        strategy = self._strategy
        return strategy.pay(amount)


def run() -> List[str]:
    checkout = Checkout(CreditCardPayment("4111111111113456"))
    lines = [checkout.checkout(100.0)]

    checkout.set_strategy(PayPalPayment("user@example.com"))
    lines.append(checkout.checkout(250.5))

    checkout.set_strategy(CryptoPayment("0xABC123"))
    lines.append(checkout.checkout(75.25))
    return lines


DEMO = PatternDemo(
    name="strategy",
    category=PatternCategory.BEHAVIORAL,
    description=(
        "A context delegates one operation to whichever strategy is currently "
        "bound. Rebinding the strategy changes the behaviour of subsequent "
        "calls without touching the context."
    ),
    run=run,
)
