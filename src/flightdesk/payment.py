from dataclasses import dataclass

from flightdesk.log import log


@dataclass(frozen=True)
class Payment:
    """
    A completed payment. Nothing is kept after the receipt has been shown, so payments are not linked to tickets.
    """

    method: str
    amount: float

    def receipt(self) -> str:
        return f"Payment of {self.amount:.2f} via {self.method} completed successfully."


def handle_payment(method: str, amount: float) -> Payment:
    """
    Take a payment of `amount` by `method` (e.g. "Cash", "Card", "Online"). Raises ValueError unless the amount is
    positive.
    """
    if not amount > 0:
        raise ValueError("amount must be a positive number")
    payment = Payment(method, amount)
    log(f"payment: {amount:.2f} via {method}")
    return payment
