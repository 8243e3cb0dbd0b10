"""
Account Entity

Monetary holder provisioned one-to-one for every store.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from storehub.core.domain import Entity, ValidationException, generate_uuid_str

BALANCE_QUANTUM = Decimal("0.00000001")
# NUMERIC(20, 8): twelve integer digits
BALANCE_LIMIT = Decimal(10) ** 12


def normalize_balance(value: Any) -> Decimal:
    """
    Coerce a balance into a non-negative Decimal with 8 fractional digits.

    Raises:
        ValidationException: Not a number, negative or too large
    """
    try:
        amount = Decimal(str(value)) if not isinstance(value, Decimal) else value
        amount = amount.quantize(BALANCE_QUANTUM)
    except (InvalidOperation, ValueError) as e:
        raise ValidationException(f"Invalid balance: {value!r}", field="balance") from e

    if not amount.is_finite() or amount < 0:
        raise ValidationException(f"Balance cannot be negative: {amount}", field="balance")
    if amount >= BALANCE_LIMIT:
        raise ValidationException(f"Balance exceeds 20 digits: {amount}", field="balance")
    return amount


@dataclass
class Account(Entity[str]):
    """
    Account entity.

    Created only when its store is created, always starting at zero, and
    deleted together with that store.
    """

    balance: Decimal = field(default_factory=lambda: Decimal("0").quantize(BALANCE_QUANTUM))

    def __post_init__(self):
        self.balance = normalize_balance(self.balance)

    @classmethod
    def create(cls) -> "Account":
        """Provision a fresh account with a new id and a zero balance."""
        account = cls(id=generate_uuid_str())
        account.updated_at = account.created_at
        return account

    def is_empty(self) -> bool:
        return self.balance == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "balance": str(self.balance),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
