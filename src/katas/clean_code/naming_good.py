"""Naming - corrected.

Thresholds live in named module constants and every identifier says what it
holds. Status and customer codes are StrEnums, so the raw codes ("ACT", "VIP")
are still accepted at the boundary.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..domain.domain_type import CustomerType, UserStatus

MINIMUM_AGE = 18
VIP_DISCOUNT_RATE = 0.20
REGULAR_DISCOUNT_RATE = 0.05
LOYALTY_POINTS_THRESHOLD = 1000

DISCOUNT_RATES: dict[CustomerType, float] = {
    CustomerType.VIP: VIP_DISCOUNT_RATE,
    CustomerType.REGULAR: REGULAR_DISCOUNT_RATE,
}


class User(BaseModel):
    """User record checked by :class:`UserService`."""

    age: int = Field(ge=0)
    status: UserStatus
    points: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class UserService:
    def validate_user(self, user: User) -> bool:
        """Adults with an active account pass; everyone else is rejected."""
        is_adult = user.age >= MINIMUM_AGE
        is_active = user.status is UserStatus.ACTIVE
        return is_adult and is_active

    def calculate_discount(self, amount: float, customer_type: CustomerType | str) -> float:
        """Discount amount (not the discounted price) for a customer segment.

        Raises:
            ValueError: If ``customer_type`` is not a known segment
        """
        rate = DISCOUNT_RATES[CustomerType(customer_type)]
        return round(amount * rate, 2)

    def is_loyal_customer(self, user: User) -> bool:
        return user.points >= LOYALTY_POINTS_THRESHOLD


__all__ = [
    "LOYALTY_POINTS_THRESHOLD",
    "MINIMUM_AGE",
    "REGULAR_DISCOUNT_RATE",
    "VIP_DISCOUNT_RATE",
    "User",
    "UserService",
]
