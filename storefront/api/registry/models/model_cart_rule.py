import enum
from decimal import Decimal

from sqlalchemy import Column, Integer, String, Numeric, Boolean, DateTime, Enum as SAEnum

from storefront.database.db_connection import Base
from storefront.utils.database_utils import now_trimmed


class CartRuleDiscountType(enum.Enum):
    FIXED = "FIXED"
    PERCENT = "PERCENT"


class CartRuleModel(Base):
    """Voucher/discount rule a customer can apply to the cart."""
    __tablename__ = "cart_rules"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(30), unique=True, nullable=False)
    description = Column(String(255), nullable=True)

    discount_type = Column(
        SAEnum(CartRuleDiscountType, name="cart_rule_discount_type_enum"),
        nullable=False,
        default=CartRuleDiscountType.FIXED,
    )
    value = Column(Numeric(18, 2), nullable=False, default=0)

    active = Column(Boolean, nullable=False, default=True)
    use_counter = Column(Integer, nullable=False, default=0)
    max_uses = Column(Integer, nullable=True)  # NULL = unlimited

    created_at = Column(DateTime(timezone=True), default=now_trimmed, nullable=False)

    def increase_use_counter(self) -> None:
        self.use_counter = (self.use_counter or 0) + 1

    def is_exhausted(self) -> bool:
        return self.max_uses is not None and (self.use_counter or 0) >= self.max_uses

    def discount_for(self, amount: Decimal) -> Decimal:
        """Discount granted on `amount`, never more than the amount itself."""
        value = Decimal(str(self.value or 0))
        if self.discount_type == CartRuleDiscountType.PERCENT:
            discount = (amount * value / Decimal("100")).quantize(Decimal("0.01"))
        else:
            discount = value
        return min(discount, amount) if amount > 0 else Decimal("0")
