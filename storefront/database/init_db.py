import logging

from .db_connection import engine, Base, SessionLocal

logger = logging.getLogger(__name__)

DEFAULT_CURRENCIES = [
    {"code": "CZK", "gpwebpay_code": 203, "symbol": "Kč"},
    {"code": "EUR", "gpwebpay_code": 978, "symbol": "€"},
]

DEFAULT_LOCALES = [
    {"icu": "cs_CZ", "language": "cs", "currency": "CZK"},
    {"icu": "sk_SK", "language": "sk", "currency": "EUR"},
]


def import_models():
    """Registers every model on `Base.metadata` before mappers are configured."""
    from storefront.api.localization.models.model_locale import CurrencyModel, LocaleModel  # noqa: F401
    from storefront.api.registry.models.model_customer import CustomerModel  # noqa: F401
    from storefront.api.registry.models.model_shipping_payment import (  # noqa: F401
        DeliveryMethodModel,
        DeliveryMethodTranslationModel,
        PaymentMethodModel,
        PaymentMethodTranslationModel,
    )
    from storefront.api.registry.models.model_cart_rule import CartRuleModel  # noqa: F401
    from storefront.api.catalog import models as catalog_models  # noqa: F401
    from storefront.api.cart.models.model_cart import CartModel, CartItemModel  # noqa: F401
    from storefront.api.orders.models.model_order import OrderModel  # noqa: F401
    from storefront.api.orders.models.model_order_item import OrderItemModel  # noqa: F401
    from storefront.api.orders.models.model_order_voucher import OrderVoucherModel  # noqa: F401
    from storefront.api.orders.models.model_order_status import (  # noqa: F401
        OrderStatusModel,
        OrderStatusTranslationModel,
    )
    logger.info("Models imported.")


def create_tables(bind=None):
    import_models()
    Base.metadata.create_all(bind=bind or engine, checkfirst=True)
    logger.info("Tables created/verified.")


def seed_defaults(session) -> None:
    """Currencies, locales and the default order status (idempotent)."""
    from storefront.api.localization.models.model_locale import CurrencyModel, LocaleModel
    from storefront.api.orders.models.model_order_status import OrderStatusModel

    currencies = {c.code: c for c in session.query(CurrencyModel).all()}
    for row in DEFAULT_CURRENCIES:
        if row["code"] not in currencies:
            currencies[row["code"]] = CurrencyModel(**row)
            session.add(currencies[row["code"]])

    existing_locales = {icu for (icu,) in session.query(LocaleModel.icu).all()}
    for row in DEFAULT_LOCALES:
        if row["icu"] in existing_locales:
            continue
        session.add(
            LocaleModel(
                icu=row["icu"],
                language=row["language"],
                currency=currencies[row["currency"]],
            )
        )

    if not session.query(OrderStatusModel).filter(OrderStatusModel.is_default.is_(True)).first():
        session.add(OrderStatusModel(code=OrderStatusModel.NEW, is_default=True, color="orange"))

    session.commit()


def initialize_database():
    logger.info("Initializing database...")
    create_tables()
    with SessionLocal() as session:
        seed_defaults(session)
    logger.info("Database ready.")
