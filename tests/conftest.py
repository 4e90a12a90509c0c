import os

# Settings are read on import
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", "")
os.environ.setdefault("BASE_URL", "https://shop.example.com")
os.environ.setdefault("GPWEBPAY_MERCHANT_NUMBER", "8888880035")

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.database.init_db import create_tables, seed_defaults
from storefront.api.localization.models.model_locale import CurrencyModel, LocaleModel
from storefront.api.registry.models import (
    CartRuleDiscountType,
    CartRuleModel,
    CustomerModel,
    DeliveryMethodModel,
    DeliveryMethodTranslationModel,
    PaymentMethodModel,
    PaymentMethodTranslationModel,
)
from storefront.api.catalog.models import (
    AvailabilityModel,
    AvailabilityTranslationModel,
    CategoryModel,
    CategoryTranslationModel,
    ImageModel,
    ParameterModel,
    ParameterTranslationModel,
    ParameterValueModel,
    ParameterValueTranslationModel,
    ProductModel,
    ProductTranslationModel,
    SurfaceFinishModel,
    SurfaceFinishTranslationModel,
    VariantImageModel,
    VariantModel,
    VariantParameterModel,
    VariantPriceModel,
)
from storefront.api.cart.models.model_cart import CartModel, CartItemModel
from storefront.api.orders.models import (
    OrderModel,
    OrderStatusModel,
    OrderStatusTranslationModel,
)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    seed_defaults(session)
    yield session
    session.close()


def _names(model, owner_field: str, owner, cs: str, sk: str, locales):
    return [
        model(**{owner_field: owner, "locale": locales.cs, "name": cs}),
        model(**{owner_field: owner, "locale": locales.sk, "name": sk}),
    ]


def _product(db, shop, code, cs_name, sk_name, czk, eur):
    product = ProductModel(code=code, category=shop.category)
    db.add_all(_names(ProductTranslationModel, "product", product, cs_name, sk_name, shop))
    variant = VariantModel(product=product, code=f"{code}-1", availability=shop.in_stock)
    db.add_all([
        VariantPriceModel(variant=variant, currency=shop.czk, price=Decimal(czk)),
        VariantPriceModel(variant=variant, currency=shop.eur, price=Decimal(eur)),
    ])
    db.add(product)
    return product, variant


@pytest.fixture
def shop(db):
    """Two locales, delivery/payment methods, a small catalogue and two vouchers."""
    shop = SimpleNamespace()
    shop.czk = db.query(CurrencyModel).filter_by(code="CZK").one()
    shop.eur = db.query(CurrencyModel).filter_by(code="EUR").one()
    shop.cs = db.query(LocaleModel).filter_by(icu="cs_CZ").one()
    shop.sk = db.query(LocaleModel).filter_by(icu="sk_SK").one()

    shop.status = db.query(OrderStatusModel).filter_by(is_default=True).one()
    db.add_all(_names(OrderStatusTranslationModel, "status", shop.status, "Nová", "Nová objednávka", shop))

    shop.courier = DeliveryMethodModel(
        code="courier",
        price=Decimal("500"),
        assembly_price=Decimal("300"),
        full_delivery_price=Decimal("200"),
    )
    shop.pickup = DeliveryMethodModel(code=DeliveryMethodModel.PERSONAL_PICKUP, price=Decimal("0"))
    db.add_all(_names(DeliveryMethodTranslationModel, "delivery_method", shop.courier, "Kurýr", "Kuriér", shop))
    db.add_all(_names(DeliveryMethodTranslationModel, "delivery_method", shop.pickup, "Osobní odběr", "Osobný odber", shop))

    shop.transfer = PaymentMethodModel(code="bank_transfer", online=False)
    shop.card = PaymentMethodModel(code="card", online=True)
    shop.card_deposit = PaymentMethodModel(code="card_deposit", online=True, deposit_percent=Decimal("30"))
    db.add_all(_names(PaymentMethodTranslationModel, "payment_method", shop.transfer, "Převodem", "Prevodom", shop))
    db.add_all(_names(PaymentMethodTranslationModel, "payment_method", shop.card, "Kartou online", "Kartou", shop))
    db.add(shop.card_deposit)

    shop.in_stock = AvailabilityModel(code="in_stock", delivery_days=3)
    db.add_all(_names(AvailabilityTranslationModel, "availability", shop.in_stock, "Skladem", "Na sklade", shop))
    shop.category = CategoryModel()
    db.add_all(_names(CategoryTranslationModel, "category", shop.category, "Stoly", "Stoly SK", shop))
    shop.matte = SurfaceFinishModel(code="matte")
    db.add_all(_names(SurfaceFinishTranslationModel, "surface_finish", shop.matte, "Matný", "Matný SK", shop))

    shop.table, shop.table_variant = _product(db, shop, "TBL", "Stůl", "Stôl", "10000", "400")
    shop.chair, shop.chair_variant = _product(db, shop, "CHR", "Židle", "Stolička", "2000", "80")

    # Images are added out of order on purpose
    db.add_all([
        VariantImageModel(variant=shop.table_variant, image=ImageModel(path="table-b.jpg"), position=2),
        VariantImageModel(variant=shop.table_variant, image=ImageModel(path="table-a.jpg"), position=1),
    ])
    material = ParameterModel(position=1)
    db.add_all(_names(ParameterTranslationModel, "parameter", material, "Materiál", "Materiál SK", shop))
    oak = ParameterValueModel(parameter=material)
    db.add_all(_names(ParameterValueTranslationModel, "value", oak, "Dub", "Dub SK", shop))
    db.add(VariantParameterModel(variant=shop.table_variant, parameter=material, value=oak))

    shop.customer = CustomerModel(email="jana@example.com", first_name="Jana", last_name="Nováková")
    db.add(shop.customer)

    shop.sale = CartRuleModel(code="SALE1000", discount_type=CartRuleDiscountType.FIXED, value=Decimal("1000"))
    shop.ten_percent = CartRuleModel(code="TEN", discount_type=CartRuleDiscountType.PERCENT, value=Decimal("10"))
    db.add_all([shop.sale, shop.ten_percent])

    db.commit()
    return shop


@pytest.fixture
def make_cart(db, shop):
    """Persists a cart; items are (product, variant, quantity) or dicts with extra fields."""

    def _make_cart(
        token: str = "cart-token",
        items=None,
        customer=None,
        delivery_method="courier",
        payment_method="transfer",
        rules=(),
        delivery_address: bool = False,
        **fields,
    ) -> CartModel:
        cart = CartModel(
            token=token,
            customer=customer,
            delivery_method=getattr(shop, delivery_method) if delivery_method else None,
            payment_method=getattr(shop, payment_method) if payment_method else None,
            email="jana@example.com",
            phone="+420777000111",
            first_name="Jana",
            last_name="Nováková",
            street="Karlova 1",
            city="Praha",
            zip="11000",
            country="CZ",
            note="Please call before delivery",
        )
        if delivery_address:
            cart.delivery_first_name = "Petr"
            cart.delivery_last_name = "Novák"
            cart.delivery_street = "Dlouhá 5"
            cart.delivery_city = "Brno"
            cart.delivery_zip = "60200"
            cart.delivery_country = "CZ"
        for key, value in fields.items():
            setattr(cart, key, value)

        for entry in items if items is not None else [(shop.table, shop.table_variant, 1)]:
            if isinstance(entry, dict):
                cart.items.append(CartItemModel(**entry))
            else:
                product, variant, quantity = entry
                cart.items.append(CartItemModel(product=product, variant=variant, quantity=quantity))
        cart.rules.extend(rules)

        db.add(cart)
        db.commit()
        return cart

    return _make_cart


@pytest.fixture
def make_order(db, shop):
    """Stores a bare order with a given index and creation time (for index numbering)."""

    def _make_order(index: str, created_at: datetime) -> OrderModel:
        order = OrderModel(index=index, hash=f"hash-{index}", locale=shop.cs, created_at=created_at)
        db.add(order)
        db.commit()
        return order

    return _make_order
