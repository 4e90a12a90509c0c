from fastapi import Depends, Request
from sqlalchemy.orm import Session

from storefront.config.settings import BASE_URL
from storefront.core.event_bus import EventBus, get_event_bus
from storefront.core.link_generator import LinkGenerator
from storefront.database.db_connection import get_db
from storefront.api.localization.models.model_locale import LocaleModel
from storefront.api.localization.repositories.repo_locale import get_locale
from storefront.api.orders.services.service_order import OrderService


def get_link_generator(request: Request) -> LinkGenerator:
    return LinkGenerator(request.app, BASE_URL)


def get_order_service(
    db: Session = Depends(get_db),
    locale: LocaleModel = Depends(get_locale),
    event_bus: EventBus = Depends(get_event_bus),
    link_generator: LinkGenerator = Depends(get_link_generator),
) -> OrderService:
    return OrderService(
        db,
        event_bus=event_bus,
        link_generator=link_generator,
        locale=locale,
    )
