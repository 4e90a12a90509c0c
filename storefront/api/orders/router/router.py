"""
Main router of the orders bounded context.
"""
from fastapi import APIRouter

from storefront.api.orders.router.client.router_orders_client import router as router_orders_client

api_orders = APIRouter(
    tags=["API - Orders"]
)

# Routers client
api_orders.include_router(router_orders_client)
