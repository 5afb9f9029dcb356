"""Checkout domain API package."""

from checkout.api.routes import cart_router, catalog_router

__all__ = ["cart_router", "catalog_router"]
