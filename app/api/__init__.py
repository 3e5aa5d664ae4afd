# app/api/__init__.py
from fastapi import FastAPI
from app.api.routers import admin, auth, blogs, cart, health, orders, products


def include_routers(app: FastAPI) -> None:
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(products.router)
    app.include_router(blogs.router)
    app.include_router(cart.router)
    app.include_router(orders.router)
    app.include_router(admin.router)
