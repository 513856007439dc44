# boutique/api/__init__.py
from fastapi import FastAPI
from boutique.api.routers import (
    health,
    products,
    listings,
    categories,
    carts,
    orders,
    users,
    testimonials,
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Boutique",
        version="1.0.0",
    )

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(listings.router)
    app.include_router(categories.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(users.router)
    app.include_router(testimonials.router)

    return app
