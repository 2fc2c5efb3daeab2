# app/api/__init__.py
from fastapi import FastAPI
from app.api.routers import products


def create_app() -> FastAPI:
    app = FastAPI(
        title="Branded Products API",
        version="1.0.0",
    )
    app.include_router(products.router)
    return app
