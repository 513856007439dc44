# boutique/main.py
from fastapi import FastAPI
import uvicorn

from boutique.api import create_app as build_app
from boutique.data.database import Base, engine
from boutique.utils.logging import get_logger

# import de tous les modeles AVANT create_all
from boutique.data.models import (  # noqa: F401
    ProductModel,
    CategoryModel,
    OrderModel,
    UserModel,
    BrowserCartModel,
    TestimonialModel,
)

logger = get_logger(__name__)


def init_db() -> None:
    logger.info(f"Initializing database, models: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables ready")


def create_app() -> FastAPI:
    init_db()
    return build_app()


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
