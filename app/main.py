# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.api import include_routers
from app.api.errors import register_exception_handlers
from app.data.database import init_db
from app.data.seed import seed
from app.utils.logging import configure_logging, get_logger
from app.utils.settings import get_jwt_secret

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Origin, Content-Type, Authorization",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing database")
    init_db()
    seed()
    logger.info("Database ready")
    yield


def create_app() -> FastAPI:
    configure_logging()
    # fail fast - bez sekretu nie wystawiamy tokenow
    get_jwt_secret()

    app = FastAPI(
        title="Shop Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def preflight(request: Request, call_next):
        # OPTIONS konczy sie tutaj, przed routingiem
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        return await call_next(request)

    register_exception_handlers(app)
    include_routers(app)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
