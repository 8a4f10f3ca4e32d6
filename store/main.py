# store/main.py
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import create_async_engine

from store.api import customers, orders, products
from store.config import AppConfig
from store.domain.exceptions import DomainValidationError, EntityNotFoundError
from store.infrastructure.database import create_database
from store.infrastructure.event_dispatcher import EventDispatcher
from store.infrastructure.event_handlers import register_event_handlers


class Application:
    def __init__(self, config: AppConfig):
        self.config = config
        self.logger = self.setup_logger()
        engine = create_async_engine(config.DATABASE_URL, echo=config.SQL_ECHO)
        self.database = create_database(engine)
        self.event_dispatcher = EventDispatcher()

        register_event_handlers(self.event_dispatcher, self.logger)

    @asynccontextmanager
    async def lifespan(self, app: FastAPI):
        await self.database.connect()
        yield
        await self.database.disconnect()

    def setup_logger(self):
        logger = logging.getLogger("StoreAPI")
        logger.setLevel(self.config.LOG_LEVEL)

        if not logger.handlers:
            c_handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            c_handler.setFormatter(formatter)
            logger.addHandler(c_handler)

        return logger

    def create_app(self) -> FastAPI:
        app = FastAPI(
            title=self.config.PROJECT_NAME,
            version=self.config.PROJECT_VERSION,
            description=self.config.PROJECT_DESCRIPTION,
            openapi_url=f"{self.config.API_V1_STR}/openapi.json",
            lifespan=self.lifespan,
        )

        app.state.config = self.config
        app.state.event_dispatcher = self.event_dispatcher
        app.state.database = self.database
        app.state.logger = self.logger

        app.include_router(
            customers.router,
            prefix=f"{self.config.API_V1_STR}/customers",
            tags=["customers"],
        )
        app.include_router(
            products.router,
            prefix=f"{self.config.API_V1_STR}/products",
            tags=["products"],
        )
        app.include_router(
            orders.router, prefix=f"{self.config.API_V1_STR}/orders", tags=["orders"]
        )

        @app.exception_handler(DomainValidationError)
        async def domain_validation_exception_handler(
            request: Request, exc: DomainValidationError
        ):
            return JSONResponse(status_code=422, content={"detail": str(exc)})

        @app.exception_handler(EntityNotFoundError)
        async def not_found_exception_handler(request: Request, exc: EntityNotFoundError):
            return JSONResponse(status_code=404, content={"detail": str(exc)})

        @app.exception_handler(Exception)
        async def global_exception_handler(request: Request, exc: Exception):
            self.logger.exception("Unhandled error while serving %s", request.url.path)
            return JSONResponse(
                status_code=500,
                content={"message": f"An unexpected error occurred: {str(exc)}"},
            )

        return app


def create():
    config = AppConfig()
    application = Application(config)
    app = application.create_app()
    application.logger.info("Application created and configured")

    return app


app = create()


@app.get("/")
async def root():
    return {"message": "Welcome to the Store API"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
