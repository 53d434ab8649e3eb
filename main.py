from contextlib import asynccontextmanager
from typing import List

import aiohttp
from fastapi import FastAPI

from api.circulation.circulation import router as circulation_router
from middleware.requestlog import RequestLogMiddleware
from utility.config import Settings
from utility.logger import logger
from utility.webhookManager import send_startup_webhook


def describe_treasuries(treasuries: List[str]) -> str:
    if not treasuries:
        return "All coins in circulation (no treasuries)"
    if len(treasuries) == 1:
        return f"Treasury ID: {treasuries[0]}"
    return f"Treasury IDs: {', '.join(treasuries)}"


def create_app(settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Token Circulation API listening on port {settings.PORT}")
        logger.info(f"Mirror Node: {settings.MIRROR_NODE}")
        logger.info(f"Token ID: {settings.TOKEN_ID}")
        logger.info(describe_treasuries(settings.treasury_ids))

        # shared across requests so the mirror node connection stays warm
        app.state.session = aiohttp.ClientSession()
        try:
            await send_startup_webhook(
                settings.STARTUP_WEBHOOK_URL,
                True,
                "Token Circulation API started successfully.",
                [
                    f"Token ID: {settings.TOKEN_ID}",
                    f"Mirror Node: {settings.MIRROR_NODE}",
                    describe_treasuries(settings.treasury_ids),
                ]
            )
            yield
        finally:
            logger.info("Shutting down the application...")
            await app.state.session.close()

    app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.add_middleware(RequestLogMiddleware)
    app.include_router(circulation_router)
    return app


def main():
    import uvicorn

    settings = Settings()
    logger.info("Running the application...")
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
