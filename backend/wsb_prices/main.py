import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from wsb_prices.settings import settings
from wsb_prices.middleware.logging import RequestLoggingMiddleware
from wsb_prices.routers import health, market
from wsb_prices.routers.market import error_response


logger = logging.getLogger(__name__)

# First path segments owned by the JSON API; never answered with the frontend
API_PREFIXES = {"api", "health", "groups", "price", "prices"}


def create_app(static_dir: str | None = None) -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    static_dir = static_dir or settings.STATIC_DIR

    app = FastAPI(title=settings.SERVICE_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router, tags=["health"])
    app.include_router(market.router, tags=["market"])

    if os.path.isdir(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning("Frontend directory %s not found; /static disabled", static_dir)

    index_html = os.path.join(static_dir, "index.html")

    # Single-page-app catch-all; must stay the last route registered
    @app.get("/{full_path:path}", include_in_schema=False)
    async def frontend(full_path: str):
        head = full_path.strip("/").split("/", 1)[0].lower()
        if head in API_PREFIXES:
            return error_response(404, "NOT_FOUND", f"No API route for /{full_path}")
        if not os.path.isfile(index_html):
            return error_response(404, "FRONTEND_NOT_FOUND", "Frontend is not available")
        return FileResponse(index_html)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    logger.info("%s running on http://localhost:%s", settings.SERVICE_NAME, settings.APP_PORT)
    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
