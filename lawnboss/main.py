"""Application entrypoint: ``uvicorn lawnboss.main:app``."""

from __future__ import annotations

from fastapi import FastAPI

from lawnboss.api.functions import get_functions_router
from lawnboss.api.v1 import get_api_router
from lawnboss.core.config import get_config
from lawnboss.core.startup import bootstrap
from lawnboss.realtime import get_change_feed


def create_app() -> FastAPI:
    """Create the FastAPI application with API and function routers."""
    cfg = get_config()
    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION)
    app.include_router(get_api_router())
    app.include_router(get_functions_router())
    app.state.change_feed = get_change_feed()

    @app.get("/")
    def root() -> dict:
        return {
            "service": cfg.APP_NAME,
            "version": cfg.APP_VERSION,
            "api_prefix": cfg.API_PREFIX,
            "functions_prefix": cfg.FUNCTIONS_PREFIX,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    bootstrap(create_schema=True)
    cfg = get_config()
    uvicorn.run("lawnboss.main:app", host=cfg.API_HOST, port=cfg.API_PORT)
