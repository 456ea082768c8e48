import structlog
import uvicorn
from fastapi import FastAPI

from stats_api.api.errors import install_error_handlers
from stats_api.api.stats.stats_routes import stats_router
from stats_api.common.config import ServerConfig
from stats_api.common.logging import configure_structlog

logger = structlog.get_logger(__name__)


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Build the application; with no config it is read from the environment.

    Serve with ``uvicorn --factory stats_api.main:create_app``.
    """
    config = config or ServerConfig.from_env()
    configure_structlog(config.log_level_number, json_logs=config.json_logs)

    # docs routes are off so every path other than the three endpoints is a 404
    app = FastAPI(title="Stats API", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.config = config

    app.include_router(stats_router)
    install_error_handlers(app)

    return app


def run() -> None:
    config = ServerConfig.from_env()
    app = create_app(config)

    logger.info("server starting", host=config.host, port=config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
