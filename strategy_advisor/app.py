import contextlib

import structlog
from fastapi import FastAPI

from strategy_advisor import config
from strategy_advisor.logging_config import configure_logging
from strategy_advisor.mcp_server import create_mcp_server
from strategy_advisor.middleware import add_cors

logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    configure_logging(config.LOG_LEVEL, json_logs=config.LOG_JSON)
    mcp = create_mcp_server()

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("advisor_starting", server_name=config.SERVER_NAME)
        async with mcp.session_manager.run():
            yield
        logger.info("advisor_stopped")

    app = FastAPI(title="Migration Strategy Advisor MCP", lifespan=lifespan)
    add_cors(app)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.mount("/", mcp.streamable_http_app())

    return app
