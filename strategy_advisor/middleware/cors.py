from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from strategy_advisor.config import CORS_ALLOWED_ORIGINS


def add_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],
    )
