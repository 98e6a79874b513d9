"""Middleware package for FastAPI application."""

from strategy_advisor.middleware.cors import add_cors

__all__ = ["add_cors"]
