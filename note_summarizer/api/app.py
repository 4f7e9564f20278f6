"""
FastAPI application hosting the note summarizer plugin.
"""

import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from note_summarizer.config import config
from note_summarizer.api.routes import router
from note_summarizer.core.host import Host, LocalHost
from note_summarizer.core.plugin import SummarizerPlugin
from note_summarizer.utils.logger import logging


def create_app(host: Optional[Host] = None) -> FastAPI:
    """Build the API around a plugin running on ``host``."""
    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="An API for running note summarizer commands against notes",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Load the plugin on application startup."""
        config.initialize()
        plugin = SummarizerPlugin(host or LocalHost())
        await plugin.on_load()
        app.state.plugin = plugin
        logging.info("Plugin loaded")

    @app.on_event("shutdown")
    async def shutdown_event():
        app.state.plugin.on_unload()

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Middleware to add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logging.error(f"Unhandled error on {request.url.path}: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content={"detail": f"An unexpected error occurred: {str(exc)}"},
        )

    # Include API router
    app.include_router(router)

    # Root
    @app.get("/")
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "description": "Note Summarizer API",
        }

    return app


app = create_app()
