"""
FastAPI application exposing the JSON-RPC tools over HTTP.
"""

import time
from typing import Any

from fastapi import Body, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from transcript_pro.api.rpc import handle_request
from transcript_pro.config import config
from transcript_pro.utils.error_handling import ErrorCodes

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="JSON-RPC API for fetching and formatting YouTube transcripts",
)


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
    return JSONResponse(
        status_code=500,
        content={
            "jsonrpc": "2.0",
            "error": {"code": ErrorCodes.INTERNAL_ERROR, "message": f"An unexpected error occurred: {str(exc)}"},
            "id": None,
        },
    )


@app.get("/")
async def root():
    """Root endpoint returning basic server information."""
    return {
        "name": config.SERVER_NAME,
        "version": config.APP_VERSION,
        "description": config.SERVER_DESCRIPTION,
        "protocolVersion": config.PROTOCOL_VERSION,
    }


@app.post("/rpc")
def rpc(payload: Any = Body(...)):
    """
    JSON-RPC endpoint.

    Tool calls block on YouTube, so this is a plain function and FastAPI
    runs it in its threadpool. Notifications get an empty 204 response.
    """
    response = handle_request(payload)
    if response is None:
        return Response(status_code=204)
    return response
