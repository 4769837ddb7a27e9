"""FastAPI application and the slash command endpoint."""

from typing import Iterable, List

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from slashgate.domain.dispatcher import Dispatcher
from slashgate.domain.parser import MAX_FORM_BYTES
from slashgate.ports.inbound import Handler

# Every method gets a 200 text reply; the parser decides what to read
SLASH_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class StatusResponse(BaseModel):
    path: str
    handlers: List[str]
    credentials: int


async def read_body(request: Request, limit: int = MAX_FORM_BYTES) -> bytes:
    """Read the request body, stopping once it exceeds ``limit`` bytes.

    An oversized body comes back as exactly ``limit + 1`` bytes, which the
    parser rejects; the rest of the stream is never read.
    """
    body = bytearray()
    async for chunk in request.stream():
        body += chunk
        if len(body) > limit:
            return bytes(body[:limit + 1])
    return bytes(body)


def build_router(dispatcher: Dispatcher, path: str = "/") -> APIRouter:
    """Router exposing ``dispatcher`` on ``path``.

    A ``path`` ending in "/" also serves everything below it, so the
    default "/" answers on any URL. The response is always 200 text/plain;
    errors travel in the body.
    """
    router = APIRouter(tags=["Slash commands"])

    async def slash_command(request: Request):
        """Slash command webhook"""
        text = await dispatcher.respond(
            method=request.method,
            content_type=request.headers.get("content-type", ""),
            query=request.scope.get("query_string", b""),
            body=await read_body(request),
        )
        return PlainTextResponse(text)

    router.add_api_route(
        path, slash_command, methods=SLASH_METHODS, response_class=PlainTextResponse
    )
    if path.endswith("/"):
        router.add_api_route(
            path + "{subpath:path}",
            slash_command,
            methods=SLASH_METHODS,
            response_class=PlainTextResponse,
            include_in_schema=False,
        )

    return router


def create_app(
    tokens: Iterable[str],
    handlers: Iterable[Handler] = (),
    path: str = "/",
) -> FastAPI:
    """Build an ASGI app serving slash commands on ``path``."""
    dispatcher = Dispatcher(tokens, handlers)

    app = FastAPI(title="slashgate")
    app.state.dispatcher = dispatcher

    # Registered ahead of the command routes, which may catch every path
    if path != "/status":

        @app.get("/status", response_model=StatusResponse)
        async def status():
            """Server status endpoint"""
            return StatusResponse(
                path=path,
                handlers=[type(h).__name__ for h in dispatcher.handlers],
                credentials=len(dispatcher.credentials),
            )

    app.include_router(build_router(dispatcher, path))
    return app
