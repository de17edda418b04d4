"""HTTP API for sessions, chat, retrieval and corpus refresh.

Handlers only translate between JSON and use cases; error bodies are
``{"error": message}``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from news_rag.application.dto.chat_dto import ChatRequest
from news_rag.config.composition import Services, build_services
from news_rag.config.settings import AppSettings
from news_rag.domain.errors import ConfigurationError, DomainError, ValidationError

logger = logging.getLogger(__name__)

ServicesFactory = Callable[[AppSettings], Awaitable[Services]]


class ChatBody(BaseModel):
    sessionId: str = ""
    message: str = ""
    topK: int | None = None


class RetrieveBody(BaseModel):
    query: str = ""
    topK: int | None = None


def _services(request: Request) -> Services:
    return request.app.state.services


async def run_refresh(app: FastAPI) -> dict[str, Any]:
    """One corpus refresh; concurrent callers wait for the running one to finish."""
    services: Services = app.state.services
    async with app.state.refresh_lock:
        report = await services.refresher.execute(services.refresh_request)
    return {"articles": report.articles, "chunks": report.chunks}


async def _refresh_loop(app: FastAPI, interval_s: int) -> None:
    first = True
    while True:
        try:
            report = await run_refresh(app)
            logger.info(
                "%s refresh complete: %d chunks",
                "Initial" if first else "Periodic",
                report["chunks"],
            )
        except asyncio.CancelledError:
            raise
        except Exception as ex:  # noqa: BLE001
            # keep serving the previous corpus
            logger.warning("%s refresh failed: %s", "Initial" if first else "Periodic", ex)
        first = False
        await asyncio.sleep(interval_s)


def create_app(
    settings: AppSettings | None = None,
    services_factory: ServicesFactory = build_services,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        cfg = settings or AppSettings()
        app.state.services = await services_factory(cfg)
        app.state.refresh_lock = asyncio.Lock()
        refresher: asyncio.Task[None] | None = None
        if cfg.refresh_interval_s > 0:
            refresher = asyncio.create_task(_refresh_loop(app, cfg.refresh_interval_s))
        try:
            yield
        finally:
            if refresher is not None:
                refresher.cancel()
                try:
                    await refresher
                except asyncio.CancelledError:
                    pass
            await app.state.services.store.close()

    app = FastAPI(title="News RAG API", version="0.1.0", lifespan=lifespan)

    @app.exception_handler(ValidationError)
    async def _bad_request(_req: Request, ex: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(ex)})

    @app.exception_handler(RequestValidationError)
    async def _bad_body(_req: Request, ex: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": "invalid request body"})

    @app.exception_handler(ConfigurationError)
    async def _misconfigured(_req: Request, ex: ConfigurationError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"error": str(ex)})

    @app.exception_handler(DomainError)
    async def _failed(_req: Request, ex: DomainError) -> JSONResponse:
        logger.error("Request failed: %s: %s", type(ex).__name__, ex)
        return JSONResponse(status_code=500, content={"error": str(ex)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/session")
    async def create_session(request: Request) -> dict[str, str]:
        session_id = await _services(request).chat.create_session()
        return {"sessionId": session_id}

    @app.get("/api/session/{session_id}/history")
    async def history(session_id: str, request: Request) -> dict[str, Any]:
        turns = await _services(request).chat.history(session_id)
        return {"history": [t.to_dict() for t in turns]}

    @app.delete("/api/session/{session_id}")
    async def clear_session(session_id: str, request: Request) -> dict[str, bool]:
        await _services(request).chat.clear(session_id)
        return {"ok": True}

    @app.post("/api/chat")
    async def chat(body: ChatBody, request: Request) -> dict[str, Any]:
        services = _services(request)
        top_k = body.topK if body.topK is not None else services.settings.chat_top_k
        result = await services.chat.chat(
            ChatRequest(session_id=body.sessionId, message=body.message, top_k=top_k)
        )
        return {"answer": result.answer, "context": [c.to_dict() for c in result.context]}

    @app.post("/api/retrieve")
    async def retrieve(body: RetrieveBody, request: Request) -> dict[str, Any]:
        services = _services(request)
        top_k = body.topK if body.topK is not None else services.settings.default_top_k
        results = await services.retriever.execute(body.query, top_k=top_k)
        return {"results": [r.to_dict() for r in results]}

    @app.post("/api/refresh")
    async def refresh(request: Request) -> JSONResponse:
        try:
            report = await run_refresh(request.app)
        except Exception as ex:  # noqa: BLE001
            logger.warning("Manual refresh failed: %s", ex)
            return JSONResponse(status_code=500, content={"error": str(ex)})
        return JSONResponse(content={"ok": True, **report})

    return app


def main() -> None:
    import uvicorn

    load_dotenv()
    settings = AppSettings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
