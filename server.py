"""HTTP server: subscribe, get/delete subscription, publish, read messages, health, stats."""

from dotenv import load_dotenv
load_dotenv()

import time
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from bridge.config import Settings
from bridge.exceptions import BridgeError
from bridge.observability import configure_logging, get_logger
from bridge.protocol import (
    HealthResponse,
    PublishResponse,
    SubscribeResponse,
    SubscriptionsResponse,
    error_body,
    error_response,
    messages_response,
    stats_response,
)
from bridge.service import SubscriberService

SUBSCRIBE_PATH = "/subscribe/"
GET_SUBSCRIBER_PATH = SUBSCRIBE_PATH + "{subscriber_id}"
PUBLISH_PATH = "/publish/"
PUSH_MESSAGE_PATH = PUBLISH_PATH + "{topic}"
MESSAGES_PATH = "/messages/"
GET_MESSAGES_PATH = MESSAGES_PATH + "{subscriber_id}"

logger = get_logger("bridge.server")


class SubscribeBody(BaseModel):
    topics: List[str] = Field(default_factory=list)


class PublishBody(BaseModel):
    subscriber: str
    text: str


def _build_router(service: SubscriberService) -> APIRouter:
    router = APIRouter()

    # ---- Subscribe ----

    @router.put(SUBSCRIBE_PATH)
    def put_subscription(body: SubscribeBody) -> JSONResponse:
        """PUT /subscribe/ { topics } → 201 { subscriber }."""
        subscriber = service.create(body.topics)
        return JSONResponse(
            content=SubscribeResponse(subscriber=subscriber.subscriber_id).to_dict(),
            status_code=201,
        )

    @router.get(GET_SUBSCRIBER_PATH)
    def get_subscription(subscriber_id: str) -> JSONResponse:
        """GET /subscribe/{id} → { subscriber, topics }."""
        subscriber = service.get(subscriber_id)
        body = SubscriptionsResponse(
            subscriber=subscriber.subscriber_id,
            topics=list(subscriber.topics),
        ).to_dict()
        return JSONResponse(content=body, status_code=200)

    @router.delete(GET_SUBSCRIBER_PATH)
    def delete_subscription(subscriber_id: str) -> JSONResponse:
        """DELETE /subscribe/{id} → { subscriber }."""
        service.delete(subscriber_id)
        return JSONResponse(content=SubscribeResponse(subscriber=subscriber_id).to_dict(), status_code=200)

    # ---- Publish ----

    @router.put(PUSH_MESSAGE_PATH)
    def push_message(topic: str, body: PublishBody) -> JSONResponse:
        """PUT /publish/{topic} { subscriber, text } → { message }."""
        message = service.message(body.subscriber, topic, body.text)
        return JSONResponse(content=PublishResponse(message=message.message_id).to_dict(), status_code=200)

    # ---- Messages ----

    @router.get(GET_MESSAGES_PATH)
    def get_messages(subscriber_id: str) -> JSONResponse:
        """GET /messages/{subscriber} → { subscriber, messages }; drains the inbox."""
        messages = service.read_messages(subscriber_id)
        return JSONResponse(content=messages_response(subscriber_id, messages), status_code=200)

    # ---- Health / stats ----

    @router.get("/health")
    def health(request: Request) -> JSONResponse:
        """GET /health → { uptime_sec, topics, subscribers }."""
        uptime = time.time() - request.app.state.start_time
        body = HealthResponse(
            uptime_sec=uptime,
            topics=service.registry.topic_count(),
            subscribers=service.registry.subscriber_count(),
        ).to_dict()
        return JSONResponse(content=body, status_code=200)

    @router.get("/stats")
    def stats() -> JSONResponse:
        """GET /stats → { topics: { name: { subscribers } }, counters }."""
        body = stats_response(service.registry.topic_stats(), service.metrics.snapshot())
        return JSONResponse(content=body, status_code=200)

    return router


def create_app(service: Optional[SubscriberService] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the HTTP app around ``service`` (a fresh one when not given)."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    if service is None:
        service = SubscriberService(inbox_warn_size=settings.inbox_warn_size)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.start_time = time.time()
        logger.info("starting", extra={"host": settings.host, "port": settings.port})
        yield
        logger.info("stopping")

    app = FastAPI(title="Bridge API", lifespan=lifespan)
    app.state.service = service
    app.state.start_time = time.time()

    @app.exception_handler(BridgeError)
    async def bridge_error_handler(request: Request, exc: BridgeError) -> JSONResponse:
        status, code, message = error_response(exc)
        logger.info("request_failed", extra={"path": request.url.path, "error": code})
        return JSONResponse(content=error_body(code, message), status_code=status)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        status, code, message = error_response(None)
        logger.info("request_invalid", extra={"path": request.url.path, "errors": len(exc.errors())})
        return JSONResponse(content=error_body(code, message), status_code=status)

    app.include_router(_build_router(service))
    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run("server:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
