import os
import uuid
from collections.abc import Sequence
from typing import Any

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator


def instrument_with_metrics(
    app: FastAPI,
    *,
    endpoint: str = "/metrics",
    include_in_schema: bool = False,
) -> None:
    Instrumentator().instrument(app).expose(
        app,
        endpoint=endpoint,
        include_in_schema=include_in_schema,
    )


def add_correlation_id_middleware(
    app: FastAPI,
    *,
    header_name: str = "X-Request-ID",
) -> None:
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name=header_name,
        generator=lambda: str(uuid.uuid4()),
        update_request_header=True,
    )


def cors_origins_from_env(origins_env: str = "CORS_ORIGINS") -> list[str]:
    raw = os.getenv(origins_env, "*")
    if raw.strip() == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


def create_service_app(
    *,
    title: str,
    version: str = "0.1.0",
    description: str | None = None,
    enable_metrics: bool = True,
    metrics_endpoint: str = "/metrics",
    enable_cors: bool = True,
    cors_allow_origins: Sequence[str] | None = None,
    enable_correlation_id: bool = True,
    correlation_header_name: str = "X-Request-ID",
    **fastapi_kwargs: Any,
) -> FastAPI:
    app = FastAPI(title=title, version=version, description=description, **fastapi_kwargs)

    if enable_metrics:
        instrument_with_metrics(app, endpoint=metrics_endpoint)

    if enable_cors:
        origins = list(cors_allow_origins) if cors_allow_origins is not None else cors_origins_from_env()
        # Browsers reject credentialed requests against a wildcard origin
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=origins != ["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if enable_correlation_id:
        add_correlation_id_middleware(app, header_name=correlation_header_name)

    return app
