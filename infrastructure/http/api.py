import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Depends, FastAPI, Request, status
from starlette.responses import Response

from application.configs import ConfigsDependencies
from infrastructure.http.configs_factory import build_configs_dependencies, register_environment_secrets
from infrastructure.http.configs_service import execute_configs_resolution
from infrastructure.http.errors import to_http_exception
from infrastructure.http.schemas import BackportConfigsRequest, BackportConfigsResponse
from infrastructure.observability.context import new_request_id, reset_request_id, set_request_id
from infrastructure.observability.logging_utils import configure_logging, log_event


configure_logging()
register_environment_secrets()
logger = logging.getLogger(__name__)
app = FastAPI(title="Backport Configs API")

DependenciesFactory = Callable[[str | None], ConfigsDependencies]


def get_dependencies_factory() -> DependenciesFactory:
    return build_configs_dependencies


@app.middleware("http")
async def request_observability_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = request.headers.get("X-Request-ID") or new_request_id()
    request.state.request_id = request_id
    token = set_request_id(request_id)

    method = request.method
    path = request.url.path
    start_time = time.perf_counter()
    log_event(logger, logging.INFO, "http.request.start", method=method, path=path)

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-ID"] = request_id
        return response
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000
        log_event(
            logger,
            logging.INFO,
            "http.request.end",
            method=method,
            path=path,
            status=status_code,
            duration_ms=f"{duration_ms:.2f}",
        )
        reset_request_id(token)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/backport/configs", response_model=BackportConfigsResponse, status_code=status.HTTP_200_OK)
def resolve_backport_configs(
    payload: BackportConfigsRequest,
    request: Request,
    dependencies_factory: DependenciesFactory = Depends(get_dependencies_factory),
) -> BackportConfigsResponse:
    request_id = getattr(request.state, "request_id", None)
    token = set_request_id(request_id) if request_id else None
    try:
        return execute_configs_resolution(payload, dependencies_factory=dependencies_factory)
    except Exception as error:
        log_event(logger, logging.ERROR, "http.configs.endpoint_failed", error=str(error))
        raise to_http_exception(error)
    finally:
        if token is not None:
            reset_request_id(token)
