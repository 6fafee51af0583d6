import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token


_NO_REQUEST_ID = "-"
_request_id_ctx: ContextVar[str] = ContextVar("request_id", default=_NO_REQUEST_ID)


def new_request_id() -> str:
    return str(uuid.uuid4())


def set_request_id(request_id: str) -> Token[str]:
    return _request_id_ctx.set(request_id)


def get_request_id() -> str:
    return _request_id_ctx.get()


def reset_request_id(token: Token[str]) -> None:
    _request_id_ctx.reset(token)


@contextmanager
def request_id_scope(request_id: str | None = None) -> Iterator[str]:
    """Bind a request id (generated when missing) to every log record emitted inside the block."""
    scoped_request_id = request_id or new_request_id()
    token = set_request_id(scoped_request_id)
    try:
        yield scoped_request_id
    finally:
        reset_request_id(token)


_request_secrets_ctx: ContextVar[tuple[str, ...]] = ContextVar("request_secrets", default=())


def get_request_secrets() -> tuple[str, ...]:
    return _request_secrets_ctx.get()


@contextmanager
def request_secrets_scope(*values: str | None) -> Iterator[None]:
    """Redact caller supplied secrets only while the block runs."""
    token = _request_secrets_ctx.set(
        _request_secrets_ctx.get() + tuple(value for value in values if value)
    )
    try:
        yield
    finally:
        _request_secrets_ctx.reset(token)
