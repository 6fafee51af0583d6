from fastapi import HTTPException, status

from domain.configs import FetchError


FETCH_ERROR_MESSAGE = "Unable to retrieve the original pull request"
INTERNAL_CONFIGS_ERROR_MESSAGE = "Internal error while resolving backport configs"


class ConfigsResolutionError(RuntimeError):
    """Controlled exception for configs resolution failures in the HTTP adapter."""


def to_http_exception(error: Exception) -> HTTPException:
    if isinstance(error, FetchError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=FETCH_ERROR_MESSAGE,
        )

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_CONFIGS_ERROR_MESSAGE,
    )
