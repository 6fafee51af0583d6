import logging
from typing import Callable

from application.configs import ConfigsDependencies, build_configs
from domain.configs import FetchError
from infrastructure.http.configs_factory import build_configs_dependencies
from infrastructure.http.errors import ConfigsResolutionError
from infrastructure.http.mappers import to_backport_args, to_backport_configs_response
from infrastructure.http.schemas import BackportConfigsRequest, BackportConfigsResponse
from infrastructure.observability.configs_observer import observe_resolved_configs
from infrastructure.observability.context import request_secrets_scope
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def execute_configs_resolution(
    payload: BackportConfigsRequest,
    *,
    dependencies_factory: Callable[[str | None], ConfigsDependencies] = build_configs_dependencies,
) -> BackportConfigsResponse:
    args = to_backport_args(payload)
    with request_secrets_scope(args.auth):
        try:
            configs = build_configs(args, dependencies_factory(args.auth))
        except FetchError:
            raise
        except Exception as error:
            log_event(logger, logging.ERROR, "http.configs.resolution_failed", error=str(error))
            raise ConfigsResolutionError("backport configs resolution failed") from error

        observe_resolved_configs(configs)
    return to_backport_configs_response(configs)
