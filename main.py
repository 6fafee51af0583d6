import logging
import os

from dotenv import load_dotenv

from application.configs import BackportArgs, build_configs
from infrastructure.http.configs_factory import build_configs_dependencies, register_environment_secrets
from infrastructure.http.mappers import to_backport_configs_response
from infrastructure.observability.configs_observer import (
    is_fetch_error,
    observe_resolved_configs,
)
from infrastructure.observability.context import request_id_scope
from infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
)


load_dotenv()
configure_logging()
logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def optional_env(name: str) -> str | None:
    return os.getenv(name)


def bool_env(name: str) -> bool | None:
    value = os.getenv(name)
    if value is None:
        return None
    return value.strip().lower() in _TRUE_VALUES


def list_env(name: str) -> tuple[str, ...] | None:
    value = os.getenv(name)
    if value is None:
        return None
    return tuple(item.strip() for item in value.split(",") if item.strip())


def args_from_env() -> BackportArgs:
    return BackportArgs(
        target_branch=required_env("BP_TARGET_BRANCH"),
        pull_request=required_env("BP_PULL_REQUEST"),
        dry_run=bool_env("BP_DRY_RUN"),
        auth=optional_env("BP_AUTH"),
        folder=optional_env("BP_FOLDER"),
        git_user=optional_env("BP_GIT_USER"),
        git_email=optional_env("BP_GIT_EMAIL"),
        title=optional_env("BP_TITLE"),
        body=optional_env("BP_BODY"),
        body_prefix=optional_env("BP_BODY_PREFIX"),
        bp_branch_name=optional_env("BP_BRANCH_NAME"),
        reviewers=list_env("BP_REVIEWERS"),
        assignees=list_env("BP_ASSIGNEES"),
        inherit_reviewers=bool_env("BP_INHERIT_REVIEWERS"),
        labels=list_env("BP_LABELS"),
        inherit_labels=bool_env("BP_INHERIT_LABELS"),
        squash=bool_env("BP_SQUASH"),
        strategy=optional_env("BP_STRATEGY"),
        strategy_option=optional_env("BP_STRATEGY_OPTION"),
        comments=list_env("BP_COMMENTS"),
    )


def main() -> None:
    with request_id_scope():
        log_event(logger, logging.INFO, "cli.configs.start")
        args = args_from_env()
        register_environment_secrets()
        register_sensitive_values(args.auth)
        try:
            configs = build_configs(args, build_configs_dependencies(args.auth))
        except Exception as error:
            error_message = str(error)
            if is_fetch_error(error_message):
                log_event(logger, logging.ERROR, "cli.configs.fetch_failed", error=error_message)
            log_event(logger, logging.ERROR, "cli.configs.failed", error=error_message)
            raise

        observe_resolved_configs(configs)
        print(to_backport_configs_response(configs).model_dump_json(indent=2))
        log_event(logger, logging.INFO, "cli.configs.end", head=configs.backport_pull_request.head)


if __name__ == "__main__":
    main()
