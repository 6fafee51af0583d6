import logging
from typing import Any

from application.configs import Configs
from domain.configs import FETCH_ERROR_PREFIX
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def observe_configs_event(level: int, event: str, **fields: Any) -> None:
    log_event(logger, level, event, **fields)


def is_fetch_error(error_message: str) -> bool:
    return error_message.startswith(FETCH_ERROR_PREFIX)


def observe_resolved_configs(configs: Configs) -> None:
    backport_pull_request = configs.backport_pull_request
    log_event(
        logger,
        logging.INFO,
        "configs.resolved",
        dry_run=configs.dry_run,
        folder=configs.folder,
        owner=backport_pull_request.owner,
        repo=backport_pull_request.repo,
        head=backport_pull_request.head,
        base=backport_pull_request.base,
        commits_count=len(configs.original_pull_request.commits),
        reviewers_count=len(backport_pull_request.reviewers),
        labels_count=len(backport_pull_request.labels),
    )
