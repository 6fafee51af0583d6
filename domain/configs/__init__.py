from domain.configs.errors import FETCH_ERROR_PREFIX, FetchError, fetch_error
from domain.configs.resolvers import (
    DEFAULT_FOLDER,
    MAX_BRANCH_NAME_LENGTH,
    resolve_assignees,
    resolve_backport_branch,
    resolve_body,
    resolve_body_prefix,
    resolve_comments,
    resolve_folder,
    resolve_labels,
    resolve_reviewers,
    resolve_title,
    truncate_branch_name,
)

__all__ = [
    "DEFAULT_FOLDER",
    "FETCH_ERROR_PREFIX",
    "FetchError",
    "MAX_BRANCH_NAME_LENGTH",
    "fetch_error",
    "resolve_assignees",
    "resolve_backport_branch",
    "resolve_body",
    "resolve_body_prefix",
    "resolve_comments",
    "resolve_folder",
    "resolve_labels",
    "resolve_reviewers",
    "resolve_title",
    "truncate_branch_name",
]
