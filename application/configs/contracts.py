import os
from dataclasses import dataclass, field
from typing import Any, Callable

from application.ports import GitClient
from domain.models import BackportPullRequest, GitIdentity, GitPullRequest


def _noop_observe_event(_: int, __: str, **___: Any) -> None:
    return None


@dataclass(frozen=True)
class BackportArgs:
    target_branch: str
    pull_request: str
    dry_run: bool | None = None
    auth: str | None = field(default=None, repr=False)
    folder: str | None = None
    git_user: str | None = None
    git_email: str | None = None
    title: str | None = None
    body: str | None = None
    body_prefix: str | None = None
    bp_branch_name: str | None = None
    reviewers: tuple[str, ...] | None = None
    assignees: tuple[str, ...] | None = None
    inherit_reviewers: bool | None = None
    labels: tuple[str, ...] | None = None
    inherit_labels: bool | None = None
    squash: bool | None = None
    strategy: str | None = None
    strategy_option: str | None = None
    comments: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ConfigsDependencies:
    git_client: GitClient
    current_directory: Callable[[], str] = os.getcwd
    observe_event: Callable[..., None] = _noop_observe_event


@dataclass(frozen=True)
class Configs:
    dry_run: bool
    folder: str
    target_branch: str
    original_pull_request: GitPullRequest
    backport_pull_request: BackportPullRequest
    git: GitIdentity
    auth: str | None = field(default=None, repr=False)
    merge_strategy: str | None = None
    merge_strategy_option: str | None = None
