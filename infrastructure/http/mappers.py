from collections.abc import Iterable

from application.configs import BackportArgs, Configs
from infrastructure.http.schemas import (
    BackportConfigsRequest,
    BackportConfigsResponse,
    BackportPullRequestResponse,
    GitIdentityResponse,
    OriginalPullRequestResponse,
)


def _optional_tuple(values: Iterable[str] | None) -> tuple[str, ...] | None:
    return tuple(values) if values is not None else None


def to_backport_args(payload: BackportConfigsRequest) -> BackportArgs:
    return BackportArgs(
        target_branch=payload.target_branch,
        pull_request=payload.pull_request,
        dry_run=payload.dry_run,
        auth=payload.auth,
        folder=payload.folder,
        git_user=payload.git_user,
        git_email=payload.git_email,
        title=payload.title,
        body=payload.body,
        body_prefix=payload.body_prefix,
        bp_branch_name=payload.bp_branch_name,
        reviewers=_optional_tuple(payload.reviewers),
        assignees=_optional_tuple(payload.assignees),
        inherit_reviewers=payload.inherit_reviewers,
        labels=_optional_tuple(payload.labels),
        inherit_labels=payload.inherit_labels,
        squash=payload.squash,
        strategy=payload.strategy,
        strategy_option=payload.strategy_option,
        comments=_optional_tuple(payload.comments),
    )


def to_backport_configs_response(configs: Configs) -> BackportConfigsResponse:
    original_pull_request = configs.original_pull_request
    backport_pull_request = configs.backport_pull_request
    # Sets have no stable order, sort them so responses are reproducible.
    return BackportConfigsResponse(
        dry_run=configs.dry_run,
        folder=configs.folder,
        target_branch=configs.target_branch,
        merge_strategy=configs.merge_strategy,
        merge_strategy_option=configs.merge_strategy_option,
        git=GitIdentityResponse(user=configs.git.user, email=configs.git.email),
        original_pull_request=OriginalPullRequestResponse(
            number=original_pull_request.number,
            author=original_pull_request.author,
            merged_by=original_pull_request.merged_by,
            html_url=original_pull_request.html_url,
            title=original_pull_request.title,
            commits=list(original_pull_request.commits),
            labels=list(original_pull_request.labels),
        ),
        backport_pull_request=BackportPullRequestResponse(
            owner=backport_pull_request.owner,
            repo=backport_pull_request.repo,
            head=backport_pull_request.head,
            base=backport_pull_request.base,
            title=backport_pull_request.title,
            body=backport_pull_request.body,
            reviewers=sorted(backport_pull_request.reviewers),
            assignees=sorted(backport_pull_request.assignees),
            labels=sorted(backport_pull_request.labels),
            comments=list(backport_pull_request.comments),
        ),
    )
