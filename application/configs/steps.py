import logging

from application.configs.contracts import BackportArgs, ConfigsDependencies
from domain.configs import (
    MAX_BRANCH_NAME_LENGTH,
    resolve_assignees,
    resolve_backport_branch,
    resolve_body,
    resolve_comments,
    resolve_labels,
    resolve_reviewers,
    resolve_title,
    truncate_branch_name,
)
from domain.models import BackportPullRequest, GitIdentity, GitPullRequest


def fetch_original_pull_request(
    args: BackportArgs,
    dependencies: ConfigsDependencies,
) -> GitPullRequest:
    try:
        return dependencies.git_client.get_pull_request_from_url(
            args.pull_request,
            bool(args.squash),
        )
    except Exception as error:
        dependencies.observe_event(
            logging.ERROR,
            "configs.original_pr.fetch_failed",
            pull_request=args.pull_request,
            error=str(error),
        )
        raise


def resolve_git_identity(
    args: BackportArgs,
    dependencies: ConfigsDependencies,
) -> GitIdentity:
    git_client = dependencies.git_client
    return GitIdentity(
        user=args.git_user if args.git_user is not None else git_client.get_default_git_user(),
        email=args.git_email if args.git_email is not None else git_client.get_default_git_email(),
    )


def resolve_head_branch(
    args: BackportArgs,
    original_pull_request: GitPullRequest,
    dependencies: ConfigsDependencies,
) -> str:
    backport_branch = resolve_backport_branch(
        args.bp_branch_name,
        args.target_branch,
        original_pull_request.commits,
    )
    if len(backport_branch) > MAX_BRANCH_NAME_LENGTH:
        # Collisions after truncation are left to branch creation.
        dependencies.observe_event(
            logging.WARNING,
            "configs.backport_branch.truncated",
            length=len(backport_branch),
            max_length=MAX_BRANCH_NAME_LENGTH,
        )
        backport_branch = truncate_branch_name(backport_branch)
    return backport_branch


def build_backport_pull_request(
    args: BackportArgs,
    original_pull_request: GitPullRequest,
    dependencies: ConfigsDependencies,
) -> BackportPullRequest:
    return BackportPullRequest(
        owner=original_pull_request.target_repo.owner,
        repo=original_pull_request.target_repo.project,
        head=resolve_head_branch(args, original_pull_request, dependencies),
        base=args.target_branch,
        title=resolve_title(args.title, args.target_branch, original_pull_request),
        body=resolve_body(args.body, args.body_prefix, original_pull_request),
        reviewers=resolve_reviewers(
            args.reviewers,
            original_pull_request,
            inherit_reviewers=bool(args.inherit_reviewers),
        ),
        assignees=resolve_assignees(args.assignees),
        labels=resolve_labels(
            args.labels,
            original_pull_request,
            inherit_labels=bool(args.inherit_labels),
        ),
        comments=resolve_comments(args.comments),
    )
