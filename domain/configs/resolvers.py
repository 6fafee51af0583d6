from collections.abc import Iterable

from domain.models import GitPullRequest


DEFAULT_FOLDER = "bp"
MAX_BRANCH_NAME_LENGTH = 250
COMMIT_PREFIX_LENGTH = 7


def resolve_folder(folder: str | None, current_directory: str) -> str:
    resolved_folder = folder if folder is not None else DEFAULT_FOLDER
    if resolved_folder.startswith("/"):
        return resolved_folder
    return f"{current_directory}/{resolved_folder}"


def resolve_reviewers(
    reviewers: Iterable[str] | None,
    original_pull_request: GitPullRequest,
    *,
    inherit_reviewers: bool,
) -> frozenset[str]:
    resolved_reviewers = list(reviewers or ())
    # Inheritance only kicks in when no reviewer was given explicitly.
    if not resolved_reviewers and inherit_reviewers:
        resolved_reviewers.append(original_pull_request.author)
        if original_pull_request.merged_by:
            resolved_reviewers.append(original_pull_request.merged_by)
    return frozenset(resolved_reviewers)


def resolve_labels(
    labels: Iterable[str] | None,
    original_pull_request: GitPullRequest,
    *,
    inherit_labels: bool,
) -> frozenset[str]:
    resolved_labels = list(labels or ())
    if inherit_labels:
        resolved_labels.extend(original_pull_request.labels)
    return frozenset(resolved_labels)


def resolve_assignees(assignees: Iterable[str] | None) -> frozenset[str]:
    return frozenset(assignees or ())


def resolve_body_prefix(body_prefix: str | None, original_pull_request: GitPullRequest) -> str:
    if body_prefix is not None:
        return body_prefix
    return f"**Backport:** {original_pull_request.html_url}\r\n\r\n"


def resolve_body(
    body: str | None,
    body_prefix: str | None,
    original_pull_request: GitPullRequest,
) -> str:
    resolved_body = body if body is not None else original_pull_request.body
    return f"{resolve_body_prefix(body_prefix, original_pull_request)}{resolved_body}"


def resolve_backport_branch(
    branch_name: str | None,
    target_branch: str,
    commits: Iterable[str],
) -> str:
    if branch_name is not None and branch_name.strip():
        return branch_name

    # 7 chars are enough to identify a commit in most projects, not a guarantee.
    concatenated_commits = "-".join(commit[:COMMIT_PREFIX_LENGTH] for commit in commits)
    return f"bp-{target_branch}-{concatenated_commits}"


def truncate_branch_name(branch_name: str) -> str:
    return branch_name[:MAX_BRANCH_NAME_LENGTH]


def resolve_title(title: str | None, target_branch: str, original_pull_request: GitPullRequest) -> str:
    if title is not None:
        return title
    return f"[{target_branch}] {original_pull_request.title}"


def resolve_comments(comments: Iterable[str] | None) -> tuple[str, ...]:
    return tuple(comments or ())
