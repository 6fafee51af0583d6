from typing import Any

from domain.configs import fetch_error
from domain.models import GitPullRequest, GitRepository


def _login(user_data: Any) -> str | None:
    if isinstance(user_data, dict):
        login = user_data.get("login")
        if isinstance(login, str) and login:
            return login
    return None


def _logins(items: Any) -> tuple[str, ...]:
    return tuple(login for login in (_login(item) for item in items or ()) if login)


def _label_names(items: Any) -> tuple[str, ...]:
    return tuple(
        item["name"]
        for item in items or ()
        if isinstance(item, dict) and isinstance(item.get("name"), str)
    )


def to_git_repository(branch_data: Any) -> GitRepository:
    repo_data = branch_data.get("repo") if isinstance(branch_data, dict) else None
    # Head repo is null once the fork it came from has been deleted.
    if not isinstance(repo_data, dict):
        return GitRepository(owner="", project="")
    return GitRepository(
        owner=_login(repo_data.get("owner")) or "",
        project=repo_data.get("name") or "",
    )


def to_target_repository(branch_data: Any) -> GitRepository:
    repository = to_git_repository(branch_data)
    if not repository.owner or not repository.project:
        raise fetch_error("pull request payload has no target repository")
    return repository


def to_git_pull_request(payload: dict[str, Any], commits: list[str]) -> GitPullRequest:
    author = _login(payload.get("user"))
    if author is None:
        raise fetch_error("pull request payload has no author login")

    try:
        return GitPullRequest(
            number=payload.get("number"),
            author=author,
            url=payload["url"],
            html_url=payload["html_url"],
            state=payload.get("state") or "closed",
            merged=bool(payload.get("merged")),
            merged_by=_login(payload.get("merged_by")),
            title=payload["title"],
            body=payload.get("body") or "",
            reviewers=_logins(payload.get("requested_reviewers")),
            assignees=_logins(payload.get("assignees")),
            labels=_label_names(payload.get("labels")),
            target_repo=to_target_repository(payload["base"]),
            source_repo=to_git_repository(payload.get("head")),
            commits=tuple(commits),
        )
    except KeyError as error:
        raise fetch_error(f"pull request payload is missing field {error}") from error


def to_commit_shas(payload: Any) -> list[str]:
    if not isinstance(payload, list):
        raise fetch_error("commits payload must be a list")
    return [item["sha"] for item in payload if isinstance(item, dict) and isinstance(item.get("sha"), str)]
