import logging
import re
from typing import Any

import requests

from domain.configs import fetch_error
from domain.models import GitPullRequest
from infrastructure.github.mappers import to_commit_shas, to_git_pull_request
from infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_GIT_USER = "GitHub"
DEFAULT_GIT_EMAIL = "noreply@github.com"
_COMMITS_PER_PAGE = 100
_PULL_REQUEST_URL_PATTERN = re.compile(
    r"^https?://[^/]+/(?:repos/)?(?P<owner>[^/]+)/(?P<repo>[^/]+)/pulls?/(?P<number>\d+)/?$"
)


def parse_pull_request_url(url: str) -> tuple[str, str, int]:
    match = _PULL_REQUEST_URL_PATTERN.match(url.strip())
    if not match:
        raise fetch_error(f"'{url}' is not a valid pull request url")
    return match.group("owner"), match.group("repo"), int(match.group("number"))


class GitHubClient:
    def __init__(
        self,
        *,
        token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        git_user: str = DEFAULT_GIT_USER,
        git_email: str = DEFAULT_GIT_EMAIL,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.git_user = git_user
        self.git_email = git_email
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def get_default_git_user(self) -> str:
        return self.git_user

    def get_default_git_email(self) -> str:
        return self.git_email

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = self.session.get(f"{self.api_url}{path}", params=params)
        except requests.RequestException as error:
            safe_error_details = safe_message(str(error))
            log_event(logger, logging.ERROR, "github.request.failed", path=path, details=safe_error_details)
            raise fetch_error(f"request to {path} failed: {safe_error_details}") from error

        if response.status_code >= 400:
            error_details = response.text
            try:
                error_payload = response.json()
                if isinstance(error_payload, dict):
                    error_details = error_payload.get("message", error_details)
            except ValueError:
                pass
            safe_error_details = safe_message(str(error_details))
            log_event(
                logger,
                logging.ERROR,
                "github.request.failed",
                path=path,
                status_code=response.status_code,
                details=safe_error_details,
            )
            raise fetch_error(f"GitHub request failed ({response.status_code}): {safe_error_details}")

        try:
            return response.json()
        except ValueError as error:
            log_event(
                logger,
                logging.ERROR,
                "github.request.failed",
                path=path,
                status_code=response.status_code,
                details="non JSON body",
            )
            raise fetch_error(f"GitHub returned a non JSON body for {path}") from error

    def _get_commits(self, owner: str, repo: str, number: int) -> list[str]:
        commits: list[str] = []
        page = 1
        while True:
            payload = self._get_json(
                f"/repos/{owner}/{repo}/pulls/{number}/commits",
                params={"page": page, "per_page": _COMMITS_PER_PAGE},
            )
            page_commits = to_commit_shas(payload)
            commits.extend(page_commits)
            if len(payload) < _COMMITS_PER_PAGE:
                break
            page += 1
        return commits

    def get_pull_request_from_url(self, url: str, squash: bool) -> GitPullRequest:
        owner, repo, number = parse_pull_request_url(url)
        log_event(
            logger,
            logging.INFO,
            "github.pr.get",
            owner=owner,
            repo=repo,
            pr_number=number,
            squash=squash,
        )
        payload = self._get_json(f"/repos/{owner}/{repo}/pulls/{number}")
        if not isinstance(payload, dict):
            raise fetch_error(f"unexpected payload for pull request #{number}")

        merge_commit_sha = payload.get("merge_commit_sha")
        if squash and payload.get("merged") and merge_commit_sha:
            commits = [merge_commit_sha]
        else:
            commits = self._get_commits(owner, repo, number)

        if not commits:
            raise fetch_error(f"pull request #{number} has no commits to backport")
        return to_git_pull_request(payload, commits)
