from typing import Protocol

from domain.models import GitPullRequest


class GitClient(Protocol):
    def get_pull_request_from_url(self, url: str, squash: bool) -> GitPullRequest:
        """Fetch the already merged pull request to backport.

        Raises FetchError when the pull request cannot be located or parsed.
        """

    def get_default_git_user(self) -> str:
        """Git user name used when none is given."""

    def get_default_git_email(self) -> str:
        """Git user email used when none is given."""
