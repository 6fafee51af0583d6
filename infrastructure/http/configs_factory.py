import os

from application.configs import ConfigsDependencies
from infrastructure.github.github_client import (
    DEFAULT_API_URL,
    DEFAULT_GIT_EMAIL,
    DEFAULT_GIT_USER,
    GitHubClient,
)
from infrastructure.observability.configs_observer import observe_configs_event
from infrastructure.observability.logging_utils import register_sensitive_values


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    return value if value else None


def register_environment_secrets() -> None:
    register_sensitive_values(_optional_env("GITHUB_TOKEN"))


def build_github_client(auth: str | None = None) -> GitHubClient:
    token = auth or _optional_env("GITHUB_TOKEN")
    return GitHubClient(
        token=token,
        api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL),
        git_user=os.getenv("GIT_AUTHOR_NAME", DEFAULT_GIT_USER),
        git_email=os.getenv("GIT_AUTHOR_EMAIL", DEFAULT_GIT_EMAIL),
    )


def build_configs_dependencies(auth: str | None = None) -> ConfigsDependencies:
    return ConfigsDependencies(
        git_client=build_github_client(auth),
        current_directory=os.getcwd,
        observe_event=observe_configs_event,
    )
