from dataclasses import dataclass, field


@dataclass(frozen=True)
class GitRepository:
    owner: str
    project: str


@dataclass(frozen=True)
class GitIdentity:
    user: str
    email: str


@dataclass(frozen=True)
class GitPullRequest:
    author: str
    url: str
    html_url: str
    title: str
    body: str
    target_repo: GitRepository
    source_repo: GitRepository
    commits: tuple[str, ...]
    number: int | None = None
    state: str = "closed"
    merged: bool = True
    merged_by: str | None = None
    reviewers: tuple[str, ...] = ()
    assignees: tuple[str, ...] = ()
    labels: tuple[str, ...] = ()


@dataclass(frozen=True)
class BackportPullRequest:
    owner: str
    repo: str
    head: str
    base: str
    title: str
    body: str
    reviewers: frozenset[str] = field(default_factory=frozenset)
    assignees: frozenset[str] = field(default_factory=frozenset)
    labels: frozenset[str] = field(default_factory=frozenset)
    comments: tuple[str, ...] = ()
