from pydantic import BaseModel, Field


class BackportConfigsRequest(BaseModel):
    target_branch: str = Field(..., min_length=1)
    pull_request: str = Field(..., min_length=1)
    dry_run: bool | None = None
    auth: str | None = Field(default=None, repr=False)
    folder: str | None = None
    git_user: str | None = None
    git_email: str | None = None
    title: str | None = None
    body: str | None = None
    body_prefix: str | None = None
    bp_branch_name: str | None = None
    reviewers: list[str] | None = None
    assignees: list[str] | None = None
    inherit_reviewers: bool | None = None
    labels: list[str] | None = None
    inherit_labels: bool | None = None
    squash: bool | None = None
    strategy: str | None = None
    strategy_option: str | None = None
    comments: list[str] | None = None


class GitIdentityResponse(BaseModel):
    user: str
    email: str


class OriginalPullRequestResponse(BaseModel):
    number: int | None = None
    author: str
    merged_by: str | None = None
    html_url: str
    title: str
    commits: list[str]
    labels: list[str]


class BackportPullRequestResponse(BaseModel):
    owner: str
    repo: str
    head: str
    base: str
    title: str
    body: str
    reviewers: list[str]
    assignees: list[str]
    labels: list[str]
    comments: list[str]


class BackportConfigsResponse(BaseModel):
    dry_run: bool
    folder: str
    target_branch: str
    merge_strategy: str | None = None
    merge_strategy_option: str | None = None
    git: GitIdentityResponse
    original_pull_request: OriginalPullRequestResponse
    backport_pull_request: BackportPullRequestResponse
