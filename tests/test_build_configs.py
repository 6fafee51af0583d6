import logging
import unittest
from typing import Any

from application.configs import BackportArgs, ConfigsDependencies, build_configs
from domain.configs import FetchError, fetch_error
from domain.models import GitPullRequest, GitRepository


def _original_pull_request(**overrides: Any) -> GitPullRequest:
    fields: dict[str, Any] = {
        "number": 2368,
        "author": "gh-user",
        "merged_by": "that-s-a-user",
        "url": "https://api.github.com/repos/owner/reponame/pulls/2368",
        "html_url": "https://github.com/owner/reponame/pull/2368",
        "title": "PR Title",
        "body": "Please review and merge",
        "labels": ("original-label",),
        "target_repo": GitRepository(owner="owner", project="reponame"),
        "source_repo": GitRepository(owner="fork", project="reponame"),
        "commits": ("abcdef1234", "9876543210"),
    }
    fields.update(overrides)
    return GitPullRequest(**fields)


class _FakeGitClient:
    def __init__(
        self,
        pull_request: GitPullRequest | None = None,
        error: Exception | None = None,
    ) -> None:
        self.pull_request = pull_request or _original_pull_request()
        self.error = error
        self.calls: list[tuple[str, bool]] = []

    def get_pull_request_from_url(self, url: str, squash: bool) -> GitPullRequest:
        self.calls.append((url, squash))
        if self.error is not None:
            raise self.error
        return self.pull_request

    def get_default_git_user(self) -> str:
        return "GitHub"

    def get_default_git_email(self) -> str:
        return "noreply@github.com"


class _EventRecorder:
    def __init__(self) -> None:
        self.events: list[tuple[int, str, dict[str, Any]]] = []

    def __call__(self, level: int, event: str, **fields: Any) -> None:
        self.events.append((level, event, fields))

    def names(self, level: int) -> list[str]:
        return [event for event_level, event, _ in self.events if event_level == level]


def _args(**overrides: Any) -> BackportArgs:
    fields: dict[str, Any] = {
        "target_branch": "release-2",
        "pull_request": "https://github.com/owner/reponame/pull/2368",
    }
    fields.update(overrides)
    return BackportArgs(**fields)


class BuildConfigsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.git_client = _FakeGitClient()
        self.recorder = _EventRecorder()
        self.dependencies = ConfigsDependencies(
            git_client=self.git_client,
            current_directory=lambda: "/home/x",
            observe_event=self.recorder,
        )

    def test_defaults_are_derived_from_original_pull_request(self) -> None:
        configs = build_configs(_args(), self.dependencies)

        self.assertFalse(configs.dry_run)
        self.assertIsNone(configs.auth)
        self.assertEqual(configs.folder, "/home/x/bp")
        self.assertEqual(configs.target_branch, "release-2")
        self.assertIsNone(configs.merge_strategy)
        self.assertIsNone(configs.merge_strategy_option)
        self.assertEqual(configs.git.user, "GitHub")
        self.assertEqual(configs.git.email, "noreply@github.com")
        self.assertIs(configs.original_pull_request, self.git_client.pull_request)

        backport_pull_request = configs.backport_pull_request
        self.assertEqual(backport_pull_request.owner, "owner")
        self.assertEqual(backport_pull_request.repo, "reponame")
        self.assertEqual(backport_pull_request.head, "bp-release-2-abcdef1-9876543")
        self.assertEqual(backport_pull_request.base, "release-2")
        self.assertEqual(backport_pull_request.title, "[release-2] PR Title")
        self.assertEqual(
            backport_pull_request.body,
            "**Backport:** https://github.com/owner/reponame/pull/2368\r\n\r\nPlease review and merge",
        )
        self.assertEqual(backport_pull_request.reviewers, frozenset())
        self.assertEqual(backport_pull_request.assignees, frozenset())
        self.assertEqual(backport_pull_request.labels, frozenset())
        self.assertEqual(backport_pull_request.comments, ())
        self.assertEqual(self.recorder.events, [])

    def test_fetch_receives_locator_and_squash_flag(self) -> None:
        build_configs(_args(squash=True), self.dependencies)
        build_configs(_args(), self.dependencies)

        self.assertEqual(
            self.git_client.calls,
            [
                ("https://github.com/owner/reponame/pull/2368", True),
                ("https://github.com/owner/reponame/pull/2368", False),
            ],
        )

    def test_overrides_are_passed_through(self) -> None:
        configs = build_configs(
            _args(
                dry_run=True,
                auth="secret-token",
                folder="/tmp/work",
                git_user="Me",
                git_email="me@example.com",
                title="New Title",
                body="New Body",
                body_prefix="New Body Prefix - ",
                bp_branch_name="bp_branch_name",
                reviewers=("user1", "user2", "user1"),
                assignees=("user3", "user3"),
                inherit_reviewers=True,
                labels=("cherry-pick :cherries:",),
                strategy="ort",
                strategy_option="theirs",
                comments=("first comment", "second comment"),
            ),
            self.dependencies,
        )

        self.assertTrue(configs.dry_run)
        self.assertEqual(configs.auth, "secret-token")
        self.assertNotIn("secret-token", repr(configs))
        self.assertEqual(configs.folder, "/tmp/work")
        self.assertEqual(configs.git.user, "Me")
        self.assertEqual(configs.git.email, "me@example.com")
        self.assertEqual(configs.merge_strategy, "ort")
        self.assertEqual(configs.merge_strategy_option, "theirs")

        backport_pull_request = configs.backport_pull_request
        self.assertEqual(backport_pull_request.head, "bp_branch_name")
        self.assertEqual(backport_pull_request.title, "New Title")
        self.assertEqual(backport_pull_request.body, "New Body Prefix - New Body")
        self.assertEqual(backport_pull_request.reviewers, frozenset({"user1", "user2"}))
        self.assertEqual(backport_pull_request.assignees, frozenset({"user3"}))
        self.assertEqual(backport_pull_request.labels, frozenset({"cherry-pick :cherries:"}))
        self.assertEqual(backport_pull_request.comments, ("first comment", "second comment"))

    def test_relative_folder_is_resolved_against_current_directory(self) -> None:
        configs = build_configs(_args(folder="rel"), self.dependencies)
        self.assertEqual(configs.folder, "/home/x/rel")

    def test_reviewers_are_inherited_only_when_none_given(self) -> None:
        configs = build_configs(_args(reviewers=(), inherit_reviewers=True), self.dependencies)
        self.assertEqual(
            configs.backport_pull_request.reviewers,
            frozenset({"gh-user", "that-s-a-user"}),
        )

    def test_labels_are_inherited_additively(self) -> None:
        configs = build_configs(
            _args(labels=("extra", "original-label"), inherit_labels=True),
            self.dependencies,
        )
        self.assertEqual(
            configs.backport_pull_request.labels,
            frozenset({"extra", "original-label"}),
        )

    def test_long_branch_name_is_truncated_with_warning(self) -> None:
        configs = build_configs(_args(bp_branch_name="x" * 300), self.dependencies)

        self.assertEqual(configs.backport_pull_request.head, "x" * 250)
        self.assertEqual(self.recorder.names(logging.WARNING), ["configs.backport_branch.truncated"])
        _, _, fields = self.recorder.events[0]
        self.assertEqual(fields["length"], 300)

    def test_computed_branch_name_is_truncated_too(self) -> None:
        commits = tuple(f"{index:07d}abcdef" for index in range(40))
        self.git_client.pull_request = _original_pull_request(commits=commits)

        configs = build_configs(_args(), self.dependencies)

        self.assertEqual(len(configs.backport_pull_request.head), 250)
        self.assertTrue(configs.backport_pull_request.head.startswith("bp-release-2-0000000-0000001"))
        self.assertEqual(self.recorder.names(logging.WARNING), ["configs.backport_branch.truncated"])

    def test_branch_name_within_limit_emits_no_warning(self) -> None:
        configs = build_configs(_args(bp_branch_name="y" * 250), self.dependencies)

        self.assertEqual(configs.backport_pull_request.head, "y" * 250)
        self.assertEqual(self.recorder.names(logging.WARNING), [])

    def test_building_twice_yields_equal_configs(self) -> None:
        args = _args(reviewers=("a", "b"), labels=("l1",), inherit_labels=True)
        self.assertEqual(build_configs(args, self.dependencies), build_configs(args, self.dependencies))

    def test_fetch_failure_is_logged_and_propagated(self) -> None:
        error = fetch_error("pull request not found")
        self.git_client.error = error

        with self.assertRaises(FetchError) as raised_error:
            build_configs(_args(), self.dependencies)

        self.assertIs(raised_error.exception, error)
        self.assertEqual(self.recorder.names(logging.ERROR), ["configs.original_pr.fetch_failed"])

    def test_default_observer_is_silent(self) -> None:
        dependencies = ConfigsDependencies(
            git_client=self.git_client,
            current_directory=lambda: "/home/x",
        )
        configs = build_configs(_args(bp_branch_name="z" * 260), dependencies)
        self.assertEqual(len(configs.backport_pull_request.head), 250)


if __name__ == "__main__":
    unittest.main()
