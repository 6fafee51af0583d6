from application.configs.contracts import BackportArgs, Configs, ConfigsDependencies
from application.configs.steps import (
    build_backport_pull_request,
    fetch_original_pull_request,
    resolve_git_identity,
)
from domain.configs import resolve_folder


def build_configs(args: BackportArgs, dependencies: ConfigsDependencies) -> Configs:
    original_pull_request = fetch_original_pull_request(args, dependencies)

    return Configs(
        dry_run=bool(args.dry_run),
        auth=args.auth,
        folder=resolve_folder(args.folder, dependencies.current_directory()),
        target_branch=args.target_branch,
        merge_strategy=args.strategy,
        merge_strategy_option=args.strategy_option,
        original_pull_request=original_pull_request,
        backport_pull_request=build_backport_pull_request(args, original_pull_request, dependencies),
        git=resolve_git_identity(args, dependencies),
    )
