from application.configs.contracts import (
    BackportArgs,
    Configs,
    ConfigsDependencies,
)
from application.configs.use_case import build_configs

__all__ = [
    "BackportArgs",
    "Configs",
    "ConfigsDependencies",
    "build_configs",
]
