"""HTTP layer package"""

from infrastructure.http.configs_factory import build_configs_dependencies, build_github_client
from infrastructure.http.configs_service import execute_configs_resolution
from infrastructure.http.schemas import BackportConfigsRequest, BackportConfigsResponse

__all__ = [
    "BackportConfigsRequest",
    "BackportConfigsResponse",
    "build_configs_dependencies",
    "build_github_client",
    "execute_configs_resolution",
]
