from application.ports.git_client import GitClient

__all__ = ["GitClient"]
