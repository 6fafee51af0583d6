FETCH_ERROR_PREFIX = "Unable to fetch original pull request"


class FetchError(RuntimeError):
    """Raised when the original pull request cannot be located, read or parsed."""


def fetch_error(details: str) -> FetchError:
    return FetchError(f"{FETCH_ERROR_PREFIX}: {details}")
