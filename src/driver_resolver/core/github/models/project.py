"""GitHub project identity."""

from dataclasses import dataclass

from driver_resolver.constants import GITHUB_API_BASE_URL


@dataclass(slots=True, frozen=True)
class ProjectIdentity:
    """Organization and project name of a GitHub repository.

    ``unique_key`` is the sole cache key for the project and must stay
    stable across runs.
    """

    organization: str
    project: str

    def __post_init__(self) -> None:
        if not self.organization or not self.project:
            msg = "organization and project must be non-empty"
            raise ValueError(msg)

    @property
    def project_url(self) -> str:
        """GitHub API base URL of the repository."""
        return f"{GITHUB_API_BASE_URL}/{self.organization}/{self.project}"

    @property
    def unique_key(self) -> str:
        """Cache key in the form ``organization@project``."""
        return f"{self.organization}@{self.project}"
