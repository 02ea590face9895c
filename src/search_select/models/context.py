"""
Current-user context passed explicitly to record sources.

The bill forms used to read the role and token from browser storage at
mount time. Here the context is a plain value handed to whoever builds the
record source, so nothing reads ambient state.
"""

from dataclasses import dataclass

from search_select import config


@dataclass(frozen=True, slots=True)
class UserContext:
    """
    Identity of the user a search-select control works on behalf of.

    Attributes:
        user_id: Backend identifier of the user, if known.
        role: Role name, e.g. "admin", "engineer" or "driver".
        token: Bearer token sent with backend requests.
    """

    user_id: str | None = None
    role: str = "admin"
    token: str | None = None

    def auth_headers(self) -> dict[str, str]:
        """Return the Authorization header for the backend, if any."""
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    @classmethod
    def from_env(cls) -> "UserContext":
        """Build the context from the configured token and role."""
        return cls(role=config.USER_ROLE, token=config.AUTH_TOKEN)
