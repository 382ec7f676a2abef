"""Security: bearer access tokens."""

from catechesis.infrastructure.security.access_tokens import (
    AccessClaims,
    issue_access_token,
    read_access_token,
)

__all__ = ["AccessClaims", "issue_access_token", "read_access_token"]
