"""User administration use cases."""

from catechesis.application.use_cases.users.user_operations import UserOperations

__all__ = ["UserOperations"]
