"""Domain entities."""

from catechesis.domain.entities.principal import Principal, validate_role_tenant

__all__ = ["Principal", "validate_role_tenant"]
