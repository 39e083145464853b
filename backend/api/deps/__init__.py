"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_account_service,
    get_course_service,
    get_database,
    get_password_hasher,
    get_settings_dependency,
    get_token_service,
    require_token,
)

__all__ = [
    "get_account_service",
    "get_course_service",
    "get_database",
    "get_password_hasher",
    "get_settings_dependency",
    "get_token_service",
    "require_token",
]
