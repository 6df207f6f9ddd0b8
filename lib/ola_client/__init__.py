from .client import OlaClient
from .config_types import ClientConfig, config_from_env, resolve_config
from .errors import (
    ApiError,
    AuthError,
    MissingCredentialError,
    NetworkError,
    OlaClientError,
    SandboxRequiredError,
    UnsupportedVerbError,
)
from .logging_ import enable_logging
from .rate_limit import RateLimit

__all__ = [
    "OlaClient",
    "ClientConfig",
    "config_from_env",
    "resolve_config",
    "RateLimit",
    "enable_logging",
    "ApiError",
    "AuthError",
    "MissingCredentialError",
    "NetworkError",
    "OlaClientError",
    "SandboxRequiredError",
    "UnsupportedVerbError",
]
