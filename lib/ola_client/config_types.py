from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

ENV_ACCESS_TOKEN = "OLA_ACCESS_TOKEN"
ENV_SERVER_TOKEN = "OLA_SERVER_TOKEN"
ENV_APP_TOKEN = "OLA_APP_TOKEN"
ENV_USE_SANDBOX = "OLA_USE_SANDBOX"
ENV_API_VERSION = "OLA_API_VERSION"
ENV_LOCALE = "OLA_LOCALE"

# camelCase spellings and the api_version alias accepted from callers
_ALIASES = {
    "accessToken": "access_token",
    "serverToken": "server_token",
    "useSandbox": "use_sandbox",
    "apiVersion": "version",
    "api_version": "version",
    "appToken": "app_token",
}


@dataclass(frozen=True)
class ClientConfig:
    access_token: str | None = None
    server_token: str | None = None
    use_sandbox: bool = False
    version: str = "v1"
    locale: str = "en_US"
    app_token: str | None = None


_FIELD_NAMES = frozenset(f.name for f in fields(ClientConfig))


def _recognized(configuration: Mapping[str, Any]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key, value in configuration.items():
        name = _ALIASES.get(key, key)
        if name in _FIELD_NAMES:
            values[name] = value
    return values


def resolve_config(configuration: Mapping[str, Any] | ClientConfig | None = None) -> ClientConfig:
    """Merge ``configuration`` over the defaults.

    Recognized keys override their default, missing keys keep it and any
    other key is dropped without complaint. No value is validated here;
    a missing access token only fails once a request is built.
    """
    if configuration is None:
        return ClientConfig()
    if isinstance(configuration, ClientConfig):
        return configuration
    return ClientConfig(**_recognized(configuration))


def merge_config(cfg: ClientConfig, overrides: Mapping[str, Any]) -> ClientConfig:
    changes = _recognized(overrides)
    return replace(cfg, **changes) if changes else cfg


def _env_flag(raw: str | None) -> bool:
    return (raw or "").strip().lower() in {"1", "true", "yes", "on"}


def config_from_env(environ: Mapping[str, str] | None = None, **overrides: Any) -> ClientConfig:
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    if env.get(ENV_ACCESS_TOKEN):
        values["access_token"] = env[ENV_ACCESS_TOKEN]
    if env.get(ENV_SERVER_TOKEN):
        values["server_token"] = env[ENV_SERVER_TOKEN]
    if env.get(ENV_APP_TOKEN):
        values["app_token"] = env[ENV_APP_TOKEN]
    if ENV_USE_SANDBOX in env:
        values["use_sandbox"] = _env_flag(env[ENV_USE_SANDBOX])
    if ENV_API_VERSION in env:
        values["version"] = env[ENV_API_VERSION].strip().strip("/")
    if env.get(ENV_LOCALE):
        values["locale"] = env[ENV_LOCALE]
    return merge_config(resolve_config(values), overrides)
