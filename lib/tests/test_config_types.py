from dataclasses import FrozenInstanceError, asdict

import pytest

from ola_client import config_types
from ola_client.config_types import ClientConfig, config_from_env, resolve_config


def test_resolve_config_defaults() -> None:
    cfg = resolve_config()
    assert cfg == ClientConfig(
        access_token=None,
        server_token=None,
        use_sandbox=False,
        version="v1",
        locale="en_US",
        app_token=None,
    )


def test_resolve_config_partial_override_keeps_other_defaults() -> None:
    cfg = resolve_config({"access_token": "abc", "use_sandbox": True})
    assert cfg.access_token == "abc"
    assert cfg.use_sandbox is True
    assert cfg.version == "v1"
    assert cfg.locale == "en_US"


def test_resolve_config_drops_unknown_keys() -> None:
    cfg = resolve_config({"locale": "hi_IN", "region": "south", "retries": 3})
    assert cfg.locale == "hi_IN"
    assert set(asdict(cfg)) == {
        "access_token",
        "server_token",
        "use_sandbox",
        "version",
        "locale",
        "app_token",
    }


def test_resolve_config_accepts_camel_case_keys() -> None:
    cfg = resolve_config({"accessToken": "t", "useSandbox": True, "apiVersion": "", "appToken": "app"})
    assert cfg.access_token == "t"
    assert cfg.use_sandbox is True
    assert cfg.version == ""
    assert cfg.app_token == "app"


def test_resolve_config_allows_empty_tokens() -> None:
    cfg = resolve_config({"access_token": "", "server_token": None})
    assert cfg.access_token == ""


def test_resolve_config_passes_client_config_through() -> None:
    cfg = ClientConfig(access_token="x")
    assert resolve_config(cfg) is cfg


def test_client_config_is_frozen() -> None:
    cfg = resolve_config()
    with pytest.raises(FrozenInstanceError):
        cfg.access_token = "late"  # type: ignore[misc]


def test_config_from_env_reads_known_variables() -> None:
    env = {
        config_types.ENV_ACCESS_TOKEN: "env-token",
        config_types.ENV_APP_TOKEN: "env-app",
        config_types.ENV_USE_SANDBOX: "Yes",
        config_types.ENV_API_VERSION: "/v2/",
        config_types.ENV_LOCALE: "en_IN",
    }
    cfg = config_from_env(env)
    assert cfg.access_token == "env-token"
    assert cfg.app_token == "env-app"
    assert cfg.use_sandbox is True
    assert cfg.version == "v2"
    assert cfg.locale == "en_IN"
    assert cfg.server_token is None


def test_config_from_env_overrides_win(monkeypatch) -> None:
    monkeypatch.setenv(config_types.ENV_ACCESS_TOKEN, "env-token")
    monkeypatch.setenv(config_types.ENV_USE_SANDBOX, "0")
    cfg = config_from_env(access_token="explicit", unknown="ignored")
    assert cfg.access_token == "explicit"
    assert cfg.use_sandbox is False
