import pytest

from ola_client.config_types import ClientConfig
from ola_client.errors import MissingCredentialError
from ola_client.headers import build_headers


def test_build_headers_trims_values() -> None:
    headers = build_headers(ClientConfig(access_token="abc", locale=" en_US "))
    assert headers == {
        "Authorization": "Bearer abc",
        "Accept-Language": "en_US",
        "X-APP-TOKEN": None,
        "Content-Type": "application/json",
    }


def test_build_headers_strips_trailing_whitespace_in_token() -> None:
    headers = build_headers(ClientConfig(access_token="abc  "))
    assert headers["Authorization"] == "Bearer abc"


def test_build_headers_passes_app_token_through() -> None:
    headers = build_headers(ClientConfig(access_token="abc", app_token=" app-1 "))
    assert headers["X-APP-TOKEN"] == " app-1 "


@pytest.mark.parametrize("token", [None, ""])
def test_build_headers_requires_access_token(token) -> None:
    with pytest.raises(MissingCredentialError):
        build_headers(ClientConfig(access_token=token))
