from __future__ import annotations

import base64
from dataclasses import FrozenInstanceError

import pytest

from maps_api_client.config import MapsClientConfig, TransportConfig


def test_config_requires_credentials():
    with pytest.raises(ValueError, match="API Key or Maps for Work credentials missing"):
        MapsClientConfig().validate()


def test_config_accepts_api_key():
    MapsClientConfig(api_key="key").validate()


def test_config_accepts_client_id_with_secret():
    secret = base64.urlsafe_b64encode(b"signing-key").decode("ascii")
    cfg = MapsClientConfig(client_id="gme-test", signing_secret=secret)
    cfg.validate()
    assert cfg.has_work_credentials is True


def test_config_client_id_without_secret_is_incomplete():
    cfg = MapsClientConfig(client_id="gme-test")
    assert cfg.has_work_credentials is False
    with pytest.raises(ValueError):
        cfg.validate()


def test_config_rejects_malformed_signing_secret():
    with pytest.raises(ValueError, match="signing secret"):
        MapsClientConfig(client_id="gme-test", signing_secret="abc").validate()


def test_config_validate_rejects_empty_base_url():
    with pytest.raises(ValueError):
        MapsClientConfig(api_key="key", base_url="").validate()


def test_config_base_url_defaults_to_each_endpoint_host():
    cfg = MapsClientConfig(api_key="key")
    assert cfg.base_url is None
    cfg.validate()


def test_config_is_immutable():
    cfg = MapsClientConfig(api_key="key")
    with pytest.raises(FrozenInstanceError):
        cfg.api_key = "other"  # type: ignore[misc]


def test_config_repr_hides_secrets():
    cfg = MapsClientConfig(api_key="super-secret-key", signing_secret="c2VjcmV0")
    assert "super-secret-key" not in repr(cfg)
    assert "c2VjcmV0" not in repr(cfg)


@pytest.mark.parametrize(
    "field",
    [
        "timeout_connect_seconds",
        "timeout_read_seconds",
        "timeout_write_seconds",
        "timeout_pool_seconds",
    ],
)
def test_config_validate_rejects_non_positive_timeouts(field):
    cfg = MapsClientConfig(api_key="key", transport=TransportConfig(**{field: 0.0}))
    with pytest.raises(ValueError, match=f"transport.{field} must be > 0"):
        cfg.validate()
