"""Tests for collection config, logging setup and response schemas."""
from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from empsearch.config import CollectionConfig, configure_logging
from empsearch.models.schemas import (
    ProbeFailure,
    ProbeSuccess,
    ProxyResponse,
    ResponseEnvelope,
)

_ENV_VARS = (
    "COLLECTION_HOST",
    "COLLECTION_NAME",
    "COLLECTION_REGION",
    "COLLECTION_SERVICE",
    "COLLECTION_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# ── CollectionConfig ─────────────────────────────────────────────────


def test_from_env_defaults(clean_env):
    config = CollectionConfig.from_env()
    assert config.host == ""
    assert config.name is None
    assert config.region == "us-east-1"
    assert config.service == "aoss"
    assert config.timeout == 10.0


def test_from_env_reads_all_vars(clean_env):
    clean_env.setenv("COLLECTION_HOST", "abc123.us-east-1.aoss.amazonaws.com")
    clean_env.setenv("COLLECTION_NAME", "employee")
    clean_env.setenv("COLLECTION_REGION", "us-west-2")
    clean_env.setenv("COLLECTION_SERVICE", "es")
    clean_env.setenv("COLLECTION_TIMEOUT", "2.5")

    config = CollectionConfig.from_env()

    assert config == CollectionConfig(
        host="abc123.us-east-1.aoss.amazonaws.com",
        name="employee",
        region="us-west-2",
        service="es",
        timeout=2.5,
    )


def test_from_env_rejects_bad_timeout(clean_env):
    clean_env.setenv("COLLECTION_TIMEOUT", "soon")
    with pytest.raises(ValidationError):
        CollectionConfig.from_env()


def test_config_is_frozen():
    config = CollectionConfig(host="h")
    with pytest.raises(ValidationError):
        config.host = "other"


def test_configure_logging_applies_level(monkeypatch):
    root = logging.getLogger()
    previous = root.level
    monkeypatch.setenv("LOG_LEVEL", "debug")
    try:
        configure_logging()
        assert root.level == logging.DEBUG
        monkeypatch.setenv("LOG_LEVEL", "nonsense")
        configure_logging()
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


# ── Envelopes ────────────────────────────────────────────────────────


def test_envelope_proxy_response_serializes_body():
    envelope = ResponseEnvelope(status=200, message="success", data="Client Build success!")

    response = envelope.proxy_response()

    assert isinstance(response, ProxyResponse)
    assert response.statusCode == 200
    assert response.headers == {"Content-Type": "application/json"}
    assert json.loads(response.body) == {
        "status": 200,
        "message": "success",
        "data": "Client Build success!",
    }


@pytest.mark.parametrize("kwargs", [
    {"status": 42, "message": "success", "data": ""},
    {"status": 200, "message": "maybe", "data": ""},
])
def test_envelope_rejects_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        ResponseEnvelope(**kwargs)


def test_success_result_envelope():
    envelope = ProbeSuccess(distribution="opensearch", number="2.11.0").to_envelope()
    assert envelope == ResponseEnvelope(status=200, message="success", data="Client Build success!")


def test_failure_result_envelope_keeps_status_200():
    envelope = ProbeFailure(error="Connection refused").to_envelope()
    assert envelope.status == 200
    assert envelope.message == "error"
    assert envelope.data == "Build failed! Connection refused"
