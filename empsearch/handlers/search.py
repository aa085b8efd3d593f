"""Search handler - verifies connectivity to the search collection."""
from __future__ import annotations

import logging
from typing import Any, Callable

from pydantic import ValidationError

from empsearch.config import CollectionConfig, configure_logging
from empsearch.models.schemas import ProbeFailure, ProbeResult, ProbeSuccess
from empsearch.search.client import CollectionClient, parse_version

logger = logging.getLogger(__name__)

ClientFactory = Callable[[CollectionConfig], CollectionClient]


def describe_error(exc: BaseException) -> str:
    """Exception message, or its type name when the message is empty."""
    return str(exc) or type(exc).__name__


def check_connectivity(
    config: CollectionConfig,
    client_factory: ClientFactory = CollectionClient,
    log: logging.Logger | None = None,
) -> ProbeResult:
    """Build a client for the collection and issue a single info call.

    Args:
        config: Collection endpoint, region and signing service
        client_factory: Builds the client from config (swapped out in tests)
        log: Logger to report to; defaults to this module's logger

    Returns:
        ProbeSuccess with the reported version, or ProbeFailure carrying
        the exception message. Never raises for client or request errors.
    """
    log = log or logger
    log.info("COLLECTION_HOST: %s", config.host)

    client = None
    try:
        client = client_factory(config)
        info = client.info()
        distribution, number = parse_version(info)
        log.info("Client Build success! %s: %s", distribution, number)
        return ProbeSuccess(distribution=distribution, number=number)
    except Exception as exc:
        log.exception("Error: %s", exc)
        return ProbeFailure(error=describe_error(exc))
    finally:
        if client is not None:
            try:
                client.close()
            except Exception:
                log.exception("Failed closing transport for %s", config.host)


class ProbeHandler:
    """Connectivity probe bound to an explicit config and logger."""

    def __init__(
        self,
        config: CollectionConfig,
        log: logging.Logger | None = None,
        client_factory: ClientFactory = CollectionClient,
    ):
        self.config = config
        self.log = log or logger
        self.client_factory = client_factory

    def handle(self, event: Any, context: Any) -> dict:
        """Run the probe; the event is not inspected."""
        result = check_connectivity(self.config, self.client_factory, self.log)
        return result.to_envelope().proxy_response().model_dump()

    __call__ = handle


def handler(event, context):
    """Lambda entry point."""
    configure_logging()
    try:
        config = CollectionConfig.from_env()
    except ValidationError as exc:
        logger.exception("Invalid collection config")
        return ProbeFailure(error=describe_error(exc)).to_envelope().proxy_response().model_dump()
    return ProbeHandler(config, client_factory=CollectionClient).handle(event, context)
