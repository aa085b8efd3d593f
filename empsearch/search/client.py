"""Signed OpenSearch client for a serverless search collection."""
from __future__ import annotations

import logging
import os

import boto3
from opensearchpy import AWSV4SignerAuth, OpenSearch, RequestsHttpConnection

from empsearch.config import CollectionConfig

logger = logging.getLogger(__name__)

HTTPS_PORT = 443


def normalize_host(host: str) -> str:
    """Strip scheme and trailing slash: the transport wants a bare hostname."""
    host = host.strip()
    for scheme in ("https://", "http://"):
        if host.startswith(scheme):
            host = host[len(scheme):]
            break
    return host.rstrip("/")


def parse_version(info: dict) -> tuple[str | None, str | None]:
    """Extract (distribution, number) from an info payload."""
    version = info.get("version") or {}
    return version.get("distribution", "opensearch"), version.get("number")


class CollectionClient:
    """Short-lived client bound to one collection endpoint.

    Creates a fresh transport per invocation, signed with SigV4 using the
    default boto3 credential chain (the function's execution role on Lambda).
    Call ``close()`` to release the transport.
    """

    @classmethod
    def is_configured(cls) -> bool:
        """Return True if COLLECTION_HOST is set."""
        return bool(os.getenv("COLLECTION_HOST", "").strip())

    def __init__(self, config: CollectionConfig):
        self.host = normalize_host(config.host or "")
        if not self.host:
            raise ValueError("COLLECTION_HOST not set.")

        self.region = config.region
        self.service = config.service

        credentials = boto3.Session().get_credentials()
        auth = AWSV4SignerAuth(credentials, self.region, self.service)

        self.client = OpenSearch(
            hosts=[{"host": self.host, "port": HTTPS_PORT}],
            http_auth=auth,
            use_ssl=True,
            verify_certs=True,
            connection_class=RequestsHttpConnection,
            timeout=config.timeout,
        )

    def info(self) -> dict:
        """Issue the info request. Raises on transport, auth or remote errors."""
        return self.client.info()

    def close(self) -> None:
        """Release the underlying HTTP transport."""
        logger.debug("Closing transport for %s", self.host)
        self.client.close()
