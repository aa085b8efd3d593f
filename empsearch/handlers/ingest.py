"""Ingest handler - echoes the inbound event back as JSON."""
from __future__ import annotations

import json
import logging

from empsearch.config import configure_logging
from empsearch.models.schemas import ProxyResponse

logger = logging.getLogger(__name__)


def handler(event, context):
    """Lambda entry point. Returns the event verbatim as the response body."""
    configure_logging()
    logger.debug("Echoing %s event", type(event).__name__)
    return ProxyResponse(statusCode=200, body=json.dumps(event)).model_dump()
