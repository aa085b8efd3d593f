#!/usr/bin/env python3
"""
Invoke both Lambda handlers locally against a real collection.

  uv run python scripts/invoke_local.py

Reads COLLECTION_HOST (and optional COLLECTION_* / AWS_* vars) from
.env.local at the project root. AWS credentials come from the usual boto3
chain (env vars, ~/.aws, SSO).
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from empsearch.config import configure_logging  # noqa: E402
from empsearch.handlers import ingest, search  # noqa: E402
from empsearch.search.client import CollectionClient  # noqa: E402

log = logging.getLogger(__name__)

SAMPLE_EVENT = {
    "resource": "/employee/ingest",
    "path": "/employee/ingest",
    "httpMethod": "POST",
    "headers": {"Content-Type": "application/json"},
    "queryStringParameters": None,
    "body": json.dumps({"id": "e-001", "name": "Ada", "team": "search"}),
    "isBase64Encoded": False,
}


def main():
    load_dotenv(PROJECT_ROOT / ".env.local")
    configure_logging()

    log.info("Invoking ingest handler")
    print(json.dumps(ingest.handler(SAMPLE_EVENT, None), indent=2))

    if not CollectionClient.is_configured():
        log.warning("COLLECTION_HOST not set - search probe will report an error envelope")

    log.info("Invoking search handler")
    print(json.dumps(search.handler({}, None), indent=2))


if __name__ == "__main__":
    main()
