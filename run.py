#!/usr/bin/env python3
"""
AiAPI goal-tree runner.

Builds the goal-decomposition chat request for the goal given on the command
line. Set SEND_REQUEST=true to dispatch it and print the raw response body.
"""
import os
import sys
import asyncio
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from aiapi.core.config import LOG_LEVEL_FROM_ENV
from aiapi.core.logging_utils import configure_logging, recent_request_log
from aiapi.core.security import EnvCredentialStore
from aiapi.core.http_client import send_request_spec, close_http_client
from aiapi.services.requests import prepare_goal_tree_request

logger = logging.getLogger("AiAPI.Runner")


async def _send(spec):
    try:
        response = await send_request_spec(spec)
        logger.info(f"Upstream responded with HTTP {response.status_code}")
        print(response.text)
    finally:
        await close_http_client()


def main():
    """Build (and optionally send) a goal-tree request."""
    configure_logging(LOG_LEVEL_FROM_ENV)

    goal = " ".join(sys.argv[1:]).strip()
    if not goal:
        print("usage: run.py <goal>", file=sys.stderr)
        sys.exit(2)

    try:
        spec = prepare_goal_tree_request(goal, EnvCredentialStore().get_api_key())
        logger.info(f"Prepared {spec.http_method} {spec.url} ({len(spec.body or b'')} bytes)")

        if os.getenv("SEND_REQUEST", "False").lower() == "true":
            asyncio.run(_send(spec))
        else:
            print((spec.body or b"").decode("utf-8"))

    except KeyboardInterrupt:
        logger.info("Interrupted by user (Ctrl+C)")
    except Exception as e:
        logger.error(f"Failed to run goal-tree request: {e}", exc_info=True)
        for line in recent_request_log.recent():
            print(line, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
