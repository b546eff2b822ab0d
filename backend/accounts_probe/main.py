# accounts_probe/main.py
import asyncio
import logging
import sys

from .db import build_pool, fetch_accounts
from .logging_config import setup_logging
from .masking import mask_sensitive_values
from .models import ConnectionConfig, QueryFailure
from .output import print_result
from .settings import RunOptions, load_settings

logger = logging.getLogger(__name__)


async def run(config: ConnectionConfig, options: RunOptions) -> int:
    """Query the accounts table once and print it; returns the exit status."""
    logger.info("rejectUnauthorized %s", config.tls_verify)
    logger.debug("connection config: %s", mask_sensitive_values(config.model_dump()))

    logger.info("test connection start")
    async with build_pool(config) as pool:
        result = await fetch_accounts(pool)
    logger.info("test connection end")

    printed = print_result(result, options.output_format)
    if isinstance(result, QueryFailure):
        # legacy behaviour: a failed query still exits 0
        return 0 if options.silent_failures else 1
    logger.debug("printed %d account rows", printed)
    return 0


def main():
    setup_logging()
    # Invalid or missing settings raise here, before any connection attempt
    config, options = load_settings()
    sys.exit(asyncio.run(run(config, options)))


if __name__ == "__main__":
    main()
