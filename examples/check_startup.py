"""
Resolve startup options the way ``licgate app`` does, without serving.

Usage: python examples/check_startup.py [config.json]
"""

import logging
import sys
from pathlib import Path

from licgate import bootstrap
from licgate.common.exceptions import LicgateError


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    try:
        options = bootstrap(config_path)
    except LicgateError as err:
        logger.error("Startup refused: %s", err.message)  # noqa: TRY400
        sys.exit(1)

    logger.info("Would listen on %s:%s", options.host, options.port)
    logger.info("Authentication: %s", "enabled" if options.auth_enabled else "disabled")
    logger.info("License: %s", options.license_outcome.status.value)


if __name__ == "__main__":
    main()
