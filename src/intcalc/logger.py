"""Project-wide logger helper.

Import `logger` and use standard levels (debug/info/warning/error).  The level
comes from ``INTCALC_LOG_LEVEL`` via :pymod:`intcalc.config`.
"""

import logging

from . import config

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

logger = logging.getLogger("intcalc")
