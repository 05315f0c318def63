# (c) Copyright IBM Corp. 2025

import logging
import os

logger = None


def get_standard_logger() -> logging.Logger:
    """
    Retrieves and configures a standard logger for the lsfinder package

    @return: Logger
    """
    standard_logger = logging.getLogger("lsfinder")

    ch = logging.StreamHandler()
    f = logging.Formatter(
        "%(asctime)s: %(process)d %(levelname)s %(name)s: %(message)s"
    )
    ch.setFormatter(f)
    standard_logger.addHandler(ch)
    if "LSFINDER_DEBUG" in os.environ:
        standard_logger.setLevel(logging.DEBUG)
    else:
        standard_logger.setLevel(logging.WARN)
    return standard_logger


logger = get_standard_logger()
