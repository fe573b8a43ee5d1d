# orrery3d/utils/logger.py
# ---------------------------------------------------------------
# Shared logger for the whole package.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("Orrery3D")


logger = init_logger()
