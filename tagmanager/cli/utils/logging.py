import logging
import sys


logger = logging.getLogger("tagmanager")

_HANDLER_NAME = "tagmanager-cli"


def configure_logging(debug: bool):
    """
    Send tag-manager log records to stdout.

    Plain messages by default; with debug, DEBUG records are shown too and
    prefixed with their level and logger name.
    """
    # Replace the handler from a previous call; its stream may be gone
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if debug:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
