"""
Logging Configuration
Sets up the 'drawingtrees' logger namespace.

Every insert re-renders the whole tree, so render messages are DEBUG and
would drown everything else. `trace_render` switches them on for the layout
module only, leaving the rest of the application at `level`.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "drawingtrees"
RENDER_LOGGER = "drawingtrees.model.tree"
TRACE_RENDER_FLAG = "--trace-render"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    trace_render: bool = False,
) -> logging.Logger:
    """
    Configures the 'drawingtrees' logger and returns it.

    Args:
        level: Logging level for the application (e.g. logging.INFO).
        log_file: Optional path to also write logs to.
        trace_render: Log every render pass (node count, root position) at DEBUG.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Setup can run again when the app is restarted in the same interpreter
    if logger.hasHandlers():
        logger.handlers.clear()

    render_logger = logging.getLogger(RENDER_LOGGER)
    render_logger.setLevel(logging.DEBUG if trace_render else logging.NOTSET)

    # handlers must let the render trace through even when `level` is higher
    handler_level = min(level, logging.DEBUG) if trace_render else level
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized (render trace {'on' if trace_render else 'off'}).")
    return logger
