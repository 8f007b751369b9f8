import threading

from assoclist import logconfig

_INIT_LOCK = threading.Lock()
_is_initialized = False


def init(force_reload: bool = False) -> None:
    """
    Configure logging for assoclist.

    Importing assoclist never touches logging configuration. Applications which want
    the ``ASSOCLIST_LOGGING_LEVEL`` and ``ASSOCLIST_USE_DEV_LOGGER`` environment
    variables honored should call ``init()`` once at startup.

    ``init()`` may be called more than once. Only the first invocation will configure
    the ``assoclist`` logger unless ``force_reload=True``.
    """
    global _is_initialized

    with _INIT_LOCK:
        if _is_initialized and not force_reload:
            return

        logconfig.configure_root_logger()
        _is_initialized = True
