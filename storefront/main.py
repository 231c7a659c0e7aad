"""Entry point for the mobile order storefront."""

from __future__ import annotations

import logging

from storefront.logs import configure_logging
from storefront.storefront_app import StorefrontApp
from storefront.store import RemoteStore, UnavailableStore, create_store, resolve_backend

logger = logging.getLogger(__name__)


def build_store(backend: str | None = None) -> RemoteStore:
    """
    Create the configured store.

    A backend that fails to initialize does not stop the app: it is replaced
    by an `UnavailableStore`, so every screen shows its error state instead.
    Unknown backend names are still rejected.
    """
    name = resolve_backend(backend)
    try:
        store = create_store(name)
    except ValueError:
        raise
    except Exception as exc:
        logger.exception("backend_init_failed backend=%s", name)
        return UnavailableStore(exc)
    logger.info("backend_ready backend=%s", name)
    return store


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    StorefrontApp(build_store()).run()


if __name__ == "__main__":
    main()
