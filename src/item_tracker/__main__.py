"""Start the item tracker service.

    python -m item_tracker
"""

from __future__ import annotations

from item_tracker.adapters.inbound import run_server
from item_tracker.infrastructure.container import Container


def main() -> None:
    container = Container.create()
    container.bootstrap()
    server = container.config.server
    try:
        run_server(
            container.coordinator,
            host=server.host,
            port=server.port,
            api_prefix=server.api_prefix,
        )
    finally:
        container.close()


if __name__ == "__main__":
    main()
