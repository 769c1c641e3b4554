"""
Factory method example (entrypoint).

Builds a transport through ShipFactory and asks it to deliver.
Run with: python factory_method.py
"""
import logging

from core.logging import configure_logging
from services.transport_factory import ShipFactory, create_transport

logger = logging.getLogger("factory_method")

def main():
    configure_logging()
    ship_factory = ShipFactory()
    logger.info("Requesting transport from %s", type(ship_factory).__name__)
    ship = create_transport(ship_factory)
    ship.deliver()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
