"""
Singleton example (entrypoint).

Grabs the shared instance twice, writes through each handle and prints the
handle of both to show they are the same object.
Run with: python singleton_demo.py
"""
import logging

from core.logging import configure_logging
from core.singleton import Singleton

logger = logging.getLogger("singleton_demo")

def main():
    configure_logging()

    obj = Singleton.get_instance()
    obj.set_value(4, 3)
    obj.print_value()

    obj2 = Singleton.get_instance()
    obj2.set_value(1, 2)
    obj2.print_value()

    print(hex(id(obj)))
    print(hex(id(obj2)))
    logger.info("same handle: %s", obj is obj2)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
