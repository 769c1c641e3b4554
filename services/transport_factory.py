# services/transport_factory.py
import logging
from abc import ABC, abstractmethod

from core.exceptions import TransportCreationError
from models.transport import Ship, Transport

logger = logging.getLogger(__name__)

class TransportFactory(ABC):
    """
    Creator side of the factory method.

    Callers hold a TransportFactory and only ever see the Transport it returns,
    so a new kind of transport is one new Transport subclass plus one new
    factory subclass. The returned object belongs to the caller.
    """

    @abstractmethod
    def get_instance(self) -> Transport:
        raise NotImplementedError()


class ShipFactory(TransportFactory):
    def get_instance(self) -> Transport:
        return Ship()


def create_transport(factory: TransportFactory) -> Transport:
    """
    Ask `factory` for a new transport and make sure it actually produced one.

    Raises TransportCreationError if the factory returns None or something that
    is not a Transport, or if construction ran out of memory.
    """
    name = type(factory).__name__
    try:
        transport = factory.get_instance()
    except MemoryError as e:
        logger.error("%s ran out of memory building a transport", name)
        raise TransportCreationError(f"{name} could not allocate a transport") from e

    if transport is None:
        raise TransportCreationError(f"{name} returned no transport")
    if not isinstance(transport, Transport):
        raise TransportCreationError(
            f"{name} returned {type(transport).__name__}, expected a Transport"
        )
    logger.debug("%s created %s", name, type(transport).__name__)
    return transport
