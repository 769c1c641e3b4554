# models/transport.py
from abc import ABC, abstractmethod

class Transport(ABC):
    """A delivery mechanism. Concrete transports only need to know how to deliver."""

    @abstractmethod
    def deliver(self):
        raise NotImplementedError()


class Ship(Transport):
    def deliver(self):
        print("delivering using ship", end="")
