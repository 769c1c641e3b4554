import pytest

from core.exceptions import TransportCreationError
from models.transport import Ship, Transport
from services.transport_factory import ShipFactory, TransportFactory, create_transport


class Truck(Transport):
    delivered = 0

    def deliver(self):
        Truck.delivered += 1
        print("delivering using truck", end="")


class TruckFactory(TransportFactory):
    def get_instance(self) -> Transport:
        return Truck()


def test_ship_delivers_exact_text(capsys):
    """Ship output is exactly the one line, no newline, nothing else."""
    Ship().deliver()
    captured = capsys.readouterr()
    assert captured.out == "delivering using ship"
    assert captured.err == ""


def test_ship_factory_builds_new_ship_each_call():
    factory = ShipFactory()
    first = factory.get_instance()
    second = factory.get_instance()
    assert isinstance(first, Ship)
    assert isinstance(second, Ship)
    # caller owns each product; nothing is shared between calls
    assert first is not second


def test_factories_are_substitutable(capsys):
    """Each factory only ever triggers its own product's behaviour."""
    Truck.delivered = 0

    create_transport(ShipFactory()).deliver()
    assert capsys.readouterr().out == "delivering using ship"
    assert Truck.delivered == 0

    create_transport(TruckFactory()).deliver()
    assert capsys.readouterr().out == "delivering using truck"
    assert Truck.delivered == 1


def test_repeated_delivery_only_repeats_output(capsys):
    ship = create_transport(ShipFactory())
    ship.deliver()
    ship.deliver()
    assert capsys.readouterr().out == "delivering using ship" * 2


def test_abstract_types_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Transport()
    with pytest.raises(TypeError):
        TransportFactory()

    class Raft(Transport):
        pass

    with pytest.raises(TypeError):
        Raft()


def test_factory_returning_none_is_fatal():
    class BrokenFactory(TransportFactory):
        def get_instance(self):
            return None

    with pytest.raises(TransportCreationError, match="returned no transport"):
        create_transport(BrokenFactory())


def test_factory_returning_wrong_type_is_fatal():
    class WrongFactory(TransportFactory):
        def get_instance(self):
            return object()

    with pytest.raises(TransportCreationError, match="expected a Transport"):
        create_transport(WrongFactory())


def test_allocation_failure_surfaces_as_creation_error():
    class ExhaustedFactory(TransportFactory):
        def get_instance(self):
            raise MemoryError()

    with pytest.raises(TransportCreationError) as excinfo:
        create_transport(ExhaustedFactory())
    assert isinstance(excinfo.value.__cause__, MemoryError)
