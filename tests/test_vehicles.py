from unittest.mock import MagicMock

import pytest

from internal.controllers import DemoController
from repositories import DemoRepository
from services import DemoService
from vehicles import Bike, Car, Cycle, IVehicle, Traveller


@pytest.mark.parametrize(
    "vehicle_cls, message",
    [
        (Car, "Car is moving"),
        (Bike, "Bike is moving"),
        (Cycle, "Cycle is moving"),
    ],
)
def test_move_prints_fixed_message(capsys, vehicle_cls, message):
    vehicle_cls().move()

    captured = capsys.readouterr()
    assert captured.out == message + "\n"


def test_vehicle_interface_is_abstract():
    with pytest.raises(TypeError):
        IVehicle()


def test_traveller_delegates_to_its_vehicle_every_time():
    vehicle = MagicMock(spec=IVehicle)
    traveller = Traveller(vehicle)

    traveller.start_journey()
    traveller.start_journey()

    assert vehicle.move.call_count == 2
    assert traveller.vehicle is vehicle


def test_traveller_journey_output(capsys):
    Traveller(Bike()).start_journey()

    assert capsys.readouterr().out == "Bike is moving\n"


def test_traveller_requires_a_vehicle():
    with pytest.raises(ValueError):
        Traveller(None)


def test_traveller_vehicle_cannot_be_reassigned():
    traveller = Traveller(Car())

    with pytest.raises(AttributeError):
        traveller.vehicle = Bike()


def test_layer_greetings():
    assert DemoController().hello() == "Hello from DemoController"
    assert DemoService().hello() == "Hello from DemoService"
    assert DemoRepository().hello() == "Hello from DemoRepository"
