import pytest

from core import (
    AmbiguousResolutionError,
    CircularDependencyError,
    Container,
    NotFoundError,
    RegistrationError,
)
from vehicles import Bike, Car, Cycle, IVehicle


class TestRegisterAndResolve:
    """Resolution by (type, qualifier) key."""

    def test_resolve_returns_registered_instance(self):
        car = Car()
        Container.register(Car, car)

        assert Container.resolve(Car) is car

    def test_resolve_by_interface_with_single_implementer(self):
        bike = Bike()
        Container.register(Bike, bike)

        assert Container.resolve(IVehicle) is bike

    def test_qualifier_selects_one_of_several_implementers(self):
        car, bike, cycle = Car(), Bike(), Cycle()
        Container.register(Car, car, qualifier="car")
        Container.register(Bike, bike)
        Container.register(Cycle, cycle)

        assert Container.resolve(IVehicle, "car") is car
        # Deterministic across calls
        assert Container.resolve(IVehicle, "car") is car

    def test_every_registered_key_resolves_to_its_own_instance(self):
        entries = [
            (Car, "car", Car()),
            (Car, None, Car()),
            (Bike, None, Bike()),
            (Cycle, "cycle", Cycle()),
        ]
        for interface, qualifier, instance in entries:
            Container.register(interface, instance, qualifier=qualifier)

        for interface, qualifier, instance in entries:
            assert Container.resolve(interface, qualifier) is instance

    def test_unregistered_type_raises_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            Container.resolve(Car)

        assert exc_info.value.interface is Car
        assert exc_info.value.qualifier is None
        assert "Car" in str(exc_info.value)

    def test_unknown_qualifier_raises_not_found(self):
        Container.register(Car, Car(), qualifier="car")

        with pytest.raises(NotFoundError) as exc_info:
            Container.resolve(IVehicle, "plane")

        assert exc_info.value.qualifier == "plane"
        assert "IVehicle[qualifier='plane']" in str(exc_info.value)

    def test_several_implementers_without_qualifier_is_ambiguous(self):
        Container.register(Car, Car(), qualifier="car")
        Container.register(Bike, Bike())
        Container.register(Cycle, Cycle())

        with pytest.raises(AmbiguousResolutionError) as exc_info:
            Container.resolve(IVehicle)

        assert exc_info.value.candidates == [Car, Bike, Cycle]
        assert "IVehicle" in str(exc_info.value)

    def test_same_type_under_two_qualifiers_needs_a_qualifier(self):
        first, second = Car(), Car()
        Container.register(Car, first, qualifier="first")
        Container.register(Car, second, qualifier="second")

        assert Container.resolve(Car, "second") is second
        with pytest.raises(AmbiguousResolutionError):
            Container.resolve(Car)

    def test_type_and_subclass_without_qualifier_is_ambiguous(self):
        class SportsCar(Car):
            pass

        car, sports_car = Car(), SportsCar()
        Container.register(Car, car, qualifier="car")
        Container.register(SportsCar, sports_car)

        with pytest.raises(AmbiguousResolutionError) as exc_info:
            Container.resolve(Car)

        assert exc_info.value.candidates == [Car, SportsCar]
        assert Container.resolve(Car, "car") is car
        assert Container.resolve(SportsCar) is sports_car

    def test_duplicate_key_is_rejected(self):
        Container.register(Car, Car(), qualifier="car")

        with pytest.raises(RegistrationError):
            Container.register(Car, Car(), qualifier="car")
        with pytest.raises(RegistrationError):
            Container.register_factory(Car, Car, qualifier="car")

    def test_none_instance_is_rejected(self):
        with pytest.raises(RegistrationError):
            Container.register(Car, None)

    def test_non_class_key_is_rejected(self):
        Container.register(Bike, Bike())

        with pytest.raises(RegistrationError) as exc_info:
            Container.register("vehicle", Car())
        assert "interface must be a class" in str(exc_info.value)
        with pytest.raises(RegistrationError):
            Container.register_factory("vehicle", Car)

        # The registry is left usable
        assert isinstance(Container.resolve(IVehicle), Bike)
        assert [r.interface for r in Container.registrations()] == ["Bike"]


class TestFactories:
    """Singleton factories."""

    def test_factory_runs_once(self):
        calls = []

        def make_car():
            calls.append(1)
            return Car()

        Container.register_factory(Car, make_car)

        first = Container.resolve(Car)
        second = Container.resolve(Car)

        assert first is second
        assert len(calls) == 1

    def test_factory_is_lazy_until_instantiate_all(self):
        calls = []
        Container.register_factory(Bike, lambda: calls.append(1) or Bike())

        assert calls == []
        assert Container.instantiate_all() == 1
        assert calls == [1]
        assert Container.registrations()[0].instantiated is True

    def test_non_callable_factory_is_rejected(self):
        with pytest.raises(RegistrationError):
            Container.register_factory(Car, "not a factory")

    def test_circular_factories_are_detected(self):
        class A:
            pass

        class B:
            pass

        Container.register_factory(A, lambda: Container.resolve(B))
        Container.register_factory(B, lambda: Container.resolve(A))

        with pytest.raises(CircularDependencyError) as exc_info:
            Container.resolve(A)

        assert exc_info.value.chain == ["A", "B", "A"]

        # The failed build leaves nothing behind
        Container.clear()
        Container.register_factory(A, A)
        assert isinstance(Container.resolve(A), A)

    def test_factory_failure_propagates_and_can_retry(self):
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("boom")
            return Cycle()

        Container.register_factory(Cycle, flaky)

        with pytest.raises(RuntimeError):
            Container.resolve(Cycle)
        assert Container.registrations()[0].instantiated is False

        assert isinstance(Container.resolve(Cycle), Cycle)


class TestRegistrations:
    def test_registrations_keep_registration_order(self):
        Container.register(Car, Car(), qualifier="car")
        Container.register_factory(Bike, Bike, stereotype="component")

        registrations = Container.registrations()

        assert [r.interface for r in registrations] == ["Car", "Bike"]
        assert registrations[0].qualifier == "car"
        assert registrations[0].instantiated is True
        assert registrations[1].stereotype == "component"
        assert registrations[1].instantiated is False

    def test_is_registered_uses_exact_key(self):
        Container.register(Car, Car(), qualifier="car")

        assert Container.is_registered(Car, "car")
        assert not Container.is_registered(Car)
        assert not Container.is_registered(IVehicle, "car")

    def test_clear_empties_registry(self):
        Container.register(Car, Car())
        Container.clear()

        assert Container.registrations() == []
        with pytest.raises(NotFoundError):
            Container.resolve(Car)
