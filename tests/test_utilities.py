import pytest

from halfstack.resources import (
    InsufficientBudgetError,
    InsufficientResourcesError,
    ResourceManager,
)
from halfstack.satisfaction import Satisfaction
from halfstack.utilities import (
    ManageSewage,
    ManageWaste,
    SupplyPower,
    SupplyWater,
    UtilitiesDepartment,
)


class FakePlant:
    def __init__(self, kind):
        self.kind = kind
        self.generated = 0

    def generate(self):
        self.generated += 1


class FakeCitizen:
    def __init__(self, satisfaction):
        self.satisfaction = satisfaction


@pytest.fixture(autouse=True)
def fresh_state():
    ResourceManager.reset_instance()
    UtilitiesDepartment.reset_instance()
    yield
    ResourceManager.reset_instance()
    UtilitiesDepartment.reset_instance()


def test_singleton_same_instance():
    first = UtilitiesDepartment.instance()
    second = UtilitiesDepartment.instance()
    assert first is second


def test_reset_instance_gives_new_department():
    first = UtilitiesDepartment.instance()
    UtilitiesDepartment.reset_instance()
    assert UtilitiesDepartment.instance() is not first
    assert UtilitiesDepartment.instance().plants == ()


def test_add_plant_pays_cost(capsys):
    department = UtilitiesDepartment.instance()
    manager = ResourceManager.instance()
    plant = FakePlant("Water")
    department.add_plant(plant)
    assert department.plants == (plant,)
    assert (manager.water, manager.energy) == (20, 20)
    assert (manager.wood, manager.steel, manager.materials) == (350, 350, 170)
    assert manager.budget == 10200
    assert "Plant successfully built." in capsys.readouterr().out


def test_add_plant_insufficient_resources_leaves_stock():
    department = UtilitiesDepartment.instance()
    manager = ResourceManager.instance()
    manager.decrease_resources(0, 0, 380, 0, 0)
    with pytest.raises(InsufficientResourcesError):
        department.add_plant(FakePlant("Power"))
    assert department.plants == ()
    assert manager.wood == 20
    assert manager.budget == 10400


def test_add_plant_insufficient_budget_rolls_back():
    department = UtilitiesDepartment.instance()
    manager = ResourceManager.instance()
    manager.decrease_budget(10300)
    with pytest.raises(InsufficientBudgetError):
        department.add_plant(FakePlant("Power"))
    assert department.plants == ()
    assert (manager.wood, manager.steel, manager.materials) == (400, 400, 200)
    assert manager.budget == 100


def test_plant_totals():
    department = UtilitiesDepartment.instance()
    for kind in ("Water", "Power", "Water", "Other"):
        department.add_plant(FakePlant(kind))
    assert department.total_water_plants() == 2
    assert department.total_power_plants() == 1


def test_supply_water_runs_only_water_plants(capsys):
    department = UtilitiesDepartment.instance()
    water, power = FakePlant("Water"), FakePlant("Power")
    department.add_plant(water)
    department.add_plant(power)
    capsys.readouterr()
    department.supply_water()
    assert (water.generated, power.generated) == (1, 0)
    assert capsys.readouterr().out == "The utilities department is supplying water.\n"


def test_supply_energy_runs_only_power_plants(capsys):
    department = UtilitiesDepartment.instance()
    water, power = FakePlant("Water"), FakePlant("Power")
    department.add_plant(water)
    department.add_plant(power)
    capsys.readouterr()
    department.supply_energy()
    assert (water.generated, power.generated) == (0, 1)
    assert capsys.readouterr().out == "The utilities department is supplying power.\n"


def test_manage_waste_raises_satisfaction(capsys):
    department = UtilitiesDepartment.instance()
    citizens = [
        FakeCitizen(Satisfaction.UNSATISFIED),
        FakeCitizen(Satisfaction.NEUTRAL),
        FakeCitizen(Satisfaction.SATISFIED),
    ]
    department.citizens.extend(citizens)
    department.manage_waste()
    assert [c.satisfaction for c in citizens] == [
        Satisfaction.NEUTRAL,
        Satisfaction.SATISFIED,
        Satisfaction.SATISFIED,
    ]
    assert capsys.readouterr().out == "The utilities department is managing waste.\n"


def test_manage_sewage_message(capsys):
    UtilitiesDepartment.instance().manage_sewage()
    assert capsys.readouterr().out == "The utilities department is managing sewage.\n"


def test_perform_routine_runs_all_services_in_order(capsys):
    department = UtilitiesDepartment.instance()
    water, power = FakePlant("Water"), FakePlant("Power")
    department.add_plant(water)
    department.add_plant(power)
    citizen = FakeCitizen(Satisfaction.NEUTRAL)
    department.citizens.append(citizen)
    capsys.readouterr()
    department.perform_routine()
    assert (water.generated, power.generated) == (1, 1)
    assert citizen.satisfaction is Satisfaction.SATISFIED
    assert capsys.readouterr().out.splitlines() == [
        "The utilities department is supplying water.",
        "The utilities department is supplying power.",
        "The utilities department is managing waste.",
        "The utilities department is managing sewage.",
    ]


def test_command_without_department_uses_shared_instance(capsys):
    SupplyWater().execute()
    assert capsys.readouterr().out == "The utilities department is supplying water.\n"


def test_supply_water_status():
    command = SupplyWater()
    command.water = 10
    assert command.status is True
    command.water = 0
    assert command.status is False


def test_supply_power_status():
    command = SupplyPower()
    command.energy = 20
    assert command.status is True
    command.energy = 0
    assert command.status is False


def test_manage_waste_status():
    command = ManageWaste()
    command.open = True
    assert command.status is True
    command.open = False
    assert command.status is False


def test_manage_sewage_status():
    command = ManageSewage()
    command.open = True
    assert command.status is True
    command.open = False
    assert command.status is False