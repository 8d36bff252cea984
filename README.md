# halfstack

This package is the core of a small city-builder simulation. One shared
manager holds the city's resources and budget. The transport and utilities
departments draw on it to build transport and plants. Waste management raises
how satisfied the citizens are.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `halfstack.resources`

`ResourceManager` stores the city's `water`, `energy`, `wood`, `steel`,
`materials` and `budget`. A new manager starts with these values:

| Attribute | Starting value |
|-----------|----------------|
| `water` | 20 |
| `energy` | 20 |
| `wood` | 400 |
| `steel` | 400 |
| `materials` | 200 |
| `budget` | 10400.0 |

- `ResourceManager.instance()` returns the shared manager and creates it on
  first use.
- `ResourceManager.reset_instance()` drops the shared manager. The next call to
  `instance()` then starts from the values above.
- `decrease_resources(water, energy, wood, steel, materials)` takes every
  amount or none of them. If any level would fall below zero it raises
  `InsufficientResourcesError`.
- `decrease_budget(money)` raises `InsufficientBudgetError` if the budget would
  fall below zero. In that case the budget is not changed.
- `increase_resources(...)` and `increase_budget(money)` add to the stock.

### `halfstack.satisfaction`

`Satisfaction` is an enum with the members `UNSATISFIED`, `NEUTRAL` and
`SATISFIED`. Its `status` property gives the display name, for example
`"Neutral"`.

- `raised()` moves one level up.
- `lowered()` moves one level down.

Both stop at the ends of the scale.

### `halfstack.transportation`

`Transportation` has a `kind`, an `is_open` flag, and the methods `open()` and
`close()`. A transport starts closed. The package provides these transport
modes:

- `Airport`
- `Road`
- `Railway`
- `Trail`

`Trail` wraps a `Pathway`. `open()` and `close()` on the trail call the
pathway's `clear()` and `block()`.

### `halfstack.transport_commands`

`TransportCommand` is the abstract command. It has `execute(transport)` and a
`status` property. There are two concrete commands:

- `OpenBusiness` opens the transport it is given.
- `CloseBusiness` closes the transport it is given.

The `status` of each command reports its own `open` or `close` flag.

### `halfstack.transport_department`

`TransportDepartment` is shared through `instance()` and `reset_instance()`.

`add_transport(transport)` pays the build cost from the shared
`ResourceManager`. These are the costs:

| Kind | Water | Energy | Wood | Steel | Materials | Budget |
|---------|----|----|-----|-----|-----|-----|
| Airport | 10 | 50 | 500 | 500 | 500 | 500 |
| Road | 10 | 10 | 100 | 100 | 100 | 100 |
| Railway | 10 | 20 | 200 | 200 | 200 | 200 |

A transport of any other kind, such as `Trail`, is added at no cost.

`add_transport` can fail in these ways:

- It raises `TransportError` if the city already has `MAX_AIRPORTS` (8)
  airports.
- It raises `TransportError` if the same transport object is already present.
- It raises `InsufficientResourcesError` or `InsufficientBudgetError` if the
  city cannot pay. A failed payment leaves the stock unchanged.

On success it prints `"<kind> successfully built."`.

The department has these other members:

- `remove_transport(transport)`. It does nothing if the transport is absent.
- `open_transport()` and `close_transport()`, which run the open or close
  command on every transport.
- The counts `total_airports()`, `total_roads()` and `total_railways()`.
- The `transports` tuple.

### `halfstack.utilities`

`UtilitiesDepartment` is shared through `instance()` and `reset_instance()`.

`add_plant(plant)` charges resources of (0, 0, 50, 50, 30) and a budget of 200.
If the city cannot pay, it raises the same errors as above and rolls the
payment back. A plant is any object that has a `kind` attribute (`"Water"` or
`"Power"`) and a `generate()` method.

`perform_routine()` runs the department's four `commands` in this order:

1. `SupplyWater` calls `generate()` on every water plant.
2. `SupplyPower` calls `generate()` on every power plant.
3. `ManageWaste` raises the `satisfaction` of every object in the
   department's `citizens` list by one level.
4. `ManageSewage` increments `sewage_cycles`.

Each service also prints a line saying what it is doing.

`total_water_plants()` and `total_power_plants()` count the plants.

## Example

```python
from halfstack.resources import ResourceManager
from halfstack.transport_department import TransportDepartment
from halfstack.transportation import Road

rm = ResourceManager.instance()
dept = TransportDepartment.instance()

road = Road()
dept.add_transport(road)   # prints "Road successfully built."
dept.open_transport()
print(road.is_open, dept.total_roads(), rm.budget)   # True 1 10300.0
```

## What this package does not do

The package is a library of simulation parts. It does not include any of the
following:

- a game loop, menu or command-line program
- concrete plant, building or citizen classes. Plants and citizens are supplied
  by the caller.
- taxes, laws or population growth
- saving state between runs