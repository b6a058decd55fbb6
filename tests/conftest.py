import pytest

from utils.state_resolver import StateSnapshot


@pytest.fixture
def states():
    return StateSnapshot(
        {
            "sensor.grid_power": "1200.4",
            "sensor.solar_power": "3150",
            "sensor.battery_power": "unavailable",
            "sensor.home_power": "482.7",
            "sensor.kitchen_light": "60.5",
            "sensor.heat_pump_power": "unknown",
        }
    )


@pytest.fixture
def card_config():
    return {
        "title": "House",
        "entities": {
            "grid": {"entity": "sensor.grid_power"},
            "solar": {"entity": "sensor.solar_power"},
            "battery": {"entity": "sensor.battery_power"},
            "home": {"entity": "sensor.home_power"},
            "individual": [],
        },
    }
