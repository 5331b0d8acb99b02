# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
import pytest
from BadDataEngine import (Bus, Load, Generator, Measurement, BusMode,
                           NetworkDescription, MeasurementSet, SolvedState)


@pytest.fixture
def single_phase_network() -> NetworkDescription:
    """
    Reference bus 1 with a generator, load at bus 2 and the zero-injection bus 3 in between
    n = (1 + 1) * 2 - 1 = 3
    """
    network = NetworkDescription(name="single phase")
    b1 = network.add_bus(Bus(name="B1", idtag="1", bus_type=BusMode.Slack_tpe, terminals=[1]))
    b2 = network.add_bus(Bus(name="B2", idtag="2", bus_type=BusMode.PQ_tpe, terminals=[1]))
    network.add_bus(Bus(name="B3", idtag="3", bus_type=BusMode.PQ_tpe, terminals=[1]))
    network.add_generator(Generator(bus=b1, name="G1", idtag="1"))
    network.add_load(Load(bus=b2, name="L1", idtag="1"))
    return network


@pytest.fixture
def single_phase_measurements() -> MeasurementSet:
    """
    Six single-phase measurements, m = 6
    """
    return MeasurementSet([
        Measurement.normal("bus", "1", "vm", 1.0, 0.01, idtag="1"),
        Measurement.normal("bus", "2", "vm", 0.98, 0.01, idtag="2"),
        Measurement.normal("gen", "1", "pg", 0.5, 0.02, idtag="3"),
        Measurement.normal("gen", "1", "qg", 0.2, 0.02, idtag="4"),
        Measurement.normal("load", "1", "pd", 0.5, 0.02, idtag="5"),
        Measurement.normal("load", "1", "qd", 0.2, 0.02, idtag="6"),
    ])


@pytest.fixture
def single_phase_solution() -> SolvedState:
    """
    Solution matching exactly the single-phase measurements
    """
    return SolvedState({
        "solution": {
            "bus": {"1": {"vm": [1.0]}, "2": {"vm": [0.98]}},
            "gen": {"1": {"pg": [0.5], "qg": [0.2]}},
            "load": {"1": {"pd": [0.5], "qd": [0.2]}},
        }
    })


@pytest.fixture
def three_phase_network() -> NetworkDescription:
    """
    Three-phase reference bus with a generator and a three-phase load bus
    n = 2 * 3 * 2 - 3 = 9
    """
    network = NetworkDescription(name="three phase")
    b1 = network.add_bus(Bus(name="B1", idtag="1", bus_type=BusMode.Slack_tpe, terminals=[1, 2, 3]))
    b2 = network.add_bus(Bus(name="B2", idtag="2", bus_type=BusMode.PQ_tpe, terminals=[1, 2, 3]))
    network.add_generator(Generator(bus=b1, idtag="1"))
    network.add_load(Load(bus=b2, idtag="1"))
    return network


@pytest.fixture
def three_phase_measurements() -> MeasurementSet:
    """
    Four three-phase measurements, m = 12
    """
    return MeasurementSet([
        Measurement.normal("bus", "1", "vm", [1.0, 1.0, 1.0], 0.005, idtag="1"),
        Measurement.normal("bus", "2", "vm", [0.99, 0.98, 0.985], 0.005, idtag="2"),
        Measurement.normal("load", "1", "pd", [0.1, 0.12, 0.09], [0.01, 0.01, 0.02], idtag="3"),
        Measurement.normal("load", "1", "qd", [0.03, 0.04, 0.02], [0.01, 0.01, 0.02], idtag="4"),
    ])


@pytest.fixture
def three_phase_solution() -> SolvedState:
    """
    Solution of the three-phase case, slightly off the measurements
    """
    return SolvedState({
        "solution": {
            "bus": {"1": {"vm": [1.0, 0.995, 1.0]}, "2": {"vm": [0.99, 0.98, 0.985]}},
            "load": {"1": {"pd": [0.1, 0.12, 0.11], "qd": [0.03, 0.04, 0.02]}},
        }
    })
