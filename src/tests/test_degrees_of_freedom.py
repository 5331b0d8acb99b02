# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
import numpy as np
import pytest
from scipy import stats
from BadDataEngine import (Bus, Load, Generator, Measurement, BusMode, Logger,
                           NetworkDescription, MeasurementSet,
                           get_degrees_of_freedom, get_number_of_state_variables,
                           ConfigurationError, ReferenceBusError, NoActiveBusesError, UnderdeterminedSystemError)


def single_phase_measurements(n: int) -> MeasurementSet:
    return MeasurementSet([Measurement.normal("bus", "2", "vm", 1.0, 0.01, idtag=str(i)) for i in range(n)])


def test_single_phase_reference_without_generator() -> None:
    """
    Reference bus of 1 terminal without injection and one active bus of 1 terminal:
    n = 1 * 2 - 1 = 1, m = 5 -> dof = 4
    """
    network = NetworkDescription()
    network.add_bus(Bus(idtag="1", bus_type=BusMode.Slack_tpe, terminals=1))
    b2 = network.add_bus(Bus(idtag="2", bus_type=BusMode.PQ_tpe, terminals=1))
    network.add_load(Load(bus=b2))

    logger = Logger()
    dof = get_degrees_of_freedom(network, single_phase_measurements(5), logger=logger)

    assert dof == 4
    # the missing reference generator is reported, not corrected
    assert logger.warning_count() == 1


def test_three_phase(three_phase_network, three_phase_measurements) -> None:
    """
    n = 2 * 3 * 2 - 3 = 9, m = 4 * 3 = 12 -> dof = 3
    """
    assert get_number_of_state_variables(three_phase_network) == 9
    assert three_phase_measurements.get_number_of_measurements() == 12
    assert get_degrees_of_freedom(three_phase_network, three_phase_measurements) == 3


def test_zero_injection_buses_are_not_counted(single_phase_network, single_phase_measurements) -> None:
    assert single_phase_network.get_zero_injection_bus_ids() == {"3"}
    assert get_number_of_state_variables(single_phase_network) == 3
    assert get_degrees_of_freedom(single_phase_network, single_phase_measurements) == 3

    # connecting a load to the zero-injection bus adds its two variables
    single_phase_network.add_load(Load(bus="3", idtag="2"))
    assert get_number_of_state_variables(single_phase_network) == 5
    assert get_degrees_of_freedom(single_phase_network, single_phase_measurements) == 1


def test_no_reference_bus() -> None:
    network = NetworkDescription()
    b1 = network.add_bus(Bus(idtag="1", bus_type=BusMode.PV_tpe))
    network.add_generator(Generator(bus=b1))

    with pytest.raises(ConfigurationError):
        get_degrees_of_freedom(network, single_phase_measurements(5))

    with pytest.raises(ReferenceBusError) as e:
        get_degrees_of_freedom(network, single_phase_measurements(5))
    assert e.value.n_reference == 0


def test_multiple_reference_buses() -> None:
    network = NetworkDescription()
    b1 = network.add_bus(Bus(idtag="1", bus_type=BusMode.Slack_tpe))
    b2 = network.add_bus(Bus(idtag="2", bus_type=BusMode.Slack_tpe))
    network.add_generator(Generator(bus=b1))
    network.add_generator(Generator(bus=b2))

    with pytest.raises(ReferenceBusError, match="multiple reference buses"):
        get_degrees_of_freedom(network, single_phase_measurements(5))


def test_no_active_buses() -> None:
    network = NetworkDescription()
    network.add_bus(Bus(idtag="1", bus_type=BusMode.Slack_tpe))
    network.add_bus(Bus(idtag="2", bus_type=BusMode.PQ_tpe))

    with pytest.raises(NoActiveBusesError, match="no active buses"):
        get_degrees_of_freedom(network, single_phase_measurements(5))


def test_just_determined_system(single_phase_network) -> None:
    # n = 3
    with pytest.raises(UnderdeterminedSystemError, match="underdetermined"):
        get_degrees_of_freedom(single_phase_network, single_phase_measurements(3))

    with pytest.raises(ConfigurationError):
        get_degrees_of_freedom(single_phase_network, single_phase_measurements(2))

    assert get_degrees_of_freedom(single_phase_network, single_phase_measurements(4)) == 1


def test_dof_does_not_depend_on_the_order(three_phase_network, three_phase_measurements) -> None:
    reversed_network = NetworkDescription()
    for bus in reversed(three_phase_network.get_buses()):
        reversed_network.add_bus(bus)
    for gen in reversed(three_phase_network.get_generators()):
        reversed_network.add_generator(gen)
    for load in reversed(three_phase_network.get_loads()):
        reversed_network.add_load(load)

    reversed_measurements = MeasurementSet(list(reversed(list(three_phase_measurements))))

    assert (get_degrees_of_freedom(reversed_network, reversed_measurements) ==
            get_degrees_of_freedom(three_phase_network, three_phase_measurements))


def test_load_at_unknown_bus_is_reported(single_phase_network, single_phase_measurements) -> None:
    single_phase_network.add_load(Load(bus="99", idtag="2"))
    logger = Logger()

    dof = get_degrees_of_freedom(single_phase_network, single_phase_measurements, logger=logger)

    assert dof == 3
    assert logger.warning_count() == 1
    assert [e.device for e in logger] == ["99"]


def test_from_dict() -> None:
    """
    Mixed network described with a data dictionary using integer bus references
    """
    data = {
        "bus": {
            "1": {"bus_type": 3, "terminals": [1, 2, 3]},
            "2": {"bus_type": 1, "terminals": [1, 2, 3]},
            "3": {"bus_type": 1, "terminals": [1]},
            "4": {"bus_type": 1, "terminals": [1, 2, 3]},
        },
        "load": {"1": {"load_bus": 2}, "2": {"load_bus": 3}},
        "gen": {"1": {"gen_bus": 1}},
        "meas": dict(),
    }

    network = NetworkDescription.from_dict(data)

    assert network.get_bus_number() == 4
    assert network.get_bus("1").is_reference
    assert network.get_active_bus_ids() == {"1", "2", "3"}
    assert network.get_zero_injection_bus_ids() == {"4"}

    # (3 + 3 + 1) * 2 - 3
    assert get_number_of_state_variables(network) == 11

    measurements = MeasurementSet.from_dict({
        str(i): {"cmp": "bus", "cmp_id": 2, "var": "vm", "dst": [stats.norm(1.0, 0.01)] * 3} for i in range(4)
    })

    assert get_degrees_of_freedom(network, measurements) == 1


def test_from_dict_with_numpy_terminal_count() -> None:
    """
    Terminal counts read from numeric arrays come as numpy integers
    """
    data = {
        "bus": {
            "1": {"bus_type": np.int64(3), "terminals": np.int64(3)},
            "2": {"bus_type": np.int64(1), "terminals": np.int32(1)},
        },
        "load": {"1": {"load_bus": 2}},
        "gen": {"1": {"gen_bus": 1}},
    }

    network = NetworkDescription.from_dict(data)

    assert network.get_bus("1").terminals == [1, 2, 3]
    assert network.get_bus("2").n_terminals == 1

    # (3 + 1) * 2 - 3
    assert get_number_of_state_variables(network) == 5
