# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Union
from BadDataEngine.DataStructures.network_description import NetworkDescription
from BadDataEngine.DataStructures.measurement_set import MeasurementSet
from BadDataEngine.basic_structures import Logger
from BadDataEngine.exceptions import ReferenceBusError, NoActiveBusesError, UnderdeterminedSystemError


def get_number_of_state_variables(network: NetworkDescription, logger: Union[Logger, None] = None) -> int:
    """
    Number of free variables of the state estimation problem.

    The system is described by the voltage variables of its buses: two per terminal
    (angle and magnitude in polar form, real and imaginary parts in rectangular form),
    so a three-phase bus has 6 variables and a single-phase bus has 2.
    The angle variables of the reference bus are fixed, one per terminal, so they are removed.
    Zero-injection buses (no load nor generator connected) are handled by equality constraints
    and do not count either.

    :param network: NetworkDescription
    :param logger: Logger (optional)
    :return: n
    :raises ReferenceBusError: if there is not exactly one reference bus
    :raises NoActiveBusesError: if no bus has a load or a generator
    """
    logger = logger if logger is not None else Logger()

    ref_bus = network.get_reference_buses()

    if len(ref_bus) != 1:
        raise ReferenceBusError(n_reference=len(ref_bus))

    non_zero_inj_buses = network.get_active_bus_ids()

    if len(non_zero_inj_buses) == 0:
        raise NoActiveBusesError()

    for bus_id in sorted(network.get_unknown_bus_references()):
        logger.add_warning("Load or generator connected to a bus that is not in the network",
                           device=bus_id,
                           device_class="Bus")

    if ref_bus[0].idtag not in non_zero_inj_buses:
        logger.add_warning("The reference bus has no generator connected",
                           device=ref_bus[0].idtag,
                           device_class="Bus")

    n_terminals = sum(bus.n_terminals for bus in network.get_buses() if bus.idtag in non_zero_inj_buses)

    return n_terminals * 2 - ref_bus[0].n_terminals


def get_degrees_of_freedom(network: NetworkDescription,
                           measurements: MeasurementSet,
                           logger: Union[Logger, None] = None) -> int:
    """
    Degrees of freedom of the state estimation problem: m - n,
    where m is the number of measured quantities (a three-phase measurement adds 3)
    and n the number of free variables (see get_number_of_state_variables)
    :param network: NetworkDescription
    :param measurements: MeasurementSet
    :param logger: Logger (optional)
    :return: m - n, strictly positive
    :raises ConfigurationError: if the reference bus is not unique, if there are no active buses,
                                or if the system is underdetermined or just barely determined
    """
    n = get_number_of_state_variables(network=network, logger=logger)
    m = measurements.get_number_of_measurements()

    if m - n <= 0:
        raise UnderdeterminedSystemError(n_measurements=m, n_variables=n)

    return m - n
