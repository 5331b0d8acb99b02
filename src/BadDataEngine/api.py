# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Dict, Any, Union, Tuple
from BadDataEngine import *


def network_and_measurements_from_dict(data: Dict[str, Any]) -> Tuple[NetworkDescription, MeasurementSet]:
    """
    Split a state estimation data dictionary into the network description and the measurements
    :param data: dictionary with the "bus", "load", "gen" and "meas" entries
    :return: NetworkDescription, MeasurementSet
    """
    return NetworkDescription.from_dict(data), MeasurementSet.from_dict(data.get("meas", dict()))


def degrees_of_freedom(data: Dict[str, Any], logger: Union[Logger, None] = None) -> int:
    """
    Degrees of freedom of the state estimation problem described by a data dictionary
    :param data: dictionary with the "bus", "load", "gen" and "meas" entries
    :param logger: Logger (optional)
    :return: m - n
    """
    network, measurements = network_and_measurements_from_dict(data)
    return get_degrees_of_freedom(network=network, measurements=measurements, logger=logger)


def chi_squares_test(sol_dict: Dict[str, Any],
                     data: Dict[str, Any],
                     prob_false: float = 0.05,
                     suppress_display: bool = False,
                     logger: Union[Logger, None] = None) -> ChiSquaresTestOutcome:
    """
    Run the Chi-squares bad data test on the state estimation dictionaries
    :param sol_dict: solution dictionary of the state estimation, it gets annotated with "norm_res" and "J"
    :param data: data dictionary of the state estimation (network and measurements)
    :param prob_false: false alarm probability allowed in the test
    :param suppress_display: if False, the verdict is printed
    :param logger: Logger (optional)
    :return: ChiSquaresTestOutcome, that unpacks as (exceeds_threshold, J, critical_value)
    """
    network, measurements = network_and_measurements_from_dict(data)

    return exceeds_chi_squares_threshold(solved_state=SolvedState(sol_dict),
                                         network=network,
                                         measurements=measurements,
                                         prob_false=prob_false,
                                         suppress_display=suppress_display,
                                         logger=logger)
