# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Dict, Any, Union
import numpy as np
from BadDataEngine.basic_structures import Vec, split_phases
from BadDataEngine.enumerations import DeviceType
from BadDataEngine.exceptions import SolutionLookupError


def _find(container: Any, key: str) -> Any:
    """
    Find a key in one level of the solution dictionary.
    The keys are compared as strings, integer keys are accepted for numeric ids
    :param container: dictionary level
    :param key: string key
    :return: the stored item
    :raises KeyError: if not found
    """
    if not isinstance(container, dict):
        raise KeyError(key)

    if key in container:
        return container[key]

    if key.isascii() and key.isdecimal() and int(key) in container:
        return container[int(key)]

    raise KeyError(key)


class SolvedState:
    """
    Accessor to the solution of the state estimation:
        data["solution"][component_type][component_id][variable_name] -> values per phase
    The normalized residuals of the bad data test are written back under
        data["solution"]["meas"][meas_id]["norm_res"]
    and the test statistic under data["J"]
    """

    def __init__(self, data: Union[Dict[str, Any], None] = None) -> None:
        """
        SolvedState constructor
        :param data: solution dictionary produced by the state estimation, it is annotated in place
        """
        self.data: Dict[str, Any] = data if data is not None else dict()

        if "solution" not in self.data:
            self.data["solution"] = dict()

    @property
    def solution(self) -> Dict[str, Any]:
        return self.data["solution"]

    @property
    def objective(self) -> Union[float, None]:
        """
        Objective value reported by the solver, if any
        :return: float or None
        """
        val = self.data.get("objective", None)
        return None if val is None else float(val)

    @property
    def J(self) -> Union[float, None]:
        """
        Chi-squares statistic written by the last bad data test
        :return: float or None
        """
        val = self.data.get("J", None)
        return None if val is None else float(val)

    @J.setter
    def J(self, val: float):
        self.data["J"] = float(val)

    def set_solution_value(self,
                           component_type: Union[DeviceType, str],
                           component_id: Union[str, int],
                           variable_name: str,
                           values: Union[float, Vec, list]) -> None:
        """
        Store a solved value
        :param component_type: DeviceType or its key ("bus", "load", ...)
        :param component_id: id of the component
        :param variable_name: name of the variable ("vm", "pd", ...)
        :param values: value per phase
        """
        cmp = component_type.value if isinstance(component_type, DeviceType) else str(component_type)
        cmp_data = self.solution.setdefault(cmp, dict())
        elm_data = cmp_data.setdefault(str(component_id), dict())
        elm_data[str(variable_name)] = split_phases(values)

    def get_solution_value(self,
                           component_type: Union[DeviceType, str],
                           component_id: Union[str, int],
                           variable_name: str) -> Vec:
        """
        Get the solved values of a variable
        :param component_type: DeviceType or its key ("bus", "load", ...)
        :param component_id: id of the component
        :param variable_name: name of the variable ("vm", "pd", ...)
        :return: array with one value per phase
        :raises SolutionLookupError: if any of the keys is missing
        """
        cmp = component_type.value if isinstance(component_type, DeviceType) else str(component_type)

        try:
            cmp_data = _find(self.solution, cmp)
            elm_data = _find(cmp_data, str(component_id))
            values = _find(elm_data, str(variable_name))
        except KeyError as e:
            raise SolutionLookupError(component_type=cmp,
                                      component_id=component_id,
                                      variable_name=variable_name) from e

        return split_phases(values)

    def set_normalized_residuals(self, meas_id: Union[str, int], values: Vec) -> None:
        """
        Store the normalized residuals of a measurement, overwriting any previous record
        :param meas_id: measurement id
        :param values: normalized residual per phase
        """
        meas_data = self.solution.setdefault(DeviceType.MeasurementDevice.value, dict())

        try:
            record = _find(meas_data, str(meas_id))
        except KeyError:
            record = meas_data.setdefault(str(meas_id), dict())

        record["norm_res"] = np.array(values, dtype=float)

    def get_normalized_residuals(self, meas_id: Union[str, int]) -> Vec:
        """
        Get the normalized residuals of a measurement
        :param meas_id: measurement id
        :return: normalized residual per phase
        :raises SolutionLookupError: if the bad data test did not run for that measurement
        """
        return self.get_solution_value(DeviceType.MeasurementDevice, meas_id, "norm_res")
