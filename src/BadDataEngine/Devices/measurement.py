# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Union, List, Sequence, Dict, Any
import numpy as np
from scipy import stats
from BadDataEngine.Devices.Parents.editable_device import EditableDevice, parse_idtag
from BadDataEngine.basic_structures import Vec, split_phases
from BadDataEngine.enumerations import DeviceType
from BadDataEngine.exceptions import MeasurementDefinitionError


class Measurement(EditableDevice):
    """
    Measurement of one variable of one component, possibly multi-phase.
    Each phase is modelled by a probability distribution: its mean is the measured value
    and its standard deviation the uncertainty. Any object exposing mean() and std() works,
    typically the frozen distributions of scipy.stats
    """

    def __init__(self,
                 cmp: Union[DeviceType, str],
                 cmp_id: Union[str, int],
                 var: str,
                 dst: Sequence[Any],
                 name: str = "",
                 idtag: Union[str, int, None] = None):
        """
        Measurement constructor
        :param cmp: type of the measured component (DeviceType or its key, i.e. "bus", "load", "gen")
        :param cmp_id: id of the measured component
        :param var: name of the measured variable (i.e. "vm", "pd", "qg")
        :param dst: list of per-phase distributions
        :param name: name of the measurement
        :param idtag: unique identifier
        """
        EditableDevice.__init__(self,
                                name=name,
                                idtag=idtag,
                                device_type=DeviceType.MeasurementDevice)

        self.cmp: str = cmp.value if isinstance(cmp, DeviceType) else str(cmp)
        self.cmp_id: str = parse_idtag(cmp_id)
        self.var: str = str(var)
        self.dst: List[Any] = list(dst)

        if len(self.dst) == 0:
            raise MeasurementDefinitionError(self.idtag, message="The measurement has no phases")

        sigma = self.get_sigmas()
        if not np.all(np.isfinite(sigma)) or np.any(sigma <= 0.0):
            raise MeasurementDefinitionError(self.idtag,
                                             message="The standard deviation must be positive and finite")

    @classmethod
    def normal(cls,
               cmp: Union[DeviceType, str],
               cmp_id: Union[str, int],
               var: str,
               values: Union[float, Sequence[float], Vec],
               sigmas: Union[float, Sequence[float], Vec],
               name: str = "",
               idtag: Union[str, int, None] = None) -> "Measurement":
        """
        Build a measurement with normally distributed phases
        :param cmp: type of the measured component
        :param cmp_id: id of the measured component
        :param var: name of the measured variable
        :param values: measured value per phase (or a scalar for single-phase)
        :param sigmas: standard deviation per phase (a scalar is broadcast to all phases)
        :param name: name of the measurement
        :param idtag: unique identifier
        :return: Measurement
        """
        mu = split_phases(values)
        sd = np.broadcast_to(split_phases(sigmas), mu.shape)
        dst = [stats.norm(loc=mu[i], scale=sd[i]) for i in range(len(mu))]
        return cls(cmp=cmp, cmp_id=cmp_id, var=var, dst=dst, name=name, idtag=idtag)

    @property
    def n_phases(self) -> int:
        """
        Number of phases measured
        :return: int
        """
        return len(self.dst)

    def get_means(self) -> Vec:
        """
        Measured values
        :return: array of means, one per phase
        """
        return np.array([float(d.mean()) for d in self.dst], dtype=float)

    def get_sigmas(self) -> Vec:
        """
        Measurement uncertainties
        :return: array of standard deviations, one per phase
        """
        return np.array([float(d.std()) for d in self.dst], dtype=float)

    def get_properties_dict(self) -> Dict[str, Any]:
        """
        Get the device properties in a flat dictionary
        :return: dictionary
        """
        data = EditableDevice.get_properties_dict(self)
        data['cmp'] = self.cmp
        data['cmp_id'] = self.cmp_id
        data['var'] = self.var
        data['n_phases'] = self.n_phases
        return data
