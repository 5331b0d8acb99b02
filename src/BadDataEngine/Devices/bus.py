# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Union, List, Dict, Any
import numpy as np
from BadDataEngine.Devices.Parents.editable_device import EditableDevice
from BadDataEngine.enumerations import BusMode, DeviceType


class Bus(EditableDevice):
    """
    Bus of the network description.
    Only the bus type and the number of terminals matter for the bad data detection:
    each terminal contributes two state variables (magnitude and angle, or real and imaginary parts)
    """

    def __init__(self,
                 name: str = "",
                 idtag: Union[str, int, None] = None,
                 bus_type: BusMode = BusMode.PQ_tpe,
                 terminals: Union[List[int], int] = 1):
        """
        Bus constructor
        :param name: name of the bus
        :param idtag: unique identifier
        :param bus_type: BusMode
        :param terminals: list of terminal numbers, or the number of terminals (1 single-phase, 3 three-phase...)
        """
        EditableDevice.__init__(self,
                                name=name,
                                idtag=idtag,
                                device_type=DeviceType.BusDevice)

        self.bus_type: BusMode = bus_type

        if isinstance(terminals, (int, np.integer)):
            self.terminals: List[int] = list(range(1, terminals + 1))
        else:
            self.terminals: List[int] = list(terminals)

    @property
    def n_terminals(self) -> int:
        """
        Number of terminals of the bus
        :return: int
        """
        return len(self.terminals)

    @property
    def is_reference(self) -> bool:
        """
        Is this the bus with the fixed voltage angle?
        :return: bool
        """
        return self.bus_type == BusMode.Slack_tpe

    def get_properties_dict(self) -> Dict[str, Any]:
        """
        Get the device properties in a flat dictionary
        :return: dictionary
        """
        data = EditableDevice.get_properties_dict(self)
        data['bus_type'] = self.bus_type.value
        data['terminals'] = list(self.terminals)
        return data
