# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Union, Dict, Any
from BadDataEngine.Devices.Parents.editable_device import EditableDevice, parse_idtag
from BadDataEngine.Devices.bus import Bus
from BadDataEngine.enumerations import DeviceType


class InjectionParent(EditableDevice):
    """
    Parent class for the devices that inject (or absorb) power at a bus
    """

    def __init__(self,
                 name: str,
                 idtag: Union[str, int, None],
                 bus: Union[Bus, str, int],
                 device_type: DeviceType):
        """
        InjectionParent
        :param name: name of the device
        :param idtag: unique identifier
        :param bus: Bus or idtag of the bus where the device is connected
        :param device_type: DeviceType
        """
        EditableDevice.__init__(self,
                                name=name,
                                idtag=idtag,
                                device_type=device_type)

        # only the reference is kept, the network description resolves it
        self.bus: str = bus.idtag if isinstance(bus, Bus) else parse_idtag(bus)

    def get_properties_dict(self) -> Dict[str, Any]:
        """
        Get the device properties in a flat dictionary
        :return: dictionary
        """
        data = EditableDevice.get_properties_dict(self)
        data['bus'] = self.bus
        return data
