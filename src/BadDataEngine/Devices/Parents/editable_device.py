# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
import uuid
from typing import Union, Dict, Any
from BadDataEngine.enumerations import DeviceType


def parse_idtag(val: Union[str, int, None]) -> str:
    """
    idtag setter
    :param val: any string, integer or None
    """
    if val is None:
        return uuid.uuid4().hex  # generate a proper UUIDv4 string
    elif isinstance(val, str):
        if len(val) == 0:
            return uuid.uuid4().hex
        else:
            return val
    else:
        # the data dictionaries use integer ids, the solution dictionaries use strings
        return str(val)


class EditableDevice:
    """
    Class to generalize any device of the network description
    """

    def __init__(self,
                 name: str,
                 idtag: Union[str, int, None],
                 device_type: DeviceType):
        """
        Class to generalize any editable device
        :param name: Asset's name
        :param idtag: unique ID, if not provided it is generated
        :param device_type: DeviceType instance
        """

        self._idtag = parse_idtag(val=idtag)

        self._name: str = name if name else self._idtag

        self.device_type: DeviceType = device_type

    def __str__(self) -> str:
        """
        Name of the object
        :return: string
        """
        return self.name

    def __repr__(self) -> str:
        return self.idtag + '::' + self.name

    def __hash__(self) -> int:
        return hash((self.device_type, self.idtag))

    def __eq__(self, other) -> bool:
        if hasattr(other, 'idtag') and hasattr(other, 'device_type'):
            return self.idtag == other.idtag and self.device_type == other.device_type
        else:
            return False

    @property
    def idtag(self) -> str:
        """
        idtag getter
        :return: string
        """
        return self._idtag

    @property
    def name(self) -> str:
        """
        Name getter
        :return: string
        """
        return self._name

    @name.setter
    def name(self, val: str):
        self._name = val

    def get_properties_dict(self) -> Dict[str, Any]:
        """
        Get the device properties in a flat dictionary
        :return: dictionary
        """
        return {'idtag': self.idtag,
                'name': self.name,
                'device_type': self.device_type.value}
