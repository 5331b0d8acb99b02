# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Union
from BadDataEngine.Devices.Parents.injection_parent import InjectionParent
from BadDataEngine.Devices.bus import Bus
from BadDataEngine.enumerations import DeviceType


class Generator(InjectionParent):
    """
    Generator, the reference bus source is a generator too
    """

    def __init__(self, bus: Union[Bus, str, int], name: str = "", idtag: Union[str, int, None] = None):
        InjectionParent.__init__(self,
                                 name=name,
                                 idtag=idtag,
                                 bus=bus,
                                 device_type=DeviceType.GeneratorDevice)
