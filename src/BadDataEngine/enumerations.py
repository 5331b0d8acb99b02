# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from enum import Enum


class BusMode(Enum):
    """
    Bus modes, the numbers match the bus_type codes of the data dictionaries
    """
    PQ_tpe = 1  # control P, Q
    PV_tpe = 2  # Control P, Vm
    Slack_tpe = 3  # Control Vm, Va (reference)
    Isolated_tpe = 4  # out of service

    def __str__(self):
        return str(self.value)


class DeviceType(Enum):
    """
    Device types, the values are the component keys used in the solution dictionaries
    """
    BusDevice = 'bus'
    LoadDevice = 'load'
    GeneratorDevice = 'gen'
    MeasurementDevice = 'meas'

    def __str__(self):
        return self.value


class LogSeverity(Enum):
    """
    Enumeration of logs severities
    """
    Warning = 'Warning'
    Information = 'Information'

    def __str__(self):
        return self.value
