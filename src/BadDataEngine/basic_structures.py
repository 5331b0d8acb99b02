# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import List, Any, Union, Tuple, Iterator
import datetime
import numpy as np
import numpy.typing as npt
import pandas as pd
from BadDataEngine.enumerations import LogSeverity

Vec = npt.NDArray[np.float64]


class LogEntry:
    """
    Diagnostic issued by the bad data detection
    """

    def __init__(self,
                 msg: str,
                 severity: LogSeverity,
                 device="",
                 device_class="",
                 device_property="",
                 value="",
                 expected_value=""):
        self.time = "{date:%H:%M:%S}".format(date=datetime.datetime.now())
        self.msg = str(msg)
        self.severity = severity
        self.device = str(device)
        self.device_class = str(device_class)
        self.device_property = str(device_property)
        self.value = str(value)
        self.expected_value = str(expected_value)

    def to_list(self) -> List[Any]:
        return [self.time, self.severity.value, self.msg, self.device_class,
                self.device_property, self.device, self.value, self.expected_value]

    def __str__(self):
        return "{0} {1}: {2} {3} {4} {5}".format(self.time, self.severity.value, self.msg,
                                                 self.device, self.value, self.expected_value)


class Logger:
    """
    Collects the diagnostics of a bad data detection run
    """

    def __init__(self) -> None:
        self.entries: List[LogEntry] = list()

    def add(self, msg: str, severity: LogSeverity, device="", device_class='', device_property='',
            value="", expected_value=""):
        """
        Add entry
        :param msg: message
        :param severity: LogSeverity
        :param device: id of the bus or measurement that the entry refers to
        :param device_class: class of the device
        :param device_property: property of the device (i.e. J)
        :param value: value found
        :param expected_value: value expected
        """
        self.entries.append(LogEntry(msg=msg, severity=severity, device=device, device_class=device_class,
                                     device_property=device_property, value=value,
                                     expected_value=expected_value))

    def add_info(self, msg: str, device="", device_class='', device_property='', value="", expected_value=""):
        self.add(msg=msg, severity=LogSeverity.Information, device=device, device_class=device_class,
                 device_property=device_property, value=value, expected_value=expected_value)

    def add_warning(self, msg: str, device="", device_class='', device_property='', value="", expected_value=""):
        self.add(msg=msg, severity=LogSeverity.Warning, device=device, device_class=device_class,
                 device_property=device_property, value=value, expected_value=expected_value)

    def warning_count(self) -> int:
        """
        Count number of warnings
        :return:
        """
        return sum(1 for entry in self.entries if entry.severity == LogSeverity.Warning)

    def to_df(self) -> pd.DataFrame:
        """
        Get DataFrame
        :return: DataFrame
        """
        data = [e.to_list() for e in self.entries]
        df = pd.DataFrame(data=data, columns=['Time', 'Severity', 'Message', 'Class',
                                              'Property', 'Device', 'Value', 'Expected value'])
        df.set_index('Time', inplace=True)
        return df

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self):
        return "".join(str(e) + '\n' for e in self.entries)


def split_phases(values: Union[float, List[float], Tuple[float, ...], Vec]) -> Vec:
    """
    Convert a scalar or a sequence of per-phase values into a float array
    :param values: scalar or sequence
    :return: Vec
    """
    return np.atleast_1d(np.asarray(values, dtype=float))
