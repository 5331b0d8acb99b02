# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Dict, List, Iterator, Any, Union
from BadDataEngine.Devices.measurement import Measurement


class MeasurementSet:
    """
    Ordered collection of measurements, keyed by the measurement idtag
    """

    def __init__(self, measurements: Union[List[Measurement], None] = None) -> None:
        """
        MeasurementSet constructor
        :param measurements: optional list of measurements to start with
        """
        self.data: Dict[str, Measurement] = dict()

        if measurements is not None:
            for meas in measurements:
                self.add(meas)

    def add(self, meas: Measurement) -> Measurement:
        """
        Add a measurement, replacing any measurement with the same idtag
        :param meas: Measurement
        :return: the same measurement
        """
        self.data[meas.idtag] = meas
        return meas

    def get(self, idtag: Union[str, int]) -> Measurement:
        return self.data[str(idtag)]

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self.data.values())

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, idtag) -> bool:
        return str(idtag) in self.data

    def get_number_of_measurements(self) -> int:
        """
        Number of measured quantities: a three-phase measurement counts three times
        :return: int
        """
        return sum(meas.n_phases for meas in self.data.values())

    @classmethod
    def from_dict(cls, data: Dict[Any, Dict[str, Any]]) -> "MeasurementSet":
        """
        Build the measurement set from a measurements dictionary:
            data[id] = {"cmp": "load", "cmp_id": 1, "var": "pd", "dst": [scipy.stats.norm(0.1, 0.01), ...]}
        :param data: measurements dictionary (the "meas" entry of the data dictionary)
        :return: MeasurementSet
        """
        mset = cls()
        for idtag, entry in data.items():
            mset.add(Measurement(cmp=entry["cmp"],
                                 cmp_id=entry["cmp_id"],
                                 var=entry["var"],
                                 dst=entry["dst"],
                                 name=str(entry.get("name", "")),
                                 idtag=idtag))
        return mset
