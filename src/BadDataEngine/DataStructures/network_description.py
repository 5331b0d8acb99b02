# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Dict, List, Set, Any, Union
from BadDataEngine.Devices.bus import Bus
from BadDataEngine.Devices.load import Load
from BadDataEngine.Devices.generator import Generator
from BadDataEngine.enumerations import BusMode


class NetworkDescription:
    """
    Topological view of the network needed to count the state variables:
    the buses with their type and terminals, and the loads and generators connected to them
    """

    def __init__(self, name: str = "") -> None:
        """
        NetworkDescription constructor
        :param name: name of the network
        """
        self.name = name

        self.buses: Dict[str, Bus] = dict()

        self.loads: Dict[str, Load] = dict()

        self.generators: Dict[str, Generator] = dict()

    def add_bus(self, obj: Bus) -> Bus:
        """
        Add a bus
        :param obj: Bus
        :return: the same bus
        """
        self.buses[obj.idtag] = obj
        return obj

    def add_load(self, obj: Load) -> Load:
        """
        Add a load
        :param obj: Load
        :return: the same load
        """
        self.loads[obj.idtag] = obj
        return obj

    def add_generator(self, obj: Generator) -> Generator:
        """
        Add a generator
        :param obj: Generator
        :return: the same generator
        """
        self.generators[obj.idtag] = obj
        return obj

    def get_bus(self, idtag: Union[str, int]) -> Bus:
        """
        Get a bus by its idtag
        :param idtag: bus id
        :return: Bus
        """
        return self.buses[str(idtag)]

    def get_buses(self) -> List[Bus]:
        return list(self.buses.values())

    def get_loads(self) -> List[Load]:
        return list(self.loads.values())

    def get_generators(self) -> List[Generator]:
        return list(self.generators.values())

    def get_bus_number(self) -> int:
        return len(self.buses)

    def get_reference_buses(self) -> List[Bus]:
        """
        Get the buses with a fixed voltage angle
        :return: list of buses
        """
        return [bus for bus in self.buses.values() if bus.bus_type == BusMode.Slack_tpe]

    def get_active_bus_ids(self) -> Set[str]:
        """
        Get the ids of the buses with some load or generator connected,
        loads include negative demand and generators include the reference bus source
        :return: set of bus ids
        """
        load_buses = {load.bus for load in self.loads.values()}
        gen_buses = {gen.bus for gen in self.generators.values()}
        return load_buses | gen_buses

    def get_zero_injection_bus_ids(self) -> Set[str]:
        """
        Get the ids of the buses without loads or generators,
        these are handled by equality constraints and are not free variables
        :return: set of bus ids
        """
        return set(self.buses.keys()) - self.get_active_bus_ids()

    def get_unknown_bus_references(self) -> Set[str]:
        """
        Get the bus ids referenced by loads or generators that are not in the network
        :return: set of bus ids
        """
        return self.get_active_bus_ids() - set(self.buses.keys())

    @classmethod
    def from_dict(cls, data: Dict[str, Any], name: str = "") -> "NetworkDescription":
        """
        Build the network description from a data dictionary:
            data["bus"][id] = {"bus_type": 3, "terminals": [1, 2, 3]}
            data["load"][id] = {"load_bus": 2}
            data["gen"][id] = {"gen_bus": 1}
        :param data: data dictionary
        :param name: name of the network
        :return: NetworkDescription
        """
        network = cls(name=name if name else str(data.get("name", "")))

        for idtag, entry in data.get("bus", dict()).items():
            network.add_bus(Bus(name=str(entry.get("name", "")),
                                idtag=idtag,
                                bus_type=BusMode(int(entry["bus_type"])),
                                terminals=entry.get("terminals", 1)))

        for idtag, entry in data.get("load", dict()).items():
            network.add_load(Load(bus=entry["load_bus"],
                                  name=str(entry.get("name", "")),
                                  idtag=idtag))

        for idtag, entry in data.get("gen", dict()).items():
            network.add_generator(Generator(bus=entry["gen_bus"],
                                            name=str(entry.get("name", "")),
                                            idtag=idtag))

        return network
