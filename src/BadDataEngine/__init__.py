# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from BadDataEngine.__version__ import __BadDataEngine_VERSION__
from BadDataEngine.enumerations import *
from BadDataEngine.basic_structures import Logger, LogEntry, Vec
from BadDataEngine.exceptions import *
from BadDataEngine.Devices import *
from BadDataEngine.DataStructures import *
from BadDataEngine.Simulations import *
from BadDataEngine.Utils.statistics import chi_squared_quantile, chi_squared_survival
