# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from BadDataEngine.Simulations.BadData.degrees_of_freedom import get_degrees_of_freedom, get_number_of_state_variables
from BadDataEngine.Simulations.BadData.chi_squares_test import (exceeds_chi_squares_threshold,
                                                                compute_normalized_residuals)
from BadDataEngine.Simulations.BadData.bad_data_results import ChiSquaresTestOutcome, BadDataResults
from BadDataEngine.Simulations.BadData.bad_data_options import BadDataOptions
from BadDataEngine.Simulations.BadData.bad_data_driver import BadDataDriver
