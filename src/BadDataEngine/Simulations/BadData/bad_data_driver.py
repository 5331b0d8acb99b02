# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
import time
from typing import Union
from BadDataEngine.DataStructures.network_description import NetworkDescription
from BadDataEngine.DataStructures.measurement_set import MeasurementSet
from BadDataEngine.DataStructures.solved_state import SolvedState
from BadDataEngine.Simulations.BadData.bad_data_options import BadDataOptions
from BadDataEngine.Simulations.BadData.bad_data_results import BadDataResults
from BadDataEngine.Simulations.BadData.chi_squares_test import exceeds_chi_squares_threshold
from BadDataEngine.basic_structures import Logger


class BadDataDriver:
    """
    Chi-squares bad data detection driver
    """
    name = 'Bad data detection'

    def __init__(self,
                 network: NetworkDescription,
                 measurements: MeasurementSet,
                 solved_state: SolvedState,
                 options: Union[BadDataOptions, None] = None):
        """
        Constructor
        :param network: NetworkDescription
        :param measurements: MeasurementSet used by the state estimation
        :param solved_state: SolvedState produced by the state estimation, it gets annotated with the residuals
        :param options: BadDataOptions (optional)
        """
        self.network = network

        self.measurements = measurements

        self.solved_state = solved_state

        self.options = BadDataOptions() if options is None else options

        self.results: Union[BadDataResults, None] = None

        self.elapsed = 0.0

        self.logger = Logger()

        self.__start = time.time()

    def tic(self):
        """
        Register start of time
        """
        self.__start = time.time()

        self.logger.add_info(msg="Elapsed total (s)", device="Started")

    def toc(self):
        """
        Register end of time
        """
        self.elapsed = time.time() - self.__start

        self.logger.add_info(msg="Elapsed total (s)", device="Ended", value=self.elapsed)

    def run(self) -> BadDataResults:
        """
        Run the Chi-squares test
        :return: BadDataResults, also stored in self.results
        """
        self.tic()

        outcome = exceeds_chi_squares_threshold(solved_state=self.solved_state,
                                                network=self.network,
                                                measurements=self.measurements,
                                                prob_false=self.options.prob_false,
                                                suppress_display=self.options.suppress_display,
                                                objective_tolerance=self.options.objective_tolerance,
                                                logger=self.logger)

        self.toc()

        self.results = BadDataResults(outcome=outcome,
                                      measurements=self.measurements,
                                      elapsed=self.elapsed)

        if self.options.verbose > 0:
            print(self.results.get_summary_df())

        if self.options.verbose > 1:
            print(self.results.get_residuals_df())
            print(self.logger.to_df())

        return self.results
