# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0


class BadDataOptions:

    def __init__(self,
                 prob_false: float = 0.05,
                 suppress_display: bool = True,
                 objective_tolerance: float = 1e-6,
                 verbose: int = 0):
        """
        BadDataOptions
        :param prob_false: probability of false alarm allowed in the Chi-squares test, in (0, 1)
        :param suppress_display: if False, the verdict is printed
        :param objective_tolerance: relative tolerance to compare J with the solver objective
        :param verbose: Verbosity level (1 prints the summary, 2 also the residuals and the logs)
        """
        self.prob_false: float = prob_false
        self.suppress_display: bool = suppress_display
        self.objective_tolerance: float = objective_tolerance
        self.verbose: int = verbose
