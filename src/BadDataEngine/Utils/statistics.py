# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from scipy.stats.distributions import chi2


def chi_squared_quantile(dof: int, probability: float) -> float:
    """
    Inverse of the cumulative distribution function of the Chi-squared distribution
    :param dof: degrees of freedom (> 0)
    :param probability: probability in (0, 1), i.e. 1 - prob_false for the upper tail critical value
    :return: value x such that P(X <= x) = probability
    """
    return float(chi2.ppf(probability, df=dof))


def chi_squared_survival(value: float, dof: int) -> float:
    """
    Upper tail probability of the Chi-squared distribution (the p-value of the test)
    :param value: test statistic
    :param dof: degrees of freedom (> 0)
    :return: P(X >= value)
    """
    return float(chi2.sf(value, df=dof))
