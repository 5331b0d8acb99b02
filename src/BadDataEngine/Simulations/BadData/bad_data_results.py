# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Dict, Iterator, Union
import numpy as np
import pandas as pd
from BadDataEngine.basic_structures import Vec
from BadDataEngine.DataStructures.measurement_set import MeasurementSet


class ChiSquaresTestOutcome:
    """
    Outcome of the Chi-squares bad data test.
    It unpacks as (exceeds_threshold, J, critical_value)
    """

    def __init__(self,
                 exceeds_threshold: bool,
                 J: float,
                 critical_value: float,
                 degrees_of_freedom: int,
                 prob_false: float,
                 p_value: float,
                 residuals: Dict[str, Vec]):
        """
        ChiSquaresTestOutcome constructor
        :param exceeds_threshold: if True, there are probably bad data
        :param J: sum of the normalized squared residuals
        :param critical_value: Chi-squares critical value at 1 - prob_false
        :param degrees_of_freedom: degrees of freedom used
        :param prob_false: false alarm probability used
        :param p_value: probability of a statistic at least as large as J with no bad data
        :param residuals: normalized squared residuals per measurement id, one value per phase
        """
        self.exceeds_threshold: bool = bool(exceeds_threshold)
        self.J: float = float(J)
        self.critical_value: float = float(critical_value)
        self.degrees_of_freedom: int = int(degrees_of_freedom)
        self.prob_false: float = float(prob_false)
        self.p_value: float = float(p_value)
        self.residuals: Dict[str, Vec] = residuals

    def __iter__(self) -> Iterator[Union[bool, float]]:
        return iter((self.exceeds_threshold, self.J, self.critical_value))

    def __bool__(self) -> bool:
        return self.exceeds_threshold

    def __str__(self) -> str:
        return self.get_message()

    def get_message(self) -> str:
        """
        Human readable verdict
        :return: str
        """
        if self.exceeds_threshold:
            return "Chi-square test indicates presence of bad data."
        else:
            return "No bad data detected by Chi-square test."

    def get_residuals_df(self, measurements: Union[MeasurementSet, None] = None) -> pd.DataFrame:
        """
        Get the normalized residuals as a DataFrame, one row per measurement phase
        :param measurements: MeasurementSet to add the measured component, variable, value and sigma (optional)
        :return: DataFrame indexed by (measurement, phase)
        """
        index = list()
        data = list()
        for meas_id, res in self.residuals.items():
            if measurements is not None and meas_id in measurements:
                meas = measurements.get(meas_id)
                z = meas.get_means()
                sigma = meas.get_sigmas()
                for i, r in enumerate(res):
                    index.append((meas_id, i + 1))
                    data.append([meas.cmp, meas.cmp_id, meas.var, z[i], sigma[i], r])
            else:
                for i, r in enumerate(res):
                    index.append((meas_id, i + 1))
                    data.append(["", "", "", np.nan, np.nan, r])

        df = pd.DataFrame(data=data,
                          index=pd.MultiIndex.from_tuples(index, names=['Measurement', 'Phase']),
                          columns=['Component', 'Component id', 'Variable', 'Measured', 'Sigma',
                                   'Normalized residual'])
        return df

    def get_summary_df(self) -> pd.DataFrame:
        """
        Get the test figures as a single column DataFrame
        :return: DataFrame
        """
        return pd.DataFrame(data=[self.exceeds_threshold, self.J, self.critical_value,
                                  self.degrees_of_freedom, self.prob_false, self.p_value],
                            index=['Bad data detected', 'J', 'Critical value', 'Degrees of freedom',
                                   'False alarm probability', 'p-value'],
                            columns=['Value'])


class BadDataResults:
    """
    Results of the bad data detection driver
    """

    def __init__(self,
                 outcome: ChiSquaresTestOutcome,
                 measurements: MeasurementSet,
                 elapsed: float = 0.0):
        """
        BadDataResults constructor
        :param outcome: ChiSquaresTestOutcome
        :param measurements: MeasurementSet that was tested
        :param elapsed: time spent (s)
        """
        self.outcome = outcome
        self.measurements = measurements
        self.elapsed = elapsed

    @property
    def bad_data_detected(self) -> bool:
        return self.outcome.exceeds_threshold

    @property
    def J(self) -> float:
        return self.outcome.J

    @property
    def critical_value(self) -> float:
        return self.outcome.critical_value

    def get_residuals_df(self) -> pd.DataFrame:
        """
        Normalized residuals with the measurement information
        :return: DataFrame
        """
        return self.outcome.get_residuals_df(measurements=self.measurements)

    def get_summary_df(self) -> pd.DataFrame:
        """
        Test figures and the time spent
        :return: DataFrame
        """
        df = self.outcome.get_summary_df()
        df.loc['Elapsed (s)'] = [self.elapsed]
        return df
