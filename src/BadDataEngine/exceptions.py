# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0


class BadDataError(Exception):
    """Base class for exceptions in this package."""
    pass


class ConfigurationError(BadDataError):
    """Exception raised when the network or the measurements cannot support a valid bad data test."""
    def __init__(self, message="Invalid bad data detection configuration"):
        self.message = message
        super().__init__(self.message)


class ReferenceBusError(ConfigurationError):
    """Exception raised when there is not exactly one reference bus."""
    def __init__(self, n_reference, message="There must be exactly one reference bus"):
        self.n_reference = n_reference
        if n_reference > 1:
            self.message = f"{message}, multiple reference buses found ({n_reference}), double-check model"
        else:
            self.message = f"{message}, none found"
        super().__init__(self.message)


class NoActiveBusesError(ConfigurationError):
    """Exception raised when no bus has a load or a generator connected."""
    def __init__(self, message="This network has no active buses, no point doing state estimation"):
        super().__init__(message)


class UnderdeterminedSystemError(ConfigurationError):
    """Exception raised when the degrees of freedom are not strictly positive."""
    def __init__(self, n_measurements, n_variables,
                 message="system underdetermined or just barely determined, "
                         "cannot perform bad data detection with this method"):
        self.n_measurements = n_measurements
        self.n_variables = n_variables
        super().__init__(f"{message}: m={n_measurements}, n={n_variables}")


class ProbabilityRangeError(ConfigurationError):
    """Exception raised when the false alarm probability is outside of (0, 1)."""
    def __init__(self, prob_false, message="The false alarm probability must lie in (0, 1)"):
        self.prob_false = prob_false
        super().__init__(f"{message}, got {prob_false}")


class MeasurementDefinitionError(ConfigurationError):
    """Exception raised when a measurement has no phases or a non-positive deviation."""
    def __init__(self, idtag, message="Invalid measurement definition"):
        self.idtag = idtag
        super().__init__(f"{message}: {idtag}")


class SolutionLookupError(BadDataError, LookupError):
    """Exception raised when a measured quantity is absent from the solved state."""
    def __init__(self, component_type, component_id, variable_name,
                 message="The solution has no value for the measured quantity"):
        self.component_type = component_type
        self.component_id = component_id
        self.variable_name = variable_name
        self.message = f"{message}: [{component_type}][{component_id}][{variable_name}]"
        super().__init__(self.message)
