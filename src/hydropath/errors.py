"""
Exceptions raised by the hydropath network computations.

Every failure aborts the current call; none of the functions in this package
return partial results.
"""


class HydroPathError(Exception):
    """Base class for all hydropath errors."""


class ValidationError(HydroPathError, ValueError):
    """
    Required columns are missing from an input segment table.

    Raised before any computation begins.
    """

    def __init__(self, function_name, missing):
        self.function_name = function_name
        self.missing = list(missing)
        super().__init__(
            "Missing some required attributes in call to: {}. Expected: {}.".format(
                function_name, ", ".join(self.missing)
            )
        )


class FatalLoopError(HydroPathError):
    """A segment was revisited while walking a mainstem upstream."""

    def __init__(self, node):
        self.node = node
        super().__init__("loop at {}".format(node))


class FatalNonTerminationError(HydroPathError):
    """Level path assignment exceeded its iteration cap."""

    def __init__(self, remaining, total):
        self.remaining = remaining
        self.total = total
        super().__init__(
            "level path assignment did not terminate: {} of {} segments remaining.".format(
                remaining, total
            )
        )


class FatalGraphError(HydroPathError):
    """The segment graph is not acyclic and cannot be sorted."""
