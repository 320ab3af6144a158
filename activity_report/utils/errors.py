# activity_report/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (paths, thresholds, etc).
    Should NOT print traceback.
    """


class AnalysisError(RuntimeError):
    """
    Fatal pipeline condition. Aborts the whole run, no partial report.
    """


class LoadError(AnalysisError):
    """Input table absent, unreadable, malformed or missing expected columns."""


class SplitError(AnalysisError):
    """Labels cannot be partitioned with stratification."""


class CompletenessError(AnalysisError):
    """Missing values survived the missingness filter."""


class DegenerateDataError(AnalysisError):
    """No predictor column left with usable variance."""
