from promsaint.exceptions.promsaint_exception import PromsaintException


class AlertValidationException(PromsaintException):
    """Raised when the alert type flags are missing or contradict each other."""
