from promsaint.exceptions.alert_delivery_exception import AlertDeliveryException
from promsaint.exceptions.alert_validation_exception import AlertValidationException
from promsaint.exceptions.invalid_base_url_exception import InvalidBaseUrlException
from promsaint.exceptions.promsaint_exception import PromsaintException

__all__ = [
    "AlertDeliveryException",
    "AlertValidationException",
    "InvalidBaseUrlException",
    "PromsaintException",
]
