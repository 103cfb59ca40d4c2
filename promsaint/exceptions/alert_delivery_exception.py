from promsaint.exceptions.promsaint_exception import PromsaintException


class AlertDeliveryException(PromsaintException):
    def __init__(self, message, url, *args: object) -> None:
        super().__init__(message, *args)
        self.url = url
