from promsaint.exceptions.promsaint_exception import PromsaintException


class InvalidBaseUrlException(PromsaintException):
    def __init__(self, message, base_url, *args: object) -> None:
        super().__init__(message, *args)
        self.base_url = base_url
