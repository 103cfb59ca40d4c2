from datetime import timedelta

from pydantic import BaseModel, validator

from promsaint.consts import DEFAULT_NOTIFY
from promsaint.utils.duration import format_duration, to_nanoseconds


class Alert(BaseModel):
    """A single host or service state change, as the promsaint daemon expects it.

    Field names are the json keys of the daemon's ``/json`` endpoint.
    ``FirePeriod`` also accepts a nanosecond count or a ``timedelta``.
    """

    Type: str
    Notify: str = DEFAULT_NOTIFY
    NotificationType: str = ""
    State: str = ""
    Host: str = ""
    Service: str = ""
    AlertName: str = ""
    Message: str = ""
    Note: str = ""
    FirePeriod: str = "0s"

    @validator("Notify")
    def lowercase_notify(cls, notify):
        return notify.lower()

    @validator("Service")
    def replace_spaces_in_service(cls, service):
        return service.replace(" ", "_")

    @validator("FirePeriod", pre=True)
    def format_fire_period(cls, fire_period):
        if isinstance(fire_period, timedelta):
            fire_period = to_nanoseconds(fire_period)
        if isinstance(fire_period, int) and not isinstance(fire_period, bool):
            return format_duration(fire_period)
        return fire_period
