import json
import os
import posixpath
import re
import urllib.parse

import requests
import urllib3

from promsaint.consts import (
    ALERT_TYPE_HOST,
    ALERT_TYPE_SERVICE,
    DEFAULT_NOTIFY,
    PROMSAINT_JSON_PATH,
)
from promsaint.exceptions import (
    AlertDeliveryException,
    AlertValidationException,
    InvalidBaseUrlException,
)
from promsaint.logging import get_logger
from promsaint.models.alert import Alert

logger = get_logger(__name__)

STATUS_2XX_RE = re.compile(r"^2\d\d$")


def validate_flags(
    host_alert: bool,
    service_alert: bool,
    alert_type_override: str,
    alert_name: str,
) -> None:
    """Check the alert type flags before an alert is built.

    Raises:
        AlertValidationException: no alert type was given, both host and
            service were given, or an alert type was given without a name.
    """
    if not host_alert and not service_alert and not alert_type_override:
        raise AlertValidationException(
            "One of -hostalert or -servicealert or -alert-type must be set"
        )

    if (host_alert or service_alert) and alert_type_override:
        logger.warning(
            "If one of -hostalert or -servicealert is set, -alert-type is ignored"
        )

    if alert_type_override and not alert_name:
        raise AlertValidationException(
            "When -alert-type is set, -alert-name needs to be set as well"
        )

    if host_alert and service_alert:
        raise AlertValidationException(
            "Only one of -hostalert or -servicealert can be set"
        )


def resolve_alert_type(
    host_alert: bool, service_alert: bool, alert_type_override: str
) -> str:
    if host_alert:
        return ALERT_TYPE_HOST
    if service_alert:
        return ALERT_TYPE_SERVICE
    return alert_type_override


def build_alert(
    host_alert: bool = False,
    service_alert: bool = False,
    alert_type_override: str = "",
    notify: str = DEFAULT_NOTIFY,
    notification_type: str = "",
    state: str = "",
    host: str = "",
    service: str = "",
    alert_name: str = "",
    message: str = "",
    note: str = "",
    fire_period: int = 0,
) -> Alert:
    validate_flags(host_alert, service_alert, alert_type_override, alert_name)
    return Alert(
        Type=resolve_alert_type(host_alert, service_alert, alert_type_override),
        Notify=notify,
        NotificationType=notification_type,
        State=state,
        Host=host,
        Service=service,
        AlertName=alert_name,
        Message=message,
        Note=note,
        FirePeriod=fire_period,
    )


def resolve_target_url(base_url: str) -> str:
    """Join the daemon's base url with the json endpoint path.

    >>> resolve_target_url("http://localhost:8080")
    'http://localhost:8080/json'
    >>> resolve_target_url("https://promsaint.example.com/api/")
    'https://promsaint.example.com/api/json'
    """
    try:
        parsed = urllib.parse.urlsplit(base_url)
        # accessing the port validates it
        parsed.port
    except ValueError as e:
        raise InvalidBaseUrlException(
            f"Invalid promsaint url {base_url!r}: {e}", base_url
        ) from e

    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise InvalidBaseUrlException(
            f"Invalid promsaint url {base_url!r}: expected http(s)://host[:port][/path]",
            base_url,
        )

    path = posixpath.normpath(
        posixpath.join("/" + parsed.path.lstrip("/"), PROMSAINT_JSON_PATH)
    )
    return urllib.parse.urlunsplit(parsed._replace(path=path))


def forward_alert(alert: Alert, base_url: str) -> bool:
    """POST ``alert`` to the promsaint daemon at ``base_url``.

    Returns True when the daemon answered with a 2xx status. Non 2xx answers
    are logged and reported as False, they are not raised.

    Raises:
        InvalidBaseUrlException: ``base_url`` can't be used to reach the daemon.
        AlertDeliveryException: the request itself failed (connection
            refused, DNS, TLS...).
    """
    body = json.dumps(alert.dict())
    url = resolve_target_url(base_url)

    kwargs = {}
    if os.environ.get("PROMSAINT_IGNORE_SSL", "false").lower() == "true":
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        kwargs["verify"] = False

    logger.info("Forwarding to Promsaint", extra={"url": url})
    try:
        response = requests.post(
            url,
            data=body,
            headers={"Content-Type": "application/json"},
            **kwargs,
        )
    except requests.exceptions.RequestException as e:
        logger.critical(f"Failed to post alert to {url}: {e}")
        raise AlertDeliveryException(str(e), url) from e

    with response:
        status = str(response.status_code)
        logger.debug(f"Status: {status}")
        if STATUS_2XX_RE.match(status):
            return True

        logger.error(
            f"Promsaint responded with non 2xx error: {status} {response.reason}"
        )
        logger.debug(f"Promsaint response: {response.text}")
        return False
