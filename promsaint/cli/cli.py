import sys
from typing import Optional

import click

from promsaint.cli.click_extensions import DURATION, GoFlagCommand
from promsaint.consts import (
    DEFAULT_NOTIFY,
    DEFAULT_PROMSAINT_URL,
    PROMSAINT_BUILD_TIME,
    PROMSAINT_VERSION,
)
from promsaint.exceptions import (
    AlertDeliveryException,
    AlertValidationException,
    InvalidBaseUrlException,
)
from promsaint.forwarder import build_alert, forward_alert
from promsaint.logging import get_logger, setup_logging

logger = get_logger(__name__)


def print_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Version: {PROMSAINT_VERSION}")
    click.echo(f"Built:   {PROMSAINT_BUILD_TIME}")
    ctx.exit(0)


# Flags are spelled the way monitoring engine command definitions already call
# them (-hostalert, -log.file, ...); the -- spelling works too.
@click.command(
    cls=GoFlagCommand,
    context_settings=dict(help_option_names=["-help", "--help"]),
)
@click.option(
    "-version",
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=print_version,
    help="Print version information",
)
@click.option(
    "-hostalert", "--hostalert", "host_alert", is_flag=True, help="This is a host alert"
)
@click.option(
    "-servicealert",
    "--servicealert",
    "service_alert",
    is_flag=True,
    help="This is a service alert",
)
@click.option(
    "-notify", "--notify", "notify", default=DEFAULT_NOTIFY, help="Value of notify label"
)
@click.option(
    "-ntype",
    "--ntype",
    "notification_type",
    default="",
    help="PROBLEM / ACKNOWLEDGEMENT / RECOVERY",
)
@click.option(
    "-state",
    "--state",
    "state",
    default="",
    help="Host states: UP / DOWN. Service states: CRITICAL / WARNING / UNKNOWN / OK",
)
@click.option("-host", "--host", "host", default="", help="Hostname of firing alert")
@click.option(
    "-service", "--service", "service", default="", help="Servicename of firing alert"
)
@click.option(
    "-alert-type",
    "--alert-type",
    "alert_type_override",
    default="",
    help="Alternative alert type",
)
@click.option(
    "-alert-name",
    "--alert-name",
    "alert_name",
    default="",
    help="Name of firing alert, when type is not service or host",
)
@click.option("-msg", "--msg", "message", default="", help="Service Output")
@click.option(
    "-note", "--note", "note", default="", help="Service note (Reference link)"
)
@click.option(
    "-promsaint",
    "--promsaint",
    "promsaint_url",
    default=DEFAULT_PROMSAINT_URL,
    envvar="PROMSAINT_URL",
    show_default=True,
    help="Url of running promsaint Daemon to post to",
)
@click.option(
    "-log.file",
    "--log.file",
    "log_file",
    default=None,
    envvar="PROMSAINT_LOG_FILE",
    type=click.Path(dir_okay=False),
    help="Log all info to file",
)
@click.option(
    "-fire-period",
    "--fire-period",
    "fire_period",
    type=DURATION,
    default="0s",
    help="The period in which the alert fires",
)
def cli(
    host_alert: bool,
    service_alert: bool,
    notify: str,
    notification_type: str,
    state: str,
    host: str,
    service: str,
    alert_type_override: str,
    alert_name: str,
    message: str,
    note: str,
    promsaint_url: str,
    log_file: Optional[str],
    fire_period: int,
):
    """Forward a monitoring engine host or service notification to promsaint."""
    setup_logging(log_file)

    try:
        alert = build_alert(
            host_alert=host_alert,
            service_alert=service_alert,
            alert_type_override=alert_type_override,
            notify=notify,
            notification_type=notification_type,
            state=state,
            host=host,
            service=service,
            alert_name=alert_name,
            message=message,
            note=note,
            fire_period=fire_period,
        )
    except AlertValidationException as e:
        logger.critical(str(e))
        sys.exit(1)

    logger.debug("Alert built", extra={"alert": alert.dict()})

    try:
        forward_alert(alert, promsaint_url)
    except InvalidBaseUrlException as e:
        logger.critical(str(e))
        sys.exit(1)
    except AlertDeliveryException:
        # already logged by forward_alert
        sys.exit(1)


if __name__ == "__main__":
    cli()
