import os
from importlib import metadata

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())

try:
    PROMSAINT_VERSION = metadata.version("promsaint")
except metadata.PackageNotFoundError:
    PROMSAINT_VERSION = os.environ.get("PROMSAINT_VERSION", "unknown")
PROMSAINT_BUILD_TIME = os.environ.get("PROMSAINT_BUILD_TIME", "unknown")

DEFAULT_PROMSAINT_URL = "http://localhost:8080"

# path segment the daemon accepts json alerts on
PROMSAINT_JSON_PATH = "json"

ALERT_TYPE_HOST = "host"
ALERT_TYPE_SERVICE = "service"
DEFAULT_NOTIFY = "blackhole"
