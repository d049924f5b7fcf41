DOMAIN = "airwatch"
VERSION = "0.1.0"

CONF_ENTRY_NAME = "entry_name"
CONF_BASE_URL = "base_url"

# Base URL resolution: config entry → environment → loopback default
BASE_URL_ENV = "AIRWATCH_BACKEND_URL"
DEFAULT_BASE_URL = "http://localhost:8000"

# Update intervals (seconds)
DEVICES_INTERVAL = 10        # device list
READINGS_INTERVAL = 5        # reading history of the selected device
READINGS_LIMIT = 100         # readings requested per fetch (newest first)

MESSAGE_CLEAR_DELAY = 4      # transient command message lifetime

REQUEST_TIMEOUT = 10         # seconds, per HTTP request

COMMAND_MODE_MANUAL = "manual"

MESSAGE_FAN_ON = "Turned fan ON (queued)"
MESSAGE_FAN_OFF = "Turned fan OFF (queued)"
MESSAGE_COMMAND_FAILED = "Error sending command"

STATUS_UPDATING = "Updating…"
STATUS_LIVE = "Live"
STATUS_WAITING = "Waiting for data"
