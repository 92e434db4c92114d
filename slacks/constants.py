"""Defaults and fixed locations shared across slacks."""

DEFAULT_CHANNEL = "#general"
DEFAULT_USERNAME = "slacks"
DEFAULT_ICON_EMOJI = ":slack:"

# Relative to $HOME
CONFIG_PATH_SUFFIX = ".config/slacks.json"

HOME_ENV_VAR = "HOME"
WEBHOOK_URL_ENV_VAR = "SLACK_WEBHOOK_URL"

WEBHOOK_HOST = "hooks.slack.com"
TIMEOUT_IN_SEC = 10.0

MAX_NAME_LENGTH = 20
