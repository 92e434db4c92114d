"""Post messages to Slack incoming webhooks from the command line."""

__version__ = "0.4.0"
