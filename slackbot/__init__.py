"""Send piped text to Slack through an incoming webhook, tagged with host name and IP addresses."""

__version__ = "0.1.0"