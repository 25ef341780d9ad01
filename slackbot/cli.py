"""Command line entry point: send piped text to a Slack webhook."""

from __future__ import annotations

import argparse
import contextlib
import http.client
import logging
import os
import socket
import sys
from dataclasses import dataclass
from typing import Iterator, TextIO

from slackbot.config import load_config
from slackbot.localip import PUBLIC_IP_URL, get_local_ip_addrs, get_public_ip_addr
from slackbot.notify import SlackError, prepare_message, send_slack_notification

HELP_MESSAGE = """SlackBot sends message to the Slack channel

echo "[ERROR] Some error details" | slackbot

cat file.txt | slackbot

echo "Text message" | slackbot -config ./config.yml"""

DEFAULT_CONFIG_FILE = "/etc/slackbot/config.yml"
CONFIG_ENV_VAR = "SLACKBOT_CONFIG"

_log = logging.getLogger("slackbot")


def read_input_text(stream: TextIO | None) -> str:
    """Read piped text from *stream*, each line preceded by a newline.

    An interactive terminal yields an empty string instead of blocking.
    Raises OSError when the stream cannot be inspected or read.
    """
    try:
        interactive = stream.isatty()
    except (AttributeError, ValueError, OSError) as exc:
        raise OSError(f"failed to stat stdin: {exc}") from exc
    if interactive:
        return ""
    try:
        return "".join("\n" + line.removesuffix("\n").removesuffix("\r") for line in stream)
    except (ValueError, OSError) as exc:
        raise OSError(f"error reading stdin: {exc}") from exc


@dataclass
class Command:
    """One invocation of the notifier."""

    config_file: str = DEFAULT_CONFIG_FILE
    help: bool = False
    stdin: TextIO | None = None
    public_ip_url: str = PUBLIC_IP_URL

    def run(self) -> None:
        """Gather host details, read the input and send it to Slack.

        Raises RuntimeError describing the step that failed.
        """
        if self.help:
            print(HELP_MESSAGE)
            return

        try:
            hostname = socket.gethostname()
        except OSError as exc:
            raise RuntimeError(f"failed to get hostname: {exc}") from exc

        try:
            ips = get_local_ip_addrs()
        except OSError as exc:
            raise RuntimeError(f"failed to get IP addresses: {exc}") from exc

        try:
            ips.append(get_public_ip_addr(self.public_ip_url))
        except (OSError, ValueError, http.client.HTTPException) as exc:
            _log.warning("failed to get public IP address: %s", exc)

        stream = self.stdin if self.stdin is not None else sys.stdin
        try:
            input_text = read_input_text(stream)
        except OSError as exc:
            raise RuntimeError(f"failed to read input text: {exc}") from exc
        if not input_text:
            raise RuntimeError("no input text provided")

        message = prepare_message(hostname, input_text, ips)

        try:
            config = load_config(self.config_file)
        except (OSError, ValueError) as exc:
            raise RuntimeError(f"failed to load configuration: {exc}") from exc

        try:
            send_slack_notification(config.webhook, message)
        except (OSError, ValueError, SlackError) as exc:
            raise RuntimeError(f"failed to send Slack notification: {exc}") from exc


@contextlib.contextmanager
def _stderr_logging() -> Iterator[None]:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("slackbot: %(message)s"))
    previous_level, previous_propagate = _log.level, _log.propagate
    _log.addHandler(handler)
    _log.setLevel(logging.INFO)
    _log.propagate = False
    try:
        yield
    finally:
        _log.removeHandler(handler)
        _log.setLevel(previous_level)
        _log.propagate = previous_propagate


def _build_parser(with_config: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slackbot",
        add_help=False,
        description=HELP_MESSAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    if with_config:
        parser.add_argument(
            "-config",
            "--config",
            dest="config_file",
            default=DEFAULT_CONFIG_FILE,
            help="Path to the config file",
        )
    parser.add_argument(
        "-help", "--help", "-h", dest="help", action="store_true", help="Show usage"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line program and return its exit status."""
    with _stderr_logging():
        config_path = os.environ.get(CONFIG_ENV_VAR, "")
        if not config_path:
            _log.info(
                "SLACKBOT_CONFIG environment variable is empty; reading from the config file"
            )
        else:
            _log.info("Reading config from SLACKBOT_CONFIG environment variable: %s", config_path)

        args = _build_parser(with_config=not config_path).parse_args(argv)
        command = Command(
            config_file=getattr(args, "config_file", config_path),
            help=args.help,
        )

        if not command.config_file:
            _log.info("No config file specified. Using default settings.")
        else:
            _log.info("Using config file: %s", command.config_file)

        try:
            command.run()
        except RuntimeError as exc:
            _log.error("Failed to run: %s", exc)
            return 1
        return 0


if __name__ == "__main__":
    sys.exit(main())