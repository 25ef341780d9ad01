"""Building and sending Slack webhook messages."""

from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.request
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Sequence

from slackbot.localip import IPAddrInfo

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class SlackError(Exception):
    """Raised when Slack does not accept a notification."""


@dataclass
class Element:
    """An element of a context block."""

    type: str
    text: str


@dataclass
class TextBlock:
    """The text object of a section block."""

    type: str
    text: str


@dataclass
class Block:
    """A Slack layout block."""

    type: str
    text: TextBlock | None = None
    elements: list[Element] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the block as its JSON object, omitting empty fields."""
        data: dict[str, Any] = {"type": self.type}
        if self.text is not None:
            data["text"] = asdict(self.text)
        if self.elements:
            data["elements"] = [asdict(element) for element in self.elements]
        return data


@dataclass
class SlackMessage:
    """A webhook payload: fallback text plus layout blocks."""

    text: str
    blocks: list[Block] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the message as its JSON object."""
        return {"text": self.text, "blocks": [block.to_dict() for block in self.blocks]}

    def to_json(self) -> str:
        """Return the compact JSON payload with HTML-sensitive characters escaped."""
        raw = json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
        return "".join(_JSON_ESCAPES.get(char, char) for char in raw)


def prepare_ip_list(ips: Sequence[IPAddrInfo]) -> str:
    """Format the IPv4 addresses as inline code, or the first address if none is IPv4."""
    if not ips:
        return "`unknown`"
    ipv4 = [f"`{ip.address}`" for ip in ips if ip.version == "IPv4"]
    if not ipv4:
        return f"`{ips[0].address}`"
    return ", ".join(ipv4)


def prepare_message(
    hostname: str,
    message: str,
    ips: Sequence[IPAddrInfo],
    now: datetime | None = None,
) -> SlackMessage:
    """Build the notification for *message* sent from *hostname* with its addresses."""
    ip_list = prepare_ip_list(ips)
    date = (now or datetime.now()).strftime(DATE_FORMAT)

    if ips and ips[0].version == "IPv4":
        ip_text = f":information_source: *IPv4* {ip_list}"
    else:
        ip_text = ip_list

    return SlackMessage(
        text=message,
        blocks=[
            Block(
                type="context",
                elements=[
                    Element(type="mrkdwn", text=f":calendar: *{date}*  |  :computer: {hostname}")
                ],
            ),
            Block(type="section", text=TextBlock(type="mrkdwn", text=ip_text)),
            Block(type="divider"),
            Block(type="section", text=TextBlock(type="mrkdwn", text=f"```{message}```")),
        ],
    )


def send_slack_notification(
    webhook_url: str, message: SlackMessage, timeout: float = 10.0
) -> None:
    """POST *message* to the Slack webhook; raise SlackError unless it answers 200."""
    request = urllib.request.Request(
        webhook_url,
        data=message.to_json().encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            status = response.status
    except urllib.error.HTTPError as exc:
        status = exc.code
        exc.close()
    except http.client.HTTPException as exc:
        raise SlackError(f"invalid response from Slack: {exc}") from exc
    if status != 200:
        raise SlackError("received non-200 response from Slack")