# slackbot

A small command-line tool that posts text from standard input to a Slack
channel through an incoming webhook. Every message carries the current date
and time, the machine's host name and its IP addresses (the local ones plus
the public address, when it can be found), so alerts from scripts and cron
jobs show where they came from.

## Installation

```
pip install .
```

This installs the `slackbot` command.

## Configuration

The webhook URL is read from a YAML file:

```yaml
webhook: https://hooks.example.com/services/placeholder
```

The config file is found as follows:

1. If the `SLACKBOT_CONFIG` environment variable is set and not empty, its
   value is the path of the config file. In that case the `-config` option is
   not accepted.
2. Otherwise the `-config` (or `--config`) option gives the path.
3. Without either, `/etc/slackbot/config.yml` is used.

Unknown keys in the file are ignored; a missing `webhook` key leaves it empty.

## Usage

Pipe the text to send into `slackbot`:

```
echo "[ERROR] Some error details" | slackbot

cat file.txt | slackbot

echo "Text message" | slackbot -config ./config.yml
```

Show the help text:

```
slackbot -help
```

`--help` and `-h` work as well.

Progress and errors are logged to standard error with the prefix
`slackbot: `. The command exits with status 1 when nothing is piped in (an
interactive terminal on standard input counts as no input), when the config
file cannot be read or parsed, or when Slack answers with anything other than
HTTP 200. A failure to look up the public IP address is only logged; the
message is still sent with the local addresses.

## Message layout

The message sent to Slack has the piped text as its fallback `text` and four
blocks:

- a context line with the date and time (`YYYY-MM-DD HH:MM:SS`) and the host
  name,
- a section listing the IPv4 addresses as inline code, separated by commas;
  when there are none, the first address found (IPv6) is shown, and `unknown`
  when there are no addresses at all. The list is labelled
  `:information_source: *IPv4*` when the first address is IPv4,
- a divider,
- the piped text in a code block.

Loopback addresses are left out of the local addresses.

## Using it from Python

```python
from slackbot.config import load_config
from slackbot.localip import get_local_ip_addrs, get_public_ip_addr
from slackbot.notify import prepare_message, send_slack_notification

config = load_config("./config.yml")
ips = get_local_ip_addrs()
msg = prepare_message("web-01", "disk almost full", ips)
send_slack_notification(config.webhook, msg)
```

- `slackbot.config.load_config(path)` returns a `Config` with a `webhook`
  field; it raises `OSError` when the file cannot be read and `ValueError`
  when its content is not a valid configuration.
- `slackbot.localip.get_local_ip_addrs()` returns a list of `IPAddrInfo`
  (`address`, `version` — `"IPv4"` or `"IPv6"` — and `local`).
  `get_public_ip_addr(url, timeout)` asks an IP echo service for the public
  address; `parse_public_ip(body)` parses such a service's reply and raises
  `ValueError` when it does not hold an IP address.
- `slackbot.notify.prepare_ip_list(ips)` formats the address list;
  `prepare_message(hostname, message, ips, now=None)` builds a
  `SlackMessage`, whose `to_dict()` and `to_json()` give the webhook payload.
  `send_slack_notification(webhook_url, message, timeout=10.0)` posts it and
  raises `slackbot.notify.SlackError` when Slack does not answer 200.
- `slackbot.cli.Command` runs one invocation; `Command.run()` raises
  `RuntimeError` naming the step that failed. `slackbot.cli.main(argv=None)`
  is the command's entry point and returns its exit status.

## Running the tests

```
pip install .[test]
pytest
```