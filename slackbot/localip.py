"""Discovery of the host's local and public IP addresses."""

from __future__ import annotations

import ipaddress
import socket
import urllib.request
from dataclasses import dataclass

import psutil

PUBLIC_IP_URL = "https://checkip.amazonaws.com"

_IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


@dataclass(frozen=True)
class IPAddrInfo:
    """An IP address with its version ("IPv4" or "IPv6") and locality."""

    address: str
    version: str
    local: bool = True


def _unmap(ip: _IPAddress) -> _IPAddress:
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip


def _info(ip: _IPAddress, local: bool) -> IPAddrInfo:
    version = "IPv4" if ip.version == 4 else "IPv6"
    return IPAddrInfo(address=str(ip), version=version, local=local)


def get_local_ip_addrs() -> list[IPAddrInfo]:
    """Return every non-loopback IPv4 and IPv6 address of the host's interfaces."""
    found: list[IPAddrInfo] = []
    for addrs in psutil.net_if_addrs().values():
        for addr in addrs:
            if addr.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            try:
                ip = ipaddress.ip_address(addr.address.split("%", 1)[0])
            except ValueError:
                continue
            ip = _unmap(ip)
            if ip.is_loopback:
                continue
            found.append(_info(ip, local=True))
    return found


def parse_public_ip(body: bytes | str) -> IPAddrInfo:
    """Parse the body of an IP echo service into a public IPAddrInfo.

    Raises ValueError when the body does not hold a single IP address.
    """
    text = body.decode("ascii") if isinstance(body, bytes) else body
    text = text.strip()
    if not text or "%" in text:
        raise ValueError(f"invalid IP address in response: {text!r}")
    try:
        ip = ipaddress.ip_address(text)
    except ValueError as exc:
        raise ValueError(f"invalid IP address in response: {text!r}") from exc
    return _info(_unmap(ip), local=False)


def get_public_ip_addr(url: str = PUBLIC_IP_URL, timeout: float = 10.0) -> IPAddrInfo:
    """Ask the IP echo service at *url* for the host's public address."""
    with urllib.request.urlopen(url, timeout=timeout) as response:
        body = response.read()
    return parse_public_ip(body)