import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from slackbot.localip import IPAddrInfo, get_local_ip_addrs, get_public_ip_addr, parse_public_ip


class _EchoHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        body = self.server.bodies.get(self.path, b"")
        self.send_response(200)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def echo_server():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    server.bodies = {}
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server, f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def test_parse_ipv4_with_newline():
    assert parse_public_ip(b"203.0.113.7\n") == IPAddrInfo("203.0.113.7", "IPv4", False)


def test_parse_ipv6_string():
    assert parse_public_ip("  2001:db8::1 ") == IPAddrInfo("2001:db8::1", "IPv6", False)


def test_parse_ipv4_mapped_is_ipv4():
    info = parse_public_ip("::ffff:192.0.2.1")
    assert (info.address, info.version) == ("192.0.2.1", "IPv4")


@pytest.mark.parametrize("body", [b"", b"not an ip", b"300.1.1.1", "fe80::1%eth0", b"\xff\xfe"])
def test_parse_invalid_raises(body):
    with pytest.raises(ValueError):
        parse_public_ip(body)


def test_local_addresses_are_local_and_not_loopback():
    import ipaddress

    for info in get_local_ip_addrs():
        assert info.local is True
        assert info.version in {"IPv4", "IPv6"}
        ip = ipaddress.ip_address(info.address)
        assert not ip.is_loopback
        assert (ip.version == 4) == (info.version == "IPv4")


def test_get_public_ip_addr(echo_server):
    server, base = echo_server
    server.bodies["/"] = b"198.51.100.23\n"
    assert get_public_ip_addr(base + "/", timeout=5) == IPAddrInfo("198.51.100.23", "IPv4", False)


def test_get_public_ip_addr_bad_body(echo_server):
    server, base = echo_server
    server.bodies["/bad"] = b"<html>oops</html>"
    with pytest.raises(ValueError):
        get_public_ip_addr(base + "/bad", timeout=5)