from __future__ import annotations

import logging
import socket
import threading
import time

from svccheck.checks.results import CheckResult

logger = logging.getLogger(__name__)

INVALID_ADDRESS_FORMAT = "invalid address format (should be IP:port)"


def is_well_formed(address: str) -> bool:
    return ":" in address


def split_address(address: str) -> tuple[str, str]:
    """
    Split "host:port" on the last colon. Bracketed IPv6 hosts
    ("[::1]:22") come back without the brackets; an unbracketed host
    that still contains a colon ("::1:22") is rejected.
    """
    host, _, port = address.rpartition(":")
    if host.startswith("[") and host.endswith("]"):
        return host[1:-1], port
    if ":" in host:
        raise ValueError(f"address {address}: too many colons in address")
    return host, port


def _resolve(host: str, port: str, timeout_s: float) -> list[tuple]:
    """getaddrinfo bounded by timeout_s; a stuck lookup is left on a daemon thread."""
    box: dict = {}

    def _do() -> None:
        try:
            box["infos"] = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
        except Exception as e:
            box["error"] = e

    t = threading.Thread(target=_do, name=f"resolve-{host}", daemon=True)
    t.start()
    t.join(max(0.0, timeout_s))
    if t.is_alive():
        raise TimeoutError("timed out")
    if "error" in box:
        raise box["error"]
    return box["infos"]


def _connect(host: str, port: str, deadline: float) -> None:
    """
    Resolve and connect to each address in turn, all within one deadline.
    Closes the first connection that succeeds; raises the last error otherwise.
    """
    infos = _resolve(host, port, deadline - time.perf_counter())
    if not infos:
        raise OSError("getaddrinfo returns an empty list")

    last_error: Exception | None = None
    for family, type_, proto, _, sockaddr in infos:
        remaining = deadline - time.perf_counter()
        if remaining <= 0:
            raise TimeoutError("timed out")
        sock = socket.socket(family, type_, proto)
        try:
            sock.settimeout(remaining)
            sock.connect(sockaddr)
            return
        except OSError as e:
            last_error = e
        finally:
            sock.close()

    assert last_error is not None
    raise last_error


def _error_text(e: Exception) -> str:
    return str(e) or e.__class__.__name__


def run_tcp(address: str, timeout_s: float) -> CheckResult:
    start = time.perf_counter()

    if not is_well_formed(address):
        logger.debug("Skipping malformed address %r", address)
        return CheckResult(
            address=address,
            available=False,
            duration_s=time.perf_counter() - start,
            error=INVALID_ADDRESS_FORMAT,
        )

    try:
        host, port = split_address(address)
        # Port may be numeric or a service name; getaddrinfo resolves both.
        _connect(host, port, deadline=start + timeout_s)
        duration_s = time.perf_counter() - start
        logger.debug("%s accepted connection in %.3fs", address, duration_s)
        return CheckResult(address=address, available=True, duration_s=duration_s)
    except Exception as e:
        duration_s = time.perf_counter() - start
        logger.debug("%s failed after %.3fs: %s", address, duration_s, e)
        return CheckResult(
            address=address,
            available=False,
            duration_s=duration_s,
            error=_error_text(e),
        )
