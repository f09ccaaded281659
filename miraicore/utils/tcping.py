"""Measure reachability of a TCP endpoint by timing connections."""

import socket
import time
from dataclasses import dataclass

_FAILED_MILLIS = 9999
_CONNECT_TIMEOUT = 10.0
_PAUSE = 0.1


@dataclass
class PingResult:
    packets_sent: int
    packets_loss: int
    avg_time_mill: int


def _parse_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {address!r}")
    return host.strip("[]"), int(port)


def _tcping(address: str) -> int:
    start = time.monotonic()
    with socket.create_connection(_parse_address(address), timeout=_CONNECT_TIMEOUT):
        pass
    return int((time.monotonic() - start) * 1000)


def run_tcp_ping_loop(address: str, count: int) -> PingResult:
    """Connect count times to "host:port" and report losses and mean time."""
    result = PingResult(packets_sent=count, packets_loss=count, avg_time_mill=_FAILED_MILLIS)
    if count <= 0:
        return result
    durations = []
    for _ in range(count):
        try:
            durations.append(_tcping(address))
            result.packets_loss -= 1
        except (OSError, ValueError):
            pass
        time.sleep(_PAUSE)
    if durations:
        total = sum(durations)
        result.avg_time_mill = total // len(durations) if len(durations) > 1 else total
    return result