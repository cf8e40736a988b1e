"""Building the party address list used to connect the computing parties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

__all__ = [
    "STATUS_OK",
    "STATUS_ERROR_DEFAULT",
    "LOCAL_BASE_PORT",
    "ProxyMode",
    "PartyConfig",
    "create_parties",
]

STATUS_OK = 200
STATUS_ERROR_DEFAULT = 201

LOCAL_HOST = "127.0.0.1"
LOCAL_BASE_PORT = 60021
LISTEN_ALL = "0.0.0.0"


class ProxyMode(IntEnum):
    """How traffic between parties is routed."""

    NONE = 0
    GATEWAY = 1


@dataclass
class PartyConfig:
    """Ports and routing mode used when building the party list."""

    self_port: int = 0
    other_port: int = 0
    gateway_port: int = 0
    proxy_mode: ProxyMode = ProxyMode.NONE

    def __post_init__(self) -> None:
        self.proxy_mode = ProxyMode(self.proxy_mode)


def create_parties(
    test_local: bool,
    config: PartyConfig,
    self_rank: int,
    ips: Sequence[str],
) -> str:
    """Return the comma separated ``host:port`` list of all parties.

    In local test mode every party runs on the loopback address with
    consecutive ports starting at ``LOCAL_BASE_PORT``. Otherwise this party
    listens on all interfaces at ``config.self_port`` and peers are reached
    directly (``ProxyMode.NONE``) or through the local gateway
    (``ProxyMode.GATEWAY``).
    """
    if test_local:
        count = max(len(ips), 1)
        return ",".join(f"{LOCAL_HOST}:{LOCAL_BASE_PORT + i}" for i in range(count))

    if not 0 <= self_rank < len(ips):
        raise IndexError(f"self rank {self_rank} out of range for {len(ips)} parties")

    self_entry = f"{LISTEN_ALL}:{config.self_port}"
    if config.proxy_mode is ProxyMode.GATEWAY:
        peer_entry = f"{ips[self_rank]}:{config.gateway_port}"
        return ",".join(
            self_entry if rank == self_rank else peer_entry for rank in range(len(ips))
        )
    return ",".join(
        self_entry if rank == self_rank else f"{ip}:{config.other_port}"
        for rank, ip in enumerate(ips)
    )