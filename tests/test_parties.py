import pytest

from pirkit.parties import (
    LOCAL_BASE_PORT,
    PartyConfig,
    ProxyMode,
    create_parties,
)

IPS = ["10.1.0.1", "10.1.0.2", "10.1.0.3"]


def test_local_first_entry_is_fixed():
    parties = create_parties(True, PartyConfig(), 0, IPS)
    assert parties.split(",")[0] == "127.0.0.1:60021"


def test_local_ports_are_consecutive():
    entries = create_parties(True, PartyConfig(), 1, IPS).split(",")
    assert len(entries) == len(IPS)
    ports = [int(e.split(":")[1]) for e in entries]
    assert ports == list(range(LOCAL_BASE_PORT, LOCAL_BASE_PORT + len(IPS)))
    assert all(e.startswith("127.0.0.1:") for e in entries)


def test_local_with_no_ips_still_has_one_party():
    assert create_parties(True, PartyConfig(), 0, []) == "127.0.0.1:60021"


def test_direct_mode():
    config = PartyConfig(self_port=12600, other_port=12601, proxy_mode=ProxyMode.NONE)
    entries = create_parties(False, config, 1, IPS).split(",")
    assert entries == [
        f"{IPS[0]}:12601",
        "0.0.0.0:12600",
        f"{IPS[2]}:12601",
    ]


def test_gateway_mode_routes_peers_through_own_ip():
    config = PartyConfig(self_port=12600, other_port=12601, gateway_port=12000,
                         proxy_mode=ProxyMode.GATEWAY)
    entries = create_parties(False, config, 2, IPS).split(",")
    assert entries[2] == "0.0.0.0:12600"
    assert entries[0] == entries[1] == f"{IPS[2]}:12000"


def test_proxy_mode_from_int():
    config = PartyConfig(proxy_mode=1)
    assert config.proxy_mode is ProxyMode.GATEWAY


def test_unknown_proxy_mode_rejected():
    with pytest.raises(ValueError):
        PartyConfig(proxy_mode=7)


def test_rank_out_of_range():
    with pytest.raises(IndexError):
        create_parties(False, PartyConfig(), 3, IPS)


def test_no_trailing_comma():
    config = PartyConfig(self_port=1, other_port=2)
    parties = create_parties(False, config, 0, IPS)
    assert not parties.endswith(",")
    assert parties.count(",") == len(IPS) - 1