import re
from concurrent.futures import ThreadPoolExecutor

from sqlboil.randomize.random import (
    ALPHABET_ALL,
    Seed,
    rand_box,
    rand_byte_slice,
    rand_circle,
    rand_lsn,
    rand_mac_addr,
    rand_money,
    rand_net_addr,
    rand_point,
    rand_str,
    rand_tx_id,
    stable_db_name,
)


def test_stable_db_name():
    one, two = stable_db_name("awesomedb"), stable_db_name("awesomedb")
    assert len(one) == 40
    assert one == two


def test_stable_db_name_lowercase_and_distinct():
    name = stable_db_name("awesomedb")
    assert re.fullmatch(r"[a-z]{40}", name)
    assert stable_db_name("otherdb") != name


def test_seed_counts_up():
    s = Seed(5)
    assert s.next_int() == 6
    assert s.next_int() == 7


def test_seed_wraps_at_max_int32():
    s = Seed(2147483646)
    assert s.next_int() == 0


def test_seed_thread_safe():
    s = Seed(0)
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: s.next_int(), range(400)))
    assert sorted(results) == list(range(1, 401))
    assert s.next_int() == 401


def test_rand_str():
    value = rand_str(Seed(0), 10)
    assert len(value) == 10
    assert all(ch in ALPHABET_ALL for ch in value)
    assert value == ALPHABET_ALL[1:11]


def test_rand_byte_slice():
    value = rand_byte_slice(Seed(254), 3)
    assert value == bytes([255, 0, 1])


def test_rand_point():
    a, b = map(int, re.fullmatch(r"\((\d+),(\d+)\)", rand_point()).groups())
    assert 0 <= a < 100
    assert b == a + 1


def test_rand_box():
    m = re.fullmatch(r"\((\d+),(\d+)\),\((\d+),(\d+)\)", rand_box())
    a, b, c, d = map(int, m.groups())
    assert (b, c, d) == (a + 1, a + 2, a + 3)


def test_rand_circle():
    m = re.fullmatch(r"\(\((\d+),(\d+)\),(\d+)\)", rand_circle())
    assert all(0 <= int(v) < 100 for v in m.groups())


def test_rand_net_addr():
    octets = [int(o) for o in rand_net_addr().split(".")]
    assert len(octets) == 4
    assert all(1 <= o <= 254 for o in octets)


def test_rand_mac_addr():
    mac = rand_mac_addr()
    assert re.fullmatch(r"([0-9a-f]{2}:){5}[0-9a-f]{2}", mac)
    assert int(mac[:2], 16) & 2 == 2


def test_rand_lsn():
    a, b = map(int, rand_lsn().split("/"))
    assert 0 <= a < 9000000
    assert 0 <= b < 9000000


def test_rand_tx_id():
    m = re.fullmatch(r"(\d+):(\d+):(\d+),(\d+)", rand_tx_id())
    a, b, c, d = map(int, m.groups())
    assert 100 <= a < 300
    assert (b, c, d) == (a + 100, a, a + 50)


def test_rand_money():
    assert rand_money(Seed(41)) == "42.00"