import pytest

from cpr.options import LocalPort, LowSpeed, MultiRange, Proxies, Range, ReserveSize


def test_range_defaults():
    whole = Range(None, None)
    assert whole.resume_from == 0
    assert whole.finish_at == -1
    assert str(whole) == "0-"


def test_range_both_limits():
    assert str(Range(2, 3)) == "2-3"


def test_range_upper_limit_only():
    r = Range(None, 5)
    assert str(r) == f"0-{r.finish_at}"


def test_range_lower_limit_only():
    r = Range(1, None)
    assert str(r) == f"{r.resume_from}-"


def test_range_negative_start_omitted():
    r = Range(-4, 9)
    assert str(r) == f"-{r.finish_at}"


def test_multi_range_joins_ranges():
    first, second = Range(None, 3), Range(5, 6)
    assert str(MultiRange(first, second)) == f"{first}, {second}"
    assert str(MultiRange(first)) == str(first)
    assert str(MultiRange()) == ""


def test_local_port_int():
    assert int(LocalPort(8080)) == 8080


@pytest.mark.parametrize("port", [-1, 65536])
def test_local_port_out_of_range(port):
    with pytest.raises(ValueError):
        LocalPort(port)


def test_low_speed_fields():
    low = LowSpeed(1024, 10)
    assert (low.limit, low.time) == (1024, 10)


def test_reserve_size_default():
    assert ReserveSize().size == 0
    assert ReserveSize(512).size == 512


def test_proxies_lookup():
    proxies = Proxies({"http": "127.0.0.1:3128"})
    assert proxies.has("http")
    assert not proxies.has("https")
    assert proxies["http"] == "127.0.0.1:3128"
    assert len(proxies) == 1


def test_proxies_missing_raises():
    with pytest.raises(KeyError):
        Proxies()["http"]


def test_proxies_iterates_sorted():
    proxies = Proxies({"https": "a", "http": "b"})
    assert list(proxies) == ["http", "https"]