import socket

import pytest

from potprobe.delay import classify_delay, measure_delay, run_delay_check


@pytest.fixture
def listening():
    """An address whose listener completes handshakes without ever accepting."""
    with socket.create_server(("127.0.0.1", 0)) as listener:
        yield "127.0.0.1:%d" % listener.getsockname()[1]


@pytest.fixture
def refused():
    with socket.create_server(("127.0.0.1", 0)) as listener:
        address = "127.0.0.1:%d" % listener.getsockname()[1]
    return address


@pytest.mark.parametrize(
    "delay, score",
    [
        (1500, 100),
        (1000, 75),
        (800, 75),
        (700, 50),
        (600, 50),
        (500, 25),
        (300, 25),
        (250, 10),
        (100, 10),
        (0, 10),
    ],
)
def test_classify_delay_thresholds(delay, score):
    _, result = classify_delay(delay)
    assert result == score


def test_classify_delay_formats_two_decimals():
    message, _ = classify_delay(1500)
    assert "1500.00 ms" in message
    assert message.startswith("🚨 HIGH delay")


def test_classify_delay_fast_message():
    message, _ = classify_delay(12.5)
    assert message.startswith("📶 Fast response")


def test_measure_delay_local_server_is_quick(listening):
    assert 0 <= measure_delay(listening) < 4000


def test_measure_delay_refused_raises(refused):
    with pytest.raises(OSError):
        measure_delay(refused)


def test_run_delay_check_local_server(listening):
    message, score = run_delay_check(listening)
    assert score == 10
    assert message.startswith("📶 Fast response")


def test_run_delay_check_refused(refused):
    message, score = run_delay_check(refused)
    assert score == 0
    assert message.startswith("❌ Connection error")