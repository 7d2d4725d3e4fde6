import pytest

from config.settings import Settings, Timeouts
from fake_site import FakeClock, FakeSauceDemo
from utils.report_sink import ReportSink


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def site(clock):
    return FakeSauceDemo(clock)


@pytest.fixture
def report(tmp_path):
    return ReportSink(tmp_path / "reports" / "TestResults.txt")


@pytest.fixture
def timeouts():
    """Short waits; the fake clock makes them free anyway"""
    return Timeouts(element=1.0, probe=0.5, poll=0.1, retry_attempts=3, retry_backoff=2.0)


@pytest.fixture
def settings(timeouts, tmp_path):
    return Settings(timeouts=timeouts, report_dir=tmp_path / "reports")


@pytest.fixture
def page_kwargs(timeouts, clock):
    return {"timeouts": timeouts, "clock": clock.monotonic, "sleep": clock.sleep}
