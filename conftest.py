import os
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from config.settings import load_settings
from drivers.playwright_driver import PlaywrightDriver
from utils.logger import init_logger
from utils.report_sink import ReportSink

LIVE_MARKERS = ("ui", "api")
ARTIFACT_DIRS = ("artifacts", "tracing")


# ================== Options / Markers ==================
def pytest_addoption(parser):
    parser.addoption("--live", action="store_true", default=False,
                     help="run ui/api tests against saucedemo.com and fakestoreapi.com")


def pytest_configure(config):
    settings = load_settings()
    init_logger(settings.log_level, settings.log_file)


def pytest_collection_modifyitems(config, items):
    """ui/api tests hit real third-party targets: skipped unless --live or LIVE_TESTS=1"""
    if config.getoption("--live") or os.getenv("LIVE_TESTS") == "1":
        return
    skip_live = pytest.mark.skip(reason="live target test, run with --live")
    for item in items:
        if any(item.get_closest_marker(marker) for marker in LIVE_MARKERS):
            item.add_marker(skip_live)


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def settings():
    return load_settings()


@pytest.fixture(scope="session")
def ui_report(settings):
    return ReportSink(settings.ui_report_path)


@pytest.fixture(scope="session")
def api_report(settings):
    return ReportSink(settings.api_report_path)


@pytest.fixture(scope="session")
def clean_artifacts():
    """Empty artifacts/ and tracing/ once, before the first browser test"""
    for path in ARTIFACT_DIRS:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)
        p.mkdir()


@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, settings, clean_artifacts):
    """One browser process per session"""
    browser = playwright_instance.chromium.launch(headless=settings.headless)
    yield browser
    browser.close()


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    A fresh context per test, closed on every exit path.
    Tracing runs for every attempt; the trace is kept only when the test failed.
    """
    attempt = getattr(request.node, "execution_count", 1)
    attempt_dir = f"attempt_{attempt}"
    record_tracing_dir = Path("tracing") / request.node.name / attempt_dir
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    context = browser.new_context(viewport={"width": 1280, "height": 720})
    context.tracing.start(name=attempt_dir, screenshots=True, snapshots=True, sources=True)

    yield context

    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)
    finally:
        context.close()

    if not getattr(request.node, "_failed", False):
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        return

    target_dir = _artifact_dir(request.node, attempt)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")
        allure.attach.file(target_dir / "trace.zip", name="Playwright-Trace.zip")
    shutil.rmtree(record_tracing_dir, ignore_errors=True)


@pytest.fixture(scope="function")
def page(context):
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture(scope="function")
def driver(page, settings):
    """BrowserDriver sitting on the saucedemo login page"""
    driver = PlaywrightDriver(page)
    driver.navigate(settings.urls["login"])
    return driver


# ================== Pytest Hook: failure artifacts ==================
def _artifact_dir(item, attempt: int) -> Path:
    module_name = item.module.__name__.split(".")[-1]
    class_name = item.cls.__name__ if item.cls else "no_class"
    base_dir = Path("artifacts") / module_name / class_name / item.name / f"attempt_{attempt}"
    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """On a failed call: screenshot + url into artifacts/, attached to allure"""
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call" or not rep.failed:
        return

    page = item.funcargs.get("page")
    if not page:
        return

    # tells the context fixture to keep the trace
    item._failed = True

    base_dir = _artifact_dir(item, getattr(item, "execution_count", 1))
    screenshot = base_dir / "failure.png"
    page.screenshot(path=screenshot, full_page=True)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")

    allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
