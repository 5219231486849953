"""
Playwright fixtures for UI tests.

This module starts the demo Rooming List app on a live server, seeds it
with the demo events and hands tests page objects pointed at it. Set
ROOMING_UI_BASE_URL to drive an already running deployment instead.

Key Concepts Demonstrated:
- Live server fixture for Playwright
- Browser context management
- Screenshot capture on failure
- Page object initialization
"""

import os
import threading
import time
from typing import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

# Set testing environment
os.environ["FLASK_ENV"] = "testing"

from app import create_app
from app.seed import seed_demo_data
from roominglist.api_client import RoomingListApiClient
from roominglist.config import HarnessConfig, get_config
from roominglist.pages import RoomingListPage

SERVER_HOST = "127.0.0.1"
SERVER_PORT = int(os.environ.get("ROOMING_UI_PORT", "5001"))
SERVER_START_TIMEOUT_S = 10


# -----------------------------------------------------------------------------
# Server Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """Create the demo application with its demo events loaded."""
    application = create_app("testing")
    with application.app_context():
        seed_demo_data()
    return application


@pytest.fixture(scope="session")
def live_server(app):
    """
    Start a live Flask server for Playwright tests.

    This fixture starts the Flask development server in a background
    thread and waits for its health endpoint before handing out the URL.

    Yields:
        str: Base URL of the running server.
    """
    external_url = os.environ.get("ROOMING_UI_BASE_URL")
    if external_url:
        yield external_url.rstrip("/")
        return

    server_thread = threading.Thread(
        target=lambda: app.run(host=SERVER_HOST, port=SERVER_PORT, use_reloader=False, threaded=True)
    )
    server_thread.daemon = True
    server_thread.start()

    base_url = f"http://{SERVER_HOST}:{SERVER_PORT}"
    client = RoomingListApiClient(base_url, timeout=1)
    deadline = time.monotonic() + SERVER_START_TIMEOUT_S
    while not client.is_healthy():
        if time.monotonic() >= deadline:
            pytest.fail(f"Demo server did not start on {base_url}")
        time.sleep(0.1)

    yield base_url

    # Server will stop when test session ends (daemon thread)


@pytest.fixture(scope="session")
def harness_config(live_server) -> type[HarnessConfig]:
    """Testing configuration with both URLs pointed at the live server."""
    return type(
        "LiveServerConfig",
        (get_config("testing"),),
        {"BASE_URL": live_server, "API_URL": live_server},
    )


@pytest.fixture(scope="session")
def api_client(harness_config) -> RoomingListApiClient:
    return RoomingListApiClient.from_config(harness_config)


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def browser_context_args():
    """
    Configure browser context options.

    Returns:
        dict: Browser context configuration.
    """
    return {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(browser: Browser, browser_context_args: dict) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    A new context means every test starts with the default filter and
    an empty search field.

    Yields:
        BrowserContext: Fresh browser context.
    """
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    """
    Create a new page (tab) for each test.

    Yields:
        Page: Playwright page object.
    """
    page = context.new_page()
    yield page
    page.close()


# -----------------------------------------------------------------------------
# Page Object Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def rooming_list_page(page: Page, harness_config) -> RoomingListPage:
    """
    RoomingListPage navigated to the events page and rendered.

    Returns:
        RoomingListPage: Page object on the rooming list page.
    """
    rooming_list = RoomingListPage(page, harness_config.BASE_URL, config=harness_config)
    return rooming_list.navigate()


# -----------------------------------------------------------------------------
# Screenshot on Failure
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture screenshot on test failure.

    This pytest hook captures a screenshot when a UI test fails,
    which is invaluable for debugging test failures.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = "test-results/screenshots"
            os.makedirs(screenshot_dir, exist_ok=True)

            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = f"{screenshot_dir}/{test_name}.png"

            try:
                page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as e:
                print(f"\nFailed to capture screenshot: {e}")
