"""Shared fixtures: fake pyppeteer and playwright clients.

Both fakes mirror the parts of each library the engines touch, so the tests
run without either package installed and without a browser.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with mocked engine libraries")


def create_mock_puppeteer(pages=None):
    """Fake ``pyppeteer`` module.

    Returns:
        (client, browser, new_page) where client.connect resolves to browser
        and browser.newPage resolves to new_page.
    """
    new_page = MagicMock(name="puppeteer_new_page")
    browser = MagicMock(name="puppeteer_browser")
    browser.pages = AsyncMock(return_value=list(pages or []))
    browser.newPage = AsyncMock(return_value=new_page)
    browser.disconnect = AsyncMock()

    client = MagicMock(name="pyppeteer")
    client.connect = AsyncMock(return_value=browser)
    return client, browser, new_page


def create_mock_playwright(contexts=None, pages=None):
    """Fake ``async_playwright`` factory.

    Args:
        contexts: Number of browser contexts to expose (default: 1)
        pages: Pages in the first context

    Returns:
        (client, driver, browser, context, new_page)
    """
    new_page = MagicMock(name="playwright_new_page")
    context = MagicMock(name="playwright_context")
    context.pages = list(pages or [])
    context.new_page = AsyncMock(return_value=new_page)

    count = 1 if contexts is None else contexts
    browser = MagicMock(name="playwright_browser")
    browser.contexts = [context] + [MagicMock() for _ in range(count - 1)] if count else []
    browser.close = AsyncMock()

    driver = MagicMock(name="playwright_driver")
    driver.chromium.connect_over_cdp = AsyncMock(return_value=browser)
    driver.stop = AsyncMock()

    client = MagicMock(name="async_playwright")
    client.return_value.start = AsyncMock(return_value=driver)
    return client, driver, browser, context, new_page


@pytest.fixture
def mock_puppeteer():
    """pyppeteer fake with one open page."""
    page = MagicMock(name="puppeteer_page")
    client, browser, new_page = create_mock_puppeteer(pages=[page])
    return client, browser, page


@pytest.fixture
def mock_playwright():
    """playwright fake with one context holding one open page."""
    page = MagicMock(name="playwright_page")
    client, driver, browser, context, new_page = create_mock_playwright(pages=[page])
    return client, driver, browser, page


@pytest.fixture
def make_puppeteer():
    """Factory fixture for pyppeteer fakes with custom pages."""
    return create_mock_puppeteer


@pytest.fixture
def make_playwright():
    """Factory fixture for playwright fakes with custom contexts/pages."""
    return create_mock_playwright
