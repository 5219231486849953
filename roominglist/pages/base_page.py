"""
Base Page class for the Page Object Model.

This class provides common functionality shared by all page objects:
navigation, the element resolver and name cleaning.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from roominglist.config import HarnessConfig
from roominglist.resolver import ElementResolver
from roominglist.text import clean

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base class for all page objects.

    All page objects should inherit from this class. Page objects built
    for the same page share one resolver.

    Attributes:
        page: Playwright page instance.
        base_url: Base URL of the application.
        resolver: Element resolver for the page.
    """

    def __init__(
        self,
        page: Page,
        base_url: str,
        resolver: ElementResolver | None = None,
        config: type[HarnessConfig] = HarnessConfig,
    ):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
            resolver: Resolver to share; a new one is built when omitted.
            config: Harness configuration class.
        """
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.resolver = resolver or ElementResolver(page, config)
        self.config = self.resolver.config

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a specific path.

        Args:
            path: URL path relative to base URL.
        """
        url = f"{self.base_url}{path}"
        logger.info("Navigating to %s", url)
        self.page.goto(url)

    def wait_for_page_load(self) -> None:
        """Wait for page to finish loading."""
        self.page.wait_for_load_state("networkidle")

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    @staticmethod
    def clean_event_name(name: str | None) -> str:
        """Strip bracket wrapping and whitespace from a rendered event name."""
        return clean(name)
