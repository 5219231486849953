"""
Element handle resolution.

The resolver translates semantic role names into live Playwright
locators and owns every wait in the harness. Page objects never build
selectors themselves and never sleep: they ask the resolver for a handle
and for a bounded wait on a post-condition.

Key behaviours:
- Interaction calls wait (bounded) for the target to be actionable and
  raise ElementNotReady when it never becomes so.
- Post-condition waits poll and raise StateTransitionTimeout.
- Nothing is retried beyond the single bounded wait.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from roominglist.config import HarnessConfig
from roominglist.errors import ElementNotFound, ElementNotReady, StateTransitionTimeout
from roominglist.roles import RoleSpec, load_role_map

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Handle:
    """A semantic role paired with the lazy locator that resolves it."""

    role: str
    locator: Locator

    def __repr__(self) -> str:
        return f"<Handle {self.role}>"


class ElementResolver:
    """
    Resolve roles to handles on one page and perform bounded interactions.

    One resolver belongs to one page; it keeps no handles between calls,
    so every query is a fresh projection of the rendered page.

    Attributes:
        page: Playwright page instance.
        config: Harness configuration class supplying the wait bounds.
        roles: Role mapping table in use.
    """

    def __init__(
        self,
        page: Page,
        config: type[HarnessConfig] = HarnessConfig,
        roles: dict[str, RoleSpec] | None = None,
    ):
        self.page = page
        self.config = config
        self.roles = roles if roles is not None else load_role_map(config.ROLE_MAP_FILE)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def spec_for(self, role: str) -> RoleSpec:
        try:
            return self.roles[role]
        except KeyError:
            raise KeyError(
                f"Unknown role {role!r}; known roles: {sorted(self.roles)}"
            ) from None

    def locate(
        self,
        role: str,
        within: Handle | None = None,
        has_text: str | None = None,
    ) -> Handle:
        """
        Build a lazy handle for a role.

        Args:
            role: Semantic role name.
            within: Optional handle to scope the search to.
            has_text: Optional text the element must contain.

        Returns:
            Handle matching zero or more elements.
        """
        spec = self.spec_for(role)
        scope = within.locator if within is not None else self.page

        if spec.strategy == "test_id":
            locator = scope.get_by_test_id(spec.value)
        elif spec.strategy == "text":
            locator = scope.get_by_text(spec.value, exact=True)
        else:
            locator = scope.locator(spec.value)

        if has_text is not None:
            locator = locator.filter(has_text=has_text)
        return Handle(role, locator)

    def find(
        self,
        role: str,
        within: Handle | None = None,
        has_text: str | None = None,
    ) -> list[Handle]:
        """Return one handle per element currently matching the role."""
        handle = self.locate(role, within=within, has_text=has_text)
        return [Handle(role, locator) for locator in handle.locator.all()]

    def find_first(
        self,
        role: str,
        within: Handle | None = None,
        has_text: str | None = None,
    ) -> Handle:
        """
        Return the first element matching the role once it is attached.

        Raises:
            ElementNotFound: Nothing matched within the action timeout.
        """
        handle = self.locate(role, within=within, has_text=has_text)
        first = Handle(role, handle.locator.first)
        try:
            first.locator.wait_for(state="attached", timeout=self.config.ACTION_TIMEOUT_MS)
        except PlaywrightTimeoutError as exc:
            logger.warning("No element for role %s after %sms", role, self.config.ACTION_TIMEOUT_MS)
            raise ElementNotFound(role, "find_first", "no matching element") from exc
        return first

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def is_visible(self, handle: Handle) -> bool:
        """Instantaneous visibility read; False when nothing matches."""
        return handle.locator.first.is_visible()

    def text_of(self, handle: Handle) -> str | None:
        """Text content of the first match, or None when nothing matches."""
        if handle.locator.count() == 0:
            return None
        return handle.locator.first.text_content(timeout=self.config.ACTION_TIMEOUT_MS)

    def attribute_or_child_text(self, handle: Handle, child_role: str) -> str | None:
        """
        Read a child role inside ``handle``.

        Returns the child's declared attribute when the role names one and
        the attribute is present, otherwise the child's text. None when the
        child is not rendered.
        """
        spec = self.spec_for(child_role)
        child = self.locate(child_role, within=handle)
        if child.locator.count() == 0:
            return None

        if spec.attribute:
            value = child.locator.first.get_attribute(
                spec.attribute, timeout=self.config.ACTION_TIMEOUT_MS
            )
            if value is not None:
                return value
        return self.text_of(child)

    def input_value(self, handle: Handle) -> str:
        return handle.locator.input_value(timeout=self.config.ACTION_TIMEOUT_MS)

    def evaluate(self, handle: Handle, expression: str) -> Any:
        return handle.locator.evaluate(expression, timeout=self.config.ACTION_TIMEOUT_MS)

    # -------------------------------------------------------------------------
    # Interactions
    # -------------------------------------------------------------------------

    def click(self, handle: Handle) -> None:
        self._interact(handle, "click", lambda timeout: handle.locator.click(timeout=timeout))

    def fill(self, handle: Handle, text: str) -> None:
        self._interact(handle, "fill", lambda timeout: handle.locator.fill(text, timeout=timeout))

    def press(self, handle: Handle, key: str) -> None:
        self._interact(handle, f"press {key}", lambda timeout: handle.locator.press(key, timeout=timeout))

    def _interact(self, handle: Handle, operation: str, action: Callable[[int], None]) -> None:
        timeout = self.config.ACTION_TIMEOUT_MS
        try:
            action(timeout)
        except PlaywrightTimeoutError as exc:
            logger.warning("%s on %s not actionable after %sms", operation, handle.role, timeout)
            raise ElementNotReady(
                handle.role, operation, f"not actionable within {timeout}ms"
            ) from exc

    # -------------------------------------------------------------------------
    # Waits
    # -------------------------------------------------------------------------

    def await_visible(self, handle: Handle, operation: str = "await visible") -> None:
        """
        Wait until the handle is visible.

        Raises:
            ElementNotReady: Still not visible after the action timeout.
        """
        timeout = self.config.ACTION_TIMEOUT_MS
        try:
            handle.locator.first.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            logger.warning("%s: %s not visible after %sms", operation, handle.role, timeout)
            raise ElementNotReady(handle.role, operation, f"not visible within {timeout}ms") from exc

    def await_hidden(self, handle: Handle, operation: str = "await hidden") -> None:
        """
        Wait until the handle is hidden or detached.

        Raises:
            StateTransitionTimeout: Still visible after the transition timeout.
        """
        timeout = self.config.TRANSITION_TIMEOUT_MS
        try:
            handle.locator.first.wait_for(state="hidden", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            logger.warning("%s: %s still visible after %sms", operation, handle.role, timeout)
            raise StateTransitionTimeout(
                handle.role, operation, f"still visible after {timeout}ms"
            ) from exc

    def wait_until(
        self,
        predicate: Callable[[], bool],
        role: str,
        operation: str,
        timeout_ms: int | None = None,
    ) -> None:
        """
        Poll ``predicate`` until it returns True.

        Raises:
            StateTransitionTimeout: The predicate never held within the bound.
        """
        timeout_ms = timeout_ms if timeout_ms is not None else self.config.TRANSITION_TIMEOUT_MS
        deadline = time.monotonic() + timeout_ms / 1000
        while True:
            if predicate():
                return
            if time.monotonic() >= deadline:
                break
            self.page.wait_for_timeout(self.config.POLL_INTERVAL_MS)

        logger.warning("%s on %s: condition not met after %sms", operation, role, timeout_ms)
        raise StateTransitionTimeout(role, operation, f"condition not met within {timeout_ms}ms")

    def await_stable(
        self,
        read: Callable[[], T],
        role: str,
        operation: str,
        timeout_ms: int | None = None,
        quiet_ms: int | None = None,
    ) -> T:
        """
        Poll ``read`` until its value stops changing.

        The value is considered settled once it has stayed equal for
        ``quiet_ms``.

        Returns:
            The settled value.

        Raises:
            StateTransitionTimeout: The value kept changing past the bound.
        """
        timeout_ms = timeout_ms if timeout_ms is not None else self.config.SETTLE_TIMEOUT_MS
        quiet_ms = quiet_ms if quiet_ms is not None else self.config.SETTLE_QUIET_MS
        deadline = time.monotonic() + timeout_ms / 1000

        value = read()
        changed_at = time.monotonic()
        while True:
            now = time.monotonic()
            if (now - changed_at) * 1000 >= quiet_ms:
                return value
            if now >= deadline:
                break
            self.page.wait_for_timeout(self.config.POLL_INTERVAL_MS)
            current = read()
            if current != value:
                value = current
                changed_at = time.monotonic()

        logger.warning("%s on %s: content did not settle after %sms", operation, role, timeout_ms)
        raise StateTransitionTimeout(role, operation, f"content did not settle within {timeout_ms}ms")
