"""
Test suite for the Rooming List verification harness.

This package contains:
- unit/: Harness logic without a browser (normalizer, extractor, filter
  bookkeeping, role table, resolver and page objects over mocked locators)
- integration/: Demo app listing API and the API client
- ui/: Browser tests driving the demo app through the page objects
"""
