"""
Integration tests for the demo Rooming List API.

Tests use the Flask test client and cover:
- Listing sort order and status filtering
- Input validation errors
- Bookings of a rooming list
- The harness API client against the demo app
"""
