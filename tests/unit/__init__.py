"""
Unit tests for harness logic that needs no browser or server.
"""
