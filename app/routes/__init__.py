"""
Routes package for the Rooming List demo application.

This package contains route blueprints:
- api: JSON listing endpoints
- views: the events page
"""
