# tests/__init__.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Test suite package for the Seedlink station service

"""
Test package for the Seedlink station service.

Includes:
- test_endpoint.py
- test_catalog.py
- test_session.py
- test_cache.py
- test_orchestrator.py
- test_full_stack.py
- test_config.py
- test_rest.py
- test_server.py

Run with: pytest tests/ -v
"""

__version__ = "1.0.0"
