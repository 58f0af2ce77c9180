#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the HTTP surface tests
    python -m pytest tests/ -v -m "not api"

    # Using unittest
    python -m unittest discover tests -v

Tests need no external services. Schema documents are built in memory from
tests/fixtures/schema_fixtures.py or written to pytest's tmp_path.
"""
