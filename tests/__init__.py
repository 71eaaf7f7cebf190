#!/usr/bin/env python3
"""
Test suite for the matching engine.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""
