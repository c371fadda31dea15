"""
Test suite for snugint

Contains:
- tests/unit/          : Unit tests for individual modules (pytest, hypothesis)
"""
