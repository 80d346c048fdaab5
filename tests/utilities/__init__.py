"""Tests for gqlcheck.utilities"""
