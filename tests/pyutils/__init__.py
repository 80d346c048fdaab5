"""Tests for gqlcheck.pyutils"""
