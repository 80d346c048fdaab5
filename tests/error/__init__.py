"""Tests for gqlcheck.error"""
