"""Tests for gqlcheck.language"""
