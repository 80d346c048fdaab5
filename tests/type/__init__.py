"""Tests for gqlcheck.type"""
