"""Tests for gqlcheck.validation"""
