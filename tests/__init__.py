"""Tests for gqlcheck"""
