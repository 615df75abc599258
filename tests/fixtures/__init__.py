"""Shared test fixtures and canned GitHub payloads."""
