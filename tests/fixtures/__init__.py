"""Shared test fixtures: sample records and mock HTTP responses."""
