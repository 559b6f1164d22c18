"""Shared platform infrastructure: errors, logging, JSON helpers and config."""
