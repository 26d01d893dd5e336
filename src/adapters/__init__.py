"""Inbound adapters (CLI and UI)."""
