"""Shared utilities: telemetry and ID generators. No business logic."""
