"""Shared helpers for the Bistro services (MongoDB, logging, id types)."""
