"""Adapters: concrete storage and export backends for the Core."""
