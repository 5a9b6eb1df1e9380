"""Batch runner: generate programs from JSON snapshots."""
