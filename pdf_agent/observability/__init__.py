"""Logging configuration and helpers."""
