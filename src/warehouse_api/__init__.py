"""Warehouse management REST service."""
