"""Headless agent harness for the Snake engine."""
