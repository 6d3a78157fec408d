"""Presentation layer: fluent DSL and pytest plugin."""
