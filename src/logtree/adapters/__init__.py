"""Adapters: concrete writers, configuration sources and logging bridge."""
