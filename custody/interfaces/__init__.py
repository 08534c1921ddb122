"""Outer interfaces to the custody engine."""
