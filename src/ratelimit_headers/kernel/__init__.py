"""Kernel – errors, value types and clocks shared by every layer."""
