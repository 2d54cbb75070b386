"""Utility helpers shared across SmartSpend modules."""
