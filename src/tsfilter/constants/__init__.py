"""Constant tables shared across tsfilter modules."""
