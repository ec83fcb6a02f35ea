"""Pricing service: per-vehicle prices served over HTTP."""
