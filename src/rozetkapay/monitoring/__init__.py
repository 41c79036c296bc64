"""Prometheus metrics for request, retry and fallback activity."""
