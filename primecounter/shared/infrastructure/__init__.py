"""
Shared Infrastructure
=====================

Technical adapters for external services.

- lookup: remote nth-prime lookup providers
"""
