"""
PrimeCounter Shared Kernel
==========================

Architecture:
- core: EventBus, configuration, logging setup
- infrastructure: Technical adapters (remote lookup providers)
- domain: Business logic (primes)
"""
