"""
Shared Domain Layer
===================

Business logic independent of the state container.

- primes: primality predicate and nth prime lookup
"""
