from .oracle import PrimeOracle, extract_first_integer, is_prime, ordinal

__all__ = ["PrimeOracle", "extract_first_integer", "is_prime", "ordinal"]
