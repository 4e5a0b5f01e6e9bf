"""
Lookup Interface - remote question-answering providers.
"""

from primecounter.shared.infrastructure.lookup.base import (
    PrimeLookupProvider,
    PrimeLookupError,
    LookupNetworkError,
    LookupUnparseableError,
    LookupServiceError,
)
from primecounter.shared.infrastructure.lookup.models import WolframAlphaResult
from primecounter.shared.infrastructure.lookup.provider_factory import (
    ProviderFactory,
    ProviderType,
)
from primecounter.shared.infrastructure.lookup.wolfram_provider import WolframAlphaProvider

__all__ = [
    # Base
    "PrimeLookupProvider",
    "PrimeLookupError",
    "LookupNetworkError",
    "LookupUnparseableError",
    "LookupServiceError",
    # Models
    "WolframAlphaResult",
    # Factory
    "ProviderFactory",
    "ProviderType",
    # Providers
    "WolframAlphaProvider",
]
