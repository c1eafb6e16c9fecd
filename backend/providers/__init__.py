"""External provider client factories (Document AI, OpenAI)."""

from .base import DocumentAIConfig, OpenAIConfig, Provider
from .factory import ProviderClients, build_clients, get_providers

__all__ = [
    "DocumentAIConfig",
    "OpenAIConfig",
    "Provider",
    "ProviderClients",
    "build_clients",
    "get_providers",
]
