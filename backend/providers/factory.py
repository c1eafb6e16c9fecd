"""Factory functions for creating provider clients at startup."""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from shared.exceptions import ConfigurationError

from .base import DocumentAIConfig, OpenAIConfig
from .documentai import DocumentAIProvider
from .openai import OpenAIProvider

logger = logging.getLogger(__name__)


@dataclass
class ProviderClients:
    """Provider clients built once per process.

    A client is None when its provider is not configured; the gateway that
    needs it raises ConfigurationError when called.
    """

    documentai: Optional[Any] = None
    llm: Optional[Any] = None
    errors: dict[str, str] = field(default_factory=dict)


def get_providers() -> dict[str, Any]:
    """Get one instance of each provider type.

    Returns:
        Dictionary mapping provider names to provider instances.
        Keys are: "documentai", "openai"
    """
    return {
        "documentai": DocumentAIProvider(),
        "openai": OpenAIProvider(),
    }


def build_clients(
    documentai_config: DocumentAIConfig,
    openai_config: OpenAIConfig,
    fail_fast: bool = False,
) -> ProviderClients:
    """Create all provider clients.

    Args:
        documentai_config: Document AI configuration
        openai_config: OpenAI configuration
        fail_fast: Raise on the first misconfigured provider instead of
                   logging it and leaving its client unset

    Returns:
        ProviderClients with every client that could be built

    Raises:
        ConfigurationError: If fail_fast is set and a provider is misconfigured
    """
    providers = get_providers()
    clients = ProviderClients()

    for name, config in (("documentai", documentai_config), ("openai", openai_config)):
        try:
            client = providers[name].create_client(config)
        except ConfigurationError as e:
            if fail_fast:
                raise
            logger.error(f"Provider {name} unavailable: {e.message}")
            clients.errors[name] = e.message
            continue

        if name == "documentai":
            clients.documentai = client
        else:
            clients.llm = client
        logger.info(f"Provider {name} initialized")

    return clients
