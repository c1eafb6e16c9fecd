"""OpenAI chat model provider.

Builds the langchain-openai ChatOpenAI client used by the language
analysis gateway. OpenAI requires a valid API key and an explicit model.
"""

from langchain_openai import ChatOpenAI

from shared.exceptions import ConfigurationError

from .base import OpenAIConfig, Provider


class OpenAIProvider(Provider[OpenAIConfig]):
    """Provider for OpenAI chat models.

    The client is created with retries disabled: a failed completion is
    surfaced to the user for manual re-submission.
    """

    name = "openai"

    def create_client(self, config: OpenAIConfig) -> ChatOpenAI:
        """Return a ChatOpenAI client configured for OpenAI.

        Args:
            config: OpenAI configuration

        Returns:
            A configured ChatOpenAI client

        Raises:
            ConfigurationError: If the API key or model is missing
        """
        errors = config.validate_config()
        if errors:
            raise ConfigurationError(
                "OpenAI is not configured: "
                + ", ".join(errors)
                + ". Set OPENAI_API_KEY and OPENAI_MODEL.",
                code="OPENAI_NOT_CONFIGURED",
                details={"errors": errors},
            )

        return ChatOpenAI(
            model=config.model,
            api_key=config.api_key,
            organization=config.organization or None,
            temperature=0.2,
            timeout=config.timeout,
            max_retries=0,
        )
