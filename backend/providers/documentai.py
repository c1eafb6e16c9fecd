"""Google Document AI provider.

Builds the async Document AI client used by the document extraction
gateway. The client talks to the regional endpoint of the configured
processor location.
"""

from google.api_core.client_options import ClientOptions
from google.auth.exceptions import DefaultCredentialsError
from google.cloud import documentai
from google.oauth2 import service_account

from shared.exceptions import ConfigurationError

from .base import DocumentAIConfig, Provider


class DocumentAIProvider(Provider[DocumentAIConfig]):
    """Provider for Google Document AI processors.

    Credentials come from the configured service-account file when set,
    otherwise from application default credentials.
    """

    name = "documentai"

    def create_client(self, config: DocumentAIConfig) -> documentai.DocumentProcessorServiceAsyncClient:
        """Return an async Document AI client for the processor's location.

        Must be called from inside a running event loop (the gRPC channel
        binds to it).

        Args:
            config: Document AI configuration

        Returns:
            A configured DocumentProcessorServiceAsyncClient

        Raises:
            ConfigurationError: If identifiers are missing or credentials
                cannot be loaded
        """
        errors = config.validate_config()
        if errors:
            raise ConfigurationError(
                "Document AI is not configured: "
                + ", ".join(errors)
                + ". Set GOOGLE_CLOUD_PROJECT_ID, GOOGLE_CLOUD_LOCATION and "
                "GOOGLE_CLOUD_PROCESSOR_ID.",
                code="DOCUMENTAI_NOT_CONFIGURED",
                details={"errors": errors},
            )

        client_options = ClientOptions(
            api_endpoint=f"{config.location}-documentai.googleapis.com"
        )

        try:
            credentials = None
            if config.credentials_path:
                credentials = service_account.Credentials.from_service_account_file(
                    config.credentials_path
                )
            return documentai.DocumentProcessorServiceAsyncClient(
                credentials=credentials,
                client_options=client_options,
            )
        except (DefaultCredentialsError, FileNotFoundError, ValueError) as e:
            raise ConfigurationError(
                f"Document AI credentials could not be loaded: {e}",
                code="DOCUMENTAI_CREDENTIALS",
            ) from e
