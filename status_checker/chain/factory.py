from status_checker.chain.client_base import BaseChainClient
from status_checker.chain.crust_http_client_adapter import CrustHttpClientAdapter
from status_checker.chain.example_client_adapter import ExampleClientAdapter
from status_checker.config.settings import Settings


class ChainClientFactory:
    """Creates the configured chain client adapter."""

    PROVIDERS = ("crust", "example")

    @classmethod
    def create(cls, settings: Settings, address: str | None = None) -> BaseChainClient:
        """Create a chain client; `address` overrides settings.chain_address."""
        provider = settings.chain_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "crust":
            return CrustHttpClientAdapter(
                address=address or settings.chain_address,
                timeout_seconds=settings.chain_timeout_seconds,
            )
        raise ValueError(
            f"Unknown chain provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
