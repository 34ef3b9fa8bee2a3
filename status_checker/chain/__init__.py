from status_checker.chain.client_base import BaseChainClient
from status_checker.chain.factory import ChainClientFactory
from status_checker.chain.models import OnchainRecord

__all__ = ["BaseChainClient", "ChainClientFactory", "OnchainRecord"]
