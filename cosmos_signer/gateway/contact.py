"""
Connection settings for a Cosmos node's gRPC endpoint.
"""
import os
import urllib.parse
from dataclasses import dataclass
from typing import Optional

from ..address import DEFAULT_PREFIX
from ..utils import validate_prefix

DEFAULT_TIMEOUT = 30.0

ENV_URL = "COSMOS_SIGNER_GRPC_URL"
ENV_CHAIN_PREFIX = "COSMOS_SIGNER_CHAIN_PREFIX"
ENV_TIMEOUT = "COSMOS_SIGNER_TIMEOUT"


@dataclass(frozen=True)
class Contact:
    """
    Immutable handle describing how to reach a node.

    Attributes:
        url: ``http://`` (plaintext) or ``https://`` (TLS) gRPC endpoint
        timeout: Seconds allowed for each gateway call
        chain_prefix: Account bech32 prefix of the chain, used as default HRP
        use_gzip: Request gzip compression on the channel
    """
    url: str
    timeout: float = DEFAULT_TIMEOUT
    chain_prefix: str = DEFAULT_PREFIX
    use_gzip: bool = False

    def __post_init__(self):
        url = self.url.strip().rstrip("/")
        parsed = urllib.parse.urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(
                f"Invalid node URL '{self.url}': expected http://host:port or https://host:port"
            )
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")
        object.__setattr__(self, "url", url)
        object.__setattr__(self, "chain_prefix", validate_prefix(self.chain_prefix))

    @classmethod
    def from_env(cls, url: Optional[str] = None, chain_prefix: Optional[str] = None) -> "Contact":
        """
        Build a contact from arguments, falling back to environment variables.

        Reads ``COSMOS_SIGNER_GRPC_URL``, ``COSMOS_SIGNER_CHAIN_PREFIX`` and
        ``COSMOS_SIGNER_TIMEOUT`` (seconds).
        """
        url = url or os.environ.get(ENV_URL)
        if not url:
            raise ValueError(f"No node URL given and {ENV_URL} is not set")
        chain_prefix = chain_prefix or os.environ.get(ENV_CHAIN_PREFIX, DEFAULT_PREFIX)

        timeout_value = os.environ.get(ENV_TIMEOUT)
        try:
            timeout = float(timeout_value) if timeout_value else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(f"{ENV_TIMEOUT} must be a number of seconds, got '{timeout_value}'") from e
        return cls(url=url, timeout=timeout, chain_prefix=chain_prefix)

    @property
    def is_secure(self) -> bool:
        return urllib.parse.urlparse(self.url).scheme == "https"

    @property
    def target(self) -> str:
        """``host:port`` for the gRPC channel, defaulting to 443/80."""
        parsed = urllib.parse.urlparse(self.url)
        port = parsed.port or (443 if parsed.scheme == "https" else 80)
        host = parsed.hostname
        if ":" in host:
            host = f"[{host}]"
        return f"{host}:{port}"
