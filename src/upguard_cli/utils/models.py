"""Domain models shared by the API layer and the CLI."""
from dataclasses import dataclass, field

from upguard_cli.utils.constants import AUTH_TOKEN_TEMPLATE


def normalize_base_url(url: str) -> str:
    """Normalize an API base URL.

    Adds an https:// scheme when none is given and strips trailing slashes.

    Args:
        url: Base URL or bare hostname

    Returns:
        Normalized base URL
    """
    url = url.strip()
    if '://' not in url:
        url = f"https://{url}"
    return url.rstrip('/')


@dataclass(frozen=True)
class Credential:
    """Credentials for the node API.

    Attributes:
        base_url: Endpoint base URL (e.g. https://appliance.example.com)
        api_key: API key
        secret_key: Secret key, never shown in repr()
    """
    base_url: str
    api_key: str
    secret_key: str = field(repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'base_url', normalize_base_url(self.base_url))

    @property
    def authorization(self) -> str:
        """Authorization header value for this credential."""
        return AUTH_TOKEN_TEMPLATE.format(api_key=self.api_key, secret_key=self.secret_key)
