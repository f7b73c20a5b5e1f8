"""
TLS and certificate-validation policy for a Dispatcher.

The policy is a value owned by one Dispatcher instead of a process-wide
setting, so turning certificate validation off only affects requests made
through that Dispatcher.
"""

import logging
import ssl
from dataclasses import dataclass

from requests.adapters import HTTPAdapter

from upguard_cli.utils.constants import DEFAULT_MINIMUM_TLS_VERSION, SUPPORTED_TLS_VERSIONS
from upguard_cli.utils.exceptions import ConfigurationError


def parse_tls_version(name: str) -> ssl.TLSVersion:
    """Convert a configured TLS version name into an ssl.TLSVersion.

    Args:
        name: Version name, one of 'TLSv1_2' or 'TLSv1_3'

    Returns:
        Matching ssl.TLSVersion member

    Raises:
        ConfigurationError: If the name is not a supported version
    """
    if name not in SUPPORTED_TLS_VERSIONS:
        raise ConfigurationError(
            f"Unsupported TLS version: {name}. Valid values are: {', '.join(SUPPORTED_TLS_VERSIONS)}"
        )
    return getattr(ssl.TLSVersion, name)


@dataclass
class SecurityContext:
    """Transport security settings applied before every dispatch.

    Attributes:
        verify_certificates: Whether server certificates are validated
        minimum_tls_version: Lowest TLS version the client will negotiate
    """
    verify_certificates: bool = True
    minimum_tls_version: ssl.TLSVersion = ssl.TLSVersion.TLSv1_2

    @classmethod
    def from_config(cls, config: dict, insecure: bool = False) -> 'SecurityContext':
        """Build a SecurityContext from the 'tls' config section.

        Args:
            config: Full configuration dictionary
            insecure: Skip certificate validation regardless of config

        Returns:
            SecurityContext instance
        """
        tls_config = config.get('tls', {})
        context = cls(
            minimum_tls_version=parse_tls_version(tls_config.get('minimum_version', DEFAULT_MINIMUM_TLS_VERSION))
        )
        if insecure or not tls_config.get('verify_certificates', True):
            context.disable_certificate_validation()
        return context

    def disable_certificate_validation(self):
        """Stop validating server certificates for the owning Dispatcher."""
        if self.verify_certificates:
            logging.warning("Certificate validation DISABLED for API requests")
        self.verify_certificates = False

    def enable_certificate_validation(self):
        """Resume validating server certificates for the owning Dispatcher."""
        if not self.verify_certificates:
            logging.info("Certificate validation re-enabled for API requests")
        self.verify_certificates = True

    def build_ssl_context(self) -> ssl.SSLContext:
        """Create an SSLContext enforcing this policy."""
        context = ssl.create_default_context()
        context.minimum_version = self.minimum_tls_version
        if not self.verify_certificates:
            # check_hostname must be cleared before verify_mode can be CERT_NONE
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def policy_key(self):
        """Hashable snapshot of the current policy."""
        return (self.minimum_tls_version, self.verify_certificates)


class TLSAdapter(HTTPAdapter):
    """HTTPS transport adapter pinned to a SecurityContext snapshot."""

    def __init__(self, security: SecurityContext, **kwargs):
        self.policy = security.policy_key()
        self._ssl_context = security.build_ssl_context()
        super().__init__(**kwargs)

    def init_poolmanager(self, *args, **kwargs):
        kwargs['ssl_context'] = self._ssl_context
        return super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, *args, **kwargs):
        kwargs['ssl_context'] = self._ssl_context
        return super().proxy_manager_for(*args, **kwargs)
