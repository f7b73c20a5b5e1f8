import sys

import yaml

from upguard_cli.utils.constants import DEFAULT_CONFIG_FILE, DEFAULT_ENV_PREFIX, DEFAULT_MINIMUM_TLS_VERSION


def _load_config_defaults(config):
    # Ensure we have a dict to work with
    if not isinstance(config, dict):
        config = {}

    # Credential placeholder defaults (keeps keys present)
    config.setdefault('upguard_credentials', {})
    uc = config['upguard_credentials']
    uc['url'] = uc.get('url', '')
    uc['api_key'] = uc.get('api_key', '')
    uc['secret_key'] = uc.get('secret_key', '')
    uc['prefix'] = uc.get('prefix', DEFAULT_ENV_PREFIX)

    # TLS defaults
    config.setdefault('tls', {})
    tls = config['tls']
    tls['verify_certificates'] = tls.get('verify_certificates', True)
    tls['minimum_version'] = tls.get('minimum_version', DEFAULT_MINIMUM_TLS_VERSION)

    # Logging defaults
    config.setdefault('logging', {})
    log = config['logging']
    log['file'] = log.get('file', 'logs/app.log')
    log['level'] = log.get('level', 'INFO')

    return config


def read_config_from_yaml(config_file=DEFAULT_CONFIG_FILE, quiet_if_missing=False):
    # Errors go to stderr so stdout stays clean for JSON output
    try:
        with open(config_file, 'r') as file:
            config = yaml.safe_load(file) or {}
    except Exception as e:
        if not (quiet_if_missing and isinstance(e, FileNotFoundError)):
            print(f"Error reading App configuration from {config_file}: {e}", file=sys.stderr)
        config = {}
    config = _load_config_defaults(config)
    return config
