# logger.py
import logging
import os


# Application log goes to a file; the console is reserved for command output.
def setup_logging(config, worker_name="upguard-cli", verbose=False):
    prefix = f"{worker_name}.{os.getpid()}"

    # Accept either the full config or just its 'logging' section
    logging_config = config.get('logging', config) if isinstance(config, dict) else config

    log_file = logging_config.get('file', 'logs/app.log')
    log_level = 'DEBUG' if verbose else logging_config.get('level', 'INFO')

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        datefmt="%Y-%m-%d %H:%M:%S",
        format=f"[{prefix}] %(asctime)s - %(levelname)s - %(message)s",
    )
    # Connection pool chatter drowns out request-level records at DEBUG
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    return log_file
