import logging
import logging.config
import os


def configure_logging(default_level: str = 'INFO') -> None:
    """
    Configure logging for an entry point.

    LOGGING_CONFIG may name a logging.config file; otherwise LOG_LEVEL
    (default_level when unset) is applied with the standard format.
    """
    log_conf = os.environ.get('LOGGING_CONFIG')
    if log_conf:
        logging.config.fileConfig(log_conf)
    else:
        logging.basicConfig(
            level=os.environ.get('LOG_LEVEL', default_level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
