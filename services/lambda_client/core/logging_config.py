from typing import Optional

from services.common.core.logging_config import setup_logging as common_setup_logging
from services.lambda_client.config import ClientConfig


def setup_logging(config: Optional[ClientConfig] = None):
    """
    Load the YAML config named by LOG_CONFIG_PATH and initialize logging.
    """
    config = config or ClientConfig()
    common_setup_logging(config.LOG_CONFIG_PATH)
