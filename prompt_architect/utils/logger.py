import logging
import sys
from prompt_architect.utils.config import config

# Configure root logger - set to ERROR by default to suppress all non-app logs
logging.basicConfig(level=logging.ERROR, format=config.log_format, stream=sys.stdout)

# Configure only the prompt_architect logger to show logs at the configured level
app_logger = logging.getLogger('prompt_architect')
app_logger.setLevel(config.log_level)

# Create a dedicated handler for app logs
app_handler = logging.StreamHandler(sys.stdout)
app_handler.setFormatter(logging.Formatter(config.log_format))

# Remove any existing handlers to avoid duplicate logs
if app_logger.handlers:
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)

app_logger.addHandler(app_handler)

# Prevent app logs from propagating to the root logger to avoid duplication
app_logger.propagate = False

# The SDK transport logs every request at INFO
for noisy in ('httpx', 'httpcore', 'google_genai'):
    logging.getLogger(noisy).setLevel(logging.WARNING)

# Get our specific module logger
logger = logging.getLogger(__name__)
