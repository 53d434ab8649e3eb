import logging
import logging.handlers

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_FILE = "circulation.log"

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger("app_logger")

file_handler = logging.handlers.RotatingFileHandler(LOG_FILE, maxBytes=5*1024*1024, backupCount=3, delay=True)
file_handler.setLevel(logging.INFO)
file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

logger.addHandler(file_handler)
