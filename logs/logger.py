"""
This module sets up the logging configuration for the application.
Error messages are always written to a file; everything at LOG_LEVEL and above
is also echoed to the console so a running service shows its progress.
"""
import logging
import os

from dotenv import load_dotenv

load_dotenv()

# Define the directory where log files will be stored
log_dir = os.getenv("LOG_DIR", "logs")
# Create the log directory if it doesn't already exist
os.makedirs(log_dir, exist_ok=True)

_file_handler = logging.FileHandler(os.path.join(log_dir, "errors.log"), mode="a", encoding="utf-8")
_file_handler.setLevel(logging.ERROR)

# Configure the basic logging settings
# - level: messages below LOG_LEVEL are dropped before reaching any handler.
# - format: Defines the layout of log records.
# - handlers: errors go to logs/errors.log, everything goes to stderr.
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[_file_handler, logging.StreamHandler()],
)

def log_error(message: str) -> None:
    """
    Logs an error message to the configured error log file.

    Args:
        message (str): The error message string to be logged.
    """
    logging.error(message)
