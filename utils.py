"""
Utility functions for rate limiting, retry logic, and logging
"""
import sys
import os
import logging
import time
from datetime import datetime
from typing import Callable
from functools import wraps

import requests

from config import RATE_LIMIT_DELAY, MAX_RETRIES, RETRY_DELAY, RETRY_BACKOFF, CONSOLE_LOG_LEVEL, LOGS_DIR

# Configure Windows console for UTF-8 encoding to handle special characters
if sys.platform == 'win32':
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8')
    if hasattr(sys.stderr, 'reconfigure'):
        sys.stderr.reconfigure(encoding='utf-8')

# Create logs directory if it doesn't exist
if not os.path.exists(LOGS_DIR):
    os.makedirs(LOGS_DIR)

log_filename = os.path.join(LOGS_DIR, f'import_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log')

# File handler captures everything, console follows config
file_handler = logging.FileHandler(log_filename, encoding='utf-8')
file_handler.setLevel(logging.DEBUG)

console_handler = logging.StreamHandler()
console_handler.setLevel(CONSOLE_LOG_LEVEL)

formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
file_handler.setFormatter(formatter)
console_handler.setFormatter(formatter)

logging.basicConfig(
    level=logging.DEBUG,
    handlers=[file_handler, console_handler]
)
logger = logging.getLogger('ganttpro_importer')

RETRYABLE_STATUS_CODES = (429, 500, 502, 503, 504)


def rate_limit(func: Callable) -> Callable:
    """Decorator to add rate limiting to API calls"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        time.sleep(RATE_LIMIT_DELAY)
        return func(*args, **kwargs)
    return wrapper


def is_retryable(error: requests.exceptions.RequestException) -> bool:
    """
    Return True for rate limits, server errors and failures to connect

    Read timeouts and truncated bodies are not retried: the POST may already
    have been applied remotely, and sending it again would create a duplicate.
    ConnectTimeout is a ConnectionError and stays retryable.
    """
    response = getattr(error, 'response', None)
    if response is not None:
        return response.status_code in RETRYABLE_STATUS_CODES
    if isinstance(error, (requests.exceptions.ReadTimeout, requests.exceptions.ChunkedEncodingError)):
        return False
    return isinstance(error, requests.exceptions.ConnectionError)


def retry_with_backoff(max_retries: int = MAX_RETRIES, delay: float = RETRY_DELAY, backoff: float = RETRY_BACKOFF):
    """
    Decorator for retrying function calls with exponential backoff

    Only `requests` errors are retried, and only when `is_retryable` says so.
    Anything else is raised on the first attempt.

    Args:
        max_retries: Maximum number of attempts
        delay: Initial delay between retries in seconds
        backoff: Multiplier for exponential backoff
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            retries = 0
            current_delay = delay

            while True:
                try:
                    return func(*args, **kwargs)
                except requests.exceptions.RequestException as e:
                    retries += 1
                    if not is_retryable(e):
                        raise
                    if retries >= max_retries:
                        logger.error(f"Max retries ({max_retries}) exceeded for {func.__name__}: {e}")
                        raise

                    logger.warning(f"Retryable error ({type(e).__name__}: {e}) in {func.__name__}, "
                                   f"retrying in {current_delay}s (attempt {retries}/{max_retries})...")
                    time.sleep(current_delay)
                    current_delay *= backoff

        return wrapper
    return decorator


def truncate(text, limit: int = 200) -> str:
    """Shorten a payload for log lines"""
    text = str(text)
    return text if len(text) <= limit else text[:limit] + '...'
