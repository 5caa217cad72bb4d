"""
Configuration and constants for the GanttPRO work-breakdown importer
"""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# GanttPRO API
# v1.0 is the documented public API. Override with GANTTPRO_BASE_URL if your
# account is pinned to another version.
GANTTPRO_BASE_URL = os.getenv('GANTTPRO_BASE_URL', 'https://api.ganttpro.com/v1.0').rstrip('/')
REQUEST_TIMEOUT = 30  # Seconds per HTTP call

# Rate limiting configuration
# OPTIMIZATION: Reduce RATE_LIMIT_DELAY if you're not hitting API rate limits
# - 0.1s (100ms) = safe default, ~10 calls/second
# - 0.2s (200ms) = slower, ~5 calls/second (use if getting 429 errors)
RATE_LIMIT_DELAY = 0.1  # Delay between API calls in seconds (100ms)
# WARNING: project and task creation are non-idempotent POSTs. A 429/5xx or
# connection error is retried, and if GanttPRO had already applied the call
# the retry creates a duplicate project/section/task. Read timeouts are never
# retried for that reason. Set MAX_RETRIES = 1 to disable retries entirely.
MAX_RETRIES = 3  # Maximum number of attempts for failed API calls (1 = no retry)
RETRY_DELAY = 1  # Initial delay between retries in seconds
RETRY_BACKOFF = 2  # Exponential backoff multiplier

# Task payload configuration
# Durations are sent in minutes. Older API versions read the value from
# 'estimation' instead of 'duration'.
TASK_DURATION_FIELD = os.getenv('GANTTPRO_DURATION_FIELD', 'duration')
SECTION_TASK_TYPE = 'project'  # GanttPRO task type for grouping rows
ZERO_EFFORT_REASON = 'zero-effort'

# Logging configuration
# Console log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
CONSOLE_LOG_LEVEL = logging.INFO  # Log level for console output
LOGS_DIR = 'logs'

# HTTP endpoint
SERVER_HOST = os.getenv('GANTTPRO_SERVER_HOST', '0.0.0.0')
SERVER_PORT = int(os.getenv('GANTTPRO_SERVER_PORT', '8002'))

# Environment variable names
ENV_GANTTPRO_API_KEY = 'GANTTPRO_API_KEY'
