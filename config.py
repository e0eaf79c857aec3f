"""
Configuration module for the TestRail API client.
Environment-driven process settings are centralized here; connection
settings live in core.config.TestRailConfig.
"""
import os
from typing import Optional
from pathlib import Path

# Load environment variables from .env file if it exists
try:
    from dotenv import load_dotenv
    env_path = Path(__file__).parent / '.env'
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
except (PermissionError, OSError):
    # .env file not accessible, skip loading .env file
    pass

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = os.getenv("LOG_FORMAT", "text")  # text or json
LOG_FILE: Optional[str] = os.getenv("LOG_FILE")
