"""Environment configuration interface for the XARF tools.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level() -> str:
        """Get the default logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def schema_version() -> str:
        """Get the XARF schema version stamped on emitted reports.

        Returns:
            Version string, defaults to '4.0.0'
        """
        return os.getenv("XARF_SCHEMA_VERSION", "4.0.0")

    @staticmethod
    def arf_recipient() -> str:
        """Get the To: address used in generated ARF messages.

        Returns:
            Email address, defaults to 'abuse@target.example'
        """
        return os.getenv("ARF_RECIPIENT", "abuse@target.example")

    @staticmethod
    def arf_user_agent() -> str:
        """Get the User-Agent value of the feedback-report part.

        Returns:
            User agent, defaults to 'XARF-Converter/1.0'
        """
        return os.getenv("ARF_USER_AGENT", "XARF-Converter/1.0")


# Singleton instance for convenient access
env = Environment()
