"""Core enums.

Usage:
    from authgate.core.enums import ErrorCode, Environment
"""

from authgate.core.enums.environment import Environment
from authgate.core.enums.error_code import ErrorCode
from authgate.core.enums.infrastructure_error_code import InfrastructureErrorCode

__all__ = ["Environment", "ErrorCode", "InfrastructureErrorCode"]
