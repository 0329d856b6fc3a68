"""Argument validation package."""

from univsaver.validation.validator import (
    ArgumentValidator,
    InvalidArgumentError,
    MissingArgumentError,
    describe_validation_error,
)

__all__ = [
    "ArgumentValidator",
    "InvalidArgumentError",
    "MissingArgumentError",
    "describe_validation_error",
]
