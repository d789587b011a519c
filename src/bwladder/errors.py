"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Error taxonomy shared by the transport, cache, mapping and pagination layers.
"""

from __future__ import annotations


class BWLadderError(RuntimeError):
    """Base class for every error raised by bwladder."""


class InvalidInputError(BWLadderError, ValueError):
    """Raised when caller-supplied arguments fail a precondition."""


class UnexpectedAPIResponseError(BWLadderError):
    """Raised when a well-formed response violates a structural assumption."""


class EntityNotFoundError(BWLadderError):
    """Raised when the requested gateway, leaderboard, player or ranking does not exist."""


class KnownUnreconcilableEntityError(BWLadderError):
    """
    Raised for one record with a known, irrecoverable data-shape anomaly.

    Collections that contain such a record skip it and keep going.
    """


class RetryableInternalServerError(BWLadderError):
    """Raised when the upstream answers with its intermittent false-error body."""


class ConnectionFailedError(BWLadderError):
    """Raised when the upstream host could not be reached at all."""


class ClientProviderError(BWLadderError):
    """Raised when the upstream host address cannot be determined."""
