"""Exceptions raised by frc_streams."""


class InvalidConfiguration(ValueError):
    """A constructor or setter parameter violates its documented invariant.

    Raised synchronously when the object is built (or reconfigured), never
    while it is being applied to samples.
    """
