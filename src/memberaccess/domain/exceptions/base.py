"""Base exceptions for memberaccess domain."""


class MemberAccessError(Exception):
    """Root exception for all memberaccess errors.

    All domain exceptions inherit from this.
    Allows catching all memberaccess-specific errors.
    """
