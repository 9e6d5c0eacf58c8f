"""Application services."""

from memberaccess.application.services.checker import MemberAccessChecker

__all__ = ["MemberAccessChecker"]
