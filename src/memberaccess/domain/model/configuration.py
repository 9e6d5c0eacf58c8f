"""Resolved member-access configuration.

Built once per analysis run by the options resolver.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MemberAccessConfig:
    """Immutable configuration record for the visibility analyzer.

    Attributes:
        forbid_default_visibility: Flag explicit `public` instead of missing visibility
        check_accessors: Also check get/set accessors
        check_constructors: Also check constructors
        check_parameter_properties: Also check constructor parameter properties
        ignore_lifecycle_names: Skip Angular lifecycle hooks in require-explicit mode
        enabled: False when conflicting options switched the rule off
    """

    forbid_default_visibility: bool = False
    check_accessors: bool = False
    check_constructors: bool = False
    check_parameter_properties: bool = False
    ignore_lifecycle_names: bool = False
    enabled: bool = True

    @classmethod
    def disabled(cls, *, ignore_lifecycle_names: bool = False) -> MemberAccessConfig:
        """Create configuration that performs no checking at all."""
        return cls(ignore_lifecycle_names=ignore_lifecycle_names, enabled=False)

    @property
    def require_explicit_visibility(self) -> bool:
        """Mode opposite to forbid_default_visibility."""
        return not self.forbid_default_visibility
