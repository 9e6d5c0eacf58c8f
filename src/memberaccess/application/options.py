"""Options resolver: flat option tokens → MemberAccessConfig.

Recognized tokens:
    no-public                 forbid the redundant `public` keyword
    check-accessor            also check get/set accessors
    check-constructor         also check constructors
    check-parameter-property  also check constructor parameter properties
    ignore-angular-lifecycle  skip Angular lifecycle hooks

Unrecognized tokens are ignored. `no-public` alone implies the three
check-* options. `no-public` together with any check-* option is a
conflict: lenient resolution disables the rule, strict resolution raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from memberaccess.domain.exceptions.configuration import ConfigurationConflictError
from memberaccess.domain.model.configuration import MemberAccessConfig

logger = logging.getLogger(__name__)

OPTION_NO_PUBLIC = "no-public"
OPTION_CHECK_ACCESSOR = "check-accessor"
OPTION_CHECK_CONSTRUCTOR = "check-constructor"
OPTION_CHECK_PARAMETER_PROPERTY = "check-parameter-property"
OPTION_IGNORE_ANGULAR_LIFECYCLE = "ignore-angular-lifecycle"

KNOWN_OPTIONS: frozenset[str] = frozenset(
    {
        OPTION_NO_PUBLIC,
        OPTION_CHECK_ACCESSOR,
        OPTION_CHECK_CONSTRUCTOR,
        OPTION_CHECK_PARAMETER_PROPERTY,
        OPTION_IGNORE_ANGULAR_LIFECYCLE,
    }
)

_CHECK_OPTIONS: frozenset[str] = frozenset(
    {OPTION_CHECK_ACCESSOR, OPTION_CHECK_CONSTRUCTOR, OPTION_CHECK_PARAMETER_PROPERTY}
)

OPTION_DESCRIPTIONS: dict[str, str] = {
    OPTION_NO_PUBLIC: "Forbid the redundant 'public' keyword (implies every check-* option)",
    OPTION_CHECK_ACCESSOR: "Enforce explicit visibility on get/set accessors",
    OPTION_CHECK_CONSTRUCTOR: "Enforce explicit visibility on constructors",
    OPTION_CHECK_PARAMETER_PROPERTY: "Enforce explicit visibility on parameter properties",
    OPTION_IGNORE_ANGULAR_LIFECYCLE: "Skip Angular lifecycle hooks such as ngOnInit",
}


def resolve_options(tokens: Iterable[str], *, strict: bool = False) -> MemberAccessConfig:
    """Resolve option tokens into a configuration record.

    Depends only on the token set: order and duplicates are irrelevant.
    Unknown tokens are logged at debug level, a conflict at warning level.

    Args:
        tokens: Option tokens
        strict: Raise on conflicting options instead of disabling the rule

    Returns:
        Resolved configuration (disabled on conflict when not strict)

    Raises:
        ConfigurationConflictError: strict=True and no-public is combined
            with a check-* option
    """
    options = frozenset(tokens)

    unknown = options - KNOWN_OPTIONS
    if unknown:
        logger.debug("Ignoring unknown member-access options: %s", ", ".join(sorted(unknown)))

    no_public = OPTION_NO_PUBLIC in options
    ignore_lifecycle = OPTION_IGNORE_ANGULAR_LIFECYCLE in options
    checks = options & _CHECK_OPTIONS

    if no_public and checks:
        if strict:
            raise ConfigurationConflictError({OPTION_NO_PUBLIC, *checks})
        logger.warning(
            "'%s' cannot be combined with %s; member-access checks are disabled",
            OPTION_NO_PUBLIC,
            ", ".join(f"'{c}'" for c in sorted(checks)),
        )
        return MemberAccessConfig.disabled(ignore_lifecycle_names=ignore_lifecycle)

    if no_public:
        return MemberAccessConfig(
            forbid_default_visibility=True,
            check_accessors=True,
            check_constructors=True,
            check_parameter_properties=True,
            ignore_lifecycle_names=ignore_lifecycle,
        )

    return MemberAccessConfig(
        check_accessors=OPTION_CHECK_ACCESSOR in checks,
        check_constructors=OPTION_CHECK_CONSTRUCTOR in checks,
        check_parameter_properties=OPTION_CHECK_PARAMETER_PROPERTY in checks,
        ignore_lifecycle_names=ignore_lifecycle,
    )
