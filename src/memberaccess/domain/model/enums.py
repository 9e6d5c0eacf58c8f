"""Domain enumerations."""

from enum import Enum, auto


class Keyword(Enum):
    """Modifier keywords that may precede a class member."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    READONLY = "readonly"
    STATIC = "static"
    ABSTRACT = "abstract"
    OVERRIDE = "override"
    DECLARE = "declare"
    ASYNC = "async"
    ACCESSOR = "accessor"

    @property
    def is_accessibility(self) -> bool:
        """True for public/protected/private."""
        return self in (Keyword.PUBLIC, Keyword.PROTECTED, Keyword.PRIVATE)


class NodeKind(Enum):
    """Discriminant of syntax node variants."""

    CLASS_LIKE = auto()
    CONSTRUCTOR = auto()
    METHOD = auto()
    PROPERTY = auto()
    GET_ACCESSOR = auto()
    SET_ACCESSOR = auto()
    PARAMETER = auto()
    OTHER = auto()


class MemberRole(Enum):
    """Syntactic role named in violation messages."""

    METHOD = "class method"
    PROPERTY = "class property"
    CONSTRUCTOR = "class constructor"
    GET_ACCESSOR = "get property accessor"
    SET_ACCESSOR = "set property accessor"
    PARAMETER_PROPERTY = "parameter property"


class Severity(Enum):
    """Rule violation severity."""

    ERROR = auto()  # exit status 1
    WARNING = auto()  # reported, exit status unaffected
