"""Infrastructure adapters.

- TreeSitterSourceParser: TypeScript parsing via tree-sitter
- TslintConfigLoader: member-access entry of tslint.json
"""

from memberaccess.infrastructure.adapters.tree_sitter_parser import TreeSitterSourceParser
from memberaccess.infrastructure.adapters.tslint_config import RuleSettings, TslintConfigLoader

__all__ = ["RuleSettings", "TreeSitterSourceParser", "TslintConfigLoader"]
