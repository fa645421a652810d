"""Rule contract, registry and the constitutional rule catalog."""

from .base import EvalContext, Rule, RuleProtocol, require_param
from .registry import ALL_RULES, RuleRegistry, default_registry
from .article1 import ARTICLE_I_RULES
from .article2 import ARTICLE_II_RULES
from .articles3_6 import ARTICLES_III_TO_VI_RULES
from .amendments1_10 import AMENDMENTS_I_TO_X_RULES
from .amendments13_27 import AMENDMENTS_XIII_TO_XXVII_RULES

__all__ = [
    # Contract
    "EvalContext",
    "Rule",
    "RuleProtocol",
    "require_param",
    # Registry
    "ALL_RULES",
    "RuleRegistry",
    "default_registry",
    # Catalog
    "ARTICLE_I_RULES",
    "ARTICLE_II_RULES",
    "ARTICLES_III_TO_VI_RULES",
    "AMENDMENTS_I_TO_X_RULES",
    "AMENDMENTS_XIII_TO_XXVII_RULES",
]
