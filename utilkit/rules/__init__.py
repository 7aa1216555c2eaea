from utilkit.rules.loader import get_rules, load_rules, reset_rules_cache
from utilkit.rules.models import UtilRules

__all__ = ["UtilRules", "get_rules", "load_rules", "reset_rules_cache"]
