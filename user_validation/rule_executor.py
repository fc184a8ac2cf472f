import time
import logging
from typing import List, Dict, Any

from .combinators import Rule, and_, or_, xor, all_of, none_of
from .rules import get_rule
from .users import User

logger = logging.getLogger(__name__)

COMBINATORS = {
    "check": lambda rule: rule,
    "and": and_,
    "or": or_,
    "xor": xor,
    "all": all_of,
    "none": none_of,
}


def build_rule(config: Dict[str, Any]) -> Rule:
    """
    Compose one configured check into a single rule.

    Args:
        config: Check config dict, e.g.
            {"rule_id": "israeli_email", "combinator": "and",
             "rules": ["email_ends_with_il", "email_length_bigger_than_10"]}

    Raises:
        ValueError: If the combinator or a rule name is unknown
    """
    combinator = COMBINATORS.get(config["combinator"])
    if combinator is None:
        raise ValueError(
            f"Unknown combinator '{config['combinator']}' in {config['rule_id']}"
        )
    operands = [get_rule(name) for name in config["rules"]]
    return combinator(*operands)


class RuleExecutor:
    """Executes the checks of a ruleset against users, with timing"""

    def __init__(self, rule_configs: List[Dict[str, Any]]):
        """
        Initialize rule executor.

        Rules are composed once here and reused for every user.

        Args:
            rule_configs: List of check config dicts from a ruleset

        Raises:
            ValueError: If two checks share a rule_id, or a check names an
                unknown combinator or rule
        """
        self.rule_configs = rule_configs
        self.rules = {}
        for config in rule_configs:
            rule_id = config["rule_id"]
            if rule_id in self.rules:
                raise ValueError(f"Duplicate rule_id '{rule_id}' in ruleset")
            self.rules[rule_id] = build_rule(config)

    def execute(self, user: User) -> List[Dict[str, Any]]:
        """
        Run every configured check against a user.

        Returns:
            One result dict per check, in config order:
            [{
                "rule_id": str,
                "description": str,
                "status": "PASS" | "FAIL" | "ERROR",
                "message": str,
                "execution_time_ms": float,
            }, ...]
        """
        results = [self._execute_rule(config, user) for config in self.rule_configs]
        failed = sum(1 for r in results if r["status"] != "PASS")
        logger.info(
            f"Executed {len(results)} checks, {failed} not passed",
            extra={'username': user.username}
        )
        return results

    def _execute_rule(self, config: Dict[str, Any], user: User) -> Dict[str, Any]:
        """Execute a single check, isolating predicate errors."""
        rule_id = config["rule_id"]
        rule = self.rules[rule_id]

        start = time.time()
        try:
            result = rule(user)
            status = "PASS" if result.is_valid else "FAIL"
            message = result.reason or ""
        except Exception as e:
            logger.exception(f"Check {rule_id} raised")
            status = "ERROR"
            message = f"{type(e).__name__}: {e}"
        elapsed_ms = round((time.time() - start) * 1000, 2)

        return {
            "rule_id": rule_id,
            "description": config.get("description", ""),
            "status": status,
            "message": message,
            "execution_time_ms": elapsed_ms,
        }
