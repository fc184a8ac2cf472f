"""
Public API for user-validation-lib

Front door for running configured rulesets. Rules composed directly with the
combinators do not need this class; use evaluate() for those.
"""

import logging
from typing import Dict, List, Optional, Any

from .config_loader import ConfigLoader
from .rule_executor import RuleExecutor
from .rules import RULE_CATALOGUE
from .users import User

logger = logging.getLogger(__name__)


class ValidationService:
    """
    Runs named rulesets from configuration against user records.

    Example:
        from user_validation import ValidationService, create_user

        service = ValidationService()
        user = create_user("basic", "johndoe123", "john@site.il", "secret99", 30)
        for result in service.validate(user, "thorough"):
            if result['status'] == 'FAIL':
                print(f"{result['rule_id']}: {result['message']}")
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize validation service.

        Args:
            config_path: Optional YAML config path; defaults to the bundled
                local-config.yaml

        Raises:
            ValueError: If the configuration is invalid or names unknown rules
        """
        self.config_loader = ConfigLoader(config_path)

        # Compose every ruleset up front so bad rule names fail at startup
        self._executors = {
            name: RuleExecutor(ruleset["rules"])
            for name, ruleset in self.config_loader.get_rulesets().items()
        }

    def validate(self, user: User, ruleset_name: str) -> List[Dict[str, Any]]:
        """
        Validate a user against a configured ruleset.

        Args:
            user: User record
            ruleset_name: Ruleset to use (e.g., "quick", "thorough")

        Returns:
            List of result dicts (rule_id, description, status, message,
            execution_time_ms), one per configured check

        Raises:
            ValueError: If ruleset_name is not configured
        """
        if ruleset_name not in self._executors:
            raise ValueError(
                f"Unknown ruleset '{ruleset_name}'. "
                f"Must be one of: {', '.join(self._executors)}"
            )
        logger.debug(f"Validating {user.username} with ruleset {ruleset_name}")
        return self._executors[ruleset_name].execute(user)

    def is_valid(self, user: User, ruleset_name: str) -> bool:
        """True when every check in the ruleset passes."""
        return all(r["status"] == "PASS" for r in self.validate(user, ruleset_name))

    def discover_rulesets(self) -> Dict[str, Dict]:
        """
        Describe the configured rulesets.

        Returns:
            Dict mapping ruleset name to {"metadata": {...},
            "stats": {"total_rules": int, "rule_ids": [...]}}
        """
        result = {}
        for name, ruleset in self.config_loader.get_rulesets().items():
            rule_ids = [c["rule_id"] for c in ruleset["rules"]]
            result[name] = {
                "metadata": dict(ruleset.get("metadata", {})),
                "stats": {"total_rules": len(rule_ids), "rule_ids": rule_ids},
            }
        return result

    def discover_rules(self) -> List[str]:
        """Names of the catalogue rules usable in configuration."""
        return sorted(RULE_CATALOGUE)
