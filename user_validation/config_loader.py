"""Configuration loading: bundled local-config.yaml or an explicit file."""

import logging
from typing import Dict, Any, Optional
from importlib.resources import files

import yaml
from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

logger = logging.getLogger(__name__)

# Operand counts are fixed for the binary combinators
CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "rulesets": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {
                    "metadata": {"type": "object"},
                    "rules": {
                        "type": "array",
                        "items": {"$ref": "#/definitions/check"},
                    },
                },
                "required": ["rules"],
            },
        },
    },
    "required": ["rulesets"],
    "definitions": {
        "check": {
            "type": "object",
            "properties": {
                "rule_id": {"type": "string", "minLength": 1},
                "description": {"type": "string"},
                "combinator": {
                    "enum": ["check", "and", "or", "xor", "all", "none"]
                },
                "rules": {"type": "array", "items": {"type": "string"}},
            },
            "required": ["rule_id", "combinator", "rules"],
            "allOf": [
                {
                    "if": {"properties": {"combinator": {"const": "check"}}},
                    "then": {"properties": {"rules": {"minItems": 1, "maxItems": 1}}},
                },
                {
                    "if": {"properties": {"combinator": {"enum": ["and", "or", "xor"]}}},
                    "then": {"properties": {"rules": {"minItems": 2, "maxItems": 2}}},
                },
            ],
        }
    },
}


class ConfigLoader:
    """Loads and checks the YAML configuration declaring rulesets."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to a YAML config file. When omitted the
                local-config.yaml bundled in the package is used.

        Raises:
            ValueError: If the config does not match CONFIG_SCHEMA
        """
        if config_path:
            self.config_path = str(config_path)
            with open(self.config_path) as f:
                self.config = yaml.safe_load(f)
        else:
            config_file = files('user_validation').joinpath('local-config.yaml')
            self.config_path = str(config_file)
            with config_file.open('r') as f:
                self.config = yaml.safe_load(f)

        self._check_config(self.config)
        logger.info(
            "Configuration loaded",
            extra={'config_path': self.config_path,
                   'rulesets': list(self.get_rulesets())}
        )

    def _check_config(self, config: Any) -> None:
        """Validate the parsed document against CONFIG_SCHEMA."""
        error = best_match(Draft7Validator(CONFIG_SCHEMA).iter_errors(config))
        if error is not None:
            error_path = " -> ".join(str(p) for p in error.path) if error.path else "root"
            raise ValueError(
                f"Invalid configuration in {self.config_path} at {error_path}: {error.message}"
            )

    def get_config(self) -> Dict[str, Any]:
        return self.config

    def get_rulesets(self) -> Dict[str, Any]:
        return self.config.get("rulesets", {})
