"""
JSON Schema Contract Validators

Validates raw ingestion input against the JSON Schema contracts shipped in
core/contracts/schema/.

Schemas:
- episode_record.json (raw episode mapping)
- feed_item.json (one JSON Feed item)
- feed_document.json (JSON Feed envelope)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    JSON Schema file loader.

    Reads schemas from the package's schema/ directory and caches them.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'feed_item')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base contract validator.

    Wraps a Draft 2020-12 validator for one named schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class EpisodeRecordValidator(ContractValidator):
    def __init__(self):
        super().__init__("episode_record")


class FeedItemValidator(ContractValidator):
    def __init__(self):
        super().__init__("feed_item")


class FeedDocumentValidator(ContractValidator):
    def __init__(self):
        super().__init__("feed_document")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_episode_record(data: Dict[str, Any]) -> None:
    """
    Validate a raw episode record.

    Raises:
        ValidationError: If data does not match episode_record.json
    """
    EpisodeRecordValidator().validate(data)


def validate_feed_item(data: Dict[str, Any]) -> None:
    """
    Validate one JSON Feed item.

    Raises:
        ValidationError: If data does not match feed_item.json
    """
    FeedItemValidator().validate(data)


def validate_feed_document(data: Dict[str, Any]) -> None:
    """
    Validate a JSON Feed envelope (items are validated separately).

    Raises:
        ValidationError: If data does not match feed_document.json
    """
    FeedDocumentValidator().validate(data)
