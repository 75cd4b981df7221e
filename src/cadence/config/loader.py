"""Loader for answer files.

An answer file is YAML or JSON holding either the bare answer mapping, or a
mapping with ``answers`` and optional ``defaults`` sections.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from cadence.config.answers import AnswerSnapshot
from cadence.config.settings import BuilderDefaults
from cadence.core.errors import ConfigurationError


class AnswersLoader:
    """Load AnswerSnapshot and BuilderDefaults from files."""

    @staticmethod
    def read(path: Path | str) -> dict[str, Any]:
        """Read a YAML or JSON mapping from disk.

        Args:
            path: File to read

        Returns:
            Parsed mapping

        Raises:
            ConfigurationError: If the file is missing, unreadable, unparsable
                or not a mapping
        """
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigurationError("Answer file not found", path=str(file_path))

        try:
            with open(file_path, encoding="utf-8") as f:
                if file_path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse file: {e}", path=str(file_path)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read file: {e}", path=str(file_path)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Expected a mapping at top level, got {type(data).__name__}",
                path=str(file_path),
            )
        return data

    @classmethod
    def load(cls, path: Path | str) -> tuple[AnswerSnapshot, BuilderDefaults]:
        """Load answers and any inline defaults from one file.

        Returns:
            Tuple of (answers, defaults); defaults are BuilderDefaults() when
            the file has no ``defaults`` section
        """
        data = cls.read(path)
        if "answers" in data:
            answers_data = data.get("answers") or {}
            defaults_data = data.get("defaults") or {}
        else:
            answers_data = data
            defaults_data = {}
        return cls.parse_answers(answers_data, source=str(path)), cls.parse_defaults(
            defaults_data, source=str(path)
        )

    @classmethod
    def load_defaults(cls, path: Path | str) -> BuilderDefaults:
        return cls.parse_defaults(cls.read(path), source=str(path))

    @staticmethod
    def parse_answers(data: dict[str, Any], source: str = "<memory>") -> AnswerSnapshot:
        try:
            return AnswerSnapshot.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid answers: {e}", source=source) from e

    @staticmethod
    def parse_defaults(data: dict[str, Any], source: str = "<memory>") -> BuilderDefaults:
        try:
            return BuilderDefaults.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid builder defaults: {e}", source=source) from e
