"""
JSON Schema контракт структурированной формы Kansuji.

Структурированная форма — Kansuji.model_dump(mode="json"): шесть групп
(gai .. base) по четыре цифры и три дробные цифры. Контракт лежит в
schema/kansuji.json и проверяется jsonschema (Draft 2020-12).
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from kansuji.core.domain.numeral import Kansuji

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение схем из SCHEMA_DIR с meta-validation и кэшем по имени."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя файла схемы без .json

        Raises:
            FileNotFoundError: Файла схемы нет в schema_dir
            ValueError: Файл не является валидной Draft 2020-12 схемой
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"{path.name} is not a valid JSON Schema: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# KANSUJI VALIDATOR
# =============================================================================


class KansujiValidator:
    """
    Проверка структурированной формы против kansuji.json.

    Example:
        >>> KansujiValidator().is_valid(Kansuji().model_dump(mode="json"))
        True
    """

    SCHEMA_NAME = "kansuji"

    def __init__(self, loader: Optional[SchemaLoader] = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.SCHEMA_NAME)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение контракта
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения контракта, а не только первое."""
        return self._validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_kansuji(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Данные не соответствуют kansuji.json
    """
    KansujiValidator().validate(data)


def kansuji_to_json(kansuji: Kansuji) -> Dict[str, Any]:
    """Структурированная форма значения, проверенная по контракту."""
    data = kansuji.model_dump(mode="json")
    validate_kansuji(data)
    return data


def kansuji_from_json(data: Dict[str, Any]) -> Kansuji:
    """
    Kansuji из структурированной формы.

    Raises:
        ValidationError: Данные не соответствуют kansuji.json
    """
    validate_kansuji(data)
    return Kansuji.model_validate(data)
