"""
Frac JSON Contract

Сериализованная дробь — объект {whole, numerator, denominator} с полями int32
и ненулевым знаменателем (schema/frac.json, Draft 2020-12). Контракт
проверяется jsonschema на обеих границах: при выгрузке Frac в dict и при
восстановлении Frac из внешних данных.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.frac import Frac

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

FRAC_SCHEMA: Final[str] = "frac"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Чтение и meta-validation схемы; результат кэшируется.

    Raises:
        FileNotFoundError: файла schema_dir/<schema_name>.json нет
        ValueError: схема не проходит Draft 2020-12 meta-validation
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
    return schema


class FracContract:
    """
    Граница сериализации Frac.

    dump() и load() пропускают данные через схему, поэтому наружу не уходит
    и внутрь не попадает тройка с нулевым знаменателем или полем вне int32.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self.validator = Draft202012Validator(load_schema(FRAC_SCHEMA, schema_dir))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: первое нарушение схемы
        """
        self.validator.validate(data)

    def violations(self, data: Dict[str, Any]) -> list[str]:
        """Все нарушения схемы, по пути поля."""
        errors = sorted(self.validator.iter_errors(data), key=lambda e: list(e.path))
        return [error.message for error in errors]

    def dump(self, frac: Frac) -> Dict[str, Any]:
        data = frac.model_dump()
        self.validate(data)
        return data

    def load(self, data: Dict[str, Any]) -> Frac:
        self.validate(data)
        return Frac.from_dict(data)


@lru_cache(maxsize=None)
def default_contract() -> FracContract:
    """Контракт по схеме из пакета."""
    return FracContract()


def validate_frac(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: если данные не соответствуют схеме
    """
    default_contract().validate(data)


def load_frac(data: Dict[str, Any]) -> Frac:
    """Проверка по контракту и восстановление Frac."""
    return default_contract().load(data)


def dump_frac(frac: Frac) -> Dict[str, Any]:
    """Frac → dict, проверенный схемой."""
    return default_contract().dump(frac)
