from __future__ import annotations

"""Base model shared by metric descriptors and metric results.

Design goals:
- Immutable value objects: ``frozen=True``, equality and hashing by content.
- Lenient parsing by default: unknown document fields are ignored so the
  client tolerates schema evolution on the service side.
- Minimal output: absent optional fields (``None``) are never written.
- Field types are strict (no str -> bool or int -> str coercion) so a
  malformed document fails with the offending field named.

Parse failures of named contracts map to ``MissingRequiredField`` /
``TypeMismatch`` and construction failures to ``InvalidArgument``; the
pydantic ``ValidationError`` is chained as the cause.
"""

import logging
from contextlib import contextmanager
from typing import Any, ClassVar, Dict, Iterator, Mapping, Optional, TextIO, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from evalclient import settings
from evalclient.io.documents import loads_document, read_document, write_document

from .errors import InvalidArgument, MetricContractError, MissingRequiredField, TypeMismatch, UnknownField

logger = logging.getLogger(__name__)

JSONDict = Dict[str, Any]

C = TypeVar("C", bound="ContractModel")


def _error_field(err: Mapping[str, Any]) -> Optional[str]:
    loc = err.get("loc") or ()
    return ".".join(str(p) for p in loc) or None


def _is_type_error(err_type: str) -> bool:
    return err_type.endswith("_type") or err_type.endswith("_parsing") or err_type == "int_from_float"


def translate_validation_error(exc: ValidationError, *, metric: str, parsing: bool) -> MetricContractError:
    """Map the first pydantic error onto the contract error taxonomy."""
    err = exc.errors()[0]
    field = _error_field(err)
    err_type = str(err.get("type", ""))
    msg = err.get("msg", "invalid value")

    if not parsing:
        return InvalidArgument(f"[{metric}] invalid argument [{field}]: {msg}", metric=metric, field=field)
    if err_type == "missing":
        return MissingRequiredField(f"[{metric}] missing required field [{field}]", metric=metric, field=field)
    if _is_type_error(err_type):
        return TypeMismatch(f"[{metric}] wrong type for field [{field}]: {msg}", metric=metric, field=field)
    # value constraints (e.g. size >= 1)
    return InvalidArgument(f"[{metric}] invalid value for field [{field}]: {msg}", metric=metric, field=field)


@contextmanager
def _translated(metric: str, *, parsing: bool) -> Iterator[None]:
    try:
        yield
    except ValidationError as exc:
        raise translate_validation_error(exc, metric=metric, parsing=parsing) from exc


def _freeze(v: Any) -> Any:
    if isinstance(v, (list, tuple)):
        return tuple(_freeze(x) for x in v)
    if isinstance(v, dict):
        return tuple(sorted((k, _freeze(x)) for k, x in v.items()))
    return v


class ValueModel(BaseModel):
    """Frozen model compared and hashed by content.

    Used directly for nested parts of a contract (e.g. curve points); it keeps
    pydantic's own ``__init__`` so nested validation errors keep their full
    location.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseModel):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((type(self), _freeze(self.__dict__)))


class ContractModel(ValueModel):
    """Named, immutable, round-trippable document contract."""

    NAME: ClassVar[str] = ""

    def __init__(self, **data: Any) -> None:
        # Direct construction only; from_document() validates without __init__.
        with _translated(type(self).NAME, parsing=False):
            super().__init__(**data)

    # ----- identity -----

    @property
    def name(self) -> str:
        return self.NAME

    def get_name(self) -> str:
        return self.NAME

    # ----- parsing -----

    @classmethod
    def from_document(cls: Type[C], doc: Any, *, lenient: Optional[bool] = None) -> C:
        """Parse a structured document (a mapping) into a validated instance."""
        if not isinstance(doc, Mapping):
            raise TypeMismatch(
                f"[{cls.NAME}] expected an object, got {type(doc).__name__}",
                metric=cls.NAME,
            )

        unknown = [k for k in doc if k not in cls.model_fields]
        if unknown:
            if lenient is None:
                lenient = settings.lenient_parsing()
            if not lenient:
                raise UnknownField(
                    f"[{cls.NAME}] unknown field [{unknown[0]}]",
                    metric=cls.NAME,
                    field=str(unknown[0]),
                )
            logger.debug("[%s] ignoring unknown fields %s", cls.NAME, unknown)

        # Same call BaseModel.__init__ makes; bypasses the constructor override so
        # failures map to parse errors.
        obj = cls.__new__(cls)
        with _translated(cls.NAME, parsing=True):
            cls.__pydantic_validator__.validate_python(dict(doc), self_instance=obj)
        return obj

    @classmethod
    def from_json(cls: Type[C], text: str | bytes, *, lenient: Optional[bool] = None) -> C:
        return cls.from_document(loads_document(text), lenient=lenient)

    @classmethod
    def read_from(cls: Type[C], source: TextIO, *, lenient: Optional[bool] = None) -> C:
        """Read and parse one document from a text stream. Stream errors propagate."""
        return cls.from_document(read_document(source), lenient=lenient)

    # ----- serialization -----

    def to_document(self) -> JSONDict:
        """Return the document form; absent optional fields are omitted."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        """Compact, byte-stable JSON form of ``to_document()``."""
        return self.model_dump_json(exclude_none=True)

    def write_to(self, sink: TextIO) -> TextIO:
        """Write the document to a text stream. Stream errors propagate."""
        write_document(self.to_document(), sink)
        return sink
