"""Small object helpers: a rectangle and JSON round-tripping of plain objects."""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, TypeVar

__all__ = ["Rectangle", "get_json", "from_json"]

T = TypeVar("T")


@dataclass
class Rectangle:
    """A rectangle with ``width`` and ``height``.

    >>> Rectangle(10, 20).get_area()
    200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _to_jsonable(obj: Any) -> Any:
    if callable(obj):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    if obj is None or isinstance(obj, (str, bool, int)):
        return obj
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, dict):
        return {k: _to_jsonable(v) for k, v in obj.items() if not callable(v)}
    if isinstance(obj, (list, tuple)):
        return [None if callable(v) else _to_jsonable(v) for v in obj]
    if is_dataclass(obj):
        return _to_jsonable(asdict(obj))
    if hasattr(obj, "__dict__"):
        return _to_jsonable({k: v for k, v in vars(obj).items() if not k.startswith("_")})
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclasses and plain objects are written as their public fields:

        [1, 2, 3]             => '[1,2,3]'
        Rectangle(10, 20)     => '{"width":10,"height":20}'

    Like JavaScript's JSON.stringify, NaN and infinities become ``null``,
    callable values are dropped from objects and become ``null`` in arrays.
    A callable at the top level raises ``TypeError``.
    """
    return json.dumps(_to_jsonable(obj), separators=(",", ":"), allow_nan=False)


def from_json(cls: type[T], text: str) -> T:
    """Return an instance of *cls* carrying the fields of the JSON object *text*.

    ``cls.__init__`` is not called; the parsed keys become instance attributes,
    so the result has *cls*'s methods and the payload's data.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    obj = cls.__new__(cls)
    obj.__dict__.update(data)
    return obj
