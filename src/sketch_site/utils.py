"""JSON helpers shared by the detection output models."""

import json
from typing import Any, ClassVar, Self

TAG_KEY = "__tag__"


def transform_for_json(obj: Any, decimals: int = 2) -> Any:
    """Round floats to ``decimals`` places and move ``__tag__`` keys first.

    Works on the plain structures produced by ``model_dump``: dicts, lists,
    tuples and scalars.
    """
    if isinstance(obj, float):
        return round(obj, decimals)
    if isinstance(obj, dict):
        items = {k: transform_for_json(v, decimals) for k, v in obj.items()}
        if TAG_KEY not in items:
            return items
        return {TAG_KEY: items.pop(TAG_KEY), **items}
    if isinstance(obj, list | tuple):
        return type(obj)(transform_for_json(item, decimals) for item in obj)
    return obj


class SerializationMixin:
    """Consistent JSON output for pydantic models.

    Dumps by alias (so discriminated unions carry ``__tag__``), drops None
    fields, and rounds floats to ``json_decimals`` places. Any keyword passed
    to ``to_dict`` or ``to_json`` overrides these defaults.

    Example:
        class Box(SerializationMixin, BaseModel):
            width: float

        Box(width=3.14159).to_json(indent=None)  # '{"width": 3.14}'
    """

    json_decimals: ClassVar[int] = 2

    def to_dict(self, **kwargs: Any) -> dict:
        options: dict[str, Any] = {
            "by_alias": True,
            "exclude_none": True,
            "mode": "json",
            **kwargs,
        }
        data = self.model_dump(**options)  # type: ignore[attr-defined]
        return transform_for_json(data, self.json_decimals)

    def to_json(self, *, indent: str | int | None = "\t", **kwargs: Any) -> str:
        """Serialize to a JSON string, tab indented unless ``indent`` says otherwise."""
        return json.dumps(self.to_dict(**kwargs), indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """Parse output written by ``to_json`` back into a model."""
        return cls.model_validate_json(text)  # type: ignore[attr-defined]
