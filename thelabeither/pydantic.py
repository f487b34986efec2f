from typing import Any, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticSerializationUnexpectedValue, core_schema


def _payload_schema(
    source: Any,
    handler: GetCoreSchemaHandler,
) -> core_schema.CoreSchema:
    """
    Schema for the wrapped value. ``Right[int]`` validates its payload as an
    ``int``; a bare ``Right`` accepts anything.
    """
    args = get_args(source)
    if not args:
        return core_schema.any_schema()
    return handler.generate_schema(args[0])


def variant_schema(
    cls: type[Any],
    tag: str,
    source: Any,
    handler: GetCoreSchemaHandler,
) -> core_schema.CoreSchema:
    """
    Build the pydantic core schema for one side of an ``Either``.

    The wire shape is a single-key mapping named after the side, e.g.
    ``{"left": "boom"}`` or ``{"right": 42}``. In Python mode an existing
    instance of the variant is also accepted as-is.
    """
    payload = _payload_schema(source, handler)
    tagged = core_schema.typed_dict_schema(
        {tag: core_schema.typed_dict_field(payload)},
        extra_behavior="forbid",
    )

    def _load(data: dict[str, Any]) -> Any:
        return cls(data[tag])

    def _dump(instance: Any) -> dict[str, Any]:
        # Lets a Left | Right union fall through to the other side
        if not isinstance(instance, cls):
            raise PydanticSerializationUnexpectedValue(
                f"Expected {cls.__name__}, got {type(instance).__name__}"
            )
        return {tag: instance.value}

    from_mapping = core_schema.no_info_after_validator_function(_load, tagged)
    return core_schema.json_or_python_schema(
        json_schema=from_mapping,
        python_schema=core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                from_mapping,
            ]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _dump,
            return_schema=tagged,
        ),
    )


__all__ = [
    "variant_schema",
]
