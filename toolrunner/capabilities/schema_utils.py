from __future__ import annotations

import inspect
import typing as t


def schema_from_callable(
    func: t.Callable,
    descriptions: t.Optional[t.Dict[str, str]] = None
) -> dict:
    """Generate a minimal JSON schema for a Python callable’s keyword parameters.

    - Types: int, float, bool, str, list[T], dict map to JSON schema types.
    - Required: parameters without default values.
    - ``descriptions`` attaches a per-argument description.
    """
    descriptions = descriptions or {}
    sig = inspect.signature(func)
    properties: dict[str, dict] = {}
    required: list[str] = []

    def map_type(ann: t.Any) -> dict:
        origin = t.get_origin(ann) or ann
        args = t.get_args(ann)
        if origin is t.Union:
            non_none = [a for a in args if a is not type(None)]
            if len(non_none) == 1:
                return map_type(non_none[0])
            return {}
        if origin in (bool,):
            return {"type": "boolean"}
        if origin in (int,):
            return {"type": "integer"}
        if origin in (float,):
            return {"type": "number"}
        if origin in (str,):
            return {"type": "string"}
        if origin in (list, t.List):
            item_schema = {"type": "string"}
            if args:
                item_schema = map_type(args[0])
            return {"type": "array", "items": item_schema}
        if origin in (dict, t.Dict):
            return {"type": "object"}
        return {"type": "string"}

    try:
        hints = t.get_type_hints(func)
    except (NameError, TypeError):
        hints = {}

    for name, param in sig.parameters.items():
        if param.kind not in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY):
            continue
        ann = hints.get(name, param.annotation)
        if ann is inspect.Parameter.empty:
            ann = str
        prop = map_type(ann)
        if name in descriptions:
            prop["description"] = descriptions[name]
        properties[name] = prop
        if param.default is inspect.Parameter.empty:
            required.append(name)

    return {
        "type": "object",
        "properties": properties,
        "required": required,
        "additionalProperties": False,
    }
