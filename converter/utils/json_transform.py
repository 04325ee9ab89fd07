from typing import Any, Callable, List, Tuple

TextTransform = Callable[[str], str]


def _empty_like(container):
    return {} if isinstance(container, dict) else []


def transform_value(value: Any, transform: TextTransform) -> Any:
    """
    Applies `transform` to every string leaf of a JSON value.

    Lists keep their length and order, dicts keep their keys (untransformed)
    and key order; numbers, booleans and None are returned unchanged. The tree
    is walked with an explicit stack, so nesting depth is not limited by the
    interpreter's recursion limit.
    """
    if isinstance(value, str):
        return transform(value)
    if not isinstance(value, (list, dict)):
        return value

    root = _empty_like(value)
    pending: List[Tuple[Any, Any]] = [(value, root)]
    while pending:
        source, target = pending.pop()
        items = source.items() if isinstance(source, dict) else enumerate(source)
        for key, item in items:
            if isinstance(item, str):
                converted = transform(item)
            elif isinstance(item, (list, dict)):
                converted = _empty_like(item)
                pending.append((item, converted))
            else:
                converted = item

            if isinstance(target, dict):
                target[key] = converted
            else:
                target.append(converted)
    return root
