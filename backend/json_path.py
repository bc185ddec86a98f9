#!/usr/bin/env python3
"""
JSON Path - Read single values out of decoded JSON documents

Paths are dot separated. A key reads from an object, an integer reads from
a list and '#' applies the rest of the path to every element of a list.
A trailing '#' gives the length of the list:

    get_path(doc, 'currencies.0.code')   -> 'ARS'
    get_path(doc, 'languages.#.name')    -> ['Spanish', 'Guaraní']
    get_path(doc, 'languages.#')         -> 2
"""
import math

_MISSING = object()


def get_path(document, path, default=None):
    """Return the value at path, or default when any segment is absent"""
    if not path:
        return document
    value = _resolve(document, path.split('.'))
    if value is _MISSING:
        return default
    return value


def get_number(document, path):
    """Finite float at path, None when absent or not a number

    The JSON decoder accepts NaN and Infinity, so those count as absent.
    """
    value = get_path(document, path)
    # bool is an int subclass but never a quantity
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None


def _resolve(node, segments):
    for position, segment in enumerate(segments):
        if segment == '#':
            if not isinstance(node, list):
                return _MISSING
            rest = segments[position + 1:]
            if not rest:
                return len(node)
            values = []
            for item in node:
                value = _resolve(item, rest)
                if value is not _MISSING:
                    values.append(value)
            return values

        if isinstance(node, dict):
            if segment not in node:
                return _MISSING
            node = node[segment]
        elif isinstance(node, list):
            try:
                index = int(segment)
            except ValueError:
                return _MISSING
            if not 0 <= index < len(node):
                return _MISSING
            node = node[index]
        else:
            return _MISSING

    return node
