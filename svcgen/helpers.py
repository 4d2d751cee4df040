# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Helper functions available inside templates.

Every helper is a pure function of its arguments. The same functions are
used by the programmatic generators so that both generation strategies
agree on naming.
"""

import keyword
import re
from typing import Any, Callable, Dict, Optional

_WORD_SPLIT = re.compile(r'[^0-9A-Za-z]+')
_PATH_PARAMETER = re.compile(r'\{([^}]+)\}')

_PYTHON_TYPES = {
    'string': 'str',
    'integer': 'int',
    'number': 'float',
    'boolean': 'bool',
    'object': 'Dict[str, Any]',
    'array': 'List[Any]',
    'file': 'bytes',
}


def camel_case(text: str) -> str:
    """Convert snake_case, kebab-case or lowerCamel text to CamelCase."""
    words = [w for w in _WORD_SPLIT.split(text) if w]
    return ''.join(w[:1].upper() + w[1:] for w in words)


def snake_case(text: str) -> str:
    """Convert CamelCase or kebab-case text to a snake_case identifier.

    Python keywords get a trailing underscore so the result is always
    usable as an attribute or argument name.
    """
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', text)
    s2 = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1)
    result = _WORD_SPLIT.sub('_', s2).strip('_').lower()
    result = re.sub('_+', '_', result)
    if result and result[0].isdigit():
        result = '_' + result
    if keyword.iskeyword(result):
        result += '_'
    return result


def pluralize(word: str) -> str:
    """Return a naive English plural of ``word``."""
    if not word:
        return word
    lower = word.lower()
    if lower.endswith(('s', 'x', 'z', 'ch', 'sh')):
        return word + 'es'
    if lower.endswith('y') and len(word) > 1 and lower[-2] not in 'aeiou':
        return word[:-1] + 'ies'
    return word + 's'


def singularize(word: str) -> str:
    """Inverse of :func:`pluralize` for the forms it produces."""
    lower = word.lower()
    if lower.endswith('ies') and len(word) > 3:
        return word[:-3] + 'y'
    if lower.endswith(('ses', 'xes', 'zes', 'ches', 'shes')):
        return word[:-2]
    if lower.endswith('s') and not lower.endswith('ss'):
        return word[:-1]
    return word


def python_type(type_name: str, format: Optional[str] = None) -> str:
    """Map an API type name to a Python annotation.

    Names that are not API primitives are assumed to be model types and
    are returned unchanged. A trailing ``[]`` denotes a list.
    """
    if type_name.endswith('[]'):
        return f"List[{python_type(type_name[:-2], format)}]"
    if type_name == 'string' and format == 'binary':
        return 'bytes'
    return _PYTHON_TYPES.get(type_name, type_name)


def comment(text: str) -> str:
    """Prefix every line of ``text`` with a Python comment marker."""
    return '\n'.join(f"# {line}".rstrip() for line in (text or '').splitlines())


def quote(value: Any) -> str:
    """Render ``value`` as a Python literal."""
    return repr(value)


def path_pattern(path: str) -> str:
    """Convert ``/pets/{petId}`` into the route form ``/pets/<pet_id>``."""
    return _PATH_PARAMETER.sub(lambda m: f"<{snake_case(m.group(1))}>", path)


def path_parameters(path: str) -> list:
    """Names of the ``{...}`` placeholders in ``path``, in order."""
    return _PATH_PARAMETER.findall(path)


def template_helpers() -> Dict[str, Callable]:
    """The fixed helper set bound into every compiled template."""
    return {
        'camel_case': camel_case,
        'snake_case': snake_case,
        'pluralize': pluralize,
        'singularize': singularize,
        'python_type': python_type,
        'comment': comment,
        'quote': quote,
        'path_pattern': path_pattern,
        'path_parameters': path_parameters,
    }
