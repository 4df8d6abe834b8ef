"""Small request payload validator for the HTTP API.

Not a JSON Schema implementation; just enough to give consistent error
responses. Returns ``(ok, value_or_error)`` tuples and lets the caller decide
how to respond.

Schema mini-language:
{
  'field_name': ('type', required: bool, extras: dict)
}
Supported types: 'str', 'int', 'list', 'coord', 'seed' (int or str)
Extras: min/max (int), min_len/max_len (str), item_type='coord' (list)

If invalid: (False, {'field': 'height', 'error': 'must be >= 1', 'code': 'min'})
If valid: (True, normalized_data)
"""

from __future__ import annotations

from typing import Any, Dict, Tuple


class ValidationError(Exception):
    def __init__(self, field: str, message: str, code: str):
        super().__init__(message)
        self.field = field
        self.message = message
        self.code = code

    def to_dict(self) -> Dict[str, str]:
        return {'field': self.field, 'error': self.message, 'code': self.code}


def _fail(field: str, message: str, code: str) -> Tuple[bool, Dict[str, Any]]:
    return False, {'field': field, 'error': message, 'code': code}


def _coerce_int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip('-').isdigit():
        return int(value.strip())
    return None


def _coerce_coord(value):
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return None
    x, y = _coerce_int(value[0]), _coerce_int(value[1])
    if x is None or y is None:
        return None
    return (x, y)


def validate(payload: Any, schema: Dict[str, tuple]) -> Tuple[bool, Dict[str, Any]]:
    if not isinstance(payload, dict):
        return _fail('__root__', 'payload must be an object', 'type')
    out = {}
    for name, spec in schema.items():
        type_name, required = spec[0], spec[1]
        extras = spec[2] if len(spec) > 2 else {}
        if name not in payload or payload[name] is None:
            if required:
                return _fail(name, 'missing required field', 'required')
            if 'default' in extras:
                out[name] = extras['default']
            continue
        value = payload[name]
        if type_name == 'int':
            ivalue = _coerce_int(value)
            if ivalue is None:
                return _fail(name, 'expected int', 'type')
            if 'min' in extras and ivalue < extras['min']:
                return _fail(name, f"must be >= {extras['min']}", 'min')
            if 'max' in extras and ivalue > extras['max']:
                return _fail(name, f"must be <= {extras['max']}", 'max')
            out[name] = ivalue
        elif type_name == 'str':
            if not isinstance(value, str):
                return _fail(name, 'expected str', 'type')
            s = value.strip()
            if not extras.get('allow_empty') and len(s) == 0:
                return _fail(name, 'must not be empty', 'empty')
            if 'max_len' in extras and len(s) > extras['max_len']:
                return _fail(name, 'too long', 'max_len')
            out[name] = s
        elif type_name == 'seed':
            if isinstance(value, bool) or not isinstance(value, (int, str)):
                return _fail(name, 'expected int or str', 'type')
            if isinstance(value, str) and len(value) > extras.get('max_len', 128):
                return _fail(name, 'too long', 'max_len')
            out[name] = value
        elif type_name == 'coord':
            coord = _coerce_coord(value)
            if coord is None:
                return _fail(name, 'expected [x, y]', 'type')
            out[name] = coord
        elif type_name == 'list':
            if not isinstance(value, list):
                return _fail(name, 'expected list', 'type')
            if 'max_len' in extras and len(value) > extras['max_len']:
                return _fail(name, 'too long', 'max_len')
            if extras.get('item_type') == 'coord':
                coords = []
                for idx, elem in enumerate(value):
                    coord = _coerce_coord(elem)
                    if coord is None:
                        return _fail(name, f'element {idx} not [x, y]', 'item_type')
                    coords.append(coord)
                out[name] = coords
            else:
                out[name] = value
        else:
            return _fail('__schema__', f'unsupported type {type_name}', 'schema')
    return True, out


# Predefined schemas used by the maze API. Dimension bounds are applied by the route
# from app config, so only the lower bound lives here.
MAZE_IDENTITY = {
    'height': ('int', False, {'min': 1, 'default': 10}),
    'width': ('int', False, {'min': 1, 'default': 10}),
    'algorithm': ('str', False, {'max_len': 32, 'default': 'dfs'}),
    'seed': ('seed', False, {'max_len': 128}),
}
MAZE_RENDER = dict(
    MAZE_IDENTITY,
    path=('list', False, {'item_type': 'coord', 'max_len': 10_000}),
    highlight=('coord', False),
)
MAZE_MOVE = dict(
    MAZE_IDENTITY,
    pos=('coord', True),
    dir=('str', True, {'allow_empty': True, 'max_len': 16}),
)
