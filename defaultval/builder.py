# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Composable default values.

A `DefaultValue[T]` carries a single, fixed default for the type `T`.
Primitive constructors provide defaults for scalar types,
and combinators derive defaults for composite types from the defaults of their components:

  `unwrap(optional_of(list_of(int_default())))` -> `Present([0])`

Every composite default holds exactly one element or entry, so that the result is a well-formed example of the type,
rather than an empty container that says nothing about its contents.
Mutable composite values (lists and dicts) are shared between calls to `unwrap`; callers must treat them as read-only.
'''

from typing import Any, final, Generic, Hashable, NoReturn, TypeVar

from .optional import Opt, Present
from .types import Comparable


_T = TypeVar('_T')
_A = TypeVar('_A')
_B = TypeVar('_B')
_C = TypeVar('_C')
_K = TypeVar('_K', bound=Comparable)
_H = TypeVar('_H', bound=Hashable)


@final
class DefaultValue(Generic[_T]):
  '''
  An opaque, immutable carrier of the default value for `T`.
  Instances cannot be created directly; use the primitive constructors and combinators of this module.
  Equality and hashing follow the wrapped value, so builders whose defaults compare equal are equal:
  `int_default() == float_default() == bool_default()`, since `0 == 0.0 == False`.
  Copying or pickling a builder rebuilds it around the same value.
  '''

  __slots__ = ('_val',)

  _val:_T

  def __init__(self) -> None:
    raise TypeError('DefaultValue cannot be instantiated directly; use a constructor such as `int_default` or `optional_of`')

  @property
  def val(self) -> _T: return self._val

  def __repr__(self) -> str: return f'{type(self).__name__}({self._val!r})'

  def __eq__(self, other:Any) -> bool:
    if not isinstance(other, DefaultValue): return NotImplemented
    return bool(self._val == other._val)

  def __hash__(self) -> int: return hash(self._val)

  def __reduce__(self) -> tuple[Any,...]: return (_wrap, (self._val,))

  def __setattr__(self, name:str, val:Any) -> NoReturn:
    raise AttributeError('DefaultValue instances are immutable')

  def __delattr__(self, name:str) -> NoReturn:
    raise AttributeError('DefaultValue instances are immutable')


def _wrap(val:_T) -> DefaultValue[_T]:
  dv:DefaultValue[_T] = object.__new__(DefaultValue)
  object.__setattr__(dv, '_val', val)
  return dv


def _req_default_value(arg:Any) -> None:
  if not isinstance(arg, DefaultValue):
    raise TypeError(f'expected DefaultValue; actual type: {type(arg)};\n  object: {arg!r}')


def _req_hashable(val:Any, role:str) -> None:
  try: hash(val)
  except TypeError as e:
    raise TypeError(f'expected hashable {role} default; actual type: {type(val)};\n  default: {val!r}') from e


def unwrap(default:DefaultValue[_T]) -> _T:
  'Return the value carried by `default`. The same value is returned on every call.'
  _req_default_value(default)
  return default._val


# Primitives.

_bool_default = _wrap(False)
_bytes_default = _wrap(b'')
_float_default = _wrap(0.0)
_int_default = _wrap(0)
_none_default = _wrap(None)
_str_default = _wrap('')

def bool_default() -> DefaultValue[bool]: return _bool_default

def bytes_default() -> DefaultValue[bytes]: return _bytes_default

def float_default() -> DefaultValue[float]: return _float_default

def int_default() -> DefaultValue[int]: return _int_default

def none_default() -> DefaultValue[None]: return _none_default

def str_default() -> DefaultValue[str]: return _str_default


# Combinators.

def optional_of(default:DefaultValue[_T]) -> DefaultValue[Opt[_T]]:
  'The default for an optional type is always the present variant, wrapping the inner default.'
  return _wrap(Present(unwrap(default)))


def seq_of(default:DefaultValue[_T]) -> DefaultValue[tuple[_T,...]]:
  'A one-element immutable sequence.'
  return _wrap((unwrap(default),))


def list_of(default:DefaultValue[_T]) -> DefaultValue[list[_T]]:
  'A one-element list. Like `seq_of`, but for the mutable, random-access representation.'
  return _wrap([unwrap(default)])


def set_of(default:DefaultValue[_H]) -> DefaultValue[frozenset[_H]]:
  el = unwrap(default)
  _req_hashable(el, 'element')
  return _wrap(frozenset((el,)))


def map_of(key:DefaultValue[_K], val:DefaultValue[_T]) -> DefaultValue[dict[_K,_T]]:
  '''
  A single-entry dict mapping the key default to the value default.
  The key type must be ordered; the key default must also be hashable, which is checked at runtime.
  '''
  k = unwrap(key)
  v = unwrap(val)
  _req_hashable(k, 'key')
  return _wrap({k: v})


def pair_of(a:DefaultValue[_A], b:DefaultValue[_B]) -> DefaultValue[tuple[_A,_B]]:
  return _wrap((unwrap(a), unwrap(b)))


def triple_of(a:DefaultValue[_A], b:DefaultValue[_B], c:DefaultValue[_C]) -> DefaultValue[tuple[_A,_B,_C]]:
  return _wrap((unwrap(a), unwrap(b), unwrap(c)))
