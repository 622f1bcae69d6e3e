# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import dataclass
from typing import Generic, TypeVar


_T = TypeVar('_T')


@dataclass(frozen=True, order=True, repr=False)
class Present(Generic[_T]):
  '''
  The present variant of an optional value.
  The absent variant is simply `None`.
  Unlike a bare `T|None`, nested optionals remain distinct: `Present(Present(0))` is not `Present(0)`.
  '''
  val:_T

  def __repr__(self) -> str: return f'Present({self.val!r})'


Opt = Present[_T]|None


def present_val(opt:Opt[_T]) -> _T:
  if opt is None: raise ValueError('unexpected absent value')
  return opt.val


def opt_or(opt:Opt[_T], default:_T) -> _T:
  'Return the value wrapped by `opt`, or `default` if it is absent.'
  return default if opt is None else opt.val
