# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Stand-ins for effectful callables, built from default values.
A stub accepts any arguments, performs no work, and returns the unwrapped default.
'''

from typing import Any, Awaitable, Callable, TypeVar

from .builder import DefaultValue, unwrap


_T = TypeVar('_T')


def stub_fn(default:DefaultValue[_T]) -> Callable[..., _T]:
  'Return a function that ignores its arguments and returns the value of `default`.'
  val = unwrap(default)

  def stub_fn(*args:Any, **kwargs:Any) -> _T: return val

  return stub_fn


def stub_async(default:DefaultValue[_T]) -> Callable[..., Awaitable[_T]]:
  'Return a coroutine function that ignores its arguments and resolves to the value of `default`.'
  val = unwrap(default)

  async def stub_async(*args:Any, **kwargs:Any) -> _T: return val

  return stub_async
