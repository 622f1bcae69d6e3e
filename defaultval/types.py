# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from abc import abstractmethod
from typing import Any, Protocol


class Comparable(Protocol):
  '''
  Values with a total ordering, suitable as map keys.
  Taken from https://www.python.org/dev/peps/pep-0484/.
  '''

  @abstractmethod
  def __lt__(self, other:Any) -> bool: ...

  @abstractmethod
  def __eq__(self, other:Any) -> bool: ...
