# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from .builder import *
from .optional import *
from .stub import *
from .types import *
