# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Type aliases used across evoframe, imported as :code:`tp`
"""
# pylint: disable=unused-import
from typing import Any as Any
from typing import Type as Type
from typing import Optional as Optional
from typing import Union as Union
from typing import Dict as Dict
from typing import Tuple as Tuple
from typing import List as List
from typing import Sequence as Sequence
from typing import Iterator as Iterator
from typing import Iterable as Iterable
from typing import Callable as Callable
from pathlib import Path
from typing_extensions import Protocol as Protocol
import numpy as _np


ArrayLike = Union[Tuple[float, ...], List[float], _np.ndarray]
PathLike = Union[str, Path]
# int seed, shared random state, or None for a seed drawn from numpy's global generator
Seed = Optional[Union[int, _np.random.RandomState]]
# takes a genome, returns the value to minimize
ObjectiveFunction = Callable[[_np.ndarray], float]
