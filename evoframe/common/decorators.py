# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp


X = tp.TypeVar("X")


class Registry(tp.MutableMapping[str, X]):
    """Name -> object mapping for objective functions and configured algorithms.
    Registering twice under the same name is an error.
    """

    def __init__(self) -> None:
        super().__init__()
        self.data: tp.Dict[str, X] = {}

    def register(self, obj: X) -> X:
        """Decorator method registering a function/class under its own name"""
        name = getattr(obj, "__name__", obj.__class__.__name__)
        self.register_name(name, obj)
        return obj

    def register_name(self, name: str, obj: X) -> None:
        """Register an object with a provided name"""
        if name in self:
            raise RuntimeError(f'Encountered a name collision "{name}"')
        self[name] = obj

    def unregister(self, name: str) -> None:
        if name in self:
            del self[name]

    def __getitem__(self, key: str) -> X:
        return self.data[key]

    def __setitem__(self, key: str, value: X) -> None:
        self.data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.data[key]

    def __iter__(self) -> tp.Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)
