# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.


# base classes


class EvoframeError(Exception):
    """Base class for error raised by evoframe"""


class EvoframeWarning(Warning):
    pass


# errors
# pylint: disable=too-many-ancestors


class EvoframeRuntimeError(RuntimeError, EvoframeError):
    """Runtime error raised by evoframe"""


class EvoframeValueError(ValueError, EvoframeError):
    """Value error raised by evoframe"""


class ConfigurationError(EvoframeValueError):
    """Invalid algorithm or operator settings (raised at construction time, never retried)"""


# warnings


class EvoframeRuntimeWarning(RuntimeWarning, EvoframeWarning):
    """Runtime warning raised by evoframe"""


class LogWriteWarning(EvoframeRuntimeWarning):
    """A fitness record could not be written, the run goes on without it"""


class RunawayWarning(EvoframeRuntimeWarning):
    """The generation cap was reached before the termination criterion"""
