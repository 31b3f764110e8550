"""
 Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
 SPDX-License-Identifier: MIT-0
 
 Permission is hereby granted, free of charge, to any person obtaining a copy of this
 software and associated documentation files (the "Software"), to deal in the Software
 without restriction, including without limitation the rights to use, copy, modify,
 merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
 permit persons to whom the Software is furnished to do so.
 
 THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
 INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
 PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
 HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
 OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
 SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""


import os
from dataclasses import dataclass
from typing import Mapping, Optional

from aws_lambda_powertools import Logger

from .errors import ConfigurationError

# Cognito waits 5s for a synchronous trigger; connect + read stays below it
DEFAULT_CONNECT_TIMEOUT = 1.0
DEFAULT_READ_TIMEOUT = 3.0
DEFAULT_MIN_REMAINING_MS = 500


def _text(environ, name):
    value = environ.get(name, "").strip()
    return value or None


def _number(environ, name, cast, default):
    value = environ.get(name, "").strip()
    if not value:
        return default
    try:
        number = cast(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if number < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value!r}")
    return number


def _setting(environ, name, cast, default, logger):
    try:
        return _number(environ, name, cast, default)
    except ConfigurationError as e:
        logger.warning(
            "Ignoring invalid setting, using default",
            extra={"setting": name, "default": default, "error_message": str(e)},
        )
        return default


@dataclass(frozen=True)
class GroupAssignerConfig:
    """Settings for the post confirmation handler, read once at cold start.

    group_name is required for an assignment to happen, but a missing value
    is reported by the handler on each invocation instead of failing the load.
    user_pool_id is optional; the pool id from the event is used without it.
    """

    group_name: Optional[str]
    user_pool_id: Optional[str] = None
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    min_remaining_ms: int = DEFAULT_MIN_REMAINING_MS

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None, logger=None) -> "GroupAssignerConfig":
        """Load settings from the environment.

        An unusable tuning value is logged and replaced by its default, so a
        bad deployment setting never stops the function from starting.
        """
        if environ is None:
            environ = os.environ
        logger = logger or Logger(child=True)
        return cls(
            group_name=_text(environ, "GROUP_NAME"),
            user_pool_id=_text(environ, "USER_POOL_ID"),
            connect_timeout=_setting(environ, "COGNITO_CONNECT_TIMEOUT", float, DEFAULT_CONNECT_TIMEOUT, logger),
            read_timeout=_setting(environ, "COGNITO_READ_TIMEOUT", float, DEFAULT_READ_TIMEOUT, logger),
            min_remaining_ms=_setting(environ, "MIN_REMAINING_TIME_MS", int, DEFAULT_MIN_REMAINING_MS, logger),
        )
