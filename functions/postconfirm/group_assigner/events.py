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


import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidTriggerEvent


@dataclass(frozen=True)
class ParsedTriggerEvent:
    """Read-only view of the fields the handler looks up in a Cognito event."""

    user_pool_id: Optional[str] = None
    user_name: Optional[str] = None
    trigger_source: Optional[str] = None


@dataclass(frozen=True)
class GroupAssignmentRequest:
    """The group, pool and user for one AdminAddUserToGroup call."""

    group_name: str
    user_pool_id: str
    user_name: str

    def as_api_params(self):
        # keyword arguments for cognito-idp admin_add_user_to_group
        return {
            'GroupName': self.group_name,
            'UserPoolId': self.user_pool_id,
            'Username': self.user_name,
        }


def _optional_string(payload, key):
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidTriggerEvent(f"'{key}' must be a string, got {type(value).__name__}")
    return value or None


def parse_trigger_event(raw) -> ParsedTriggerEvent:
    """Parse a post confirmation payload without modifying it.

    The Lambda runtime hands over a dict, but a raw JSON document (str or
    bytes) is accepted as well. Missing fields come back as None so the
    caller can decide which of them it needs.
    """
    payload = raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            payload = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidTriggerEvent(f"event is not valid UTF-8: {e}") from e
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise InvalidTriggerEvent(f"event is not valid JSON: {e}") from e
    if not isinstance(payload, Mapping):
        raise InvalidTriggerEvent(f"event must be a JSON object, got {type(payload).__name__}")

    request = payload.get('request')
    if request is not None and not isinstance(request, Mapping):
        raise InvalidTriggerEvent(f"'request' must be an object, got {type(request).__name__}")

    return ParsedTriggerEvent(
        user_pool_id=_optional_string(payload, 'userPoolId'),
        user_name=_optional_string(payload, 'userName'),
        trigger_source=_optional_string(payload, 'triggerSource'),
    )
