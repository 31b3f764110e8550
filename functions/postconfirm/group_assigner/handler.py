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


from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError, ConnectTimeoutError, ReadTimeoutError

from .config import GroupAssignerConfig
from .errors import InvalidTriggerEvent
from .events import GroupAssignmentRequest, parse_trigger_event


class OutcomeStatus(str, Enum):
    ASSIGNED = "assigned"
    INVALID_EVENT = "invalid_event"
    MISSING_GROUP_NAME = "missing_group_name"
    MISSING_USER_POOL_ID = "missing_user_pool_id"
    MISSING_USER_NAME = "missing_user_name"
    TIMED_OUT = "timed_out"
    FAILED = "failed"


@dataclass(frozen=True)
class AssignmentOutcome:
    """What one invocation did, as handed to the on_outcome hook."""

    status: OutcomeStatus
    request: Optional[GroupAssignmentRequest] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def succeeded(self):
        return self.status is OutcomeStatus.ASSIGNED


class GroupAssigner:
    """Adds a freshly confirmed Cognito user to the configured group.

    handle() always gives back the event it was called with. Every problem
    (bad payload, missing setting, missing username, Cognito error or
    timeout) is logged and reported to on_outcome, never raised, so user
    confirmation is not blocked by a failed group assignment.
    """

    def __init__(
        self,
        client,
        config: GroupAssignerConfig,
        logger=None,
        on_outcome: Optional[Callable[[AssignmentOutcome], None]] = None,
    ):
        self.client = client
        self.config = config
        self.logger = logger or Logger(child=True)
        self.on_outcome = on_outcome

    @property
    def required_ms(self):
        # worst case for the call under the client timeouts, plus a margin to return
        config = self.config
        return int((config.connect_timeout + config.read_timeout) * 1000) + config.min_remaining_ms

    def handle(self, event: Any, context=None) -> Any:
        self.logger.debug("Received raw event", extra={'event': event})
        outcome = self._assign(event, context)
        self._report(outcome)
        return event

    def _assign(self, event, context):
        try:
            parsed = parse_trigger_event(event)
        except InvalidTriggerEvent as e:
            self.logger.error("Could not parse post confirmation event", extra={'error_message': str(e)})
            return AssignmentOutcome(OutcomeStatus.INVALID_EVENT, error_message=str(e))

        group_name = self.config.group_name
        if not group_name:
            self.logger.error("GROUP_NAME environment variable not set")
            return AssignmentOutcome(OutcomeStatus.MISSING_GROUP_NAME)

        user_pool_id = self.config.user_pool_id or parsed.user_pool_id
        if not user_pool_id:
            self.logger.error(
                "Could not determine user pool id from environment or event",
                extra={'group_name': group_name},
            )
            return AssignmentOutcome(OutcomeStatus.MISSING_USER_POOL_ID)

        if not parsed.user_name:
            self.logger.error(
                "Username not found in the event",
                extra={'group_name': group_name, 'user_pool_id': user_pool_id},
            )
            return AssignmentOutcome(OutcomeStatus.MISSING_USER_NAME)

        request = GroupAssignmentRequest(group_name, user_pool_id, parsed.user_name)
        log_extra = {
            'group_name': group_name,
            'user_pool_id': user_pool_id,
            'user_name': parsed.user_name,
            'trigger_source': parsed.trigger_source,
        }

        remaining_ms = _remaining_time_ms(context)
        if remaining_ms is not None and remaining_ms < self.required_ms:
            self.logger.error(
                "Not enough invocation time left to add user to group",
                extra={**log_extra, 'remaining_ms': remaining_ms, 'required_ms': self.required_ms},
            )
            return AssignmentOutcome(
                OutcomeStatus.TIMED_OUT, request,
                error_message=f"{remaining_ms}ms remaining, {self.required_ms}ms needed",
            )

        self.logger.info("Adding user to group", extra=log_extra)
        try:
            self.client.admin_add_user_to_group(**request.as_api_params())
        except (ConnectTimeoutError, ReadTimeoutError) as e:
            self.logger.error("Timed out adding user to group", extra={**log_extra, 'error_message': str(e)})
            return AssignmentOutcome(OutcomeStatus.TIMED_OUT, request, error_message=str(e))
        except ClientError as e:
            error = e.response.get('Error', {})
            self.logger.error(
                "Error adding user to group",
                extra={**log_extra, 'error_code': error.get('Code'), 'error_message': error.get('Message')},
            )
            return AssignmentOutcome(
                OutcomeStatus.FAILED, request,
                error_code=error.get('Code'), error_message=error.get('Message'),
            )
        except Exception as e:
            self.logger.exception("Unexpected error adding user to group", extra=log_extra)
            return AssignmentOutcome(
                OutcomeStatus.FAILED, request,
                error_code=type(e).__name__, error_message=str(e),
            )

        self.logger.info("Successfully added user to group", extra=log_extra)
        return AssignmentOutcome(OutcomeStatus.ASSIGNED, request)

    def _report(self, outcome):
        if self.on_outcome is None:
            return
        try:
            self.on_outcome(outcome)
        except Exception:
            self.logger.exception("Outcome hook failed", extra={'status': outcome.status.value})


def _remaining_time_ms(context):
    get_remaining = getattr(context, 'get_remaining_time_in_millis', None)
    if get_remaining is None:
        return None
    return get_remaining()
