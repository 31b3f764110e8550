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

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit

from group_assigner import GroupAssigner, GroupAssignerConfig
from group_assigner.client import create_cognito_client

logger = Logger(service=os.environ.get('POWERTOOLS_SERVICE_NAME', 'post-confirmation'))
metrics = Metrics(namespace=os.environ.get('POWERTOOLS_METRICS_NAMESPACE', 'PostConfirmation'))
config = GroupAssignerConfig.from_environ(logger=logger)
cognito = create_cognito_client(config)


def record_outcome(outcome):
    name = 'GroupAddSuccess' if outcome.succeeded else 'GroupAddFailure'
    metrics.add_metric(name=name, unit=MetricUnit.Count, value=1)
    metrics.add_metadata(key='status', value=outcome.status.value)


assigner = GroupAssigner(cognito, config, logger=logger, on_outcome=record_outcome)

#add the confirmed cognito user to GROUP_NAME, always handing the event back to cognito

@logger.inject_lambda_context
@metrics.log_metrics
def lambda_handler(event, context):
    return assigner.handle(event, context)
