# Copyright 2016 Google Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Utilities to support long running operations."""

import abc
import collections

from gcesecuritygroups.core import log
from gcesecuritygroups.core.util import retry


class OperationPoller(object, metaclass=abc.ABCMeta):
  """Interface for defining operation which can be polled and waited on.

  This construct manages operation_ref and operation objects. Operation_ref is
  an identifier for the operation. OperationPoller has two responsibilities:
    1. Given operation object determine if it is done.
    2. Given operation_ref fetch operation object
  """

  @abc.abstractmethod
  def IsDone(self, operation):
    """Given result of Poll determines if result is done.

    Args:
      operation: object representing operation returned by Poll method.

    Returns:
      bool, True if the operation reached a terminal state.
    """
    return True

  @abc.abstractmethod
  def Poll(self, operation_ref):
    """Retrieves operation given its reference.

    Args:
      operation_ref: object, some id for operation.

    Returns:
      object which represents operation.
    """
    return None


class Done(collections.namedtuple('Done', ['operation'])):
  """The operation was observed in a terminal state.

  Attributes:
    operation: the last fetched operation. It may still describe a failure.
  """


class TimedOut(collections.namedtuple('TimedOut', ['operation', 'timeout_ms'])):
  """The deadline elapsed before the operation was observed in a terminal state.

  The operation is not cancelled and may still complete remotely.

  Attributes:
    operation: the last fetched operation.
    timeout_ms: int, the deadline that elapsed.
  """


def PollUntilDone(poller, operation, timeout_ms, interval_ms):
  """Blocks until the operation is done or timeout_ms elapsed.

  The operation is re-fetched every interval_ms, and once more at the deadline
  when it falls between two polls. An operation which is already done is
  returned without being fetched again. Failures recorded on a done operation
  are not inspected here; that is the caller's job.

  Args:
    poller: OperationPoller, poller used to fetch and inspect the operation.
    operation: object, the operation returned by the mutating call. It is
      also the reference handed to poller.Poll.
    timeout_ms: int, how long to keep polling.
    interval_ms: int, how long to sleep between two polls.

  Returns:
    Done or TimedOut, both carrying the last observed operation.
  """
  if poller.IsDone(operation):
    return Done(operation)

  def _StatusUpdate(unused_result, state):
    log.debug('Operation not done after %dms (poll #%d).',
              state.time_passed_ms, state.retrial + 1)

  def _IsNotDone(result, unused_state):
    return not poller.IsDone(result)

  retryer = retry.Retryer(max_wait_ms=timeout_ms,
                          jitter_ms=None,
                          status_update_func=_StatusUpdate)
  try:
    operation = retryer.RetryOnResult(
        func=poller.Poll,
        args=(operation,),
        should_retry_if=_IsNotDone,
        sleep_ms=interval_ms)
  except retry.WaitException as e:
    return TimedOut(e.last_result, timeout_ms)
  return Done(operation)
