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
"""Constructs to poll compute operations."""

from gcesecuritygroups.api_lib.util import waiter
from gcesecuritygroups.core import exceptions
from gcesecuritygroups.core import log


class Error(exceptions.Error):
  """Errors raised by this module."""


class OperationNotFoundError(Error):
  """The operation disappeared while it was being polled."""

  def __init__(self, self_link):
    super(OperationNotFoundError, self).__init__(
        'Operation [{0}] no longer exists.'.format(self_link))


class Poller(waiter.OperationPoller):
  """Compute operations poller.

  Unlike the pollers of other surfaces this one does not raise on operation
  errors: a done operation is handed back as is and the caller decides what
  its httpErrorStatusCode means.
  """

  def __init__(self, adapter):
    """Initializes poller for compute operations.

    Args:
      adapter: client_adapter.ClientAdapter, used to fetch operations.
    """
    self.adapter = adapter
    self.status_enum = adapter.messages.Operation.StatusValueValuesEnum

  def IsDone(self, operation):
    """Overrides."""
    return operation.status == self.status_enum.DONE

  def Poll(self, operation_ref):
    """Overrides."""
    operation = self.adapter.operations.Get(operation_ref.selfLink)
    if operation is None:
      raise OperationNotFoundError(operation_ref.selfLink)
    log.debug('Operation [%s] on [%s] is %s.', operation.name,
              operation.targetLink, operation.status)
    return operation
