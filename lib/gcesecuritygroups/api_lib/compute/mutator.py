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
"""Creates and deletes networks and firewalls, waiting for their operations.

Every mutating call returns an operation. The mutator polls it until it is
done and turns a timeout or a failed operation into an exception, so callers
may chain dependent calls once a method returns.
"""

import http.client

from apitools.base.py import encoding
from gcesecuritygroups.api_lib.compute.operations import poller
from gcesecuritygroups.api_lib.util import waiter
from gcesecuritygroups.core import exceptions
from gcesecuritygroups.core import log
from gcesecuritygroups.core import properties


class Error(exceptions.Error):
  """Errors raised by this module."""


class OperationError(Error):
  """A mutating operation did not complete successfully.

  Attributes:
    operation: Operation, the last observed state of the operation.
  """

  def __init__(self, message, operation):
    super(OperationError, self).__init__(message)
    self.operation = operation


class OperationFailedError(OperationError):
  """The operation completed with an error."""


class OperationTimeoutError(OperationError):
  """The operation was not done before the deadline.

  It may still be running, and may still succeed, remotely.
  """


def _GetProblems(operation):
  """Returns the error messages recorded on a done operation."""
  problems = []
  # httpErrorStatusCode is set only when the operation is not successful.
  if (operation.httpErrorStatusCode and
      operation.httpErrorStatusCode != http.client.OK):
    problems.append('HTTP {0} {1}'.format(
        operation.httpErrorStatusCode, operation.httpErrorMessage or '')
                    .rstrip())
  # Just in case the server did not set httpErrorStatusCode but the
  # operation did fail, we check the "error" field.
  if operation.error:
    for error in operation.error.errors or []:
      problems.append(error.message or error.code)
  return problems


class ResourceMutator(object):
  """Issues create and delete calls and waits for their operations."""

  def __init__(self, adapter, interval_ms=None, timeout_ms=None):
    """Creates the mutator.

    Args:
      adapter: client_adapter.ClientAdapter, issues the calls.
      interval_ms: int, time between polls. Defaults to the
        compute/operation_complete_interval_ms property.
      timeout_ms: int, how long to wait for an operation. Defaults to the
        compute/operation_complete_timeout_ms property.
    """
    self._adapter = adapter
    self._poller = poller.Poller(adapter)
    if interval_ms is None:
      interval_ms = (
          properties.VALUES.compute.operation_complete_interval_ms.GetInt())
    if timeout_ms is None:
      timeout_ms = (
          properties.VALUES.compute.operation_complete_timeout_ms.GetInt())
    self._interval_ms = interval_ms
    self._timeout_ms = timeout_ms

  @property
  def interval_ms(self):
    return self._interval_ms

  @property
  def timeout_ms(self):
    return self._timeout_ms

  def DeleteFirewall(self, name):
    """Deletes a firewall and waits until it is gone."""
    operation = self._adapter.firewalls.Delete(name)
    self._WaitForOperation(operation, 'delete', 'firewall', name)
    log.DeletedResource(name, kind='firewall')

  def DeleteNetwork(self, name):
    """Deletes a network and waits until it is gone."""
    operation = self._adapter.networks.Delete(name)
    self._WaitForOperation(operation, 'delete', 'network', name)
    log.DeletedResource(name, kind='network')

  def CreateFirewall(self, name, network_uri, options):
    """Creates a firewall in a network and waits until it exists.

    Args:
      name: str, the firewall name.
      network_uri: str, selfLink of the network.
      options: firewalls_utils.FirewallOptions, rules and sources.

    Returns:
      Operation, the done insert operation.
    """
    operation = self._adapter.firewalls.CreateInNetwork(
        name, network_uri, options)
    operation = self._WaitForOperation(operation, 'create', 'firewall', name)
    log.CreatedResource(name, kind='firewall')
    return operation

  def CreateNetwork(self, name, ipv4_range):
    """Creates a network and waits until it exists.

    Args:
      name: str, the network name.
      ipv4_range: str, the network's internal address range.

    Returns:
      Operation, the done insert operation.
    """
    operation = self._adapter.networks.Insert(name, ipv4_range)
    operation = self._WaitForOperation(operation, 'create', 'network', name)
    log.CreatedResource(name, kind='network', details='in [{0}]'.format(
        ipv4_range))
    return operation

  def _WaitForOperation(self, operation, action, kind, name):
    """Polls the operation until done and validates its outcome.

    Args:
      operation: Operation, returned by the mutating call.
      action: str, 'create' or 'delete', for messages.
      kind: str, the resource kind, for messages.
      name: str, the resource name, for messages.

    Returns:
      Operation, the done operation.

    Raises:
      OperationTimeoutError: if the operation was not done in time.
      OperationFailedError: if the operation recorded an error.
    """
    log.debug('Waiting for operation [%s] to %s %s [%s].',
              operation.name, action, kind, name)
    result = waiter.PollUntilDone(
        self._poller, operation, self._timeout_ms, self._interval_ms)

    if isinstance(result, waiter.TimedOut):
      raise OperationTimeoutError(
          'Could not {action} {kind} [{name}]: operation [{op}] did not '
          'finish within {timeout}ms. It may still be underway remotely and '
          'may still succeed.'.format(
              action=action, kind=kind, name=name,
              op=result.operation.name, timeout=result.timeout_ms),
          result.operation)

    operation = result.operation
    problems = _GetProblems(operation)
    if problems:
      raise OperationFailedError(
          'Could not {action} {kind} [{name}], operation failed: '
          '{problems}\n{payload}'.format(
              action=action, kind=kind, name=name,
              problems='; '.join(problems),
              payload=encoding.MessageToJson(operation)),
          operation)
    return operation
