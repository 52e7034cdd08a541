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
"""Registry creating each network at most once per process.

Concurrent requests for the same (name, range) wait for the single creation in
flight and share its result. Successful results are remembered until they are
explicitly invalidated; failures are not, so the next request tries again.
"""

import collections
import threading
from concurrent import futures

from gcesecuritygroups.core import exceptions
from gcesecuritygroups.core import log


class Error(exceptions.Error):
  """Errors raised by this module."""


class NetworkCreationError(Error):
  """The network is missing although its insert operation succeeded."""


NetworkAndAddressRange = collections.namedtuple(
    'NetworkAndAddressRange', ['name', 'ipv4_range'])


class NetworkCreator(object):
  """Creates networks on demand, memoizing them by name and range."""

  def __init__(self, adapter, resource_mutator):
    """Creates an empty registry.

    Args:
      adapter: client_adapter.ClientAdapter, used to look networks up.
      resource_mutator: mutator.ResourceMutator, used to insert networks.
    """
    self._adapter = adapter
    self._mutator = resource_mutator
    self._lock = threading.Lock()
    self._networks = {}
    self._in_flight = {}

  def GetOrCreate(self, name, ipv4_range):
    """Returns the named network, creating it with ipv4_range if needed.

    Args:
      name: str, the network name.
      ipv4_range: str, the address range used if the network is created.

    Returns:
      Network message.

    Raises:
      NetworkCreationError: if the network cannot be found after creation.
      mutator.OperationError: if the insert operation failed or timed out.
    """
    key = NetworkAndAddressRange(name, ipv4_range)
    with self._lock:
      network = self._networks.get(key)
      if network is not None:
        return network
      future = self._in_flight.get(key)
      owner = future is None
      if owner:
        future = futures.Future()
        self._in_flight[key] = future

    if not owner:
      log.debug('Waiting for the creation of network [%s] in flight.', name)
      return future.result()

    try:
      network = self._CreateIfNeeded(key)
    except BaseException as e:
      with self._lock:
        del self._in_flight[key]
      future.set_exception(e)
      raise

    with self._lock:
      self._networks[key] = network
      del self._in_flight[key]
    future.set_result(network)
    return network

  def Invalidate(self, name):
    """Forgets every network remembered under the given name."""
    with self._lock:
      for key in [k for k in self._networks if k.name == name]:
        del self._networks[key]

  def _CreateIfNeeded(self, key):
    network = self._adapter.networks.Get(key.name)
    if network is not None:
      log.info('Using existing network [%s].', key.name)
      return network

    self._mutator.CreateNetwork(key.name, key.ipv4_range)
    network = self._adapter.networks.Get(key.name)
    if network is None:
      raise NetworkCreationError(
          'Network [{0}] was created but cannot be found.'.format(key.name))
    return network


_process_creators_lock = threading.Lock()
_process_creators = {}


def GetProcessNetworkCreator(adapter, resource_mutator):
  """Returns the process-wide NetworkCreator of the adapter's project.

  The creator is built with the given adapter and mutator on first use and
  handed to every later caller for the same project, so extensions built
  independently still create each network at most once.

  Args:
    adapter: client_adapter.ClientAdapter, used if the creator is built.
    resource_mutator: mutator.ResourceMutator, used if the creator is built.

  Returns:
    NetworkCreator.
  """
  with _process_creators_lock:
    creator = _process_creators.get(adapter.project)
    if creator is None:
      creator = NetworkCreator(adapter, resource_mutator)
      _process_creators[adapter.project] = creator
    return creator


def ClearProcessNetworkCreators():
  """Drops every process-wide creator, e.g. when credentials change."""
  with _process_creators_lock:
    _process_creators.clear()
