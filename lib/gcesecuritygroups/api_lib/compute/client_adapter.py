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
"""Compute API surface used by security groups.

The adapter wraps an apitools compute client. It exposes networks, firewalls,
operations and instances with plain arguments, turns HTTP 404 on reads into
None and walks every page of list results.
"""

import http.client

from apitools.base.py import exceptions as apitools_exceptions
from apitools.base.py import list_pager
from gcesecuritygroups.api_lib.compute import path_simplifier
from gcesecuritygroups.core import log
from gcesecuritygroups.core import properties


def _GetOrNone(service, request):
  """Issues a Get request, returning None if the resource does not exist."""
  try:
    return service.Get(request)
  except apitools_exceptions.HttpError as e:
    if e.status_code == http.client.NOT_FOUND:
      log.debug('Resource not found: %s', e.url)
      return None
    raise


class _Networks(object):
  """Networks of the adapter's project."""

  def __init__(self, adapter):
    self._adapter = adapter
    self._service = adapter.apitools_client.networks

  def List(self):
    """Yields every network of the project."""
    request = self._adapter.messages.ComputeNetworksListRequest(
        project=self._adapter.project)
    return self._adapter.YieldFromList(self._service, request)

  def Get(self, name, project=None):
    """Returns the named network or None if it does not exist."""
    request = self._adapter.messages.ComputeNetworksGetRequest(
        network=name, project=project or self._adapter.project)
    return _GetOrNone(self._service, request)

  def GetByUri(self, uri):
    """Returns the network a selfLink points at or None."""
    try:
      project = path_simplifier.Parse(uri).project
    except path_simplifier.InvalidResourceUriError:
      project = None
    return self.Get(path_simplifier.Name(uri), project=project)

  def Insert(self, name, ipv4_range):
    """Starts creating a legacy network with the given address range."""
    messages = self._adapter.messages
    request = messages.ComputeNetworksInsertRequest(
        network=messages.Network(name=name, IPv4Range=ipv4_range),
        project=self._adapter.project)
    return self._service.Insert(request)

  def Delete(self, name):
    """Starts deleting the named network."""
    request = self._adapter.messages.ComputeNetworksDeleteRequest(
        network=name, project=self._adapter.project)
    return self._service.Delete(request)


class _Firewalls(object):
  """Firewalls of the adapter's project."""

  def __init__(self, adapter):
    self._adapter = adapter
    self._service = adapter.apitools_client.firewalls

  def List(self, filter_expr=None):
    """Yields every firewall matching filter_expr.

    Args:
      filter_expr: str, a server side filter such as
        'network eq .*/my-network'.

    Returns:
      A generator of Firewall messages.
    """
    request = self._adapter.messages.ComputeFirewallsListRequest(
        filter=filter_expr, project=self._adapter.project)
    return self._adapter.YieldFromList(self._service, request)

  def CreateInNetwork(self, name, network_uri, options):
    """Starts creating a firewall in a network.

    Args:
      name: str, the firewall name.
      network_uri: str, selfLink of the network the firewall belongs to.
      options: firewalls_utils.FirewallOptions, the rules and sources.

    Returns:
      Operation, the insert operation.
    """
    messages = self._adapter.messages
    allowed = [
        messages.Firewall.AllowedValueListEntry(
            IPProtocol=rule.protocol, ports=list(rule.ports))
        for rule in options.allowed]
    firewall = messages.Firewall(
        name=name,
        network=network_uri,
        description=options.description,
        allowed=allowed,
        sourceRanges=list(options.source_ranges),
        sourceTags=list(options.source_tags),
        targetTags=list(options.target_tags))
    request = messages.ComputeFirewallsInsertRequest(
        firewall=firewall, project=self._adapter.project)
    return self._service.Insert(request)

  def Delete(self, name):
    """Starts deleting the named firewall."""
    request = self._adapter.messages.ComputeFirewallsDeleteRequest(
        firewall=name, project=self._adapter.project)
    return self._service.Delete(request)


class _Operations(object):
  """Global, regional and zonal operations."""

  def __init__(self, adapter):
    self._adapter = adapter

  def Get(self, self_link):
    """Fetches the current state of an operation.

    The collection (global, regional or zonal) is picked from the selfLink.

    Args:
      self_link: str, the operation's selfLink.

    Returns:
      Operation, or None if the operation no longer exists.
    """
    ref = path_simplifier.Parse(self_link)
    client = self._adapter.apitools_client
    messages = self._adapter.messages
    if ref.zone:
      service = client.zoneOperations
      request = messages.ComputeZoneOperationsGetRequest(
          operation=ref.name, project=ref.project, zone=ref.zone)
    elif ref.region:
      service = client.regionOperations
      request = messages.ComputeRegionOperationsGetRequest(
          operation=ref.name, project=ref.project, region=ref.region)
    else:
      service = client.globalOperations
      request = messages.ComputeGlobalOperationsGetRequest(
          operation=ref.name, project=ref.project)
    return _GetOrNone(service, request)


class _Instances(object):
  """Instances, looked up by selfLink."""

  def __init__(self, adapter):
    self._adapter = adapter
    self._service = adapter.apitools_client.instances

  def GetByUri(self, uri):
    """Returns the instance a selfLink points at or None."""
    ref = path_simplifier.Parse(uri)
    if not ref.zone:
      raise path_simplifier.InvalidResourceUriError(
          '[{0}] is not a zonal instance URI.'.format(uri))
    request = self._adapter.messages.ComputeInstancesGetRequest(
        instance=ref.name, project=ref.project, zone=ref.zone)
    return _GetOrNone(self._service, request)


class ClientAdapter(object):
  """Encapsulates compute apitools interactions."""

  def __init__(self, client, project=None, max_results_per_page=None):
    """Creates the adapter.

    Args:
      client: an apitools compute client, exposing the networks, firewalls,
        globalOperations, regionOperations, zoneOperations and instances
        services and MESSAGES_MODULE.
      project: str, the project owning the networks. Defaults to the
        core/project property.
      max_results_per_page: int, page size of list requests. Defaults to the
        compute/max_results_per_page property.
    """
    self._client = client
    self._project = project or properties.VALUES.core.project.GetOrFail()
    self._max_results_per_page = (
        max_results_per_page or
        properties.VALUES.compute.max_results_per_page.GetInt())

    self.networks = _Networks(self)
    self.firewalls = _Firewalls(self)
    self.operations = _Operations(self)
    self.instances = _Instances(self)

  @property
  def apitools_client(self):
    return self._client

  @property
  def messages(self):
    return self._client.MESSAGES_MODULE

  @property
  def project(self):
    return self._project

  def YieldFromList(self, service, request):
    """Yields the items of every page of a list request."""
    return list_pager.YieldFromList(
        service, request,
        batch_size=self._max_results_per_page,
        batch_size_attribute='maxResults',
        field='items')
