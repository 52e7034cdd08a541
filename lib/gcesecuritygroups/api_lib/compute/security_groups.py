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
"""Security groups on top of Compute Engine networks and firewalls.

A security group is a network: its id and name are the network name and its
permissions are the allowed rules of the firewalls referencing the network.
Adding a permission creates one firewall, removing it deletes the firewalls
that encode exactly that permission, and deleting the group deletes the
firewalls and then the network.
"""

from gcesecuritygroups.api_lib.compute import client_adapter
from gcesecuritygroups.api_lib.compute import firewalls_utils
from gcesecuritygroups.api_lib.compute import mutator
from gcesecuritygroups.api_lib.compute import network_creator as network_creator_lib
from gcesecuritygroups.api_lib.compute import networks_utils
from gcesecuritygroups.api_lib.compute import security_group
from gcesecuritygroups.core import exceptions
from gcesecuritygroups.core import log
from gcesecuritygroups.core import properties


class Error(exceptions.Error):
  """Errors raised by this module."""


class InvalidArgumentError(Error):
  """A required argument is missing."""


class NetworkNotFoundError(Error):
  """The network backing a security group does not exist."""


def _CheckNotNone(value, name):
  if value is None:
    raise InvalidArgumentError('[{0}] must be specified.'.format(name))
  return value


class SecurityGroupExtension(object):
  """Lists, creates and deletes security groups and their permissions."""

  def __init__(self, adapter, resource_mutator, network_creator,
               default_network_range):
    """Creates the extension.

    Args:
      adapter: client_adapter.ClientAdapter, reads resources.
      resource_mutator: mutator.ResourceMutator, creates and deletes
        resources and waits for their operations.
      network_creator: network_creator.NetworkCreator, shared by every
        extension that should not create the same network twice.
      default_network_range: str, address range of networks created for new
        groups.
    """
    self._adapter = adapter
    self._mutator = resource_mutator
    self._network_creator = network_creator
    self._default_network_range = default_network_range

  @classmethod
  def FromProperties(cls, client, project=None, network_creator=None):
    """Creates an extension configured from properties.

    Args:
      client: an apitools compute client.
      project: str, overrides the core/project property.
      network_creator: network_creator.NetworkCreator, overrides the
        process-wide registry of the project.

    Returns:
      SecurityGroupExtension.
    """
    adapter = client_adapter.ClientAdapter(client, project=project)
    resource_mutator = mutator.ResourceMutator(adapter)
    if network_creator is None:
      network_creator = network_creator_lib.GetProcessNetworkCreator(
          adapter, resource_mutator)
    return cls(adapter, resource_mutator, network_creator,
               properties.VALUES.compute.default_network_range.Get())

  def ListSecurityGroups(self):
    """Returns a set with the security group of every network."""
    return set(self._ToSecurityGroup(network)
               for network in self._adapter.networks.List())

  def ListSecurityGroupsInLocation(self, unused_location):
    """Networks are global, so this lists every security group."""
    return self.ListSecurityGroups()

  def ListSecurityGroupsForNode(self, instance_uri):
    """Returns the security groups applying to an instance.

    A network's group applies when one of its firewalls has no target tags or
    targets one of the instance's tags.

    Args:
      instance_uri: str, the instance selfLink.

    Returns:
      set(SecurityGroup), empty if the instance does not exist.
    """
    _CheckNotNone(instance_uri, 'instance_uri')
    instance = self._adapter.instances.GetByUri(instance_uri)
    if instance is None:
      return set()

    tags = instance.tags.items if instance.tags else []
    groups = set()
    for network_interface in instance.networkInterfaces:
      network = self._adapter.networks.GetByUri(network_interface.network)
      if network is None:
        log.warning('Network [%s] of instance [%s] does not exist.',
                    network_interface.network, instance.name)
        continue
      group = networks_utils.GroupForTagsInNetwork(
          network, self._ListFirewalls(network.name), tags)
      if group is not None:
        groups.add(group)
    return groups

  def GetSecurityGroupById(self, id):  # pylint: disable=redefined-builtin
    """Returns the security group of the named network, or None."""
    _CheckNotNone(id, 'id')
    network = self._adapter.networks.Get(id)
    if network is None:
      return None
    return self._ToSecurityGroup(network)

  def CreateSecurityGroup(self, name, unused_location=None):
    """Returns the group of the named network, creating the network if needed.

    Concurrent calls for the same name issue a single network insert.

    Args:
      name: str, the group (network) name.

    Returns:
      SecurityGroup.
    """
    _CheckNotNone(name, 'name')
    network = self._network_creator.GetOrCreate(
        name, self._default_network_range)
    return self._ToSecurityGroup(network)

  def RemoveSecurityGroup(self, id):  # pylint: disable=redefined-builtin
    """Deletes the firewalls of a network, then the network.

    Args:
      id: str, the group (network) name.

    Returns:
      bool, False if the network did not exist, True once it is deleted.

    Raises:
      mutator.OperationError: if a deletion failed or timed out. Firewalls
        deleted before the failure stay deleted.
    """
    _CheckNotNone(id, 'id')
    if self._adapter.networks.Get(id) is None:
      return False

    for firewall in self._ListFirewalls(id):
      self._mutator.DeleteFirewall(firewall.name)
    self._mutator.DeleteNetwork(id)
    self._network_creator.Invalidate(id)
    return True

  def AddIpPermission(self, ip_permission, group):
    """Grants a permission to a group by creating one firewall.

    Nothing is created if a firewall of the group already provides the
    permission.

    Args:
      ip_permission: IpPermission, the permission to grant.
      group: SecurityGroup, the group to grant it to.

    Returns:
      SecurityGroup, the refreshed group, or group itself if unchanged.
    """
    _CheckNotNone(group, 'group')
    _CheckNotNone(ip_permission, 'ip_permission')
    network = self._GetBackingNetwork(group)

    firewalls = self._ListFirewalls(network.name)
    if any(firewalls_utils.ProvidesIpPermission(fw, ip_permission)
           for fw in firewalls):
      log.info('Permission %s is already granted to group [%s].',
               ip_permission, group.id)
      return group

    options = firewalls_utils.IpPermissionToFirewallOptions(
        ip_permission, group.name)
    options.network = network.selfLink
    self._mutator.CreateFirewall(options.name, network.selfLink, options)
    return self.GetSecurityGroupById(group.id)

  def AddIpPermissionFromParts(self, ip_protocol, from_port, to_port,
                               tenant_id_group_name_pairs, cidr_blocks,
                               group_ids, group):
    """Builds an IpPermission and grants it to the group.

    Tenant id/group name pairs are not supported and are ignored.

    Returns:
      SecurityGroup, the refreshed group.
    """
    return self.AddIpPermission(
        self._BuildPermission(ip_protocol, from_port, to_port,
                              tenant_id_group_name_pairs, cidr_blocks,
                              group_ids),
        group)

  def RemoveIpPermission(self, ip_permission, group):
    """Deletes every firewall of the group encoding exactly this permission.

    Removing a permission the group does not have changes nothing.

    Args:
      ip_permission: IpPermission, the permission to revoke.
      group: SecurityGroup, the group to revoke it from.

    Returns:
      SecurityGroup, the refreshed group.
    """
    _CheckNotNone(group, 'group')
    _CheckNotNone(ip_permission, 'ip_permission')
    network = self._GetBackingNetwork(group)

    for firewall in self._ListFirewalls(network.name):
      if firewalls_utils.EqualsIpPermission(firewall, ip_permission):
        self._mutator.DeleteFirewall(firewall.name)
    return self.GetSecurityGroupById(group.id)

  def RemoveIpPermissionFromParts(self, ip_protocol, from_port, to_port,
                                  tenant_id_group_name_pairs, cidr_blocks,
                                  group_ids, group):
    """Builds an IpPermission and revokes it from the group."""
    return self.RemoveIpPermission(
        self._BuildPermission(ip_protocol, from_port, to_port,
                              tenant_id_group_name_pairs, cidr_blocks,
                              group_ids),
        group)

  def SupportsTenantIdGroupNamePairs(self):
    return False

  def SupportsTenantIdGroupIdPairs(self):
    return False

  def SupportsGroupIds(self):
    return True

  def SupportsPortRangesForGroups(self):
    return True

  def SupportsExclusionCidrBlocks(self):
    return False

  def _BuildPermission(self, ip_protocol, from_port, to_port,
                       tenant_id_group_name_pairs, cidr_blocks, group_ids):
    _CheckNotNone(ip_protocol, 'ip_protocol')
    if tenant_id_group_name_pairs:
      log.debug('Ignoring tenant id/group name pairs %s, they are not '
                'supported.', tenant_id_group_name_pairs)
    return security_group.IpPermission(
        ip_protocol=ip_protocol,
        from_port=from_port,
        to_port=to_port,
        cidr_blocks=cidr_blocks,
        group_ids=group_ids)

  def _GetBackingNetwork(self, group):
    network = self._adapter.networks.Get(group.id)
    if network is None:
      raise NetworkNotFoundError(
          'Network [{0}] backing the security group does not exist.'.format(
              group.id))
    return network

  def _ListFirewalls(self, network_name):
    return list(self._adapter.firewalls.List(
        firewalls_utils.NetworkFilter(network_name)))

  def _ToSecurityGroup(self, network):
    return networks_utils.NetworkToSecurityGroup(
        network, self._ListFirewalls(network.name))
