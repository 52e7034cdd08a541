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
"""Common classes and functions for firewall rules.

Firewalls are compared with permissions through plain functions over the
fields that matter: protocol, port span, source ranges, source tags and
target tags.
"""
import collections
import re

from gcesecuritygroups.api_lib.compute import name_generator
from gcesecuritygroups.api_lib.compute import security_group
from gcesecuritygroups.core import exceptions

LEGAL_PORT_SPECS = re.compile(
    r"""

    (?P<from_port>\d+)          # The first port.

    (-(?P<to_port>\d+))?        # The optional last port of a range.

    $                           # End of input marker.
    """,
    re.VERBOSE)

# Compute Engine fills this in when a firewall has neither source ranges nor
# source tags.
DEFAULT_SOURCE_RANGE = '0.0.0.0/0'


class Error(exceptions.Error):
  """Errors raised by this module."""


class InvalidPortSpecError(Error):
  """A firewall rule carries a port entry that is neither N nor N-M."""


class UnsupportedProtocolError(Error):
  """A permission's protocol cannot be expressed as a firewall rule."""


FirewallRule = collections.namedtuple('FirewallRule', ['protocol', 'ports'])


class FirewallOptions(object):
  """Parameters of a firewall to create.

  Attributes:
    name: str, the firewall name.
    network: str, selfLink of the network the firewall belongs to.
    description: str, optional description.
    allowed: [FirewallRule], the allowed protocols and ports.
    source_ranges: [str], source CIDR ranges.
    source_tags: [str], source instance tags.
    target_tags: [str], the instances the firewall applies to; empty for all.
  """

  def __init__(self, name=None, network=None, description=None, allowed=None,
               source_ranges=None, source_tags=None, target_tags=None):
    self.name = name
    self.network = network
    self.description = description
    self.allowed = list(allowed or [])
    self.source_ranges = list(source_ranges or [])
    self.source_tags = list(source_tags or [])
    self.target_tags = list(target_tags or [])

  def __eq__(self, other):
    return (isinstance(other, FirewallOptions) and
            self.__dict__ == other.__dict__)

  def __ne__(self, other):
    return not self == other

  def __repr__(self):
    return 'FirewallOptions({0})'.format(', '.join(
        '{0}={1!r}'.format(k, v) for k, v in sorted(self.__dict__.items())))


def NetworkFilter(network_name):
  """Returns the list filter selecting the firewalls of a network."""
  return 'network eq .*/{0}'.format(network_name)


def FormatPorts(from_port, to_port):
  """Renders a port span as firewall port entries.

  Args:
    from_port: int, first port. Values <= 0 mean the rule has no ports.
    to_port: int, last port.

  Returns:
    [str], [] for no ports, ['N'] for a single port, ['N-M'] for a range.
  """
  if from_port <= 0:
    return []
  if from_port == to_port:
    return [str(to_port)]
  return ['{0}-{1}'.format(from_port, to_port)]


def ParsePorts(port_spec):
  """Parses a firewall port entry into a (from_port, to_port) tuple."""
  match = LEGAL_PORT_SPECS.match(port_spec.strip())
  if not match:
    raise InvalidPortSpecError(
        'Firewall ports must be of the form PORT[-PORT]; received [{0}].'
        .format(port_spec))
  from_port = int(match.group('from_port'))
  to_port = int(match.group('to_port') or from_port)
  return from_port, to_port


def FirewallToIpPermissions(firewall):
  """Returns one IpPermission per protocol and port entry of the firewall.

  A rule without ports becomes a single permission with ports 0-0.

  Args:
    firewall: Firewall message.

  Returns:
    [IpPermission], in rule order.
  """
  permissions = []
  for rule in firewall.allowed:
    protocol = security_group.IpProtocol.FromValue(rule.IPProtocol)
    spans = [ParsePorts(p) for p in rule.ports] or [(0, 0)]
    for from_port, to_port in spans:
      permissions.append(security_group.IpPermission(
          ip_protocol=protocol,
          from_port=from_port,
          to_port=to_port,
          cidr_blocks=firewall.sourceRanges,
          group_ids=firewall.sourceTags))
  return permissions


def _Normalized(permission):
  """Applies the server side defaults so permissions compare by meaning."""
  if permission.from_port <= 0:
    permission = permission._replace(from_port=0, to_port=0)
  if not permission.cidr_blocks and not permission.group_ids:
    permission = permission._replace(
        cidr_blocks=frozenset([DEFAULT_SOURCE_RANGE]))
  return permission


def _Covers(granted, wanted):
  """True if the granted permission allows all traffic of the wanted one."""
  if granted.ip_protocol not in (wanted.ip_protocol,
                                 security_group.IpProtocol.ALL):
    return False
  if granted.from_port > 0:
    if wanted.from_port <= 0:
      return False
    if not granted.from_port <= wanted.from_port <= wanted.to_port <= (
        granted.to_port):
      return False
  return (wanted.cidr_blocks <= granted.cidr_blocks and
          wanted.group_ids <= granted.group_ids)


def ProvidesIpPermission(firewall, permission):
  """True if the firewall already allows everything the permission allows."""
  if permission.ip_protocol == security_group.IpProtocol.UNRECOGNIZED:
    return False
  wanted = _Normalized(permission)
  return any(_Covers(_Normalized(granted), wanted)
             for granted in FirewallToIpPermissions(firewall))


def EqualsIpPermission(firewall, permission):
  """True if the firewall encodes exactly this permission and nothing else."""
  if permission.ip_protocol == security_group.IpProtocol.UNRECOGNIZED:
    return False
  granted = set(_Normalized(p) for p in FirewallToIpPermissions(firewall))
  return granted == set([_Normalized(permission)])


def AppliesToTags(firewall, tags):
  """True if the firewall applies to an instance carrying the given tags.

  Args:
    firewall: Firewall message.
    tags: iterable(str), the instance tags.

  Returns:
    bool, True when the firewall has no target tags or one of them is in tags.
  """
  if not firewall.targetTags:
    return True
  return not set(firewall.targetTags).isdisjoint(tags)


def IpPermissionToFirewallOptions(permission, group_name):
  """Builds the options of a firewall granting a single permission.

  Args:
    permission: IpPermission, the permission to grant.
    group_name: str, the security group name, used as the firewall name prefix.

  Returns:
    FirewallOptions, with a generated name and no network set.

  Raises:
    UnsupportedProtocolError: if the permission's protocol is unrecognized.
  """
  if permission.ip_protocol == security_group.IpProtocol.UNRECOGNIZED:
    raise UnsupportedProtocolError(
        'Cannot create a firewall rule for {0}.'.format(permission))
  rule = FirewallRule(
      protocol=permission.ip_protocol.value.lower(),
      ports=FormatPorts(permission.from_port, permission.to_port))
  return FirewallOptions(
      name=name_generator.GenerateUniqueNameForGroup(group_name),
      allowed=[rule],
      source_ranges=sorted(permission.cidr_blocks),
      source_tags=sorted(permission.group_ids))
