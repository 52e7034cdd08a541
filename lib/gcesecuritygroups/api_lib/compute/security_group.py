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
"""Provider neutral security group model."""

import collections
import enum


class IpProtocol(enum.Enum):
  """IP protocols a permission can allow."""
  TCP = 'tcp'
  UDP = 'udp'
  ICMP = 'icmp'
  ESP = 'esp'
  AH = 'ah'
  SCTP = 'sctp'
  ALL = 'all'
  UNRECOGNIZED = 'unrecognized'

  @classmethod
  def FromValue(cls, value):
    """Maps a firewall IPProtocol string to a member, never failing."""
    try:
      return cls(value.lower())
    except (AttributeError, ValueError):
      return cls.UNRECOGNIZED


class IpPermission(collections.namedtuple(
    'IpPermission',
    ['ip_protocol', 'from_port', 'to_port', 'cidr_blocks', 'group_ids'])):
  """A unit of allowed inbound traffic.

  Attributes:
    ip_protocol: IpProtocol, the allowed protocol.
    from_port: int, first allowed port, 0 when the protocol has no ports or
      all ports are allowed.
    to_port: int, last allowed port.
    cidr_blocks: frozenset(str), source address ranges.
    group_ids: frozenset(str), source instance tags.
  """

  def __new__(cls, ip_protocol, from_port=0, to_port=None, cidr_blocks=(),
              group_ids=()):
    if to_port is None:
      to_port = from_port
    return super(IpPermission, cls).__new__(
        cls, ip_protocol, int(from_port), int(to_port),
        frozenset(cidr_blocks or ()), frozenset(group_ids or ()))

  def __str__(self):
    return ('IpPermission({0} {1}-{2} from ranges [{3}] tags [{4}])'.format(
        self.ip_protocol.value, self.from_port, self.to_port,
        ', '.join(sorted(self.cidr_blocks)),
        ', '.join(sorted(self.group_ids))))


class SecurityGroup(object):
  """A security group backed by a network and its firewalls.

  Attributes:
    id: str, the network name.
    name: str, the network name.
    provider_id: str, the network's numeric id.
    uri: str, the network's selfLink.
    ip_permissions: tuple(IpPermission), without duplicates, in the order the
      firewalls listed them.
  """

  def __init__(self, id, name, uri, ip_permissions=(), provider_id=None):  # pylint: disable=redefined-builtin
    self.id = id
    self.name = name
    self.uri = uri
    self.provider_id = provider_id
    self.ip_permissions = tuple(collections.OrderedDict.fromkeys(
        ip_permissions))

  def __eq__(self, other):
    return (isinstance(other, SecurityGroup) and
            (self.id, self.name, self.uri, self.provider_id,
             frozenset(self.ip_permissions)) ==
            (other.id, other.name, other.uri, other.provider_id,
             frozenset(other.ip_permissions)))

  def __ne__(self, other):
    return not self == other

  def __hash__(self):
    return hash((self.id, self.uri))

  def __repr__(self):
    return 'SecurityGroup(id={0!r}, uri={1!r}, ip_permissions=[{2}])'.format(
        self.id, self.uri, ', '.join(str(p) for p in self.ip_permissions))
