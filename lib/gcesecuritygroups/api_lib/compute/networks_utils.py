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
"""Code that maps networks and their firewalls to security groups."""

from gcesecuritygroups.api_lib.compute import firewalls_utils
from gcesecuritygroups.api_lib.compute import security_group


def NetworkToSecurityGroup(network, firewalls):
  """Builds the security group a network and its firewalls stand for.

  Args:
    network: Network message.
    firewalls: iterable(Firewall), the firewalls referencing the network.

  Returns:
    SecurityGroup, identified by the network name.
  """
  permissions = []
  for firewall in firewalls:
    permissions.extend(firewalls_utils.FirewallToIpPermissions(firewall))
  return security_group.SecurityGroup(
      id=network.name,
      name=network.name,
      uri=network.selfLink,
      provider_id=str(network.id) if network.id is not None else None,
      ip_permissions=permissions)


def GroupForTagsInNetwork(network, firewalls, tags):
  """Returns the network's group if it applies to instances with these tags.

  Args:
    network: Network message.
    firewalls: [Firewall], all firewalls referencing the network.
    tags: iterable(str), the instance tags.

  Returns:
    SecurityGroup, or None when no firewall of the network applies to the
    tags.
  """
  tags = frozenset(tags)
  if not any(firewalls_utils.AppliesToTags(fw, tags) for fw in firewalls):
    return None
  return NetworkToSecurityGroup(network, firewalls)
