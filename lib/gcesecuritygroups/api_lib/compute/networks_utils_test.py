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

"""Tests for the networks_utils module."""

from gcesecuritygroups.api_lib.compute import networks_utils
from gcesecuritygroups.api_lib.compute import security_group
from gcesecuritygroups.tests.lib import fake_compute
from gcesecuritygroups.tests.lib import test_case

IpPermission = security_group.IpPermission
IpProtocol = security_group.IpProtocol


class NetworksUtilsTest(test_case.Base):

  def SetUp(self):
    self.fake = fake_compute.FakeCompute()
    self.network = self.fake.AddNetwork('net')
    self.ssh = self.fake.AddFirewall('net-ssh', 'net', [('tcp', ['22'])],
                                     source_ranges=['0.0.0.0/0'])
    self.web = self.fake.AddFirewall('net-web', 'net', [('tcp', ['80'])],
                                     source_ranges=['0.0.0.0/0'],
                                     target_tags=['web'])

  def testNetworkToSecurityGroup(self):
    group = networks_utils.NetworkToSecurityGroup(
        self.network, [self.ssh, self.web])
    self.assertEqual('net', group.id)
    self.assertEqual('net', group.name)
    self.assertEqual(fake_compute.NetworkUri('fake-project', 'net'), group.uri)
    self.assertEqual(str(self.network.id), group.provider_id)
    self.assertEqual(
        (IpPermission(IpProtocol.TCP, 22, 22, ['0.0.0.0/0']),
         IpPermission(IpProtocol.TCP, 80, 80, ['0.0.0.0/0'])),
        group.ip_permissions)

  def testNetworkWithoutFirewalls(self):
    group = networks_utils.NetworkToSecurityGroup(self.network, [])
    self.assertEqual((), group.ip_permissions)

  def testGroupForTagsInNetwork(self):
    group = networks_utils.GroupForTagsInNetwork(
        self.network, [self.web], ['web', 'prod'])
    self.assertEqual('net', group.id)
    self.assertIsNone(networks_utils.GroupForTagsInNetwork(
        self.network, [self.web], ['db']))
    self.assertIsNone(networks_utils.GroupForTagsInNetwork(
        self.network, [], ['web']))

  def testUntargetedFirewallAppliesToAnyTags(self):
    group = networks_utils.GroupForTagsInNetwork(
        self.network, [self.ssh, self.web], [])
    self.assertEqual(2, len(group.ip_permissions))
