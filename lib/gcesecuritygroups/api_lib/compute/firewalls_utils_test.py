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

"""Tests for the firewalls_utils module."""

from gcesecuritygroups.api_lib.compute import compute_messages
from gcesecuritygroups.api_lib.compute import firewalls_utils
from gcesecuritygroups.api_lib.compute import security_group
from gcesecuritygroups.tests.lib import test_case

IpPermission = security_group.IpPermission
IpProtocol = security_group.IpProtocol


def _Firewall(allowed, source_ranges=(), source_tags=(), target_tags=()):
  entry = compute_messages.Firewall.AllowedValueListEntry
  return compute_messages.Firewall(
      name='fw',
      network='projects/p/global/networks/net',
      allowed=[entry(IPProtocol=p, ports=list(ports)) for p, ports in allowed],
      sourceRanges=list(source_ranges),
      sourceTags=list(source_tags),
      targetTags=list(target_tags))


class PortsTest(test_case.Base):

  def testFormatPorts(self):
    self.assertEqual(['1-10'], firewalls_utils.FormatPorts(1, 10))
    self.assertEqual(['33'], firewalls_utils.FormatPorts(33, 33))
    self.assertEqual([], firewalls_utils.FormatPorts(0, 0))
    self.assertEqual([], firewalls_utils.FormatPorts(-1, 20))

  def testParsePorts(self):
    self.assertEqual((80, 80), firewalls_utils.ParsePorts('80'))
    self.assertEqual((1000, 2000), firewalls_utils.ParsePorts('1000-2000'))
    with self.assertRaises(firewalls_utils.InvalidPortSpecError):
      firewalls_utils.ParsePorts('http')

  def testNetworkFilter(self):
    self.assertEqual('network eq .*/default',
                     firewalls_utils.NetworkFilter('default'))


class FirewallToIpPermissionsTest(test_case.Base):

  def testOnePermissionPerPortEntry(self):
    firewall = _Firewall([('tcp', ['22', '8000-8080']), ('udp', ['53'])],
                         source_ranges=['10.0.0.0/8'], source_tags=['web'])
    self.assertEqual([
        IpPermission(IpProtocol.TCP, 22, 22, ['10.0.0.0/8'], ['web']),
        IpPermission(IpProtocol.TCP, 8000, 8080, ['10.0.0.0/8'], ['web']),
        IpPermission(IpProtocol.UDP, 53, 53, ['10.0.0.0/8'], ['web']),
    ], firewalls_utils.FirewallToIpPermissions(firewall))

  def testRuleWithoutPorts(self):
    firewall = _Firewall([('icmp', [])], source_ranges=['0.0.0.0/0'])
    self.assertEqual(
        [IpPermission(IpProtocol.ICMP, 0, 0, ['0.0.0.0/0'])],
        firewalls_utils.FirewallToIpPermissions(firewall))

  def testUnknownProtocol(self):
    firewall = _Firewall([('gre', [])])
    [permission] = firewalls_utils.FirewallToIpPermissions(firewall)
    self.assertEqual(IpProtocol.UNRECOGNIZED, permission.ip_protocol)


class ProvidesIpPermissionTest(test_case.Base):

  def testExactMatch(self):
    firewall = _Firewall([('tcp', ['22'])], source_ranges=['1.2.3.4/32'])
    self.assertTrue(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 22, 22, ['1.2.3.4/32'])))

  def testRangeCoversNarrowerRange(self):
    firewall = _Firewall([('tcp', ['1-100'])], source_ranges=['10.0.0.0/8'])
    self.assertTrue(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 10, 20, ['10.0.0.0/8'])))
    self.assertFalse(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 90, 110, ['10.0.0.0/8'])))

  def testRuleWithoutPortsCoversAllPorts(self):
    firewall = _Firewall([('udp', [])], source_ranges=['10.0.0.0/8'])
    self.assertTrue(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.UDP, 53, 53, ['10.0.0.0/8'])))

  def testAllProtocolCoversEverything(self):
    firewall = _Firewall([('all', [])], source_ranges=['0.0.0.0/0'])
    self.assertTrue(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.SCTP, 5, 5, ['0.0.0.0/0'])))

  def testDifferentProtocolOrSources(self):
    firewall = _Firewall([('tcp', ['22'])], source_ranges=['1.2.3.4/32'])
    self.assertFalse(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.UDP, 22, 22, ['1.2.3.4/32'])))
    self.assertFalse(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 22, 22, ['5.6.7.8/32'])))
    self.assertFalse(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 22, 22, ['1.2.3.4/32'],
                               ['web'])))

  def testMissingSourcesMeanAnywhere(self):
    firewall = _Firewall([('tcp', ['22'])])
    self.assertTrue(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 22, 22, ['0.0.0.0/0'])))
    self.assertTrue(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 22)))

  def testUnrecognizedNeverProvided(self):
    firewall = _Firewall([('gre', [])])
    self.assertFalse(firewalls_utils.ProvidesIpPermission(
        firewall, IpPermission(IpProtocol.UNRECOGNIZED)))


class EqualsIpPermissionTest(test_case.Base):

  def testExact(self):
    firewall = _Firewall([('tcp', ['1-10'])], source_ranges=['10.0.0.0/8'],
                         source_tags=['web'])
    self.assertTrue(firewalls_utils.EqualsIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 1, 10, ['10.0.0.0/8'],
                               ['web'])))

  def testCoveringIsNotEqual(self):
    firewall = _Firewall([('tcp', ['1-10'])], source_ranges=['10.0.0.0/8'])
    self.assertFalse(firewalls_utils.EqualsIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 2, 3, ['10.0.0.0/8'])))

  def testFirewallWithMoreRulesIsNotEqual(self):
    firewall = _Firewall([('tcp', ['22']), ('udp', ['22'])],
                         source_ranges=['10.0.0.0/8'])
    self.assertFalse(firewalls_utils.EqualsIpPermission(
        firewall, IpPermission(IpProtocol.TCP, 22, 22, ['10.0.0.0/8'])))


class AppliesToTagsTest(test_case.Base):

  def testNoTargetTagsAppliesToAll(self):
    self.assertTrue(firewalls_utils.AppliesToTags(_Firewall([]), []))

  def testTargetTags(self):
    firewall = _Firewall([], target_tags=['web', 'db'])
    self.assertTrue(firewalls_utils.AppliesToTags(firewall, ['db']))
    self.assertFalse(firewalls_utils.AppliesToTags(firewall, ['cache']))
    self.assertFalse(firewalls_utils.AppliesToTags(firewall, []))


class IpPermissionToFirewallOptionsTest(test_case.Base):

  def testTcpRange(self):
    options = firewalls_utils.IpPermissionToFirewallOptions(
        IpPermission(IpProtocol.TCP, 1, 10, ['10.0.0.0/8', '1.2.3.4/32'],
                     ['web']),
        'net')
    self.assertRegex(options.name, r'^net-[0-9a-f]{3}$')
    self.assertEqual([firewalls_utils.FirewallRule('tcp', ['1-10'])],
                     options.allowed)
    self.assertEqual(['1.2.3.4/32', '10.0.0.0/8'], options.source_ranges)
    self.assertEqual(['web'], options.source_tags)
    self.assertEqual([], options.target_tags)
    self.assertIsNone(options.network)

  def testSinglePortAndNoPorts(self):
    single = firewalls_utils.IpPermissionToFirewallOptions(
        IpPermission(IpProtocol.UDP, 33, 33), 'net')
    self.assertEqual(['33'], single.allowed[0].ports)
    icmp = firewalls_utils.IpPermissionToFirewallOptions(
        IpPermission(IpProtocol.ICMP), 'net')
    self.assertEqual(firewalls_utils.FirewallRule('icmp', []),
                     icmp.allowed[0])

  def testUnrecognizedProtocol(self):
    with self.assertRaises(firewalls_utils.UnsupportedProtocolError):
      firewalls_utils.IpPermissionToFirewallOptions(
          IpPermission(IpProtocol.UNRECOGNIZED), 'net')
