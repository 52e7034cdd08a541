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

"""Tests for the path_simplifier module."""

from gcesecuritygroups.api_lib.compute import path_simplifier
from gcesecuritygroups.tests.lib import test_case

_BASE = 'https://www.googleapis.com/compute/v1/'


class PathSimplifierTest(test_case.Base):

  def testName(self):
    self.assertEqual(
        'my-net',
        path_simplifier.Name(_BASE + 'projects/p/global/networks/my-net'))
    self.assertEqual('my-net', path_simplifier.Name('my-net'))

  def testParseGlobal(self):
    self.assertEqual(
        path_simplifier.ResourceRef(project='p', region=None, zone=None,
                                    collection='operations', name='op-1'),
        path_simplifier.Parse(_BASE + 'projects/p/global/operations/op-1'))

  def testParseRegional(self):
    ref = path_simplifier.Parse(
        _BASE + 'projects/p/regions/us-central1/operations/op-2')
    self.assertEqual('us-central1', ref.region)
    self.assertIsNone(ref.zone)

  def testParseZonal(self):
    ref = path_simplifier.Parse('projects/p/zones/us-central1-a/instances/vm')
    self.assertEqual(('p', 'us-central1-a', 'instances', 'vm'),
                     (ref.project, ref.zone, ref.collection, ref.name))

  def testParseInvalid(self):
    with self.assertRaises(path_simplifier.InvalidResourceUriError):
      path_simplifier.Parse('my-net')
    with self.assertRaises(path_simplifier.InvalidResourceUriError):
      path_simplifier.Parse(None)
