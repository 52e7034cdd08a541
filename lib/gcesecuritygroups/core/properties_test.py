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

"""Tests for the properties module."""

import os

from gcesecuritygroups.core import properties
from gcesecuritygroups.tests.lib import test_case


class PropertiesTest(test_case.Base):

  def testDefaults(self):
    compute = properties.VALUES.compute
    self.assertEqual(2000, compute.operation_complete_interval_ms.GetInt())
    self.assertEqual(600000, compute.operation_complete_timeout_ms.GetInt())
    self.assertEqual(500, compute.max_results_per_page.GetInt())
    self.assertEqual('10.0.0.0/8', compute.default_network_range.Get())
    self.assertIsNone(properties.VALUES.core.project.Get())

  def testEnvironmentOverridesDefault(self):
    os.environ['GCESG_COMPUTE_OPERATION_COMPLETE_TIMEOUT_MS'] = '1500'
    self.assertEqual(
        1500,
        properties.VALUES.compute.operation_complete_timeout_ms.GetInt())

  def testSetStoresInEnvironment(self):
    prop = properties.VALUES.core.project
    prop.Set('my-project')
    self.assertEqual('my-project', os.environ['GCESG_CORE_PROJECT'])
    self.assertEqual('my-project', prop.Get())
    prop.Set(None)
    self.assertNotIn('GCESG_CORE_PROJECT', os.environ)

  def testRequiredPropertyMissing(self):
    with self.assertRaisesRegex(properties.RequiredPropertyError,
                                r'GCESG_CORE_PROJECT'):
      properties.VALUES.core.project.GetOrFail()

  def testInvalidValues(self):
    compute = properties.VALUES.compute
    with self.assertRaises(properties.InvalidValueError):
      compute.operation_complete_interval_ms.Set(0)
    with self.assertRaises(properties.InvalidValueError):
      compute.default_network_range.Set('not-a-range')
    with self.assertRaises(properties.InvalidValueError):
      properties.VALUES.core.project.Set('Invalid Project')
    with self.assertRaises(properties.InvalidValueError):
      properties.VALUES.core.verbosity.Set('loud')

  def testNonIntegerValue(self):
    os.environ['GCESG_COMPUTE_MAX_RESULTS_PER_PAGE'] = 'many'
    with self.assertRaises(properties.InvalidValueError):
      properties.VALUES.compute.max_results_per_page.GetInt()

  def testGetBool(self):
    prop = properties.VALUES.core.user_output_enabled
    self.assertIsNone(prop.GetBool())
    prop.Set('false')
    self.assertFalse(prop.GetBool())
    prop.Set(True)
    self.assertTrue(prop.GetBool())

  def testSetStoresNonStringValuesAsStrings(self):
    prop = properties.VALUES.compute.max_results_per_page
    prop.Set(750)
    self.assertEqual('750', os.environ['GCESG_COMPUTE_MAX_RESULTS_PER_PAGE'])
    self.assertEqual(750, prop.GetInt())
