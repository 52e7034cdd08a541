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
"""Generates names for resources created on behalf of a security group."""

import random

# Compute Engine names are at most 63 characters long.
MAX_NAME_LENGTH = 63
SUFFIX_LENGTH = 3


def GenerateUniqueNameForGroup(group_name):
  """Returns '<group_name>-<random hex suffix>' trimmed to a legal length.

  Args:
    group_name: str, the security group (network) name.

  Returns:
    str, a firewall name that starts with the group name.
  """
  suffix = '{0:0{1}x}'.format(random.randrange(16 ** SUFFIX_LENGTH),
                              SUFFIX_LENGTH)
  prefix = group_name[:MAX_NAME_LENGTH - SUFFIX_LENGTH - 1].rstrip('-')
  return '{0}-{1}'.format(prefix, suffix)
