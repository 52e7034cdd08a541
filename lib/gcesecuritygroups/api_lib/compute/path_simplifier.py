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
"""Utilities for working with Compute Engine resource URIs."""

import collections
import re

from gcesecuritygroups.core import exceptions

# projects/<project>/(global|regions/<region>|zones/<zone>)/<collection>/<name>
_RESOURCE_PATH = re.compile(
    r'(?:^|/)projects/(?P<project>[^/]+)/'
    r'(?:global|regions/(?P<region>[^/]+)|zones/(?P<zone>[^/]+))/'
    r'(?P<collection>[^/]+)/(?P<name>[^/?#]+)/?$')


class InvalidResourceUriError(exceptions.Error):
  """The URI does not name a Compute Engine resource."""


ResourceRef = collections.namedtuple(
    'ResourceRef', ['project', 'region', 'zone', 'collection', 'name'])


def Name(uri):
  """Returns the last path component of the given URI.

  Args:
    uri: str, a resource URI or a bare name.

  Returns:
    str, the resource name, e.g. 'my-net' for
    'https://www.googleapis.com/compute/v1/projects/p/global/networks/my-net'.
  """
  return uri.rstrip('/').split('/')[-1]


def Parse(uri):
  """Splits a Compute Engine resource URI into its parts.

  Args:
    uri: str, a selfLink or a relative path starting at 'projects/'.

  Returns:
    ResourceRef, region and zone are None unless the resource lives in one.

  Raises:
    InvalidResourceUriError: if the URI has no recognizable resource path.
  """
  match = _RESOURCE_PATH.search(uri or '')
  if not match:
    raise InvalidResourceUriError(
        '[{0}] is not a valid Compute Engine resource URI.'.format(uri))
  return ResourceRef(**match.groupdict())
