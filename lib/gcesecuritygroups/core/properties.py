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

"""Read and write properties for the security group library.

Properties are looked up, in order, in the environment (values set with
Property.Set() are stored there as well) and then in the property default.
The environment variable for a property is GCESG_<SECTION>_<NAME>, for example
GCESG_COMPUTE_OPERATION_COMPLETE_TIMEOUT_MS.
"""

import functools
import ipaddress
import os
import re

from gcesecuritygroups.core import exceptions


_ENV_PREFIX = 'GCESG'

_VALID_PROJECT_REGEX = re.compile(
    r'^'
    # An optional domain-like component, ending with a colon, e.g.,
    # google.com:
    r'(?:(?:[-a-z0-9]{1,63}\.)*(?:[a-z](?:[-a-z0-9]{0,61}[a-z0-9])?):)?'
    # Followed by a required identifier-like component.
    r'(?:(?:[a-z](?:[-a-z0-9]{0,61}[a-z0-9])?))'
    r'$'
)

VERBOSITY_CHOICES = ('debug', 'info', 'warning', 'error', 'critical', 'none')


class Error(exceptions.Error):
  """Exceptions for the properties module."""


class InvalidValueError(Error):
  """An exception to be raised when the set value of a property is invalid."""


class RequiredPropertyError(Error):
  """Generic exception for when a required property was not set."""

  def __init__(self, prop):
    super(RequiredPropertyError, self).__init__(
        'The required property [{name}] is not currently set.\n'
        'You may set it for the current process with '
        'properties.VALUES.{section}.{name}.Set(VALUE) or in the environment '
        'variable [{env_var}].'.format(
            section=prop.section, name=prop.name,
            env_var=_EnvironmentName(prop)))
    self.property = prop


def _BooleanValidator(property_name, value):
  """Validates boolean properties.

  Args:
    property_name: str, the name of the property
    value: str | bool, the value to validate

  Raises:
    InvalidValueError: if value is not boolean
  """
  accepted_strings = ['true', '1', 'on', 'yes', 'y',
                      'false', '0', 'off', 'no', 'n',
                      '', 'none']
  if str(value).lower() not in accepted_strings:
    raise InvalidValueError(
        'The [{0}] value [{1}] is not valid. Possible values: [{2}].'.format(
            property_name, value,
            ', '.join([x if x else "''" for x in accepted_strings])))


def _PositiveIntValidator(property_name, value):
  if value is None:
    return
  try:
    parsed = int(value)
  except ValueError:
    parsed = 0
  if parsed <= 0:
    raise InvalidValueError(
        'The [{0}] value [{1}] is not valid. It must be a positive '
        'integer.'.format(property_name, value))


def _CidrValidator(property_name, value):
  if value is None:
    return
  try:
    ipaddress.ip_network(str(value))
  except ValueError:
    raise InvalidValueError(
        'The [{0}] value [{1}] is not a valid CIDR range.'.format(
            property_name, value))


def _ProjectValidator(project):
  if project is None:
    return
  if not _VALID_PROJECT_REGEX.match(project):
    raise InvalidValueError(
        'The project property must be set to a valid project ID, '
        '[{0}] is not a valid project ID.'.format(project))


def _VerbosityValidator(value):
  if value is None:
    return
  if value.lower() not in VERBOSITY_CHOICES:
    raise InvalidValueError(
        'The verbosity property must be one of [{0}], not [{1}].'.format(
            ', '.join(VERBOSITY_CHOICES), value))


class _Sections(object):
  """Represents the available sections of properties.

  Attributes:
    core: Section, The section containing core properties.
    compute: Section, The section containing compute properties.
  """

  def __init__(self):
    self.core = _SectionCore()
    self.compute = _SectionCompute()


class _Section(object):
  """Represents a section of related properties.

  Attributes:
    name: str, The name of the section.
  """

  def __init__(self, name):
    self.__name = name

  @property
  def name(self):
    return self.__name

  def _Add(self, name, default=None, validator=None):
    return _Property(section=self.__name, name=name, default=default,
                     validator=validator)

  def _AddBool(self, name, default=None):
    return self._Add(name=name, default=default,
                     validator=functools.partial(_BooleanValidator, name))


class _SectionCore(_Section):
  """Contains the properties for the 'core' section."""

  def __init__(self):
    super(_SectionCore, self).__init__('core')
    # Owner of the networks and firewalls backing security groups.
    self.project = self._Add('project', validator=_ProjectValidator)
    self.verbosity = self._Add('verbosity', validator=_VerbosityValidator)
    # If False, created and deleted resources are not reported.
    self.user_output_enabled = self._AddBool('user_output_enabled')


class _SectionCompute(_Section):
  """Contains the properties for the 'compute' section."""

  def __init__(self):
    super(_SectionCompute, self).__init__('compute')
    self.operation_complete_interval_ms = self._Add(
        'operation_complete_interval_ms',
        default=2000,
        validator=functools.partial(
            _PositiveIntValidator, 'operation_complete_interval_ms'))
    # How long to wait for an operation to reach DONE.
    self.operation_complete_timeout_ms = self._Add(
        'operation_complete_timeout_ms',
        default=600000,
        validator=functools.partial(
            _PositiveIntValidator, 'operation_complete_timeout_ms'))
    # IPv4 range of networks created for new security groups.
    self.default_network_range = self._Add(
        'default_network_range',
        default='10.0.0.0/8',
        validator=functools.partial(_CidrValidator, 'default_network_range'))
    self.max_results_per_page = self._Add(
        'max_results_per_page',
        default=500,
        validator=functools.partial(
            _PositiveIntValidator, 'max_results_per_page'))


class _Property(object):
  """An individual property.

  Attributes:
    section: str, The name of the section the property appears in.
    name: str, The name of the property.
    default: str, A final value to use if no value is found in the
      environment.
    validator: func(str), A function that is called on the value when .Set()'d
      or .Get()'d. For valid values, the function should do nothing. For
      invalid values, it should raise InvalidValueError with an
      explanation of why it was invalid.
  """

  def __init__(self, section, name, default=None, validator=None):
    self.__section = section
    self.__name = name
    self.__default = default
    self.__validator = validator

  @property
  def section(self):
    return self.__section

  @property
  def name(self):
    return self.__name

  @property
  def default(self):
    return self.__default

  def __eq__(self, other):
    return self.section == other.section and self.name == other.name

  def __ne__(self, other):
    return not self == other

  def __hash__(self):
    return hash((self.section, self.name))

  def Get(self, required=False, validate=True):
    """Gets the value for this property.

    Looks first in the environment and then at the default.

    Args:
      required: bool, True to raise an exception if the property is not set.
      validate: bool, Whether or not to run the fetched value through the
          validation function.

    Returns:
      str, The value for this property.
    """
    value = _GetProperty(self, required)
    if validate:
      self.Validate(value)
    return value

  def GetOrFail(self):
    """Shortcut for Get(required=True)."""
    return self.Get(required=True)

  def GetBool(self, required=False, validate=False):
    """Gets the boolean value for this property.

    Args:
      required: bool, True to raise an exception if the property is not set.
      validate: bool, Whether or not to run the fetched value through the
          validation function.

    Returns:
      bool, The boolean value for this property, or None if it is not set.

    Raises:
      InvalidValueError: if value is not boolean
    """
    value = _GetProperty(self, required)
    if validate:
      _BooleanValidator(self.name, value)
    if value is None or value.lower() == 'none':
      return None
    return value.lower() in ['1', 'true', 'on', 'yes', 'y']

  def GetInt(self, required=False, validate=True):
    """Gets the integer value for this property.

    Args:
      required: bool, True to raise an exception if the property is not set.
      validate: bool, Whether or not to run the fetched value through the
          validation function.

    Returns:
      int, The integer value for this property.
    """
    value = _GetProperty(self, required)
    if value is None:
      return None
    try:
      int_value = int(value)
    except ValueError:
      raise InvalidValueError(
          'The property [{section}.{name}] must have an integer value: '
          '[{value}]'.format(section=self.section, name=self.name,
                             value=value))
    if validate:
      self.Validate(value)
    return int_value

  def Validate(self, value):
    """Test to see if the value is valid for this property.

    Args:
      value: str, The value of the property to be validated.

    Raises:
      InvalidValueError: If the value was invalid according to the property's
          validator.
    """
    if self.__validator:
      self.__validator(value)

  def Set(self, value):
    """Sets the value for this property as an environment variable.

    Args:
      value: str/bool/int, The proposed value for this property.  If None, it
        is removed from the environment.
    """
    if value is None:
      os.environ.pop(_EnvironmentName(self), None)
      return
    value = str(value)
    self.Validate(value)
    os.environ[_EnvironmentName(self)] = value

  def __str__(self):
    return '{section}/{name}'.format(section=self.__section, name=self.__name)


VALUES = _Sections()


def _EnvironmentName(prop):
  return '{prefix}_{section}_{name}'.format(
      prefix=_ENV_PREFIX,
      section=prop.section.upper(),
      name=prop.name.upper(),
  )


def _GetProperty(prop, required):
  """Gets the given property.

  Args:
    prop: properties.Property, The property to get.
    required: bool, True to raise an exception if the property is not set.

  Raises:
    RequiredPropertyError: If the property was required but unset.

  Returns:
    str, The value of the property, or None if it is not set.
  """
  value = os.environ.get(_EnvironmentName(prop))
  if value is not None:
    return value

  if prop.default is not None:
    return str(prop.default)

  if required:
    raise RequiredPropertyError(prop)

  return None
