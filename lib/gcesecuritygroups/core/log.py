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

"""Module with logging related functionality for the security group library."""

import logging
import sys

from gcesecuritygroups.core import properties

DEFAULT_VERBOSITY = logging.WARNING
DEFAULT_USER_OUTPUT_ENABLED = True

_VERBOSITY_LEVELS = [
    ('debug', logging.DEBUG),
    ('info', logging.INFO),
    ('warning', logging.WARNING),
    ('error', logging.ERROR),
    ('critical', logging.CRITICAL),
    ('none', logging.CRITICAL + 10)]
VALID_VERBOSITY_STRINGS = dict(_VERBOSITY_LEVELS)

LOGGER_NAME = 'gcesecuritygroups'


class _UserOutputFilter(object):
  """A filter to turn on and off user output.

  This filter is used by the ConsoleWriter to determine if output messages
  should be printed or not.
  """

  def __init__(self, enabled):
    """Creates the filter.

    Args:
      enabled: bool, True to enable output, false to suppress.
    """
    self.enabled = enabled


class _StreamWrapper(object):
  """A class to hold an output stream that we can manipulate."""

  def __init__(self, stream):
    """Creates the stream wrapper.

    Args:
      stream: The stream to hold on to.
    """
    self.stream = stream


class _ConsoleWriter(object):
  """A class that wraps stderr so we can control how it gets logged.

  This class is a stripped down file-like object that provides the basic
  writing methods.  When you write to this stream, if it is enabled, it will be
  written to the wrapped stream.  All strings will also be logged at INFO
  level.
  """

  def __init__(self, logger, output_filter, stream_wrapper):
    """Creates a new _ConsoleWriter wrapper.

    Args:
      logger: logging.Logger, The logger to log to.
      output_filter: _UserOutputFilter, Used to determine whether to write
        output or not.
      stream_wrapper: _StreamWrapper, The wrapper for the output stream.
    """
    self.__logger = logger
    self.__filter = output_filter
    self.__stream_wrapper = stream_wrapper

  def Print(self, *msg):
    """Writes the given message to the output stream, and adds a newline.

    Args:
      *msg: str, The messages to print.
    """
    message = ' '.join(str(x) for x in msg)
    self.write(message + '\n')

  # pylint: disable=g-bad-name, This must match file-like objects
  def write(self, msg):
    self.__logger.info(msg.rstrip('\n'))
    if self.__filter.enabled:
      self.__stream_wrapper.stream.write(msg)

  # pylint: disable=g-bad-name, This must match file-like objects
  def flush(self):
    if self.__filter.enabled:
      self.__stream_wrapper.stream.flush()


class _ConsoleFormatter(logging.Formatter):
  """A formatter for the console logger."""

  DEFAULT_FORMAT = '%(levelname)s: %(message)s'

  def __init__(self):
    super(_ConsoleFormatter, self).__init__(
        fmt=_ConsoleFormatter.DEFAULT_FORMAT)


class _LogManager(object):
  """A class to manage the logging handlers of the library logger.

  Messages logged through this module go to the library logger, which owns a
  stderr handler whose level follows the core/verbosity property. Status
  output written to the console writer is recorded at INFO level on a logger
  that does not propagate, so it never shows up twice on the console.
  """
  STATUS_LOGGER_NAME = LOGGER_NAME + '.status'

  def __init__(self):
    self.logger = logging.getLogger(LOGGER_NAME)
    self.logger.setLevel(logging.DEBUG)

    self.status_logger = logging.getLogger(_LogManager.STATUS_LOGGER_NAME)
    self.status_logger.setLevel(logging.INFO)
    self.status_logger.propagate = False
    self.status_logger.addHandler(logging.NullHandler())

    self._user_output_filter = _UserOutputFilter(DEFAULT_USER_OUTPUT_ENABLED)
    self.stderr_stream_wrapper = _StreamWrapper(None)
    self.stderr_writer = _ConsoleWriter(self.status_logger,
                                        self._user_output_filter,
                                        self.stderr_stream_wrapper)

    self.stderr_handler = None
    self.verbosity = None
    self.user_output_enabled = None
    self.Reset(sys.stderr)

  def Reset(self, stderr):
    """Resets all logging functionality to its default state."""
    if self.stderr_handler is not None:
      self.logger.removeHandler(self.stderr_handler)

    self.stderr_stream_wrapper.stream = stderr

    self.stderr_handler = logging.StreamHandler(stderr)
    self.stderr_handler.setFormatter(_ConsoleFormatter())
    self.stderr_handler.setLevel(DEFAULT_VERBOSITY)
    self.logger.addHandler(self.stderr_handler)

    self.verbosity = None
    self.SetVerbosity(None)
    self.SetUserOutputEnabled(None)

  def SetVerbosity(self, verbosity):
    """Sets the active verbosity for the logger.

    Args:
      verbosity: int, A verbosity constant from the logging module that
        determines what level of logs will show in the console. If None, the
        value from properties or the default will be used.

    Returns:
      int, The previous verbosity.
    """
    if verbosity is None:
      verbosity_string = properties.VALUES.core.verbosity.Get()
      if verbosity_string is not None:
        verbosity = VALID_VERBOSITY_STRINGS.get(verbosity_string.lower())
    if verbosity is None:
      verbosity = DEFAULT_VERBOSITY

    if self.verbosity == verbosity:
      return self.verbosity

    self.stderr_handler.setLevel(verbosity)

    old_verbosity = self.verbosity
    self.verbosity = verbosity
    return old_verbosity

  def SetUserOutputEnabled(self, enabled):
    """Sets whether user output should go to the console.

    Args:
      enabled: bool, True to enable output, False to suppress.  If None, the
        value from properties or the default will be used.

    Returns:
      bool, The old value of enabled.
    """
    if enabled is None:
      enabled = properties.VALUES.core.user_output_enabled.GetBool()
    if enabled is None:
      enabled = DEFAULT_USER_OUTPUT_ENABLED

    self._user_output_filter.enabled = enabled

    old_enabled = self.user_output_enabled
    self.user_output_enabled = enabled
    return old_enabled


_log_manager = _LogManager()

# Status output writer. For things that are useful to know for someone watching
# an operation run, such as resources created or deleted.
status = _log_manager.stderr_writer


def Reset(stderr=None):
  """Reinitialize the logging system.

  Args:
    stderr: The stream to send stderr output to.  If not given, sys.stderr
      is used.
  """
  _log_manager.Reset(stderr or sys.stderr)


def SetVerbosity(verbosity):
  """Sets the active verbosity for the logger.

  Args:
    verbosity: int, A verbosity constant from the logging module that
      determines what level of logs will show in the console. If None, the
      value from properties or the default will be used.

  Returns:
    int, The current verbosity.
  """
  return _log_manager.SetVerbosity(verbosity)


def SetUserOutputEnabled(enabled):
  """Sets whether user output should go to the console.

  Args:
    enabled: bool, True to enable output, false to suppress.

  Returns:
    bool, The old value of enabled.
  """
  return _log_manager.SetUserOutputEnabled(enabled)


def _PrintResourceChange(operation, resource, kind, details, failed,
                         operation_past_tense=None):
  """Prints a status message for operation on resource.

  The non-failure status messages are disabled when user output is disabled.

  Args:
    operation: str, The completed operation name.
    resource: str, The resource name.
    kind: str, The resource kind (network, firewall, ...).
    details: str, Extra details appended to the message. Keep it succinct.
    failed: str, Failure message. Failure messages use log.error. This will
      display the message on the standard error even when user output is
      disabled.
    operation_past_tense: str, The past tense version of the operation verb.
      If None assumes operation + 'd'
  """
  msg = []
  if failed:
    msg.append('Failed to')
    msg.append(operation)
  else:
    verb = operation_past_tense or '{0}d'.format(operation)
    msg.append('{0}'.format(verb.capitalize()))

  if kind:
    msg.append(kind)
  msg.append('[{0}]'.format(resource))
  if details:
    msg.append(details)
  if failed:
    msg[-1] = '{0}:'.format(msg[-1])
    msg.append(failed)
  period = '' if msg[-1].endswith('.') else '.'
  writer = error if failed else status.Print
  writer('{0}{1}'.format(' '.join(msg), period))


def CreatedResource(resource, kind=None, details=None, failed=None):
  """Prints a status message indicating that a resource was created.

  Args:
    resource: str, The resource name.
    kind: str, The resource kind (network, firewall, ...).
    details: str, Extra details appended to the message. Keep it succinct.
    failed: str, Failure message.
  """
  _PrintResourceChange('create', resource, kind, details, failed)


def DeletedResource(resource, kind=None, details=None, failed=None):
  """Prints a status message indicating that a resource was deleted.

  Args:
    resource: str, The resource name.
    kind: str, The resource kind (network, firewall, ...).
    details: str, Extra details appended to the message. Keep it succinct.
    failed: str, Failure message.
  """
  _PrintResourceChange('delete', resource, kind, details, failed)


# pylint: disable=invalid-name
# There are simple redirects to the library logger as a convenience.
_logger = _log_manager.logger
log = _logger.log
debug = _logger.debug
info = _logger.info
warning = _logger.warning
error = _logger.error
critical = _logger.critical
exception = _logger.exception
