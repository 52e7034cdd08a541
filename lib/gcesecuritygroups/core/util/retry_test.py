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

"""Tests for the retry module."""

from gcesecuritygroups.core.util import retry
from gcesecuritygroups.tests.lib import test_case


class RetryerTest(test_case.Base):

  def SetUp(self):
    self.now_ms = 0
    self.sleeps = []

    def _Sleep(ms):
      self.sleeps.append(ms)
      self.now_ms += ms

    self.StartObjectPatch(retry, '_SleepMs', side_effect=_Sleep)
    self.StartObjectPatch(retry, '_GetCurrentTimeMs',
                          side_effect=lambda: self.now_ms)

  def _Counter(self, results):
    results = iter(results)
    return lambda: next(results)

  def testReturnsFirstAcceptedResult(self):
    retryer = retry.Retryer(jitter_ms=None)
    result = retryer.RetryOnResult(self._Counter([1, 1, 2]),
                                   should_retry_if=1, sleep_ms=10)
    self.assertEqual(2, result)
    self.assertEqual([10, 10], self.sleeps)

  def testCallablePredicateSeesState(self):
    states = []

    def _ShouldRetry(result, state):
      states.append(state.retrial)
      return result < 3

    retryer = retry.Retryer(jitter_ms=None)
    self.assertEqual(3, retryer.RetryOnResult(
        self._Counter([1, 2, 3]), should_retry_if=_ShouldRetry, sleep_ms=5))
    self.assertEqual([0, 1, 2], states)

  def testMaxWaitRaisesWaitExceptionWithLastResult(self):
    retryer = retry.Retryer(max_wait_ms=25, jitter_ms=None)
    with self.assertRaises(retry.WaitException) as ctx:
      retryer.RetryOnResult(self._Counter(range(100)),
                            should_retry_if=lambda r, s: True, sleep_ms=10)
    self.assertEqual(3, ctx.exception.last_result)
    self.assertEqual([10, 10, 5], self.sleeps)

  def testMaxWaitShorterThanSleepTriesAgainAtDeadline(self):
    retryer = retry.Retryer(max_wait_ms=4, jitter_ms=None)
    result = retryer.RetryOnResult(self._Counter([0, 1]), should_retry_if=0,
                                   sleep_ms=10)
    self.assertEqual(1, result)
    self.assertEqual([4], self.sleeps)

  def testMaxRetrials(self):
    retryer = retry.Retryer(max_retrials=2, jitter_ms=None)
    with self.assertRaises(retry.MaxRetrialsException) as ctx:
      retryer.RetryOnResult(self._Counter(range(100)),
                            should_retry_if=lambda r, s: True, sleep_ms=1)
    self.assertEqual(2, ctx.exception.last_result)

  def testSleepIterableExhausted(self):
    retryer = retry.Retryer(jitter_ms=None)
    with self.assertRaises(retry.MaxRetrialsException):
      retryer.RetryOnResult(self._Counter(range(100)),
                            should_retry_if=lambda r, s: True,
                            sleep_ms=[1, 2])
    self.assertEqual([1, 2], self.sleeps)

  def testStatusUpdateCalledBeforeEachSleep(self):
    updates = []
    retryer = retry.Retryer(
        jitter_ms=None,
        status_update_func=lambda r, s: updates.append((r, s.time_passed_ms)))
    retryer.RetryOnResult(self._Counter([0, 0, 1]), should_retry_if=0,
                          sleep_ms=7)
    self.assertEqual([(0, 0), (0, 7)], updates)

  def testExponentialSleepWithCeiling(self):
    retryer = retry.Retryer(exponential_sleep_multiplier=2, jitter_ms=None,
                            wait_ceiling_ms=35)
    retryer.RetryOnResult(self._Counter([0, 0, 0, 0, 1]), should_retry_if=0,
                          sleep_ms=10)
    self.assertEqual([10, 20, 35, 35], self.sleeps)

  def testJitterIsBounded(self):
    self.StartObjectPatch(retry.random, 'random', return_value=0.5)
    retryer = retry.Retryer(jitter_ms=100)
    retryer.RetryOnResult(self._Counter([0, 1]), should_retry_if=0,
                          sleep_ms=10)
    self.assertEqual([60], self.sleeps)
