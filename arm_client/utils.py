# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import datetime
import itertools
import logging
import random
import time
import uuid

import requests
from dateutil import tz

from arm_client import constants

log = logging.getLogger('arm_client.utils')


class StringUtils:

    @staticmethod
    def equal(a, b, case_insensitive=True):
        if isinstance(a, str) and isinstance(b, str):
            if case_insensitive:
                return a.strip().lower() == b.strip().lower()
            else:
                return a.strip() == b.strip()

        return False

    @staticmethod
    def is_blank(value):
        return value is None or (isinstance(value, str) and not value.strip())

    @staticmethod
    def bool_string(value):
        return 'true' if value else 'false'


def require(value, name):
    """Raise ValueError when a required argument is missing or blank."""
    if StringUtils.is_blank(value):
        raise ValueError('%s is required' % name)
    return value


def to_subscription(subscription, name='subscription'):
    """Coerce a subscription id into a non-nil UUID.

    Accepts a UUID or its string form. None, blank strings and the
    nil UUID are rejected with ValueError, anything else with TypeError.
    """
    if isinstance(subscription, uuid.UUID):
        value = subscription
    elif isinstance(subscription, str):
        if not subscription.strip():
            raise ValueError('%s is required' % name)
        try:
            value = uuid.UUID(subscription.strip())
        except ValueError:
            raise ValueError('%s is not a valid subscription id: %s' % (name, subscription))
    elif subscription is None:
        raise ValueError('%s is required' % name)
    else:
        raise TypeError('%s must be a UUID or string, not %s' % (
            name, type(subscription).__name__))

    if value.int == 0:
        raise ValueError('%s is required' % name)
    return value


def strip_leading_slash(resource_id):
    return resource_id[1:] if resource_id.startswith('/') else resource_id


def utcnow():
    """The timezone aware datetime for the current time in UTC
    """
    return datetime.datetime.now(tz=tz.tzutc())


def as_utc(value):
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz.tzutc())
    return value


def backoff_delays(start, stop, factor=2.0, jitter=False):
    """Geometric backoff sequence w/ jitter
    """
    cur = start
    while cur <= stop:
        if jitter:
            yield cur - (cur * random.random())
        else:
            yield cur
        cur = cur * factor


class RetryPolicy:
    """Bounded retry of transient transport failures.

    A call is attempted at most ``max_attempts`` times. The wait before
    retry n is ``min_delay * factor ** n`` seconds, capped at
    ``max_delay``. An exception is retryable when it is a connection or
    timeout error, or when its message mentions an unresolvable host or
    a cancelled request.
    """

    def __init__(self, max_attempts=constants.DEFAULT_MAX_ATTEMPTS,
                 min_delay=constants.DEFAULT_MIN_RETRY_DELAY,
                 max_delay=constants.DEFAULT_MAX_RETRY_DELAY,
                 factor=2.0, jitter=False):
        if max_attempts < 1:
            raise ValueError('max_attempts must be at least 1')
        self.max_attempts = max_attempts
        self.min_delay = min_delay
        self.max_delay = max_delay
        self.factor = factor
        self.jitter = jitter

    @classmethod
    def from_config(cls, config):
        return cls(max_attempts=config.max_attempts)

    def is_retryable(self, error):
        if isinstance(error, (requests.ConnectionError, requests.Timeout)):
            return True
        message = str(error).lower()
        return any(m in message for m in constants.RETRYABLE_ERROR_MESSAGES)

    def delays(self):
        """The waits between attempts, one fewer than max_attempts."""
        return list(itertools.islice(
            itertools.chain(
                backoff_delays(self.min_delay, self.max_delay, self.factor, self.jitter),
                itertools.repeat(self.max_delay)),
            self.max_attempts - 1))

    def call(self, func, *args, **kw):
        """Invoke func, retrying retryable errors. The last error propagates."""
        delays = iter(self.delays())
        attempt = 1
        while True:
            try:
                return func(*args, **kw)
            except Exception as e:
                if not self.is_retryable(e):
                    raise
                delay = next(delays, None)
                if delay is None:
                    log.warning("giving up after %d attempts error:%s", attempt, e)
                    raise
                log.warning(
                    "retrying transport error attempt:%d delay:%0.2f error:%s",
                    attempt, delay, e)
                time.sleep(delay)
                attempt += 1


NO_RETRY = RetryPolicy(max_attempts=1)
