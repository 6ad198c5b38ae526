# -*- coding: utf-8 -*-

#  Copyright (©) Meteo-France (2020-)
#
#  This software is a computer program whose purpose is to provide
#   a text-based hotel front-desk console and its notification services.
#
#  This software is governed by the CeCILL-C license under French law and
#  abiding by the rules of distribution of free software.  You can  use,
#  modify and/ or redistribute the software under the terms of the CeCILL-C
#  license as circulated by CEA, CNRS and INRIA at the following URL
#  "http://www.cecill.info".
#
#  As a counterpart to the access to the source code and  rights to copy,
#  modify and redistribute granted by the license, users are provided only
#  with a limited warranty  and the software's author,  the holder of the
#  economic rights,  and the successive licensors  have only  limited
#  liability.
#
#  In this respect, the user's attention is drawn to the risks associated
#  with loading,  using,  modifying and/or developing or reproducing the
#  software by the user in light of its specific status of free software,
#  that may mean  that it is complicated to manipulate,  and  that  also
#  therefore means  that it is reserved for developers  and  experienced
#  professionals having in-depth computer knowledge. Users are therefore
#  encouraged to load and test the software's suitability as regards their
#  requirements in conditions enabling the security of their systems and/or
#  data to be ensured and,  more generally, to use and operate it in the
#  same conditions as regards security.
#
#  The fact that you are presently reading this means that you have had
#  knowledge of the CeCILL-C license and that you accept its terms.

"""
A crude, thread-safe implementation of the observer design pattern.

Observers are notified synchronously, in the order they were attached. What
happens when an observer fails is governed by the :class:`ErrorPolicy` of the
:class:`Subject`.
"""

from __future__ import annotations

import abc
from enum import Enum, unique
import logging
import threading
import typing

__all__ = ["ErrorPolicy", "NotificationError", "Subject", "Observer"]

logger = logging.getLogger(__name__)


@unique
class ErrorPolicy(Enum):
    """What to do when an observer fails to process a notification."""

    FAIL_FAST = "fail_fast"
    BEST_EFFORT = "best_effort"


class NotificationError(RuntimeError):
    """Raised when some observers failed to process a notification.

    In fail-fast mode, there is only one failure and the observer's exception
    is also available as ``__cause__``.
    """

    def __init__(self, failures: typing.List[typing.Tuple[Observer, Exception]]):
        """
        :param failures: The failing observers and the exception they raised
        """
        self.failures = list(failures)
        super().__init__(
            "{:d} observer(s) failed: {:s}".format(
                len(self.failures),
                ", ".join(
                    "{!s} ({!r})".format(obs, exc) for obs, exc in self.failures
                ),
            )
        )


class Subject(object):
    """Mixin class for any Observable class."""

    def __init__(self, error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST):
        """
        :param error_policy: How failing observers are dealt with
        """
        assert isinstance(error_policy, ErrorPolicy)
        self._error_policy = error_policy
        self._observers = list()
        self._observers_lock = threading.RLock()

    @property
    def error_policy(self) -> ErrorPolicy:
        """The policy applied when an observer fails."""
        return self._error_policy

    @property
    def observers(self) -> typing.Tuple[Observer, ...]:
        """The attached observers (in attachment order)."""
        with self._observers_lock:
            return tuple(self._observers)

    def add_observer(self, observer: Observer):
        """Attach a new :class:`Observer` object to this class.

        Nothing prevents the same observer from being attached twice: it will
        then be notified twice.
        """
        assert isinstance(observer, Observer)
        with self._observers_lock:
            self._observers.append(observer)

    def remove_observer(self, observer: Observer):
        """Remove the first occurrence of **observer** (if attached)."""
        with self._observers_lock:
            for i, attached in enumerate(self._observers):
                if attached is observer:
                    del self._observers[i]
                    break

    def _notify_observers(self, payload: typing.Any):
        """Notify all of the attached :class:`Observer` object.

        Observers attached or detached while the notification is in progress
        are only taken into account by the next notification.
        """
        failures = []
        for observer in self.observers:
            try:
                observer.notify(payload)
            except Exception as e:
                logger.exception("%s failed to process %r", observer, payload)
                if self._error_policy is ErrorPolicy.FAIL_FAST:
                    raise NotificationError([(observer, e)]) from e
                failures.append((observer, e))
        if failures:
            raise NotificationError(failures)


class Observer(metaclass=abc.ABCMeta):
    """Abstract class for any observer class."""

    @abc.abstractmethod
    def notify(self, payload: typing.Any):
        """Process the **payload** sent by a :class:`Subject` object."""
        raise NotImplementedError()
