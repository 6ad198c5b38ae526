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
Test the observer design pattern implementation.
"""

import threading
import unittest

from frontdesk.observer import ErrorPolicy, NotificationError, Observer, Subject


class JournalObserver(Observer):
    """Fake observer for test purposes: record notifications in a journal."""

    def __init__(self, name, journal):
        self.name = name
        self.journal = journal

    def notify(self, payload):
        """Record the payload."""
        self.journal.append((self.name, payload))

    def __str__(self):
        return self.name


class FailingObserver(JournalObserver):
    """Fake observer that records the payload and then fails."""

    def notify(self, payload):
        super().notify(payload)
        raise OSError("{:s} is broken".format(self.name))


class SelfDetachingObserver(JournalObserver):
    """Fake observer that detaches itself when notified."""

    def __init__(self, name, journal, subject):
        super().__init__(name, journal)
        self.subject = subject

    def notify(self, payload):
        super().notify(payload)
        self.subject.remove_observer(self)


class TestObserver(unittest.TestCase):
    """Unit-test class for Subject/Observer."""

    def setUp(self):
        self.journal = []

    def _observers(self, *names):
        return [JournalObserver(name, self.journal) for name in names]

    def test_abstract_observer(self):
        with self.assertRaises(TypeError):
            Observer()

    def test_add_remove(self):
        subject = Subject()
        self.assertEqual(subject.observers, ())
        obs = self._observers("a", "b", "c")
        for o in obs:
            subject.add_observer(o)
        self.assertEqual(subject.observers, tuple(obs))
        # No implicit deduplication
        subject.add_observer(obs[0])
        self.assertEqual(len(subject.observers), 4)
        # Only the first occurrence is removed
        subject.remove_observer(obs[0])
        self.assertEqual(subject.observers, (obs[1], obs[2], obs[0]))
        subject.remove_observer(obs[0])
        self.assertEqual(subject.observers, (obs[1], obs[2]))
        # Removing a missing observer is a no-op
        subject.remove_observer(obs[0])
        subject.remove_observer(JournalObserver("z", self.journal))
        self.assertEqual(subject.observers, (obs[1], obs[2]))
        with self.assertRaises(AssertionError):
            subject.add_observer("not an observer")

    def test_notify_order(self):
        subject = Subject()
        subject._notify_observers("nobody")
        self.assertListEqual(self.journal, [])
        a, b, c = self._observers("a", "b", "c")
        for o in (a, b, c, a):
            subject.add_observer(o)
        subject._notify_observers("Bob")
        self.assertListEqual(
            self.journal, [("a", "Bob"), ("b", "Bob"), ("c", "Bob"), ("a", "Bob")]
        )
        del self.journal[:]
        subject.remove_observer(a)
        subject.remove_observer(a)
        subject._notify_observers("Carol")
        self.assertListEqual(self.journal, [("b", "Carol"), ("c", "Carol")])

    def test_notify_snapshot(self):
        subject = Subject()
        a, b = self._observers("a", "b")
        subject.add_observer(a)
        subject.add_observer(SelfDetachingObserver("d", self.journal, subject))
        subject.add_observer(b)
        subject._notify_observers(1)
        self.assertListEqual(self.journal, [("a", 1), ("d", 1), ("b", 1)])
        del self.journal[:]
        subject._notify_observers(2)
        self.assertListEqual(self.journal, [("a", 2), ("b", 2)])

    def test_fail_fast(self):
        subject = Subject()
        self.assertIs(subject.error_policy, ErrorPolicy.FAIL_FAST)
        a, c = self._observers("a", "c")
        for o in (a, FailingObserver("b", self.journal), c):
            subject.add_observer(o)
        b = subject.observers[1]
        with self.assertLogs("frontdesk.observer", level="ERROR"):
            with self.assertRaises(NotificationError) as cm:
                subject._notify_observers("Bob")
        self.assertListEqual(self.journal, [("a", "Bob"), ("b", "Bob")])
        self.assertEqual(len(cm.exception.failures), 1)
        self.assertIs(cm.exception.failures[0][0], b)
        self.assertIsInstance(cm.exception.__cause__, OSError)
        self.assertIs(cm.exception.failures[0][1], cm.exception.__cause__)

    def test_best_effort(self):
        subject = Subject(error_policy=ErrorPolicy.BEST_EFFORT)
        a, c = self._observers("a", "c")
        b = FailingObserver("b", self.journal)
        d = FailingObserver("d", self.journal)
        for o in (a, b, c, d):
            subject.add_observer(o)
        with self.assertLogs("frontdesk.observer", level="ERROR"):
            with self.assertRaises(NotificationError) as cm:
                subject._notify_observers("Bob")
        self.assertListEqual(
            self.journal, [("a", "Bob"), ("b", "Bob"), ("c", "Bob"), ("d", "Bob")]
        )
        self.assertListEqual([f[0] for f in cm.exception.failures], [b, d])
        self.assertTrue(all(isinstance(f[1], OSError) for f in cm.exception.failures))
        self.assertIn("2 observer(s) failed", str(cm.exception))
        # No failure, no exception
        subject.remove_observer(b)
        subject.remove_observer(d)
        subject._notify_observers("Carol")

    def test_concurrent_add(self):
        subject = Subject()
        obs = self._observers(*["o{:02d}".format(i) for i in range(40)])

        def attach(chunk):
            for o in chunk:
                subject.add_observer(o)

        threads = [threading.Thread(target=attach, args=(obs[i::4],)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(subject.observers), 40)
        self.assertSetEqual(set(subject.observers), set(obs))


if __name__ == "__main__":
    unittest.main()
