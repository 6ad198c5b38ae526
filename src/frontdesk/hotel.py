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
The hotel rooms: things guests check into.
"""

from __future__ import annotations

import logging
import typing

from .observer import ErrorPolicy, Subject

__all__ = ["Room"]

logger = logging.getLogger(__name__)


class Room(Subject):
    """A hotel room.

    Each room can be observed (see the :class:`frontdesk.observer.Observer`
    class): the attached observers are notified with the guest's name each time
    someone checks in.
    """

    def __init__(self, number: str, error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST):
        """
        :param number: The room's number
        :param error_policy: How failing observers are dealt with
        """
        super().__init__(error_policy=error_policy)
        self._number = number
        self._guests = list()

    @property
    def number(self) -> str:
        """The room's number."""
        return self._number

    @property
    def guests(self) -> typing.Tuple[str, ...]:
        """The guests that checked into this room so far."""
        return tuple(self._guests)

    def check_in(self, guest_name: str):
        """Check **guest_name** in and notify the observers."""
        assert isinstance(guest_name, str)
        logger.info("%s: checking in %s", self, guest_name)
        self._guests.append(guest_name)
        self._notify_observers(guest_name)

    def __str__(self):
        return "Room {!s}".format(self.number)

    def __repr__(self):
        return "<{:s} number={!r} observers={:d}>".format(
            self.__class__.__name__, self.number, len(self.observers)
        )
