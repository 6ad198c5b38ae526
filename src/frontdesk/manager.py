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
The hotel manager creates the notification services and the rooms, and wires
them together.
"""

from __future__ import annotations

import collections
import logging
import typing

from .conf import frontdesk_conf
from .hotel import Room
from .observer import ErrorPolicy
from .services import NotificationService, get_notification_service

__all__ = ["HotelManager"]

logger = logging.getLogger(__name__)


class HotelManager(object):
    """Own the notification services and the rooms they observe.

    It can be used as a dictionary to access the rooms (e.g. self['101'] will
    return the room numbered ``101``).
    """

    def __init__(
        self,
        service_kinds: typing.Iterable[str] = None,
        error_policy: ErrorPolicy = None,
    ):
        """
        :param service_kinds: The kinds of notification services to create
                              (defaults to the configuration file setting)
        :param error_policy: The error policy of the rooms created by this
                             manager (defaults to the configuration file
                             setting)
        """
        if service_kinds is None:
            service_kinds = frontdesk_conf.notification_services
        if error_policy is None:
            error_policy = frontdesk_conf.error_policy
        self._error_policy = error_policy
        self._services = [self._create_service(kind) for kind in service_kinds]
        self._rooms = collections.OrderedDict()

    @staticmethod
    def _create_service(kind: str) -> NotificationService:
        """Create a notification service, given the configuration data."""
        kwargs = frontdesk_conf.notification_service_options(kind)
        return get_notification_service(kind, **kwargs)

    @property
    def error_policy(self) -> ErrorPolicy:
        """The error policy of the rooms created by this manager."""
        return self._error_policy

    @property
    def services(self) -> typing.List[NotificationService]:
        """The notification services (in wiring order)."""
        return list(self._services)

    def service(self, kind: str) -> NotificationService:
        """Return the first service of a given **kind**."""
        for service in self._services:
            if service.kind == kind:
                return service
        raise KeyError(kind)

    @property
    def rooms(self) -> typing.Dict[str, Room]:
        """The rooms created so far."""
        return collections.OrderedDict(self._rooms)

    def create_room(self, number: str) -> Room:
        """Create a new room and attach the notification services to it.

        :param number: The room's number.
        """
        if number in self._rooms:
            raise ValueError("Room {!s} already exists".format(number))
        room = Room(number, error_policy=self._error_policy)
        for service in self._services:
            room.add_observer(service)
        logger.debug(
            "%s created. Attached services: %s",
            room,
            ", ".join(str(s) for s in self._services) or "none",
        )
        self._rooms[number] = room
        return room

    def check_in(self, number: str, guest_name: str) -> Room:
        """Check **guest_name** into the room numbered **number**."""
        room = self[number]
        room.check_in(guest_name)
        return room

    def __getitem__(self, item) -> Room:
        return self._rooms[item]

    def __contains__(self, item):
        return item in self._rooms

    def __iter__(self) -> typing.Iterator[Room]:
        """Iterates over rooms."""
        for room in self._rooms.values():
            yield room

    def __len__(self):
        """The number of rooms."""
        return len(self._rooms)
