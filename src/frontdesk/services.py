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
The notification services that are told about check-ins.

Nothing is actually sent: each service logs what it would do and records the
guests it has been notified about.
"""

import logging
import typing

from .observer import Observer

__all__ = [
    "NotificationService",
    "EmailNotificationService",
    "PushNotificationService",
    "get_notification_service",
    "available_kinds",
]

logger = logging.getLogger(__name__)


class NotificationService(Observer):
    """The base class for any notification service."""

    #: The kind of service (as used by :func:`get_notification_service`)
    kind = None

    def __init__(self):
        self.delivered = list()

    def notify(self, payload: str):
        """Deliver a notification about the **payload** guest."""
        self._deliver(payload)
        self.delivered.append(payload)

    def _deliver(self, guest_name: str):
        """Actually do something about **guest_name**."""
        raise NotImplementedError()

    def __str__(self):
        return "{:s} service".format(self.kind)


class EmailNotificationService(NotificationService):
    """Send welcome emails."""

    kind = "email"

    def __init__(self, sender: str = "frontdesk@hotel.example"):
        """
        :param sender: The address emails are sent from
        """
        super().__init__()
        self.sender = sender

    def _deliver(self, guest_name: str):
        logger.info("Sending welcome email to %s (from %s)", guest_name, self.sender)


class PushNotificationService(NotificationService):
    """Register guests for push updates."""

    kind = "push"

    def __init__(self, channel: str = "guests"):
        """
        :param channel: The push channel guests are subscribed to
        """
        super().__init__()
        self.channel = channel

    def _deliver(self, guest_name: str):
        logger.info(
            "Registering %s for push notifications (channel=%s)",
            guest_name,
            self.channel,
        )


_SERVICES = {
    EmailNotificationService.kind: EmailNotificationService,
    PushNotificationService.kind: PushNotificationService,
}


def get_notification_service(kind: str, **kwargs) -> NotificationService:
    """A simple factory method for NotificationService classes."""
    logger.debug("Creating a notification service. kind=%s. kwargs=%s", kind, kwargs)
    if kind not in _SERVICES:
        raise ValueError(
            'No notification service is available for kind="{:s}"'.format(kind)
        )
    try:
        return _SERVICES[kind](**kwargs)
    except TypeError as e:
        raise ValueError(
            'Invalid arguments for the "{:s}" service: {!s}'.format(kind, e)
        ) from e


def available_kinds() -> typing.List[str]:
    """The list of known service kinds."""
    return sorted(_SERVICES)
