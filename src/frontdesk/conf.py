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
Handle the frontdesk configuration's file.
"""

from __future__ import annotations

import configparser
import logging
import logging.handlers
import os
import re
import typing

from .observer import ErrorPolicy

__all__ = ["FrontDeskConfig", "frontdesk_conf"]

logger = logging.getLogger(__name__)


#: The default urwid palette for the frontdesk console
DEFAULT_PALETTE = dict(
    room=("black", "light gray"),
    room_f=("white", "dark blue", "bold"),
    checkin=("light green", "black"),
    notification=("light cyan", "black"),
    failure=("light red", "black", "bold"),
    warning=("black", "brown"),
    head=("yellow", "black", "standout"),
    foot=("white", "black"),
    key=("light cyan", "black", "underline"),
    title=("white", "black", "bold"),
    button=("black", "light gray"),
    button_f=("white", "dark blue", "bold"),
    editable=("black", "light gray"),
    editable_f=("white", "dark blue", "bold"),
)


class FrontDeskConfig(object):
    """Read the frontdesk configuration files.

    A system-wide configuration file can be specified using the
    FRONTDESK_SITE_CONF environment variable. An additional user-wide
    configuration file while be read in (if present). It is located in
    ~/.frontdeskrc.ini.
    """

    _CONFIG_ENV_VAR = "FRONTDESK_SITE_CONF"
    _CONFIG_FILE = os.path.join(os.path.expanduser("~"), ".frontdeskrc.ini")

    def __init__(self, conf_txt: str = None):
        """
        :param conf_txt: Provide a text based version of the config file. For
                         testing purposes only. If provided, the default
                         configuration (~/.frontdeskrc.ini) is not read in.
        """
        conf_obj = configparser.ConfigParser()
        conf_obj.optionxform = lambda option: option
        if conf_txt is not None:
            conf_obj.read_string(conf_txt)
        else:
            todo = []
            site_config = os.environ.get(self._CONFIG_ENV_VAR, None)
            if site_config and os.path.exists(site_config):
                todo.append(site_config)
            if os.path.exists(self._CONFIG_FILE):
                todo.append(self._CONFIG_FILE)
            if todo:
                conf_obj.read(todo, encoding="utf-8")
        self._conf = conf_obj

    def logging_config(self, filename: str = None, level: str = None):
        """Configure the logging facility.

        The ``filename`` and ``level`` options of the configuration file
        ``[logging]`` section are considered. If missing, default values for
        ``filename`` and ``level`` are ``~/.frontdesk.log`` and ``CRITICAL``.
        """
        # Handler
        if filename is None:
            filename = self._conf.get(
                "logging", "filename", fallback="~/.frontdesk.log"
            )
            filename = os.path.expanduser(filename)
        f_handler = logging.handlers.TimedRotatingFileHandler(
            filename, when="midnight", interval=1, backupCount=3, encoding="utf-8"
        )
        # Formatter
        formatter = logging.Formatter(
            "[%(asctime)s] pid=%(process)d: %(name)s %(levelname)s: %(message)s"
        )
        f_handler.setFormatter(formatter)
        # Add the Handler to the main logger
        m_logger = logging.getLogger()
        m_logger.addHandler(f_handler)
        # Configure the logging level
        if level is None:
            m_logger.setLevel(
                self._conf.get("logging", "level", fallback=logging.CRITICAL)
            )
        else:
            m_logger.setLevel(level)

    @staticmethod
    def _split_list(value: str) -> typing.List[str]:
        """Split a comma or space separated list of items."""
        return [item for item in re.split(r"[\s,]+", value) if item]

    @property
    def notification_services(self) -> typing.List[str]:
        """The notification services attached to every room.

        Example::

            [notifications]
            services = email, push

        """
        return self._split_list(
            self._conf.get("notifications", "services", fallback="email, push")
        )

    @property
    def error_policy(self) -> ErrorPolicy:
        """What to do when a notification service fails.

        ``fail_fast`` (the default) stops at the first failure, ``best_effort``
        notifies all the services and reports the failures afterwards.
        """
        value = self._conf.get("notifications", "error_policy", fallback="fail_fast")
        try:
            return ErrorPolicy(value.strip(" ").lower())
        except ValueError:
            raise ValueError(
                "Must be one of: {:s}. Not {!s}.".format(
                    ", ".join(p.value for p in ErrorPolicy), value
                )
            ) from None

    @property
    def email_sender(self) -> str:
        """The address welcome emails are sent from."""
        return self._conf.get(
            "notifications", "email_sender", fallback="frontdesk@hotel.example"
        )

    @property
    def push_channel(self) -> str:
        """The channel guests are registered to for push notifications."""
        return self._conf.get("notifications", "push_channel", fallback="guests")

    def notification_service_options(self, kind: str) -> dict:
        """The keyword arguments needed to create a **kind** service."""
        if kind == "email":
            return dict(sender=self.email_sender)
        elif kind == "push":
            return dict(channel=self.push_channel)
        else:
            return dict()

    @property
    def rooms(self) -> typing.List[str]:
        """The room numbers created by the demo console."""
        return self._split_list(
            self._conf.get("hotel", "rooms", fallback="101 102 103 201 202")
        )

    @property
    def urwid_backend(self) -> str:
        """The 'urwid' that should be used to create the layout.

        Currently, only ``raw`` and ``curses`` are supported.

        Example::

            [urwid]
            backend = raw

        """
        return self._conf.get("urwid", "backend", fallback="raw")

    @property
    def palette(self) -> typing.Union[typing.List[typing.Tuple], None]:
        """Return a "palette" description that could be used in urwid.

        The palette configuration data are to be found in the [palette] section
        of the configuration file.

        The configuration file key corresponds to the palette entry key. The
        configuration value is split based on the ',' and '+' character in
        order to create the appropriate tuples.

        For example::

            failure = light red, black, bold+underline

        Will be transformed into the following tuple::

            ('failure', 'light red', 'black', ('bold', 'underline')),

        The resulting palette is an update of the default palette (see the
        ``DEFAULT_PALETTE`` module variable) with lines read in the
        configuration file.
        """
        full_palette = DEFAULT_PALETTE.copy()
        if self._conf.has_section("palette"):
            palette = dict()
            for k, v in self._conf.items("palette"):
                v_items = [s.strip(" ") for s in v.split(",")]
                v_items = [tuple(s.split("+")) if "+" in s else s for s in v_items]
                palette[k] = tuple(v_items)
            # noinspection PyTypeChecker
            full_palette.update(palette)
        return [(k, *v) for k, v in sorted(full_palette.items())]

    @staticmethod
    def _true_false_none_value(value: str) -> typing.Union[bool, None]:
        """Detect True, False or None in a configuration entry."""
        if value.strip(" ") in ("false", "False", "0"):
            return False
        elif value.strip(" ") in ("True", "true", "1"):
            return True
        elif value.strip(" ") in ("None", "none", "Null", "null"):
            return None
        else:
            raise ValueError("Must be True, False or None. Not {!s}.".format(value))

    @property
    def terminal_properties(self) -> dict:
        """Read the necessary data to setup the Urwid screen object.

        A ``None`` value, means do not change the default.
        """
        return dict(
            colors=int(self._conf.get("urwid", "terminal_colors", fallback=0)) or None,
            bright_is_bold=self._true_false_none_value(
                self._conf.get("urwid", "terminal_bright_is_bold", fallback="None")
            ),
            has_underline=self._true_false_none_value(
                self._conf.get("urwid", "terminal_has_underline", fallback="None")
            ),
        )

    @property
    def handle_mouse(self) -> bool:
        """Allow mouse interactions."""
        return self._true_false_none_value(
            self._conf.get("urwid", "handle_mouse", fallback="False")
        )


#: The go-to object to fetch some configuration data
frontdesk_conf = FrontDeskConfig()
