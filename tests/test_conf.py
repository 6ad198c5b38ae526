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
Test everything related to the frontdesk configuration parser
"""

import logging
import os
import tempfile
import unittest

from frontdesk.conf import FrontDeskConfig
from frontdesk.observer import ErrorPolicy


class TestConf(unittest.TestCase):
    """Unit-test class for the configuration parser."""

    _default_palette = [
        ("button", "black", "light gray"),
        ("button_f", "white", "dark blue", "bold"),
        ("checkin", "light green", "black"),
        ("editable", "black", "light gray"),
        ("editable_f", "white", "dark blue", "bold"),
        ("failure", "light red", "black", "bold"),
        ("foot", "white", "black"),
        ("head", "yellow", "black", "standout"),
        ("key", "light cyan", "black", "underline"),
        ("notification", "light cyan", "black"),
        ("room", "black", "light gray"),
        ("room_f", "white", "dark blue", "bold"),
        ("title", "white", "black", "bold"),
        ("warning", "black", "brown"),
    ]

    def assertPaletteConf(self, conf_line, expected, new=False):
        """Assert if the palette is properly read from file."""
        res = FrontDeskConfig(
            conf_txt="""
            [palette]
            {:s}
            """.format(
                conf_line
            )
        ).palette
        self.assertIn(expected, res)
        self.assertEqual(len(res), len(self._default_palette) + int(new))

    def test_palette(self):
        """Test the palette reading."""
        self.assertListEqual(
            FrontDeskConfig(conf_txt="").palette, self._default_palette
        )
        self.assertPaletteConf(
            "room =  yellow,  dark green", ("room", "yellow", "dark green")
        )
        self.assertPaletteConf(
            "failure=yellow,dark blue,  bold+strikeout",
            ("failure", "yellow", "dark blue", ("bold", "strikeout")),
        )
        self.assertPaletteConf(
            "vip=yellow,dark blue", ("vip", "yellow", "dark blue"), new=True
        )

    def test_notifications_stuff(self):
        """Test notification services related config."""
        conf = FrontDeskConfig(conf_txt="")
        self.assertListEqual(conf.notification_services, ["email", "push"])
        self.assertIs(conf.error_policy, ErrorPolicy.FAIL_FAST)
        self.assertEqual(conf.email_sender, "frontdesk@hotel.example")
        self.assertEqual(conf.push_channel, "guests")
        self.assertDictEqual(
            conf.notification_service_options("email"),
            dict(sender="frontdesk@hotel.example"),
        )
        self.assertDictEqual(conf.notification_service_options("other"), dict())
        conf = FrontDeskConfig(
            conf_txt="""[notifications]
            services = push
            error_policy = Best_Effort
            email_sender = me@hotel.example
            push_channel = vip
            """
        )
        self.assertListEqual(conf.notification_services, ["push"])
        self.assertIs(conf.error_policy, ErrorPolicy.BEST_EFFORT)
        self.assertDictEqual(
            conf.notification_service_options("push"), dict(channel="vip")
        )
        self.assertDictEqual(
            conf.notification_service_options("email"),
            dict(sender="me@hotel.example"),
        )
        self.assertListEqual(
            FrontDeskConfig(
                conf_txt="""[notifications]
                services =
                """
            ).notification_services,
            [],
        )
        with self.assertRaises(ValueError):
            assert FrontDeskConfig(
                conf_txt="""[notifications]
                error_policy = whatever
                """
            ).error_policy

    def test_hotel_stuff(self):
        self.assertListEqual(
            FrontDeskConfig(conf_txt="").rooms, ["101", "102", "103", "201", "202"]
        )
        self.assertListEqual(
            FrontDeskConfig(
                conf_txt="""[hotel]
                rooms = 1, 2
                    3
                """
            ).rooms,
            ["1", "2", "3"],
        )

    def test_urwid_stuff(self):
        """Test urwid related config."""
        self.assertEqual(FrontDeskConfig(conf_txt="").urwid_backend, "raw")
        self.assertEqual(FrontDeskConfig(conf_txt="").handle_mouse, False)
        self.assertEqual(
            FrontDeskConfig(
                conf_txt="""[urwid]
            backend= curses
            handle_mouse= 1
            """
            ).urwid_backend,
            "curses",
        )
        self.assertEqual(
            FrontDeskConfig(
                conf_txt="""[urwid]
                    handle_mouse= 1
                    """
            ).handle_mouse,
            True,
        )
        self.assertEqual(
            FrontDeskConfig(
                conf_txt="""[urwid]
            terminal_colors= 256
            """
            ).terminal_properties,
            dict(colors=256, has_underline=None, bright_is_bold=None),
        )
        self.assertEqual(
            FrontDeskConfig(
                conf_txt="""[urwid]
            terminal_has_underline= 1
            terminal_bright_is_bold=  0
            """
            ).terminal_properties,
            dict(colors=None, has_underline=True, bright_is_bold=False),
        )
        with self.assertRaises(ValueError):
            assert FrontDeskConfig(
                conf_txt="""[urwid]
                terminal_has_underline= hello
                """
            ).terminal_properties

    def test_logging_config(self):
        """Test the logging setup."""
        m_logger = logging.getLogger()
        previous_level = m_logger.level
        previous_handlers = list(m_logger.handlers)
        with tempfile.TemporaryDirectory() as tmpdir:
            logfile = os.path.join(tmpdir, "frontdesk.log")
            try:
                FrontDeskConfig(
                    conf_txt="""[logging]
                    filename = {:s}
                    level = INFO
                    """.format(
                        logfile
                    )
                ).logging_config()
                self.assertEqual(m_logger.level, logging.INFO)
                new_handlers = [
                    h for h in m_logger.handlers if h not in previous_handlers
                ]
                self.assertEqual(len(new_handlers), 1)
                logging.getLogger("frontdesk.test").info("Hello from the front desk")
                new_handlers[0].flush()
                with open(logfile, encoding="utf-8") as fhl:
                    self.assertIn(
                        "frontdesk.test INFO: Hello from the front desk", fhl.read()
                    )
            finally:
                for handler in m_logger.handlers[:]:
                    if handler not in previous_handlers:
                        m_logger.removeHandler(handler)
                        handler.close()
                m_logger.setLevel(previous_level)


if __name__ == "__main__":
    unittest.main()
