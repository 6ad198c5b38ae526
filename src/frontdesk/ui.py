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
All the necessary `urwid`` based classes needed to build the front-desk console.

Here are a few pointers:

* A :class:`FrontDeskApplication` manages the whole application UI. A call to
  its ``main`` method starts the Urwid main loop (and therefore actually starts
  the UI).
* The :class:`FrontDeskApplication` object, builds a :class:`FrontDeskMainView`
  object and displays it. It lists the rooms and lets the user check guests in.
* The :class:`ActivityFeed` widget displays what happened. It is fed by
  :class:`ActivityFeedObserver` objects that are attached to every room, next
  to the regular notification services.

"""

from __future__ import annotations

import abc
import logging
import typing

import urwid

from .conf import frontdesk_conf
from .hotel import Room
from .manager import HotelManager
from .observer import NotificationError, Observer

__all__ = ["FrontDeskApplication", "ActivityFeed", "ActivityFeedObserver"]

logger = logging.getLogger(__name__)


class ActivityFeed(urwid.ListBox):
    """A scroll-able list of messages (the latest is focused)."""

    def __init__(self):
        self.walker = urwid.SimpleFocusListWalker([])
        super().__init__(self.walker)

    @property
    def messages(self) -> typing.List[str]:
        """The raw text of the messages displayed so far."""
        return [w.text for w in self.walker]

    def append(self, markup):
        """Add a new message (any urwid text **markup**) at the bottom."""
        self.walker.append(urwid.Text(markup))
        self.walker.set_focus(len(self.walker) - 1)


class ActivityFeedObserver(Observer):
    """Report the check-ins of a given room in an :class:`ActivityFeed`."""

    def __init__(self, feed: ActivityFeed, room: Room):
        """
        :param feed: The feed to write to
        :param room: The observed room
        """
        self.feed = feed
        self.room = room

    def notify(self, payload: str):
        """Tell the user which services are attached to the room."""
        services = [str(o) for o in self.room.observers if o is not self]
        self.feed.append(
            (
                "notification",
                "{!s}: {:s} checked in (attached: {:s})".format(
                    self.room, payload, ", ".join(services) or "nobody"
                ),
            )
        )

    def __str__(self):
        return "activity feed"


# ------ Views are custom object that handle a given layout of the UI ------


class FrontDeskAbstractView(metaclass=abc.ABCMeta):
    """Any frontdesk views must inherit from this class"""

    footer_add_quit = True
    footer_text = []

    def __init__(self, app_object: FrontDeskApplication):
        """
        Any view must have ``header``, ``footer`` and ``main_content`` attribute.
        They will be used to build a Frame widget.

        :param app_object: The application object
        """
        super().__init__()
        self.app = app_object
        self.header = urwid.Text("")
        self.header_update()
        self.footer = None
        self.footer_update()
        self.main_content = None

    def switch_in_hook(self):
        """Called each time this view is shown."""
        pass

    def switch_out_hook(self):
        """Called each time this view is hidden."""
        pass

    def header_update(self, extra: str = ""):
        """Update the header text (given any **extra** information)."""
        self.header.set_text(
            "Front desk ({:d} rooms). {:s}".format(len(self.app.manager), extra)
        )

    def footer_update(self, *extras: list):
        """Update the footer text given a list of command extended by **extras**."""
        txt_pile = []
        for extra in extras:
            txt_pile.append(urwid.Text(extra))
        for extra in self.footer_text:
            txt_pile.append(urwid.Text(extra))
        if self.footer_add_quit:
            txt_pile.append(urwid.Text([("key", "Q"), ": Quit"]))
        max_len = max([len(t.text) for t in txt_pile]) if txt_pile else 1
        self.footer = urwid.GridFlow(
            txt_pile, max_len, h_sep=1, v_sep=0, align="left"
        )

    def keypress_hook(self, key: str) -> typing.Union[str, None]:
        """Called for any key stroke that the widgets did not handle."""
        return key


class FrontDeskMainView(FrontDeskAbstractView):
    """The list of rooms, the check-in form and the activity feed."""

    footer_text = [
        [("key", "Tab"), ": Switch panel"],
        [("key", "Enter"), ": Check in"],
    ]

    def __init__(self, app_object: FrontDeskApplication):
        """
        :param app_object: The application object
        """
        super().__init__(app_object)
        self.feed = ActivityFeed()
        # One radio button per room
        self._rooms_group = []
        self._rooms_buttons = []
        for room in self.app.manager:
            r_button = urwid.RadioButton(self._rooms_group, str(room))
            self._rooms_buttons.append((r_button, room))
            room.add_observer(ActivityFeedObserver(self.feed, room))
        rooms_box = urwid.LineBox(
            urwid.ListBox(
                urwid.SimpleFocusListWalker(
                    [
                        urwid.AttrMap(r_button, "room", "room_f")
                        for r_button, _ in self._rooms_buttons
                    ]
                )
            ),
            title="Rooms",
        )
        # The check-in form
        self.guest_edit = urwid.Edit(("title", "Guest name: "))
        check_in_button = urwid.Button("Check in", self.check_in_press)
        form = urwid.Pile(
            [
                urwid.AttrMap(self.guest_edit, "editable", "editable_f"),
                urwid.Divider(),
                urwid.AttrMap(check_in_button, "button", "button_f"),
            ]
        )
        self._right = urwid.Pile(
            [
                ("pack", urwid.LineBox(form, title="Check-in")),
                ("weight", 1, urwid.LineBox(self.feed, title="Activity")),
            ]
        )
        self._columns = urwid.Columns(
            [("weight", 1, rooms_box), ("weight", 3, self._right)], dividechars=1
        )
        self.main_content = self._columns

    @property
    def selected_room(self) -> typing.Union[Room, None]:
        """The room currently selected in the rooms list."""
        for r_button, room in self._rooms_buttons:
            if r_button.state:
                return room
        return None

    def switch_in_hook(self):
        """Focus the guest name entry."""
        self._columns.focus_position = 1
        self._right.focus_position = 0

    def check_in_press(self, button: urwid.Button = None):
        """Check the guest in (using the data from the form)."""
        guest_name = self.guest_edit.edit_text.strip()
        room = self.selected_room
        if not guest_name:
            self.feed.append(("warning", "Please enter the guest's name"))
            return
        if room is None:
            self.feed.append(("warning", "Please select a room"))
            return
        self.feed.append(("checkin", "{!s}: checking in {:s}".format(room, guest_name)))
        try:
            self.app.manager.check_in(room.number, guest_name)
        except NotificationError as e:
            # The guest is checked in: only some notifications failed
            for observer, exc in e.failures:
                self.feed.append(
                    (
                        "failure",
                        "{!s}: notifying {!s} failed: {!s}".format(
                            room, observer, exc
                        ),
                    )
                )
        except Exception as e:
            logger.exception("The check-in of %s in %s failed", guest_name, room)
            self.feed.append(("failure", "Check-in failed: {!s}".format(e)))
        self.guest_edit.set_edit_text("")
        self.header_update("Last check-in: {:s}".format(guest_name))

    def keypress_hook(self, key: str) -> typing.Union[str, None]:
        """Switch panels and validate the form."""
        if key == "tab":
            self._columns.focus_position = 1 - self._columns.focus_position
            return None
        if key == "enter" and self._columns.focus_position == 1:
            self.check_in_press()
            return None
        return key


class FrontDeskQuitView(FrontDeskAbstractView):
    """The view that is triggered when the user wants to quit the application."""

    footer_add_quit = False

    def __init__(self, app_object: FrontDeskApplication):
        """
        :param app_object: The application object
        """
        super().__init__(app_object)
        self._inner_g_flow = urwid.GridFlow(
            [
                urwid.AttrMap(
                    urwid.Button(name, self.button_press), "button", "button_f"
                )
                for name in ("Yes", "No")
            ],
            cell_width=7,
            h_sep=3,
            v_sep=1,
            align="center",
        )
        pile = urwid.Pile(
            [
                urwid.Text("Are you sure you want to quit?", align="center"),
                urwid.Divider(),
                self._inner_g_flow,
            ]
        )
        pile.focus_position = 2
        w = urwid.Padding(urwid.LineBox(pile), align="center", width=36)
        self.main_content = urwid.Filler(w, "middle")
        # Where to go back if the user answers No ?
        self.previous_view = None

    def switch_in_hook(self):
        """Record the previous view and focus the Yes answer."""
        self.previous_view = self.app.current_view
        self._inner_g_flow.focus_position = 0

    def switch_out_hook(self):
        """Forget about the previous view."""
        self.previous_view = None

    def button_press(self, button: urwid.Button):
        """Exit or go back to the previous view."""
        if button.label == "Yes":
            raise urwid.ExitMainLoop()
        else:
            self.app.switch_view(self.previous_view)


class FrontDeskApplication(object):
    """The object representing the frontdesk UI."""

    def __init__(self, manager: HotelManager):
        """
        :param manager: The hotel manager (rooms and notification services)
        """
        self.manager = manager
        # Create the Frame widget that will be used in the whole application
        self.view = urwid.Frame(urwid.Filler(urwid.Text("Initialising...")))
        # Create the main loop
        screen = None
        if frontdesk_conf.urwid_backend == "curses":
            import urwid.curses_display

            screen = urwid.curses_display.Screen()
        palette = frontdesk_conf.palette
        logger.debug(
            "Creating the urwid main loop. Palette is:\n  %s",
            "\n  ".join([str(item) for item in palette]),
        )
        self.loop = urwid.MainLoop(
            self.view,
            palette,
            screen=screen,
            unhandled_input=self.unhandled_input,
            handle_mouse=frontdesk_conf.handle_mouse,
        )
        if frontdesk_conf.urwid_backend != "curses":
            t_properties = frontdesk_conf.terminal_properties
            self.loop.screen.set_terminal_properties(**t_properties)
            logger.debug(
                "Creating the urwid main loop. Terminal properties: %s", t_properties
            )
        # Create the Main view and display it
        self.current_view = None
        self.main_view = FrontDeskMainView(self)
        self.switch_view(self.main_view)
        # Create the Quit view (just in case)
        self.quit_view = FrontDeskQuitView(self)

    def switch_view(self, view_obj: FrontDeskAbstractView):
        """Display the **view_obj** view."""
        logger.debug('Switching to view: "%s"', view_obj)
        if self.current_view is not None:
            self.current_view.switch_out_hook()
        view_obj.switch_in_hook()
        self.view.body = view_obj.main_content
        self.view.header = urwid.AttrMap(view_obj.header, "head")
        self.view.footer = urwid.AttrMap(view_obj.footer, "foot")
        self.current_view = view_obj

    def main(self):
        """Run the Urwid main loop."""
        self.loop.run()

    def unhandled_input(self, key: str):
        """Handle q/Q key strokes (and forward the others to the current view)."""
        if not isinstance(key, str):
            return
        if key in ("q", "Q") and self.current_view is self.main_view:
            self.switch_view(self.quit_view)
        elif self.current_view is not None:
            self.current_view.keypress_hook(key)
