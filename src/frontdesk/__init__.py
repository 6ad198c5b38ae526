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
The ``frontdesk`` package provides a minimal hotel front-desk: rooms that guests
check into, and notification services that are told about every check-in.

Here are a few pointers for a better understanding of the code:

* :mod:`frontdesk.observer` provides a very simple (but thread-safe)
  implementation of the Observer design pattern. The
  :class:`frontdesk.observer.Subject` class keeps an ordered list of
  :class:`frontdesk.observer.Observer` objects and notifies them synchronously.
* A :class:`frontdesk.hotel.Room` is a subject: its ``check_in`` method records
  the guest and notifies the observers with the guest's name.
* The :mod:`frontdesk.services` module provides the concrete observers (email
  and push notification services).
* The :class:`frontdesk.manager.HotelManager` class creates the services and the
  rooms, and attaches the former to the latter.
* :mod:`frontdesk.conf` is an utility module that is used to handle the
  configuration data.
* :mod:`frontdesk.ui` is an ``urwid`` based front-desk console (see the
  ``frontdesk_demo.py`` executable).

"""

__all__ = ["FrontDeskApplication", "HotelManager", "Room"]

__version__ = "0.1.0"

from .hotel import Room
from .manager import HotelManager
from .ui import FrontDeskApplication
