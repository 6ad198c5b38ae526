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
This is a demonstration-only executable.

It creates a few rooms, attaches the email and push notification services to
them, and starts the front-desk console. Nothing is actually sent: the
notification services only log what they would do.
"""

import argparse
import os
import sys

from frontdesk import FrontDeskApplication, HotelManager
from frontdesk.conf import frontdesk_conf
from frontdesk.observer import ErrorPolicy


def main():
    """Start the front-desk console."""

    frontdesk_conf.logging_config()

    # Process the command-line arguments
    program_name = os.path.basename(sys.argv[0])
    program_short_desc = program_name + " -- " + __doc__.lstrip("\n")
    # noinspection PyTypeChecker
    parser = argparse.ArgumentParser(
        description=program_short_desc,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r",
        "--rooms",
        dest="rooms",
        action="store",
        nargs="+",
        default=frontdesk_conf.rooms,
        help="The room numbers [default: %(default)s].",
    )
    parser.add_argument(
        "-p",
        "--policy",
        dest="policy",
        action="store",
        choices=[p.value for p in ErrorPolicy],
        default=frontdesk_conf.error_policy.value,
        help="What to do when a notification fails [default: %(default)s].",
    )
    args = parser.parse_args()
    duplicates = sorted({n for n in args.rooms if args.rooms.count(n) > 1})
    if duplicates:
        parser.error("duplicate room number(s): {:s}".format(", ".join(duplicates)))

    manager = HotelManager(error_policy=ErrorPolicy(args.policy))
    for number in args.rooms:
        manager.create_room(number)
    app = FrontDeskApplication(manager)
    app.main()
