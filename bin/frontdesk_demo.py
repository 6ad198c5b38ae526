#! /usr/bin/env python3
# -*- coding: utf-8 -*-

"""
This is a demonstration-only executable.

It creates a few rooms, attaches the email and push notification services to
them, and starts the front-desk console.
"""

from frontdesk.entrypoints.demo import main

if __name__ == '__main__':
    main()
