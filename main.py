#!/usr/bin/env python3
"""
Main entry point for the Twitch chat bot
"""

import sys

from chatbot.main import main

if __name__ == "__main__":
    sys.exit(main())
