"""Framing helpers, device IDs, message formatting and parsing for Xbus motion trackers."""