"""Lightweight logging utilities for game events."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def silent(message):
    pass
