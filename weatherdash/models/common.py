"""Enumerations shared across models."""

from enum import StrEnum


class Severity(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class SearchState(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ClientMode(StrEnum):
    LIVE = "live"
    DEMO = "demo"
