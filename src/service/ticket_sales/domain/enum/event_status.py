from enum import StrEnum


class EventStatus(StrEnum):
    """OPEN -> CLOSED is the only transition; CLOSED is terminal."""

    OPEN = 'open'
    CLOSED = 'closed'
