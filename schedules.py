"""Build Schedule.Create request bodies for the Shelly Gen2 RPC API.

A schedule fires once its timespec matches the device clock:
  "<second> <minute> <hour> <day-of-month> <month> <weekday>"
e.g. "5 30 17 15 1 MON". Each schedule carries a single Switch.Set call.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timedelta

import config
from timerange import DATE_FORMAT

_TIME_FORMAT = "%H:%M:%S"
_DATETIME_FORMAT = f"{DATE_FORMAT} {_TIME_FORMAT}"


def get_timespec(when):
    """Format a datetime as a device timespec string."""
    # isoweekday(): Monday=1 .. Sunday=7; WEEKDAYS starts at Sunday
    weekday = config.WEEKDAYS[when.isoweekday() % 7]
    return f"{when.second} {when.minute} {when.hour} {when.day} {when.month} {weekday}"


def create_schedule_payload(relay_id: int, when: datetime, on: bool) -> str:
    """Return the JSON body that switches relay_id on/off at `when`."""
    schedule = {
        "enable": True,
        "timespec": get_timespec(when),
        "calls": [
            {"method": "Switch.Set", "params": {"id": relay_id, "on": on}},
        ],
    }
    return json.dumps(schedule, separators=(",", ":"))


def relay_offset(index):
    """Shift for the index-th relay in the list (position, not relay id)."""
    return timedelta(seconds=config.RELAY_OFFSET_SECONDS * index)


@dataclass
class RelayWindow:
    relay_id: int
    date: datetime      # target day, midnight
    on_at: datetime
    off_at: datetime

    def describe(self):
        """'17:00:02 ... 18:00:02', with dates when either end leaves the target day."""
        day = self.date.date()
        if self.on_at.date() != day or self.off_at.date() != day:
            fmt = _DATETIME_FORMAT
        else:
            fmt = _TIME_FORMAT
        return f"{self.on_at.strftime(fmt)} ... {self.off_at.strftime(fmt)}"


def plan_schedules(relay_ids, date, offset):
    """Yield the on/off window for each relay, in input order."""
    for i, relay_id in enumerate(relay_ids):
        shift = relay_offset(i)
        yield RelayWindow(
            relay_id=relay_id,
            date=date,
            on_at=date + offset.begin + shift,
            off_at=date + offset.end + shift,
        )
