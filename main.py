"""shelly: schedule a Shelly Gen2 relay to switch on and off.

  shelly onoff <relays> <date> <hours>

One run:
  1. Parse relay ids, resolve the date keyword and the hour range
  2. Check the device answers (Shelly.GetStatus)
  3. Delete every schedule already on the device
  4. Create an "on" and an "off" schedule per relay

Any error stops the run with exit code 1; nothing is retried or rolled back.
"""

import argparse
import logging
import sys
from datetime import datetime

from dotenv import load_dotenv

import config
from devices.shelly_relay import ShellyRelay
from errors import MissingArgumentsError, ShellyError
from schedules import create_schedule_payload, plan_schedules
from timerange import describe_date, parse_date, parse_ints, parse_time

log = logging.getLogger(__name__)

EXAMPLES = f"""\
Examples:

  {config.APP_NAME} onoff 0,1,2 today 17..18
  {config.APP_NAME} onoff 0 tomorrow 2..3
  {config.APP_NAME} onoff 0 today -1..2       # starts at 23:00 the day before

Note 1: by default, all earlier schedules are deleted before setting new ones.
Note 2: times are shifted by <position in relay list>*{config.RELAY_OFFSET_SECONDS} seconds.
"""


_HELP_FLAGS = {"-h", "--help"}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting, carrying its own help text."""

    def error(self, message):
        raise MissingArgumentsError(message, usage=self.format_help())


def build_parser():
    parser = _ArgumentParser(
        prog=config.APP_NAME,
        description="Command to easily turn relays on and off.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    onoff_parser = commands.add_parser(
        "onoff",
        help="turn relay or list of relays on and off at certain time",
        description="Turn relay or list of relays on and off at certain time.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    onoff_parser.add_argument("relays", help="relay id or comma-separated list of relay ids")
    onoff_parser.add_argument("date", help="today or tomorrow")
    onoff_parser.add_argument("hours", help="hour range <hour_start>..<hour_end>")
    return parser, onoff_parser


def parse_args(argv):
    argv = list(argv)
    parser, onoff_parser = build_parser()

    # onoff positionals are taken as given: argparse would read an hour range
    # such as -1..2 as an option
    if argv[:1] == ["onoff"] and not _HELP_FLAGS & set(argv[1:]):
        values = argv[1:]
        if len(values) < 3:
            raise MissingArgumentsError(
                "onoff needs <relays> <date> <hours>", usage=onoff_parser.format_help()
            )
        args = argparse.Namespace(
            command="onoff", relays=values[0], date=values[1], hours=values[2]
        )
        extra = values[3:]
    else:
        args, extra = parser.parse_known_args(argv)

    if args.command is None:
        raise MissingArgumentsError("no command given", usage=parser.format_help())
    if extra:
        log.warning("Ignoring extra arguments: %s", " ".join(extra))
    return args


def onoff(args, now=datetime.now, relay_cls=ShellyRelay):
    """Replace all schedules on the device with on/off pairs for args.relays."""
    relay_ids = parse_ints(args.relays, ",")
    ip = config.get_shelly_ip()

    date = parse_date(args.date, now)
    log.info("Setting relays for date %s", describe_date(date, now))
    offset = parse_time(args.hours)

    relay = relay_cls(ip, name=f"shelly@{ip}")
    relay.check_connection()
    relay.delete_all_schedules()

    for window in plan_schedules(relay_ids, date, offset):
        log.info("Setting relay %d on between: %s", window.relay_id, window.describe())

        payload = create_schedule_payload(window.relay_id, window.on_at, True)
        log.info("Payload for turn relay on: %s", payload)
        relay.create_schedule(payload)

        payload = create_schedule_payload(window.relay_id, window.off_at, False)
        log.info("Payload for turn relay off: %s", payload)
        relay.create_schedule(payload)

    log.info("Everything done!")


def main(argv=None, now=datetime.now):
    """Run the CLI and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv)
        onoff(args, now)
    except MissingArgumentsError as e:
        print(e.usage)
        log.error("%s", e)
        return 1
    except ShellyError as e:
        log.error("%s", e)
        return 1
    return 0


def run():
    load_dotenv()
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    sys.exit(main())


if __name__ == "__main__":
    run()
