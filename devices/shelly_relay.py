"""Shelly Gen2 relay: schedule management over the local RPC API.

Uses: http://<ip>/rpc/Shelly.GetStatus
      http://<ip>/rpc/Schedule.DeleteAll
      http://<ip>/rpc/Schedule.Create   (POST, JSON body)
"""

import logging

import requests

import config
from errors import DeviceConnectionError, ScheduleClearError, ScheduleCreateError

log = logging.getLogger(__name__)


class ShellyRelay:
    """Programs on/off schedules on a Shelly Gen2 relay via local RPC API.

    Every method raises on a network error or any status other than 200.
    """

    def __init__(self, ip, name="relay"):
        self.ip = ip
        self.name = name
        self.base_url = f"http://{self.ip}/{config.RPC_PATH}"

    def check_connection(self):
        """Make sure the device answers before touching its schedules."""
        url = f"{self.base_url}/Shelly.GetStatus"
        log.info("%s: getting status from %s", self.name, url)
        try:
            resp = requests.get(url, timeout=config.HTTP_TIMEOUT)
        except requests.RequestException as e:
            raise DeviceConnectionError(f"{self.name}: {e}") from e
        log.info("%s: response status code: %d", self.name, resp.status_code)
        if resp.status_code != 200:
            raise DeviceConnectionError(f"{self.name}: status code {resp.status_code} != 200")

    def delete_all_schedules(self):
        """Remove every schedule stored on the device."""
        log.info("%s: removing old schedules ...", self.name)
        try:
            resp = requests.get(
                f"{self.base_url}/Schedule.DeleteAll",
                timeout=config.HTTP_TIMEOUT,
            )
        except requests.RequestException as e:
            raise ScheduleClearError(f"{self.name}: {e}") from e
        if resp.status_code != 200:
            raise ScheduleClearError(f"{self.name}: status code {resp.status_code} != 200")
        log.info("%s: schedules deleted, response: %s", self.name, resp.text)

    def create_schedule(self, payload):
        """POST a Schedule.Create body (see schedules.create_schedule_payload)."""
        try:
            resp = requests.post(
                f"{self.base_url}/Schedule.Create",
                data=payload,
                headers={"Content-Type": "application/json"},
                timeout=config.HTTP_TIMEOUT,
            )
        except requests.RequestException as e:
            raise ScheduleCreateError(f"{self.name}: {e}") from e
        if resp.status_code != 200:
            raise ScheduleCreateError(f"{self.name}: status code {resp.status_code} != 200")
        log.info("%s: schedule created, response: %s", self.name, resp.text)
