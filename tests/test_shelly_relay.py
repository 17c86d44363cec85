"""Tests for the Shelly RPC schedule client (HTTP mocked)."""

import logging
from unittest import mock

import pytest
import requests

import config
from devices.shelly_relay import ShellyRelay
from errors import DeviceConnectionError, ScheduleClearError, ScheduleCreateError


def _response(status_code: int = 200, text: str = "{}") -> mock.Mock:
    return mock.Mock(status_code=status_code, text=text)


@pytest.fixture
def relay() -> ShellyRelay:
    return ShellyRelay("192.0.2.5", name="test")


def test_base_url(relay: ShellyRelay) -> None:
    assert relay.base_url == "http://192.0.2.5/rpc"


class TestCheckConnection:
    def test_ok(self, relay: ShellyRelay, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        with mock.patch("devices.shelly_relay.requests.get", return_value=_response()) as get:
            relay.check_connection()
        get.assert_called_once_with(
            "http://192.0.2.5/rpc/Shelly.GetStatus", timeout=config.HTTP_TIMEOUT
        )
        assert "response status code: 200" in caplog.text

    def test_bad_status(self, relay: ShellyRelay) -> None:
        with mock.patch("devices.shelly_relay.requests.get", return_value=_response(500)):
            with pytest.raises(DeviceConnectionError, match="500"):
                relay.check_connection()

    def test_unreachable(self, relay: ShellyRelay) -> None:
        err = requests.ConnectionError("connection refused")
        with mock.patch("devices.shelly_relay.requests.get", side_effect=err):
            with pytest.raises(DeviceConnectionError) as exc_info:
                relay.check_connection()
        assert isinstance(exc_info.value, ConnectionError)
        assert exc_info.value.__cause__ is err


class TestDeleteAllSchedules:
    def test_ok_logs_body(self, relay: ShellyRelay, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        with mock.patch(
            "devices.shelly_relay.requests.get", return_value=_response(text="null")
        ) as get:
            relay.delete_all_schedules()
        get.assert_called_once_with(
            "http://192.0.2.5/rpc/Schedule.DeleteAll", timeout=config.HTTP_TIMEOUT
        )
        assert "schedules deleted, response: null" in caplog.text

    def test_bad_status(self, relay: ShellyRelay) -> None:
        with mock.patch("devices.shelly_relay.requests.get", return_value=_response(404)):
            with pytest.raises(ScheduleClearError):
                relay.delete_all_schedules()

    def test_timeout(self, relay: ShellyRelay) -> None:
        with mock.patch("devices.shelly_relay.requests.get", side_effect=requests.Timeout("slow")):
            with pytest.raises(ScheduleClearError, match="slow"):
                relay.delete_all_schedules()


class TestCreateSchedule:
    PAYLOAD = '{"enable":true,"timespec":"0 0 17 15 1 MON","calls":[]}'

    def test_posts_json_body(self, relay: ShellyRelay, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        with mock.patch(
            "devices.shelly_relay.requests.post", return_value=_response(text='{"id":1,"rev":3}')
        ) as post:
            relay.create_schedule(self.PAYLOAD)
        post.assert_called_once_with(
            "http://192.0.2.5/rpc/Schedule.Create",
            data=self.PAYLOAD,
            headers={"Content-Type": "application/json"},
            timeout=config.HTTP_TIMEOUT,
        )
        assert 'schedule created, response: {"id":1,"rev":3}' in caplog.text

    def test_bad_status(self, relay: ShellyRelay) -> None:
        with mock.patch("devices.shelly_relay.requests.post", return_value=_response(400)):
            with pytest.raises(ScheduleCreateError, match="400"):
                relay.create_schedule(self.PAYLOAD)

    def test_unreachable(self, relay: ShellyRelay) -> None:
        with mock.patch(
            "devices.shelly_relay.requests.post", side_effect=requests.ConnectionError("reset")
        ):
            with pytest.raises(ScheduleCreateError):
                relay.create_schedule(self.PAYLOAD)
