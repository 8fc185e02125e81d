"""Tests for settings and WoL target validation (fail fast at setup)."""

import pytest
from pydantic import ValidationError

from wakegate.config import Settings
from wakegate.schemas.wol import WakeTarget

MAC = "10:ff:e0:cf:e6:0e"


class TestWakeTarget:
    def test_valid(self):
        target = WakeTarget(mac=MAC, host="123.123.1.3")
        assert target.port == 0
        assert target.effective_port == 9

    def test_explicit_port(self):
        assert WakeTarget(mac=MAC, host="nas.local", port=7).effective_port == 7

    @pytest.mark.parametrize("port", [70000, 65536, -1])
    def test_port_out_of_range(self, port):
        with pytest.raises(ValidationError):
            WakeTarget(mac=MAC, host="123.123.1.3", port=port)

    def test_bad_mac(self):
        with pytest.raises(ValidationError, match="not-a-mac"):
            WakeTarget(mac="not-a-mac", host="123.123.1.3")

    def test_missing_mac(self):
        with pytest.raises(ValidationError):
            WakeTarget(mac="", host="123.123.1.3")

    def test_missing_host(self):
        with pytest.raises(ValidationError):
            WakeTarget(mac=MAC, host="   ")


class TestSettings:
    def test_defaults_disable_wol(self):
        s = Settings(_env_file=None)
        assert s.wol_enabled is False
        assert s.wol_port == 0
        assert s.wol_paths == []

    def test_port_out_of_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, wol_mac=MAC, wol_host="123.123.1.3", wol_port=70000)

    def test_port_from_env_out_of_range(self, monkeypatch):
        monkeypatch.setenv("WAKEGATE_WOL_PORT", "70000")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_bad_mac(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, wol_mac="zz:zz:zz:zz:zz:zz", wol_host="nas.local")

    def test_mac_requires_host(self):
        with pytest.raises(ValidationError, match="wol_host"):
            Settings(_env_file=None, wol_mac=MAC)

    def test_env_configuration(self, monkeypatch):
        monkeypatch.setenv("WAKEGATE_WOL_MAC", "10-ff-e0-cf-e6-0e")
        monkeypatch.setenv("WAKEGATE_WOL_HOST", "nas.local")
        monkeypatch.setenv("WAKEGATE_WOL_PORT", "7")
        monkeypatch.setenv("WAKEGATE_WOL_PATHS", "/jellyfin, /photos")
        s = Settings(_env_file=None)
        assert s.wol_enabled is True
        assert s.wol_mac == "10-ff-e0-cf-e6-0e"
        assert s.wol_port == 7
        assert s.wol_paths == ["/jellyfin", "/photos"]

    def test_paths_json_list(self, monkeypatch):
        monkeypatch.setenv("WAKEGATE_WOL_PATHS", '["/a", "/b"]')
        assert Settings(_env_file=None).wol_paths == ["/a", "/b"]

    def test_dev_mode(self):
        assert Settings(_env_file=None, mode="dev").is_dev_mode is True
        assert Settings(_env_file=None).is_dev_mode is False
