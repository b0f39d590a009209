"""Tests for ContextVar-based scan configuration.

Validates thread isolation, context manager behavior and from_dict().
"""

from threading import Thread

import pytest

from barelinks import (
    ScanConfig,
    find_autolinks,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Every detector is enabled by default."""
        config = ScanConfig()
        assert config.url_enabled is True
        assert config.www_enabled is True
        assert config.email_enabled is True
        assert config.subreddit_enabled is True
        assert config.username_enabled is True

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.url_enabled = False  # type: ignore[misc]

    def test_custom_values(self) -> None:
        config = ScanConfig(www_enabled=False, username_enabled=False)
        assert config.www_enabled is False
        assert config.username_enabled is False
        assert config.url_enabled is True


class TestFromDict:
    """Test ScanConfig.from_dict()."""

    def test_known_keys(self) -> None:
        config = ScanConfig.from_dict({"email_enabled": False, "url_enabled": False})
        assert config.email_enabled is False
        assert config.url_enabled is False
        assert config.www_enabled is True

    def test_unknown_keys_ignored(self) -> None:
        config = ScanConfig.from_dict({"tables_enabled": True, "subreddit_enabled": False})
        assert config.subreddit_enabled is False
        assert not hasattr(config, "tables_enabled")

    def test_empty_dict(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_get(self) -> None:
        custom = ScanConfig(www_enabled=False)
        set_scan_config(custom)
        assert get_scan_config() is custom

    def test_reset(self) -> None:
        set_scan_config(ScanConfig(www_enabled=False))
        reset_scan_config()
        assert get_scan_config().www_enabled is True


class TestContextManager:
    """Test scan_config_context()."""

    def test_restores_previous(self) -> None:
        with scan_config_context(ScanConfig(url_enabled=False)):
            assert get_scan_config().url_enabled is False
        assert get_scan_config().url_enabled is True

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(url_enabled=False)):
                raise RuntimeError("boom")
        assert get_scan_config().url_enabled is True

    def test_nested(self) -> None:
        with scan_config_context(ScanConfig(url_enabled=False)):
            with scan_config_context(ScanConfig(www_enabled=False)):
                assert get_scan_config().url_enabled is True
                assert get_scan_config().www_enabled is False
            assert get_scan_config().url_enabled is False


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_threads_do_not_share_config(self) -> None:
        results: dict[str, list[str]] = {}

        def worker(name: str, config: ScanConfig) -> None:
            set_scan_config(config)
            results[name] = [m.text for m in find_autolinks("a@example.com www.example.com")]

        threads = [
            Thread(target=worker, args=("no_email", ScanConfig(email_enabled=False))),
            Thread(target=worker, args=("no_www", ScanConfig(www_enabled=False))),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results["no_email"] == ["www.example.com"]
        assert results["no_www"] == ["a@example.com"]
        assert get_scan_config() == ScanConfig()
