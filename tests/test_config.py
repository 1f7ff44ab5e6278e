import pytest

from cvss_sim.config.settings import CVSSSimConfig


def test_defaults():
    config = CVSSSimConfig.from_env()

    assert config.log_level == 'WARNING'
    assert config.default_format == 'table'
    assert config.alert_limit == 10
    assert config.color is True
    assert config.validate() == []


def test_environment_variables(monkeypatch):
    monkeypatch.setenv('CVSS_SIM_LOG_LEVEL', 'DEBUG')
    monkeypatch.setenv('CVSS_SIM_FORMAT', 'json')
    monkeypatch.setenv('CVSS_SIM_ALERT_LIMIT', '2')
    monkeypatch.setenv('CVSS_SIM_COLOR', 'off')

    config = CVSSSimConfig.from_env()

    assert config.log_level == 'DEBUG'
    assert config.default_format == 'json'
    assert config.alert_limit == 2
    assert config.color is False


def test_env_file_in_working_directory(tmp_path):
    (tmp_path / '.env').write_text("CVSS_SIM_FORMAT=csv\nCVSS_SIM_ALERT_LIMIT=3\n")

    config = CVSSSimConfig.from_env()

    assert config.default_format == 'csv'
    assert config.alert_limit == 3


def test_explicit_env_file(tmp_path):
    env_file = tmp_path / 'custom.env'
    env_file.write_text("CVSS_SIM_COLOR=no\n")

    config = CVSSSimConfig.from_env(str(env_file))

    assert config.color is False


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    (tmp_path / '.env').write_text("CVSS_SIM_FORMAT=csv\n")
    monkeypatch.setenv('CVSS_SIM_FORMAT', 'json')

    assert CVSSSimConfig.from_env().default_format == 'json'


@pytest.mark.parametrize("overrides, message", [
    ({'log_level': 'LOUD'}, "Unknown log level"),
    ({'default_format': 'xml'}, "Unknown output format"),
    ({'alert_limit': 0}, "Alert limit must be positive"),
])
def test_validate_reports_issues(overrides, message):
    issues = CVSSSimConfig(**overrides).validate()

    assert len(issues) == 1
    assert issues[0].startswith(message)


def test_non_integer_alert_limit_falls_back_and_is_reported(monkeypatch):
    monkeypatch.setenv('CVSS_SIM_ALERT_LIMIT', 'ten')

    config = CVSSSimConfig.from_env()

    assert config.alert_limit == 10
    assert config.validate() == ["Alert limit must be an integer (got 'ten')"]


def test_negative_alert_limit_is_reported(monkeypatch):
    monkeypatch.setenv('CVSS_SIM_ALERT_LIMIT', '-1')

    config = CVSSSimConfig.from_env()

    assert config.alert_limit == -1
    assert config.validate() == ["Alert limit must be positive"]
