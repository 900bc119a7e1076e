import pytest

from stackenv.config.core.provider import (
    ProcessEnvironmentProvider, FileEnvironmentProvider, LayeredEnvironmentProvider
)
from stackenv.config.core.composer import ActivationMode, compose
from stackenv.config.services import default_registry
from stackenv.core.exceptions import EnvironmentFileError
from stackenv.env import create_env


class TestProcessEnvironmentProvider:
    """Test process environment snapshots."""

    def test_snapshot_of_given_mapping(self):
        source = {'A': '1'}
        snapshot = ProcessEnvironmentProvider(source).get_snapshot()
        source['A'] = '2'
        assert snapshot['A'] == '1'

    def test_snapshot_is_read_only(self):
        snapshot = ProcessEnvironmentProvider({'A': '1'}).get_snapshot()
        with pytest.raises(TypeError):
            snapshot['A'] = '2'

    def test_os_environ_captured_once(self, monkeypatch):
        monkeypatch.setenv('STACKENV_TEST_VALUE', 'before')
        provider = ProcessEnvironmentProvider()
        monkeypatch.setenv('STACKENV_TEST_VALUE', 'after')
        assert provider.get_snapshot()['STACKENV_TEST_VALUE'] == 'before'


class TestFileEnvironmentProvider:
    """Test YAML environment files."""

    def test_scalars_kept_literally(self, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text(
            "DATABASE_URL: postgresql://localhost/app\n"
            "ENABLE_SERVICES_FLAGS: true\n"
            "ENABLE_STRIPE: TRUE\n"
            "ENABLE_CLERK: yes\n"
            "ENABLE_GA: on\n"
            "PORT: 8080\n"
            "SENTRY_ORG: 0123\n"
            "SENTRY_PROJECT:\n"
        )
        snapshot = FileEnvironmentProvider(path).get_snapshot()

        assert snapshot['DATABASE_URL'] == 'postgresql://localhost/app'
        assert snapshot['ENABLE_SERVICES_FLAGS'] == 'true'
        assert snapshot['ENABLE_STRIPE'] == 'TRUE'
        assert snapshot['ENABLE_CLERK'] == 'yes'
        assert snapshot['ENABLE_GA'] == 'on'
        assert snapshot['PORT'] == '8080'
        assert snapshot['SENTRY_ORG'] == '0123'
        assert snapshot['SENTRY_PROJECT'] == ''

    def test_non_exact_flags_leave_services_inactive(self, tmp_path, required_environment):
        path = tmp_path / "env.yaml"
        path.write_text(
            "ENABLE_SERVICES_FLAGS: 'true'\n"
            "ENABLE_STRIPE: TRUE\n"
            "ENABLE_CLERK: yes\n"
            "ENABLE_GA: on\n"
        )
        snapshot = LayeredEnvironmentProvider(
            ProcessEnvironmentProvider(required_environment),
            FileEnvironmentProvider(path)
        ).get_snapshot()

        rule_set = compose(default_registry(), ActivationMode.from_environment(snapshot), snapshot)

        assert rule_set.active_services == ()
        assert 'STRIPE_SECRET_KEY' not in rule_set
        assert 'CLERK_SECRET_KEY' not in rule_set
        create_env(snapshot)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text("")
        assert dict(FileEnvironmentProvider(path).get_snapshot()) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(EnvironmentFileError):
            FileEnvironmentProvider(tmp_path / "missing.yaml").get_snapshot()

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text("- A\n- B\n")
        with pytest.raises(EnvironmentFileError) as exc_info:
            FileEnvironmentProvider(path).get_snapshot()
        assert 'expected a mapping' in str(exc_info.value)

    def test_nested_value_rejected(self, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text("A:\n  B: 1\n")
        with pytest.raises(EnvironmentFileError):
            FileEnvironmentProvider(path).get_snapshot()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text("A: [unclosed\n")
        with pytest.raises(EnvironmentFileError):
            FileEnvironmentProvider(path).get_snapshot()


class TestLayeredEnvironmentProvider:
    """Later providers override earlier ones."""

    def test_override(self, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text("A: from-file\nB: from-file\n")
        layered = LayeredEnvironmentProvider(
            FileEnvironmentProvider(path),
            ProcessEnvironmentProvider({'B': 'from-process', 'C': 'from-process'})
        )
        assert dict(layered.get_snapshot()) == {
            'A': 'from-file', 'B': 'from-process', 'C': 'from-process'
        }
