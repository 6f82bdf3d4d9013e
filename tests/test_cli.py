"""Tests for CLI interface."""

import os
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from gh2bb.cli.main import _load_config, cli, main
from gh2bb.config.config import Config
from gh2bb.exceptions import ConfigurationError

DEST_URL = 'git@bitbucket.org:myteam/widgets.git'


class TestCLI:
    """Test CLI command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_cli_help(self):
        """Test CLI help command."""
        result = self.runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert 'mirror-push over SSH' in result.output
        assert '--dest-url' in result.output
        assert '--dry-run' in result.output

    def test_cli_version(self):
        """Test CLI version command."""
        result = self.runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_main_entry_point(self):
        """Test the console script entry point runs the command."""
        with patch('sys.argv', ['gh2bb', '--version']):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0

    @patch('gh2bb.cli.main.MirrorMigration')
    def test_missing_dest_url(self, mock_migration):
        """Test --dest-url is required."""
        result = self.runner.invoke(cli, [])

        assert result.exit_code == 2
        assert '--dest-url' in result.output
        mock_migration.assert_not_called()

    @patch('gh2bb.cli.main.MirrorMigration')
    @patch('gh2bb.cli.main._load_config')
    def test_missing_prefix(self, mock_load_config, mock_migration):
        """Test a missing prefix aborts before the migration."""
        mock_load_config.side_effect = ConfigurationError(
            'GH_PREFIX must be set in .env or environment'
        )

        result = self.runner.invoke(cli, ['--dest-url', DEST_URL])

        assert result.exit_code == 1
        assert 'Configuration error' in result.output
        mock_migration.assert_not_called()

    @patch('gh2bb.git.runner.subprocess.run')
    @patch('gh2bb.cli.main._load_config')
    def test_dry_run(self, mock_load_config, mock_run):
        """Test dry run completes without running git."""
        mock_load_config.return_value = Config(prefix='myorg')

        result = self.runner.invoke(cli, ['--dest-url', DEST_URL, '--dry-run'])

        assert result.exit_code == 0
        assert 'dry-run mode' in result.output
        assert 'Dry run completed' in result.output
        assert 'Migration Summary' in result.output
        mock_run.assert_not_called()

    @patch('gh2bb.git.runner.subprocess.run')
    @patch('gh2bb.cli.main._load_config')
    def test_migration_success(self, mock_load_config, mock_run):
        """Test successful migrate command."""
        mock_load_config.return_value = Config(prefix='myorg')

        result = self.runner.invoke(cli, ['--dest-url', DEST_URL])

        assert result.exit_code == 0
        assert 'Migration completed' in result.output
        assert mock_run.call_count == 3

    @patch('gh2bb.git.runner.subprocess.run')
    @patch('gh2bb.cli.main._load_config')
    def test_non_ssh_destination(self, mock_load_config, mock_run):
        """Test an https destination exits non-zero without running git."""
        mock_load_config.return_value = Config(prefix='myorg')

        result = self.runner.invoke(
            cli, ['--dest-url', 'https://bitbucket.org/myteam/widgets.git']
        )

        assert result.exit_code == 1
        assert 'Migration failed' in result.output
        mock_run.assert_not_called()

    @patch('gh2bb.cli.main._load_config')
    def test_source_host_override(self, mock_load_config):
        """Test --source-host replaces the configured host."""
        mock_load_config.return_value = Config(prefix='myorg')

        with patch('gh2bb.cli.main.MirrorMigration') as mock_migration:
            mock_migration.return_value.migrate.side_effect = RuntimeError('stop')
            self.runner.invoke(
                cli,
                ['--dest-url', DEST_URL, '--source-host', 'github.example.com'],
            )

        config = mock_migration.call_args.args[0]
        assert config.source_host == 'github.example.com'
        assert config.prefix == 'myorg'

    @patch('gh2bb.cli.main.console.print_exception')
    @patch('gh2bb.cli.main._load_config')
    def test_error_handling_with_verbose(self, mock_load_config, mock_print_exception):
        """Test traceback is printed with the verbose flag."""
        mock_load_config.return_value = Config(prefix='myorg')

        with patch('gh2bb.cli.main.MirrorMigration') as mock_migration:
            mock_migration.return_value.migrate.side_effect = RuntimeError('boom')
            result = self.runner.invoke(cli, ['--verbose', '--dest-url', DEST_URL])

        assert result.exit_code == 1
        mock_print_exception.assert_called_once()


class TestConfigLoading:
    """Test configuration loading functions."""

    @patch('gh2bb.config.config.Config.from_file')
    def test_load_config_with_file(self, mock_from_file):
        """Test loading config from specified file."""
        mock_config = Mock(spec=Config)
        mock_from_file.return_value = mock_config

        config = _load_config('/path/to/gh2bb.yaml')

        assert config == mock_config
        mock_from_file.assert_called_once_with('/path/to/gh2bb.yaml')

    def test_load_config_default_location(self, tmp_path, monkeypatch):
        """Test loading config from the working directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / 'gh2bb.yaml').write_text('prefix: fromfile\n')

        assert _load_config(None).prefix == 'fromfile'

    def test_load_config_from_env(self, tmp_path, monkeypatch):
        """Test falling back to environment variables."""
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {'GH_PREFIX': 'fromenv'}):
            assert _load_config(None).prefix == 'fromenv'

    def test_load_config_not_found(self, tmp_path, monkeypatch):
        """Test missing prefix everywhere is a configuration error."""
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ):
            os.environ.pop('GH_PREFIX', None)
            with pytest.raises(ConfigurationError):
                _load_config(None)

    def test_cli_with_config_file(self, tmp_path):
        """Test --config is read before the migration runs."""
        config_file = tmp_path / 'custom.yaml'
        config_file.write_text('prefix: myorg\n')

        result = CliRunner().invoke(
            cli, ['--config', str(config_file), '--dest-url', DEST_URL, '--dry-run']
        )

        assert result.exit_code == 0
        assert 'Dry run completed' in result.output

    @pytest.mark.parametrize(
        'content, message',
        [
            ('invalid: yaml: content:', 'Invalid YAML'),
            ('- a\n- b\n', 'must contain a mapping'),
        ],
    )
    def test_cli_with_broken_config_file(
        self, tmp_path, monkeypatch, content, message
    ):
        """Test an unreadable config file is reported, not raised."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / 'gh2bb.yaml').write_text(content)

        with patch('gh2bb.cli.main.MirrorMigration') as mock_migration:
            result = CliRunner().invoke(
                cli,
                ['--config', 'gh2bb.yaml', '--dest-url', DEST_URL, '--dry-run'],
            )

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert 'Configuration error' in result.output
        assert message in result.output
        mock_migration.assert_not_called()
