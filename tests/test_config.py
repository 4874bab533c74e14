"""Tests for gwf.config and gwf.paths modules."""

from pathlib import Path

from gwf.config import PostCommitConfig, find_config_file, load_post_commit_config
from gwf.paths import get_global_config_file, get_gwf_dir, get_repo_config_file


class TestPaths:
    """Tests for path helpers."""

    def test_gwf_dir_in_home(self):
        """Test that the default gwf directory is ~/.gwf."""
        result = get_gwf_dir()
        assert isinstance(result, Path)
        assert result.name == ".gwf"

    def test_gwf_dir_can_be_patched(self, gwf_dir):
        """Test that the module-level directory is used."""
        assert get_gwf_dir() == gwf_dir
        assert get_global_config_file() == gwf_dir / "gwf.toml"

    def test_explicit_gwf_dir(self, temp_dir):
        """Test overriding the gwf directory per call."""
        assert get_global_config_file(temp_dir) == temp_dir / "gwf.toml"

    def test_repo_config_file(self, temp_dir):
        """Test repository config location."""
        assert get_repo_config_file(temp_dir) == temp_dir / "gwf.toml"


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_none_when_absent(self, temp_dir):
        """Test that no file yields None."""
        assert find_config_file(temp_dir / "repo", temp_dir / ".gwf") is None

    def test_global_used_when_repo_missing(self, temp_dir):
        """Test fallback to the user-level file."""
        gwf_dir = temp_dir / ".gwf"
        gwf_dir.mkdir()
        (gwf_dir / "gwf.toml").write_text('post_commit_command = "true"\n')

        assert find_config_file(temp_dir, gwf_dir) == gwf_dir / "gwf.toml"

    def test_repo_file_takes_precedence(self, temp_dir):
        """Test that the repository file wins."""
        repo = temp_dir / "repo"
        repo.mkdir()
        (repo / "gwf.toml").write_text('post_commit_command = "repo"\n')
        gwf_dir = temp_dir / ".gwf"
        gwf_dir.mkdir()
        (gwf_dir / "gwf.toml").write_text('post_commit_command = "global"\n')

        assert find_config_file(repo, gwf_dir) == repo / "gwf.toml"


class TestLoadPostCommitConfig:
    """Tests for load_post_commit_config function."""

    def test_returns_none_without_config(self, temp_dir):
        """Test that absent config is not an error."""
        assert load_post_commit_config(temp_dir, temp_dir / ".gwf") is None

    def test_loads_repo_config(self, temp_dir):
        """Test loading the repository config."""
        (temp_dir / "gwf.toml").write_text('post_commit_command = "git push"\n')

        config = load_post_commit_config(temp_dir, temp_dir / ".gwf")

        assert config == PostCommitConfig(post_commit_command="git push")
        assert config.post_commit_timeout is None

    def test_repo_config_overrides_global(self, temp_dir):
        """Test precedence when both files exist."""
        repo = temp_dir / "repo"
        repo.mkdir()
        (repo / "gwf.toml").write_text('post_commit_command = "repo"\n')
        gwf_dir = temp_dir / ".gwf"
        gwf_dir.mkdir()
        (gwf_dir / "gwf.toml").write_text('post_commit_command = "global"\n')

        config = load_post_commit_config(repo, gwf_dir)

        assert config.post_commit_command == "repo"

    def test_loads_global_config(self, temp_dir, gwf_dir):
        """Test that the patched ~/.gwf is used by default."""
        gwf_dir.mkdir(parents=True)
        (gwf_dir / "gwf.toml").write_text('post_commit_command = "global"\n')

        config = load_post_commit_config(temp_dir)

        assert config.post_commit_command == "global"

    def test_reads_timeout(self, temp_dir):
        """Test the optional timeout setting."""
        (temp_dir / "gwf.toml").write_text(
            'post_commit_command = "make deploy"\npost_commit_timeout = 30\n'
        )

        config = load_post_commit_config(temp_dir, temp_dir / ".gwf")

        assert config.post_commit_timeout == 30.0

    def test_ignores_unknown_keys(self, temp_dir):
        """Test that extra keys do not invalidate the config."""
        (temp_dir / "gwf.toml").write_text('post_commit_command = "x"\ncolor = true\n')

        assert load_post_commit_config(temp_dir, temp_dir / ".gwf").post_commit_command == "x"

    def test_invalid_toml_returns_none(self, temp_dir):
        """Test that a syntax error is swallowed."""
        (temp_dir / "gwf.toml").write_text("post_commit_command = \n[[[")

        assert load_post_commit_config(temp_dir, temp_dir / ".gwf") is None

    def test_missing_key_returns_none(self, temp_dir):
        """Test that a document without the command is ignored."""
        (temp_dir / "gwf.toml").write_text('other = "value"\n')

        assert load_post_commit_config(temp_dir, temp_dir / ".gwf") is None

    def test_wrong_type_returns_none(self, temp_dir):
        """Test that a non-string command is ignored."""
        (temp_dir / "gwf.toml").write_text("post_commit_command = [1, 2]\n")

        assert load_post_commit_config(temp_dir, temp_dir / ".gwf") is None

    def test_broken_repo_config_does_not_fall_back(self, temp_dir):
        """Test that an invalid repo file hides the global one."""
        repo = temp_dir / "repo"
        repo.mkdir()
        (repo / "gwf.toml").write_text("not toml at all = = =")
        gwf_dir = temp_dir / ".gwf"
        gwf_dir.mkdir()
        (gwf_dir / "gwf.toml").write_text('post_commit_command = "global"\n')

        assert load_post_commit_config(repo, gwf_dir) is None

    def test_invalid_utf8_returns_none(self, temp_dir):
        """Test that a file that is not UTF-8 is ignored."""
        (temp_dir / "gwf.toml").write_bytes(b'post_commit_command = "\xff"\n')

        assert load_post_commit_config(temp_dir, temp_dir / ".gwf") is None

    def test_unreadable_file_returns_none(self, temp_dir):
        """Test that a config path that cannot be opened is ignored."""
        (temp_dir / "gwf.toml").mkdir()

        assert load_post_commit_config(temp_dir, temp_dir / ".gwf") is None
