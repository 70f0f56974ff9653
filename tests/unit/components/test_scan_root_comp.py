"""
Unit tests for nozombie.components.discovery.scan_root_comp module.
"""

import pytest

from nozombie.components.discovery.scan_root_comp import (
    describe_root_choice,
    load_base_url,
    resolve_base_url,
    resolve_scan_root,
)
from nozombie.helpers.dto.config_dto import RunConfig
from nozombie.helpers.exceptions import ConfigError


class TestResolveScanRoot:
    """Tests for resolve_scan_root function."""

    @pytest.mark.unit
    def test_defaults_to_cwd(self) -> None:
        assert resolve_scan_root(RunConfig(), "/work") == "/work"

    @pytest.mark.unit
    def test_explicit_path_used_verbatim(self) -> None:
        assert resolve_scan_root(RunConfig(path="./app/src/"), "/work") == "./app/src/"

    @pytest.mark.unit
    def test_absolute_imports_appends_base_url(self) -> None:
        config = RunConfig(absolute_imports=True, base_url="src")
        assert resolve_scan_root(config, "/work") == "/work/src"

    @pytest.mark.unit
    def test_explicit_path_wins_over_absolute_imports(self) -> None:
        config = RunConfig(path="lib", absolute_imports=True, base_url="src")
        assert resolve_scan_root(config, "/work") == "lib"

    @pytest.mark.unit
    def test_absolute_imports_reads_tsconfig(self, tmp_path, write_file) -> None:
        write_file("tsconfig.json", '{\n  // paths\n  "compilerOptions": { "baseUrl": "app", },\n}\n')
        config = RunConfig(absolute_imports=True)
        assert resolve_scan_root(config, str(tmp_path)) == f"{tmp_path}/app"


class TestLoadBaseUrl:
    """Tests for load_base_url and resolve_base_url."""

    @pytest.mark.unit
    def test_none_without_config_files(self, tmp_path) -> None:
        assert load_base_url(str(tmp_path)) is None

    @pytest.mark.unit
    def test_falls_back_to_jsconfig(self, tmp_path, write_file) -> None:
        write_file("tsconfig.json", '{"compilerOptions": {"strict": true}}')
        write_file("jsconfig.json", '{"compilerOptions": {"baseUrl": "js-src"}}')
        assert load_base_url(str(tmp_path)) == "js-src"

    @pytest.mark.unit
    def test_tsconfig_takes_precedence(self, tmp_path, write_file) -> None:
        write_file("tsconfig.json", '{"compilerOptions": {"baseUrl": "ts-src"}}')
        write_file("jsconfig.json", '{"compilerOptions": {"baseUrl": "js-src"}}')
        assert load_base_url(str(tmp_path)) == "ts-src"

    @pytest.mark.unit
    def test_malformed_config_raises(self, tmp_path, write_file) -> None:
        write_file("tsconfig.json", "{ compilerOptions: ")
        with pytest.raises(ConfigError, match="tsconfig.json"):
            load_base_url(str(tmp_path))

    @pytest.mark.unit
    def test_missing_base_url_raises(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="needs a base URL"):
            resolve_base_url(RunConfig(absolute_imports=True), str(tmp_path))

    @pytest.mark.unit
    def test_configured_base_url_skips_files(self, tmp_path, write_file) -> None:
        write_file("tsconfig.json", "not json")
        assert resolve_base_url(RunConfig(base_url="src"), str(tmp_path)) == "src"


class TestDescribeRootChoice:
    """Tests for describe_root_choice function."""

    @pytest.mark.unit
    def test_silent_without_absolute_imports(self) -> None:
        assert describe_root_choice(RunConfig(path="src"), "/work") is None

    @pytest.mark.unit
    def test_conflict_message(self) -> None:
        message = describe_root_choice(RunConfig(path="lib", absolute_imports=True), "/work")
        assert message == "--absolute-imports AND --path conflict.\t Will use path: 'lib' instead of absolute imports"

    @pytest.mark.unit
    def test_base_url_message(self) -> None:
        message = describe_root_choice(RunConfig(absolute_imports=True, base_url="src"), "/work")
        assert message == "--absolute-imports. \tWill use baseUrl: 'src'"
