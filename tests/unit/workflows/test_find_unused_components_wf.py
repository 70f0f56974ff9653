"""
Unit tests for find_unused_components_workflow.

Tests verify:
1. Scenario: Bar renders Foo -> Foo used, Bar unused
2. Spinner is started and stopped around the scan, even on failure
3. Count lines are logged in order
"""

import errno

import pytest

from nozombie.components.infrastructure.filesystem_comp import LocalFileSystem
from nozombie.helpers.dto.config_dto import RunConfig
from nozombie.helpers.exceptions import ConfigError, FilesystemReadError
from nozombie.workflows.find_unused_components_wf import SEARCH_MESSAGE, find_unused_components_workflow


class TestFindUnusedComponents:
    """Discovery plus usage classification over a real tree."""

    @pytest.mark.unit
    def test_reports_unused_components(self, react_project, progress) -> None:
        config = RunConfig(path=str(react_project / "src"))

        report = find_unused_components_workflow(config, LocalFileSystem(), progress, str(react_project))

        assert [c.name for c in report.components] == ["Bar", "Foo"]
        assert [c.name for c in report.unused] == ["Bar"]
        assert [c.name for c in report.used] == ["Foo"]

    @pytest.mark.unit
    def test_progress_events(self, react_project, progress) -> None:
        config = RunConfig(ignore_node_modules=True)

        find_unused_components_workflow(config, LocalFileSystem(), progress, str(react_project))

        assert progress.events == [
            ("start", SEARCH_MESSAGE),
            ("log", "2 components found!"),
            ("stop", ""),
            ("log", "1 unused components found!"),
        ]

    @pytest.mark.unit
    def test_absolute_imports_scan_from_base_url(self, react_project, write_file, progress) -> None:
        write_file("tsconfig.json", '{"compilerOptions": {"baseUrl": "src"}}')
        config = RunConfig(absolute_imports=True)

        report = find_unused_components_workflow(config, LocalFileSystem(), progress, str(react_project))

        assert {c.name for c in report.components} == {"Foo", "Bar"}
        assert all(c.path.startswith(f"{react_project}/src") for c in report.components)


class TestFindUnusedFailures:
    """Failure propagation."""

    @pytest.mark.unit
    def test_read_error_stops_spinner_and_propagates(self, fake_fs, progress) -> None:
        fs = fake_fs({"/p/A.tsx": "x"}, fail_on={"/p": PermissionError(errno.EACCES, "Permission denied")})

        with pytest.raises(FilesystemReadError):
            find_unused_components_workflow(RunConfig(), fs, progress, "/p")

        assert progress.events == [("start", SEARCH_MESSAGE), ("stop", "")]

    @pytest.mark.unit
    def test_missing_base_url_fails_before_spinner(self, tmp_path, progress, fake_fs) -> None:
        with pytest.raises(ConfigError):
            find_unused_components_workflow(RunConfig(absolute_imports=True), fake_fs({}), progress, str(tmp_path))

        assert progress.events == []
