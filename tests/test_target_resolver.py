"""
Tests for target resolution — explicit path, selection, workspace root.
"""

from pathlib import Path

from jsongen.core.context import Workspace
from jsongen.core.models.outcome import ResolutionFailure
from jsongen.core.models.target import TargetResolution
from jsongen.core.services.target_resolver import TargetResolver
from tests.conftest import make_tree


class TestResolutionOrder:
    def test_explicit_path_wins(self, tmp_path: Path):
        files = make_tree(tmp_path, {"lib/a.dart": "", "lib/b.dart": ""})
        ws = Workspace(selection=files["lib/b.dart"], roots=(tmp_path,))
        result = TargetResolver(ws).resolve(files["lib/a.dart"], "file")
        assert isinstance(result, TargetResolution)
        assert result.target_path == str(files["lib/a.dart"])
        assert result.is_file

    def test_selection_file_mode(self, tmp_path: Path):
        files = make_tree(tmp_path, {"lib/a.dart": ""})
        ws = Workspace(selection=files["lib/a.dart"], roots=(tmp_path,))
        result = TargetResolver(ws).resolve(None, "file")
        assert result.target_path == str(files["lib/a.dart"])

    def test_selection_folder_mode_uses_directory(self, tmp_path: Path):
        files = make_tree(tmp_path, {"lib/a.dart": ""})
        ws = Workspace(selection=files["lib/a.dart"], roots=(tmp_path,))
        result = TargetResolver(ws).resolve(None, "folder")
        assert result.target_path == str(tmp_path / "lib")
        assert not result.is_file

    def test_first_workspace_root(self, tmp_path: Path):
        other = tmp_path / "other"
        other.mkdir()
        ws = Workspace(roots=(tmp_path, other))
        result = TargetResolver(ws).resolve(None, "folder")
        assert result.target_path == str(tmp_path)

    def test_no_target(self):
        result = TargetResolver(Workspace()).resolve(None, "folder")
        assert isinstance(result, ResolutionFailure)
        assert result.kind == "no_target"

    def test_relative_explicit_path_made_absolute(self, tmp_path: Path, monkeypatch):
        make_tree(tmp_path, {"lib/a.dart": ""})
        monkeypatch.chdir(tmp_path)
        result = TargetResolver(Workspace()).resolve("lib/a.dart", "file")
        assert result.target_path == str(tmp_path / "lib" / "a.dart")


class TestValidation:
    def test_path_not_found(self, tmp_path: Path):
        result = TargetResolver(Workspace()).resolve(tmp_path / "missing", "folder")
        assert isinstance(result, ResolutionFailure)
        assert result.kind == "path_not_found"
        assert str(tmp_path / "missing") in result.message

    def test_wrong_file_type_in_file_mode(self, tmp_path: Path):
        files = make_tree(tmp_path, {"notes.txt": ""})
        result = TargetResolver(Workspace()).resolve(files["notes.txt"], "file")
        assert isinstance(result, ResolutionFailure)
        assert result.kind == "wrong_file_type"
        assert result.message == "Please select a .dart file"

    def test_folder_mode_accepts_any_file(self, tmp_path: Path):
        files = make_tree(tmp_path, {"notes.txt": ""})
        result = TargetResolver(Workspace()).resolve(files["notes.txt"], "folder")
        assert isinstance(result, TargetResolution)
        assert result.is_file

    def test_file_mode_accepts_directory(self, tmp_path: Path):
        result = TargetResolver(Workspace()).resolve(tmp_path, "file")
        assert isinstance(result, TargetResolution)
        assert not result.is_file


class TestInputInfo:
    def test_file_in_file_mode(self, tmp_path: Path):
        target = TargetResolution(target_path=str(tmp_path / "a.dart"), is_file=True)
        info = target.input_info("file")
        assert info.input_path == str(tmp_path / "a.dart")
        assert info.display_name == "a.dart"

    def test_file_in_folder_mode_uses_parent(self, tmp_path: Path):
        target = TargetResolution(target_path=str(tmp_path / "models" / "a.dart"), is_file=True)
        info = target.input_info("folder")
        assert info.input_path == str(tmp_path / "models")
        assert info.display_name == "models"

    def test_directory_in_file_mode_is_used_as_directory(self, tmp_path: Path):
        target = TargetResolution(target_path=str(tmp_path / "models"), is_file=False)
        info = target.input_info("file")
        assert info.input_path == str(tmp_path / "models")
        assert info.display_name == "models"

    def test_directory_in_folder_mode(self, tmp_path: Path):
        target = TargetResolution(target_path=str(tmp_path), is_file=False)
        assert target.input_info("folder").display_name == tmp_path.name
