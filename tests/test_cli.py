"""Tests for the command line interface."""

import io
import json

import pytest
import yaml
from pathlib import Path
from rich.console import Console

from termboard.__main__ import main, parse_args
from termboard.cli import commands
from termboard.cli.init import CONFIG_FILE, generate_config_yaml, run_init
from termboard.models import TermboardConfig
from termboard.repositories import JsonBoardRepository
from termboard.services import BoardService


@pytest.fixture
def board_file(tmp_path: Path) -> Path:
    return tmp_path / "kanban_board.json"


@pytest.fixture
def board_service(board_file: Path) -> BoardService:
    return BoardService(JsonBoardRepository(board_file))


def stored_tasks(board_file: Path) -> list[dict]:
    return json.loads(board_file.read_text())["tasks"]


class TestGenerateConfigYaml:
    """Tests for generate_config_yaml function."""

    def test_generates_valid_yaml(self):
        """Generated YAML is parseable and matches the defaults."""
        parsed = yaml.safe_load(generate_config_yaml())
        default = TermboardConfig.default()

        assert parsed["version"] == default.version
        assert parsed["board_file"] == "kanban_board.json"
        assert parsed["csv_file"] == ".kanban.csv"
        assert [c["name"] for c in parsed["board"]["columns"]] == default.board.column_names

    def test_unset_titles_omitted(self):
        parsed = yaml.safe_load(generate_config_yaml())
        for col in parsed["board"]["columns"]:
            assert "title" not in col

    def test_includes_header_comments(self):
        content = generate_config_yaml()
        assert "# termboard Board Configuration" in content
        assert "# Column constraints:" in content

    def test_generated_yaml_loads_as_config(self):
        config = TermboardConfig(**yaml.safe_load(generate_config_yaml()))
        assert config == TermboardConfig.default()


class TestRunInit:
    """Tests for run_init."""

    def test_creates_config(self, tmp_path: Path, capsys):
        assert run_init(tmp_path) == 0
        assert (tmp_path / CONFIG_FILE).exists()
        assert "Generated config" in capsys.readouterr().out

    def test_existing_config_untouched(self, tmp_path: Path, capsys):
        config_path = tmp_path / CONFIG_FILE
        config_path.write_text("version: 1\n")

        assert run_init(tmp_path) == 1

        assert config_path.read_text() == "version: 1\n"
        assert "Nothing to generate" in capsys.readouterr().out


class TestRunAdd:
    """Tests for the add command."""

    def test_add_to_first_column(self, board_service: BoardService, board_file: Path, capsys):
        code = commands.run_add(board_service, "Write spec", tags=["doc"])

        assert code == 0
        [record] = stored_tasks(board_file)
        assert record["title"] == "Write spec"
        assert record["status"] == "Todo"
        assert record["tags"] == ["doc"]
        assert "Added" in capsys.readouterr().out

    def test_add_with_status(self, board_service: BoardService, board_file: Path):
        assert commands.run_add(board_service, "Ship it", status="Done") == 0
        assert stored_tasks(board_file)[0]["status"] == "Done"

    def test_add_unknown_status(self, board_service: BoardService, board_file: Path, capsys):
        assert commands.run_add(board_service, "Lost", status="Someday") == 1
        assert not board_file.exists()
        assert "Unknown status" in capsys.readouterr().out

    def test_add_with_due_date(self, board_service: BoardService, board_file: Path):
        commands.run_add(board_service, "Due", due="2026-11-01")
        [record] = stored_tasks(board_file)
        assert record["due_date"] == 1793491200

    def test_add_with_bad_due_date_warns(
        self, board_service: BoardService, board_file: Path, capsys
    ):
        assert commands.run_add(board_service, "Due", due="tomorrow") == 0
        assert stored_tasks(board_file)[0]["due_date"] is None
        assert "without a due date" in capsys.readouterr().out

    def test_add_refuses_corrupt_board(
        self, board_service: BoardService, board_file: Path, capsys
    ):
        board_file.write_text("{broken")

        assert commands.run_add(board_service, "New") == 1

        assert board_file.read_text() == "{broken"
        assert "failed to load" in capsys.readouterr().out

    def test_add_appends(self, board_service: BoardService, board_file: Path):
        commands.run_add(board_service, "First")
        commands.run_add(board_service, "Second")
        assert [r["title"] for r in stored_tasks(board_file)] == ["First", "Second"]


class TestReadCommands:
    """Tests for show, list, tags and stats."""

    @pytest.fixture(autouse=True)
    def populated(self, board_service: BoardService):
        commands.run_add(board_service, "Write spec", tags=["doc", "core"])
        commands.run_add(board_service, "Fix bug", tags=["bug"], status="Doing")

    def test_show(self, board_service: BoardService):
        out = io.StringIO()
        console = Console(file=out, width=120, color_system=None)

        assert commands.run_show(board_service, console=console) == 0

        text = out.getvalue()
        assert "Todo (1)" in text
        assert "Doing (1)" in text
        assert "Done (0)" in text
        assert "Write spec" in text

    def test_list(self, board_service: BoardService, capsys):
        capsys.readouterr()
        assert commands.run_list(board_service) == 0

        out = capsys.readouterr().out
        assert "Todo:" in out
        assert "Write spec (doc, core)" in out
        assert "Fix bug (bug)" in out

    def test_tags(self, board_service: BoardService, capsys):
        capsys.readouterr()
        commands.run_tags(board_service)
        assert "Tags: doc, core, bug" in capsys.readouterr().out

    def test_stats(self, board_service: BoardService, capsys):
        capsys.readouterr()
        commands.run_stats(board_service)

        out = capsys.readouterr().out
        assert "Todo: 1" in out
        assert "Doing: 1" in out
        assert "Done: 0" in out
        assert "Total: 2" in out


class TestCsvCommands:
    """Tests for export and import."""

    def test_export_then_import_replaces_board(
        self, board_service: BoardService, board_file: Path, tmp_path: Path, capsys
    ):
        commands.run_add(board_service, "Keep", description="Keep")
        csv_path = tmp_path / "out.csv"

        assert commands.run_export(board_service, csv_path) == 0
        commands.run_add(board_service, "Dropped")
        assert commands.run_import(board_service, csv_path) == 0

        records = stored_tasks(board_file)
        assert [r["title"] for r in records] == ["Keep"]
        assert "Imported 1 tasks" in capsys.readouterr().out

    def test_import_missing_file(self, board_service: BoardService, tmp_path: Path, capsys):
        assert commands.run_import(board_service, tmp_path / "missing.csv") == 1
        assert "Cannot read" in capsys.readouterr().out

    def test_import_undecodable_file(self, board_service: BoardService, tmp_path: Path, capsys):
        path = tmp_path / "bad.csv"
        path.write_bytes(b"\xff\xfe")

        assert commands.run_import(board_service, path) == 1
        assert "Invalid CSV" in capsys.readouterr().out

    def test_tags_empty_board(self, board_service: BoardService, capsys):
        commands.run_tags(board_service)
        assert "No tags" in capsys.readouterr().out


class TestMain:
    """Tests for argument parsing and dispatch."""

    def test_parse_add_arguments(self):
        args = parse_args(["add", "Title", "-t", "a", "-t", "b", "--due", "2026-01-02"])
        assert args.command == "add"
        assert args.title == "Title"
        assert args.tags == ["a", "b"]
        assert args.due == "2026-01-02"

    def test_no_command(self):
        assert parse_args([]).command is None

    def test_init_exits_with_code(self, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--project-root", str(tmp_path), "init"])
        assert exc_info.value.code == 0
        assert (tmp_path / CONFIG_FILE).exists()

    def test_add_uses_configured_board_file(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).write_text("board_file: data/board.json\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["--project-root", str(tmp_path), "add", "From CLI"])

        assert exc_info.value.code == 0
        assert stored_tasks(tmp_path / "data" / "board.json")[0]["title"] == "From CLI"

    def test_board_file_flag_overrides_config(self, tmp_path: Path):
        target = tmp_path / "custom.json"

        with pytest.raises(SystemExit):
            main(["--project-root", str(tmp_path), "--board-file", str(target), "add", "X"])

        assert target.exists()
        assert not (tmp_path / "kanban_board.json").exists()

    def test_export_defaults_to_configured_csv(self, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--project-root", str(tmp_path), "export"])
        assert exc_info.value.code == 0
        assert (tmp_path / ".kanban.csv").exists()
