"""
Tests for the command-line interface and schema export.
"""

import json

import pytest

from ..cli import main
from ..api.schema_export import EXPORTED_MODELS, export_schemas


@pytest.fixture
def store_args(tmp_path):
    return ["--store", str(tmp_path / "games.json")]


class TestCLI:

    def test_start_and_list(self, store_args, capsys):
        main(store_args + ["start", "creator", "an_opponent", "scissors"])
        main(store_args + ["start", "user", "an_opponent", "rock"])
        capsys.readouterr()

        main(store_args + ["games", "--host", "creator"])
        out = capsys.readouterr().out

        assert "an_opponent" in out
        assert "Scissors" in out
        assert "user" not in out

    def test_duplicate_game_exits(self, store_args, capsys):
        main(store_args + ["start", "creator", "an_opponent", "rock"])

        with pytest.raises(SystemExit) as exc_info:
            main(store_args + ["start", "creator", "an_opponent", "paper"])

        assert exc_info.value.code == 1
        assert "GAME_IN_PROGRESS" in capsys.readouterr().out

    def test_move_resolves(self, store_args, capsys):
        main(store_args + ["start", "creator", "an_opponent", "rock"])
        main(store_args + ["move", "creator", "an_opponent", "paper"])

        assert "Result: OpponentWins" in capsys.readouterr().out

    def test_start_rejects_malformed_host(self, store_args, capsys):
        """The caller's own identifier is checked before anything is stored."""
        with pytest.raises(SystemExit) as exc_info:
            main(store_args + ["start", "Alice Smith", "bob", "rock"])

        assert exc_info.value.code == 1
        assert "INVALID_IDENTIFIER" in capsys.readouterr().out

        main(store_args + ["games"])
        assert "No games" in capsys.readouterr().out

    def test_move_rejects_malformed_opponent(self, store_args, capsys):
        main(store_args + ["start", "creator", "an_opponent", "rock"])
        capsys.readouterr()

        with pytest.raises(SystemExit) as exc_info:
            main(store_args + ["move", "creator", "An Opponent", "paper"])

        assert exc_info.value.code == 1
        assert "INVALID_IDENTIFIER" in capsys.readouterr().out

        main(store_args + ["games"])
        assert "Started" in capsys.readouterr().out

    def test_corrupted_store_exits(self, tmp_path, capsys):
        path = tmp_path / "games.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["--store", str(path), "games"])

        assert exc_info.value.code == 1
        assert "corrupted" in capsys.readouterr().out

    def test_unknown_move_exits(self, store_args):
        with pytest.raises(SystemExit) as exc_info:
            main(store_args + ["start", "creator", "an_opponent", "lizard"])
        assert exc_info.value.code == 1

    def test_no_games(self, store_args, capsys):
        main(store_args + ["games"])
        assert "No games" in capsys.readouterr().out

    def test_init(self, store_args, capsys):
        main(store_args + ["init", "--owner", "creator"])
        assert "instantiate: owner=creator" in capsys.readouterr().out

    def test_no_command_exits(self, store_args):
        with pytest.raises(SystemExit):
            main(store_args)


class TestSchemaExport:

    def test_writes_one_file_per_model(self, tmp_path):
        paths = export_schemas(tmp_path / "schema")

        assert len(paths) == len(EXPORTED_MODELS)
        names = {p.name for p in paths}
        assert "start_game_request.json" in names
        assert "games_response.json" in names

    def test_schema_contents(self, tmp_path):
        export_schemas(tmp_path)

        with open(tmp_path / "start_game_request.json", encoding="utf-8") as f:
            schema = json.load(f)

        assert schema["title"] == "StartGameRequest"
        assert set(schema["required"]) == {"opponent_id", "first_move"}

    def test_removes_stale_schemas(self, tmp_path):
        (tmp_path / "old_model.json").write_text("{}", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("keep", encoding="utf-8")

        paths = export_schemas(tmp_path)

        assert not (tmp_path / "old_model.json").exists()
        assert (tmp_path / "notes.txt").exists()
        assert sorted(tmp_path.glob("*.json")) == sorted(paths)

    def test_cli_schema_command(self, tmp_path, capsys):
        main(["schema", "--out-dir", str(tmp_path / "out")])
        assert (tmp_path / "out" / "error_response.json").exists()
