"""Test the command-line entry points."""

import json

import pytest

from fillwords import check
from fillwords.engine import GridResult, Placement, PuzzleConfig
from fillwords.main import load_config, main, save_puzzle
from fillwords.utils.grid_visualizer import render_grid


class TestLoadConfig:
    """YAML configuration loading."""

    def test_missing_file(self, tmp_path):
        """A missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_load_yaml(self, tmp_path):
        """Fields are read into a PuzzleConfig."""
        path = tmp_path / "config.yaml"
        path.write_text("lang: ru\nlevel: medium\nseed: 7\nwords:\n  - кот\n  - собака\n", encoding="utf-8")
        config = load_config(str(path))
        assert config.lang == "ru"
        assert config.seed == 7
        assert config.words == ["кот", "собака"]
        assert config.effective_grid_size == 14

    def test_empty_yaml(self, tmp_path):
        """An empty file gives the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)) == PuzzleConfig()


class TestGenerateCommand:
    """python -m fillwords.main"""

    def test_generate_and_save(self, tmp_path, capsys):
        """Words on the command line produce a saved puzzle."""
        output = tmp_path / "puzzles" / "p1.json"
        code = main(["--words", "cat,dog,bird", "--size", "8", "--seed", "1", "--output", str(output)])
        assert code == 0
        assert output.exists()

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["config"]["grid_size"] == 8
        puzzle = GridResult.model_validate(data)
        assert puzzle.size == 8
        assert set(puzzle.target_words) <= {"cat", "dog", "bird"}

        out = capsys.readouterr().out
        assert "Words to find" in out

    def test_words_file(self, tmp_path, capsys):
        """A words file is filtered by level before placement."""
        words_file = tmp_path / "words.txt"
        words_file.write_text("cat\ndog\nowl\nelephant\nx1\n", encoding="utf-8")
        code = main(["--words-file", str(words_file), "--level", "easy", "--seed", "3"])
        assert code == 0
        out = capsys.readouterr().out
        assert "elephant" not in out

    def test_config_file(self, tmp_path, capsys):
        """Settings are read from a YAML config and the grid is printed."""
        path = tmp_path / "config.yaml"
        path.write_text("grid_size: 6\nwords: [sun, moon]\n", encoding="utf-8")
        code = main([str(path), "--reveal"])
        assert code == 0
        out = capsys.readouterr().out
        for line in out.splitlines()[:6]:
            assert sum(ch.isalpha() for ch in line) == 6

    def test_duplicate_words_placed_once(self, tmp_path, capsys):
        """Repeated explicit words are placed once and reported on stderr."""
        output = tmp_path / "p.json"
        code = main(["--words", "cat,CAT,dog,cat", "--size", "8", "--seed", "2", "--output", str(output)])
        assert code == 0
        puzzle = GridResult.model_validate(json.loads(output.read_text(encoding="utf-8")))
        assert sorted(puzzle.target_words + puzzle.skipped) == ["cat", "dog"]
        assert "2 duplicate word(s)" in capsys.readouterr().err

    def test_extra_words_dropped_with_warning(self, tmp_path, capsys):
        """Words beyond the word count are dropped with a warning."""
        output = tmp_path / "p.json"
        code = main(["--words", "cat,dog,owl", "--count", "2", "--size", "8", "--output", str(output)])
        assert code == 0
        puzzle = GridResult.model_validate(json.loads(output.read_text(encoding="utf-8")))
        assert sorted(puzzle.target_words + puzzle.skipped) == ["cat", "dog"]
        assert "dropped: owl" in capsys.readouterr().err

    def test_no_words(self, capsys):
        """Without any words the command fails."""
        assert main([]) == 1
        assert "no usable words" in capsys.readouterr().err

    def test_bad_config(self, tmp_path, capsys):
        """An unreadable config fails with a message."""
        assert main([str(tmp_path / "missing.yaml")]) == 1
        assert "Error loading config" in capsys.readouterr().err


class TestCheckCommand:
    """python -m fillwords.check"""

    @pytest.fixture
    def puzzle_path(self, tmp_path):
        result = GridResult(
            grid=[["c", "a", "t"], ["x", "x", "x"], ["x", "x", "x"]],
            placements=[
                Placement(word="cat", row=0, col=0, direction="right", dr=0, dc=1,
                          cells=[(0, 0), (0, 1), (0, 2)]),
            ],
        )
        path = tmp_path / "puzzle.json"
        save_puzzle(result, PuzzleConfig(grid_size=3), path)
        return path

    def test_found(self, puzzle_path, capsys):
        """A reversed drag over a placed word is found in reading order."""
        assert check.main([str(puzzle_path), "0,2 0,1 0,0"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["found"] is True
        assert result["word"] == "cat"
        assert result["direction"] == "right"
        assert result["start_cell"] == {"row": 0, "col": 0}

    def test_explicit_words(self, puzzle_path, capsys):
        """Target words can be given on the command line."""
        assert check.main([str(puzzle_path), "1,0 1,1 1,2", "--words", "xxx"]) == 0
        assert json.loads(capsys.readouterr().out)["found"] is True

    def test_invalid_selection(self, puzzle_path, capsys):
        """A bent selection reports valid=false."""
        assert check.main([str(puzzle_path), "0,0 0,1 1,1"]) == 0
        assert json.loads(capsys.readouterr().out)["valid"] is False

    def test_missing_puzzle(self, tmp_path, capsys):
        """A missing puzzle file fails."""
        assert check.main([str(tmp_path / "nope.json"), "0,0"]) == 1

    def test_bad_cells(self, puzzle_path, capsys):
        """Unparseable cell text fails."""
        assert check.main([str(puzzle_path), "top left"]) == 1


class TestRenderGrid:
    """Plain-text grid rendering."""

    def test_plain(self):
        """Rows of uppercase letters."""
        assert render_grid([["c", "a"], ["x", "y"]]) == " C  A\n X  Y"

    def test_highlight(self):
        """Highlighted cells are bracketed."""
        assert render_grid([["c", "a"], ["x", "y"]], highlight=[(0, 1)], uppercase=False) == " c [a]\n x  y"
