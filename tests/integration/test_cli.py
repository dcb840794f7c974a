"""
Integration tests for the grouper command line interface.
"""

import json

from grouper.cli import main


class TestCli:
    """End-to-end runs of grouper.cli.main."""

    def test_prints_all_sections_by_default(self, movies_path, capsys):
        exit_code = main([str(movies_path)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Clusters grouped by affinity:" in out
        assert "Cluster tree:" in out
        assert "Distances between every pair of entities:" in out
        assert "Movie 1 <-> Movie 2:" in out

    def test_single_section(self, movies_path, capsys):
        exit_code = main([str(movies_path), "--tree"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Cluster tree:" in out
        assert "Clusters grouped by affinity:" not in out
        assert "(0) +" in out

    def test_writes_csv(self, movies_path, tmp_path, capsys):
        csv_path = tmp_path / "distances.csv"

        exit_code = main([str(movies_path), "--distances", "--csv", str(csv_path)])

        assert exit_code == 0
        lines = csv_path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "entity_a,entity_b,distance"
        assert len(lines) == 1 + 15

    def test_config_overrides_precision(self, movies_path, tmp_path, capsys):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"export": {"float_precision": 2}}))

        main([str(movies_path), "--tree", "--config", str(config_path)])

        first_line = capsys.readouterr().out.splitlines()[1]
        assert first_line.startswith("(0) + ")
        assert len(first_line.split("+ ")[1].split(".")[1]) == 2

    def test_invalid_data_exits_with_error(self, tmp_path, capsys):
        data_path = tmp_path / "broken.json"
        data_path.write_text('{"A": {}}')

        exit_code = main([str(data_path)])

        assert exit_code == 2
        assert "grouper: error:" in capsys.readouterr().err

    def test_missing_file_exits_with_error(self, tmp_path, capsys):
        exit_code = main([str(tmp_path / "nope.json")])

        assert exit_code == 2
        assert "Cannot read rating table" in capsys.readouterr().err

    def test_oversized_rating_exits_with_error(self, tmp_path, capsys):
        data_path = tmp_path / "huge.json"
        data_path.write_text('{"A": {"k": 1' + "0" * 400 + '}, "B": {"k": 2}}')

        exit_code = main([str(data_path)])

        err = capsys.readouterr().err
        assert exit_code == 2
        assert "not representable as a float" in err
        assert "Traceback" not in err
