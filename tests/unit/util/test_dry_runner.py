# pylint: disable=missing-docstring
# pylint: disable=protected-access
from pathlib import Path

from headerprep.util.configuration import Configuration
from headerprep.util.dry_runner import DryRunner

path_to_config = "tests/testdata/config/config.yml"
path_to_records = "tests/testdata/input_logdata/records.txt"


class TestDryRunner:
    def setup_method(self):
        self.config = Configuration.from_source(path_to_config)

    def test_run_passes_records_through_all_interceptors(self):
        records = DryRunner(path_to_records, self.config).run()
        assert [record.headers for record in records] == [
            {"headerA": "1", "headerB": "2", "headerC": "3.4foobar5", "host": "2"},
            {
                "headerA": "2024-01-01",
                "headerB": "web01 proxy",
                "headerC": "GET /index.html",
                "host": "web01",
            },
            {"headerA": "no delimiter here", "host": "delimiter"},
        ]

    def test_run_does_not_change_bodies(self):
        records = DryRunner(path_to_records, self.config).run()
        expected_bodies = Path(path_to_records).read_bytes().splitlines()
        assert [record.body for record in records] == expected_bodies

    def test_run_prints_results(self, capsys):
        DryRunner(path_to_records, self.config).run()
        captured = capsys.readouterr()
        assert "PROCESSED RECORD" in captured.out
        assert '"headerC": "3.4foobar5"' in captured.out
        assert "TRANSFORMED RECORDS: 3/3" in captured.out

    def test_run_counts_untouched_records(self, tmp_path: Path, capsys):
        records_path = tmp_path / "records.txt"
        records_path.write_text("1:2\n", encoding="utf8")
        config_path = tmp_path / "config.yml"
        config_path.write_text(
            "interceptors:\n"
            "  - extractor:\n"
            "      type: field_extractor\n"
            "      delimiter: ':'\n"
            "      headers: '5:missing'\n",
            encoding="utf8",
        )
        records = DryRunner(str(records_path), Configuration.from_source(str(config_path))).run()
        assert records[0].headers == {}
        captured = capsys.readouterr()
        assert "no headers set" in captured.out
        assert "TRANSFORMED RECORDS: 0/1" in captured.out

    def test_run_logs_missing_fields_with_dry_runner_logger(self, caplog):
        DryRunner(path_to_records, self.config).run()
        missing = [record for record in caplog.records if "not set" in record.getMessage()]
        assert missing
        assert all(record.name == "DryRunner" for record in missing)
