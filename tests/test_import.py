"""Tests for the CSV import command."""

from copilot_cli.cli.main import cli


def test_import_successful(cli_runner, temp_db, sample_csv):
    """Test successful CSV import."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "import", str(sample_csv)],
    )

    assert result.exit_code == 0
    assert "Parsed 3 transactions" in result.output
    assert "Imported: 3" in result.output
    assert "Skipped" not in result.output
    assert temp_db.count_transactions() == 3


def test_import_twice_reports_skipped(cli_runner, temp_db, sample_csv):
    """Re-importing the same export reports every row as skipped."""
    cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "import", str(sample_csv)])

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "import", str(sample_csv)],
    )

    assert result.exit_code == 0
    assert "Imported: 0" in result.output
    assert "Skipped (duplicates): 3" in result.output


def test_import_dry_run(cli_runner, temp_db, sample_csv):
    """Dry run previews rows and writes nothing."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "import", str(sample_csv), "--dry-run"],
    )

    assert result.exit_code == 0
    assert "Dry run - no changes made" in result.output
    assert "2024-01-15 | Coffee Shop" in result.output
    assert "-5.50" in result.output
    assert temp_db.count_transactions() == 0
    assert temp_db.list_imports() == []


def test_import_malformed_file(cli_runner, temp_db, fixtures_dir):
    """Malformed CSV exits with an error and imports nothing."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "import",
            str(fixtures_dir / "malformed_quotes.csv"),
        ],
    )

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "unexpected end of data" in result.output
    assert temp_db.count_transactions() == 0


def test_import_invalid_file(cli_runner, temp_db):
    """Test import with non-existent file."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "import", "/nonexistent/file.csv"],
    )

    # Click returns exit code 2 for bad arguments
    assert result.exit_code != 0
    assert "does not exist" in result.output.lower()
