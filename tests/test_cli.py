"""Tests for the command line interface."""

from click.testing import CliRunner

from pom_analyzer.cli import cli


def test_writes_dot_to_stdout(tmp_path, write_pom):
    write_pom("a", "a", deps=[("com.example", "b")])
    result = CliRunner().invoke(cli, [str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "digraph {" in result.output
    assert 'label1 [label="com.example:a"]' in result.output
    assert "label1 -> label2" in result.output


def test_writes_dot_to_file(tmp_path, write_pom):
    write_pom("src/a", "a", deps=[("com.example", "b")])
    write_pom("src/b", "b", deps=[("com.example", "a")])
    target = tmp_path / "out.dot"
    result = CliRunner().invoke(cli, ["-o", str(target), str(tmp_path / "src")])
    assert result.exit_code == 0, result.output
    text = target.read_text()
    assert text.startswith("digraph {")
    assert text.count("[color=red,penwidth=2]") == 2


def test_filter_option(tmp_path, write_pom):
    write_pom("a", "a", deps=[("junit", "junit")])
    result = CliRunner().invoke(cli, ["--filter", "group_id != 'junit'", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "junit" not in result.output


def test_invalid_filter(tmp_path):
    result = CliRunner().invoke(cli, ["--filter", "group_id ==", str(tmp_path)])
    assert result.exit_code == 1
    assert "Invalid filter expression" in result.output


def test_malformed_pom_aborts(tmp_path):
    (tmp_path / "pom.xml").write_text("<project/>")
    result = CliRunner().invoke(cli, [str(tmp_path)])
    assert result.exit_code == 1


def test_keep_going(tmp_path, write_pom):
    write_pom("good", "good")
    (tmp_path / "bad").mkdir()
    (tmp_path / "bad" / "pom.xml").write_text("<project/>")
    result = CliRunner().invoke(cli, ["--keep-going", str(tmp_path)])
    assert result.exit_code == 0
    assert "com.example:good" in result.output


def test_maxdepth(tmp_path, write_pom):
    write_pom("a", "shallow")
    write_pom("a/b/c", "deep")
    result = CliRunner().invoke(cli, ["--maxdepth", "1", str(tmp_path)])
    assert result.exit_code == 0
    assert "shallow" in result.output
    assert "deep" not in result.output


def test_summary_without_cycles(tmp_path, write_pom):
    write_pom("a", "a")
    result = CliRunner().invoke(cli, ["--summary", str(tmp_path)])
    assert result.exit_code == 0
    assert "No circular dependencies found." in result.output


def test_duplicate_folder(tmp_path):
    result = CliRunner().invoke(cli, [str(tmp_path), str(tmp_path)])
    assert result.exit_code == 1
    assert "Duplicate folder" in result.output


def test_max_depth_from_environment(tmp_path, write_pom):
    write_pom(".", "top")
    write_pom("a", "nested")
    result = CliRunner().invoke(cli, [str(tmp_path)], env={"POM_ANALYZER_MAX_DEPTH": "0"})
    assert result.exit_code == 0, result.output
    assert "top" in result.output
    assert "nested" not in result.output


def test_invalid_max_depth_in_environment(tmp_path):
    result = CliRunner().invoke(cli, [str(tmp_path)], env={"POM_ANALYZER_MAX_DEPTH": "abc"})
    assert result.exit_code == 1
    assert "POM_ANALYZER_MAX_DEPTH must be an integer" in result.output
    assert "Traceback" not in result.output


def test_maxdepth_option_overrides_environment(tmp_path, write_pom):
    write_pom("a", "nested")
    result = CliRunner().invoke(cli, ["--maxdepth", "1", str(tmp_path)], env={"POM_ANALYZER_MAX_DEPTH": "abc"})
    assert result.exit_code == 0, result.output
    assert "nested" in result.output
