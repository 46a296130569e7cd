from click.testing import CliRunner

from react_import_sorter.cli import cli

UNSORTED = 'import b from "b";\nimport a from "a";\n\nexport default a + b;\n'
SORTED = 'import a from "a";\nimport b from "b";\n\nexport default a + b;\n'


def test_check_reports_without_modifying(tmp_path):
    source = tmp_path / "index.js"
    source.write_text(UNSORTED)
    result = CliRunner().invoke(cli, ["check", str(tmp_path)])
    assert result.exit_code == 1
    assert source.read_text() == UNSORTED


def test_fix_rewrites_files(tmp_path):
    source = tmp_path / "index.js"
    source.write_text(UNSORTED)
    runner = CliRunner()

    result = runner.invoke(cli, ["fix", str(source)])
    assert result.exit_code == 1
    assert source.read_text() == SORTED

    result = runner.invoke(cli, ["check", str(tmp_path)])
    assert result.exit_code == 0


def test_sort_reads_stdin(tmp_path):
    result = CliRunner().invoke(
        cli, ["sort", "--root", str(tmp_path)], input='import b from "b";\nimport a from "a";\n',
    )
    assert result.exit_code == 0
    assert 'import a from "a";\nimport b from "b";\n' in result.output


def test_sort_with_overrides(tmp_path):
    result = CliRunner().invoke(
        cli,
        ["--sort-by", "z-a", "--path-prefix", "common", "--no-separate-types", "sort", "--root", str(tmp_path)],
        input='import a from "common/a";\nimport b from "b";\nimport c from "common/c";\n',
    )
    assert result.exit_code == 0
    assert 'import b from "b";\nimport c from "common/c";\nimport a from "common/a";\n' in result.output


def test_sort_without_imports_echoes_input(tmp_path):
    result = CliRunner().invoke(cli, ["sort", "--root", str(tmp_path)], input="const a = 1;\n")
    assert result.exit_code == 1
    assert "const a = 1;" in result.output


def test_invalid_project_config(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.react-import-sorter]\nsort-by = "sideways"\n')
    (tmp_path / "index.js").write_text(UNSORTED)
    result = CliRunner().invoke(cli, ["check", str(tmp_path)])
    assert result.exit_code == 2


def test_sort_rejects_unparsable_selection(tmp_path):
    result = CliRunner().invoke(
        cli, ["sort", "--root", str(tmp_path)], input='import {\n  a, // first\n  b\n} from "x";\n',
    )
    assert result.exit_code == 2


def test_fix_leaves_unparsable_file_alone(tmp_path):
    content = 'import {\n  b, // keep b\n  a\n} from "x";\n\nuse(a, b);\n'
    source = tmp_path / "index.js"
    source.write_text(content)
    result = CliRunner().invoke(cli, ["fix", str(tmp_path)])
    assert result.exit_code == 2
    assert source.read_text() == content
