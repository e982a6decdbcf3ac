"""
Tests for workflow step outputs.
"""

from autoui.github import ActionOutputs


class TestActionOutputs:
    """Test output rendering and writing."""

    def test_render_values(self):
        assert ActionOutputs.render(True) == "true"
        assert ActionOutputs.render(False) == "false"
        assert ActionOutputs.render(None) == ""
        assert ActionOutputs.render(7) == "7"

    def test_flush_to_file_uses_delimiters(self, tmp_path):
        output_file = tmp_path / "github_output"
        output_file.write_text("existing=1\n", encoding="utf-8")

        outputs = ActionOutputs(str(output_file))
        outputs.set_output("complete", False)
        outputs.set_output("status_block", "### Basics\n- `a`: ❌")
        outputs.flush()

        lines = output_file.read_text(encoding="utf-8").split("\n")
        assert lines[0] == "existing=1"
        assert lines[1].startswith("complete<<ghadelimiter_")
        delimiter = lines[1].split("<<", 1)[1]
        assert lines[2] == "false"
        assert lines[3] == delimiter
        assert lines[4].startswith("status_block<<")
        assert lines[5:7] == ["### Basics", "- `a`: ❌"]

    def test_environment_output_file(self, tmp_path, monkeypatch):
        output_file = tmp_path / "out"
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

        outputs = ActionOutputs()
        outputs.update({"pending_key": "tagline"})
        outputs.flush()

        assert "pending_key<<" in output_file.read_text(encoding="utf-8")

    def test_flush_to_stdout(self, capsys, monkeypatch):
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)

        outputs = ActionOutputs()
        outputs.update({"has_label": True, "pending_key": ""})
        outputs.flush()

        assert capsys.readouterr().out == "has_label=true\npending_key=\n"
