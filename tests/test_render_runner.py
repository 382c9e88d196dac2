"""
Tests for the render runner command line.

Only the compile/dry-run path is exercised; rendering video is left to the
manim toolchain.
"""

import os

import pytest

pytest.importorskip("manim")

EXAMPLE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "examples", "request_pipeline.yaml")


class TestRunner:
    def test_dry_run_prints_summary(self, capsys):
        from diagram_anim.runner.render import main

        assert main(["--diagram", EXAMPLE, "--dry-run"]) == 0
        out = capsys.readouterr().out
        assert "title: Request pipeline" in out
        assert "rankdir: TB" in out
        assert "client->gateway" in out

    def test_missing_file_returns_error_code(self, tmp_path):
        from diagram_anim.runner.render import main

        assert main(["--diagram", str(tmp_path / "missing.yaml"), "--dry-run"]) == 2

    def test_malformed_diagram_returns_error_code(self, tmp_path):
        from diagram_anim.runner.render import main

        path = tmp_path / "bad.yaml"
        path.write_text("edges:\n  - not an edge\n", encoding="utf-8")
        assert main(["--diagram", str(path), "--dry-run"]) == 2

    def test_unknown_scene_exits(self):
        from diagram_anim.runner.render import main

        with pytest.raises(SystemExit):
            main(["--diagram", EXAMPLE, "--scene", "Nope", "--dry-run"])

    def test_summary_counts_default_steps(self):
        from diagram_anim.runner.render import summarize
        from diagram_core.compiler import compile_from_dict

        text = summarize(compile_from_dict({"edges": ["a -> b"]}))
        assert "nodes (2): a, b" in text
        assert "steps: 2" in text
