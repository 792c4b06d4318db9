"""
Tests for the demo driver.
"""

import io
import re

import pytest

from demo import main, run


class TestDemo:
    """Tests for demo.run and demo.main."""

    def test_run_output(self):
        """Test the report, dump and deletion lines."""
        out = io.StringIO()
        tree = run(count=50, deletes=5, seed=7, out=out)

        lines = out.getvalue().splitlines()
        assert re.fullmatch(r"\d+ \| \d+", lines[0])
        assert sum(1 for line in lines if line.startswith("deleting: ")) == 5

        keys = [k for k, _ in tree.inorder()]
        assert keys == sorted(set(keys))

    def test_run_is_seeded(self):
        """Test the same seed gives the same output."""
        first, second = io.StringIO(), io.StringIO()
        run(seed=3, out=first)
        run(seed=3, out=second)
        assert first.getvalue() == second.getvalue()

    def test_run_without_keys(self):
        """Test an empty run."""
        out = io.StringIO()
        tree = run(count=0, deletes=1, seed=1, out=out)
        assert tree.is_empty
        assert out.getvalue().startswith("0 | 0\n")

    def test_run_rejects_bad_arguments(self):
        """Test validation of counts and the key range."""
        with pytest.raises(ValueError):
            run(count=-1)
        with pytest.raises(ValueError):
            run(low=5, high=1)

    def test_main(self, capsys):
        """Test the command line entry point."""
        assert main(["--count", "20", "--deletes", "2", "--seed", "9"]) == 0
        assert "deleting: " in capsys.readouterr().out

    def test_main_bad_arguments(self):
        """Test invalid arguments return a non-zero status."""
        assert main(["--low", "10", "--high", "0"]) == 2
