# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the command-line demonstration."""

import logging

from genro_bstree.__main__ import main, run


class TestDemo:
    """Tests for python -m genro_bstree."""

    def test_default_scenario(self, capsys):
        """Test the default run prints both trees then the values."""
        main([])
        out = capsys.readouterr().out
        assert out.splitlines() == ['3 5 7', '3 5', '3', '5', '7']

    def test_custom_values(self):
        """Test custom root and insertion lists."""
        lines = run(10, [4, 12], [7])
        assert lines == ['4 7 10 12', '4 10 12', '4', '7', '10', '12']

    def test_arguments(self, capsys):
        """Test command-line arguments reach the tree."""
        main(['--root', '2', '--first', '--after-clone', '1', '3'])
        out = capsys.readouterr().out
        assert out.splitlines() == ['1 2 3', '2', '1', '2', '3']

    def test_verbose_logs_duplicates(self, caplog):
        """Test duplicate insertions are logged at debug level."""
        caplog.set_level(logging.DEBUG, logger='genro_bstree')
        main(['-v', '--first', '3', '3'])
        assert any('already present' in r.getMessage() for r in caplog.records)
