"""
Tests for duvlab.logic.duv.session
"""

import pytest

from duvlab.core.duv import calc_duv
from duvlab.logic.duv import DuvSession


class TestPairs:
    def test_fifo_order(self) -> None:
        session = DuvSession()
        session.extend([1.0, 2.0, 3.0, 4.0, 5.0])
        assert list(session.pairs()) == [(1.0, 2.0), (3.0, 4.0)]
        assert session.pending == 1

    def test_single_value_stays_buffered(self) -> None:
        session = DuvSession()
        session.extend([0.5])
        assert list(session.pairs()) == []
        assert session.pending == 1


class TestFeed:
    def test_one_pair(self) -> None:
        session = DuvSession()
        results = session.feed("0.4525 0.4037")
        assert results == [pytest.approx(calc_duv(0.4525, 0.4037))]
        assert session.pending == 0

    def test_scaled_and_fractional_agree(self) -> None:
        scaled = DuvSession().feed("4525 4037")
        fractional = DuvSession().feed("0.4525 0.4037")
        assert scaled == pytest.approx(fractional)

    def test_odd_value_waits_for_partner(self) -> None:
        session = DuvSession()
        assert session.feed("0.4525") == []
        assert session.pending == 1
        results = session.feed("0.4037")
        assert results == [pytest.approx(calc_duv(0.4525, 0.4037))]
        assert session.pending == 0

    def test_multi_pair_drain_in_row_order(self) -> None:
        results = DuvSession().feed("4356 4118 4377 4101")
        assert results == [
            pytest.approx(calc_duv(0.4356, 0.4118)),
            pytest.approx(calc_duv(0.4377, 0.4101)),
        ]

    def test_buffer_never_holds_two_after_feed(self) -> None:
        session = DuvSession()
        for chunk in ["1", "2 3", "4 5 6", "", "7"]:
            session.feed(chunk)
            assert session.pending in (0, 1)

    def test_bad_token_is_logged_and_dropped(self, capsys) -> None:
        session = DuvSession()
        results = session.feed("abc 0.4525 0.4037")
        assert results == DuvSession().feed("0.4525 0.4037")
        captured = capsys.readouterr()
        assert "abc" in captured.err
        assert "[error]" in captured.err
        assert captured.out == ""

    def test_sessions_are_independent(self) -> None:
        first = DuvSession()
        second = DuvSession()
        first.feed("0.4525")
        assert second.pending == 0
        assert second.feed("0.4037") == []
