"""Tests for layout configuration and rank direction parsing."""

import pytest

from diagram_core.config import LayoutConfig, VisualConfig
from diagram_core.enums import RankDir
from diagram_core.errors import InvalidEntity, UnresolvedEndpoint


class TestLayoutConfig:
    def test_defaults(self):
        cfg = LayoutConfig()
        assert cfg.rankdir is RankDir.TB
        assert (cfg.nodesep, cfg.edgesep, cfg.ranksep) == (1.0, 0.75, 1.0)

    def test_rankdir_accepts_strings(self):
        assert LayoutConfig(rankdir=" bt ").rankdir is RankDir.BT
        assert LayoutConfig(rankdir=RankDir.RL).rankdir.horizontal

    def test_negative_spacing_rejected(self):
        with pytest.raises(ValueError):
            LayoutConfig(ranksep=-1)

    def test_from_dict_ignores_unknown_keys(self):
        cfg = LayoutConfig.from_dict({"edgesep": 0.5, "splines": "ortho"})
        assert cfg.edgesep == 0.5

    def test_from_none(self):
        assert LayoutConfig.from_dict(None) == LayoutConfig()


class TestRankDir:
    def test_horizontal(self):
        assert [d.horizontal for d in RankDir] == [False, False, True, True]

    def test_unknown(self):
        with pytest.raises(ValueError):
            RankDir.parse("up")


class TestVisualConfig:
    def test_minimum_vertex_size(self):
        assert VisualConfig().min_vertex_size == 1.0
        assert VisualConfig(min_vertex_size=2.0).min_vertex_size == 2.0


class TestErrors:
    def test_invalid_entity_message(self):
        err = InvalidEntity("Vertex", 42)
        assert str(err) == "Only Vertex can be added to Graph, got int"
        assert isinstance(err, TypeError)

    def test_unresolved_endpoint_message(self):
        err = UnresolvedEndpoint("db")
        assert "db" in str(err)
        assert isinstance(err, KeyError)
