import numpy as np
import pytest

pytest.importorskip("manim")


def _skip_if_text_unavailable():
    from manim import Text

    try:
        _ = Text("ok", font_size=12)
    except (
        ImportError,
        RuntimeError,
        OSError,
    ) as exc:  # pragma: no cover - environment-dependent
        pytest.skip(f"Skipping Manim Text-based tests: {exc}")


@pytest.fixture(autouse=True)
def _text_available():
    _skip_if_text_unavailable()


def test_vertex_never_smaller_than_minimum():
    from diagram_anim.mobjects import Vertex

    v = Vertex("a")
    assert v.vertex_id == "a"
    assert v.label == "a"
    assert v.diameter >= 1.0
    assert v.width == pytest.approx(v.diameter)
    assert v.height == pytest.approx(v.diameter)


def test_vertex_grows_with_label():
    from diagram_anim.mobjects import Vertex

    short = Vertex("a")
    long = Vertex("b", label="a considerably longer label")
    assert long.diameter > short.diameter
    assert long.diameter == pytest.approx(np.hypot(long.text.width, long.text.height), rel=1e-3)


def test_vertex_respects_custom_minimum():
    from diagram_anim.mobjects import Vertex
    from diagram_core.config import VisualConfig

    v = Vertex("a", config=VisualConfig(min_vertex_size=2.5))
    assert v.diameter == pytest.approx(2.5)


def test_set_label_resizes_around_center():
    from diagram_anim.mobjects import Vertex

    v = Vertex("a")
    v.move_to([2.0, 1.0, 0.0])
    before = v.diameter
    v.set_label("a much, much longer label")
    assert v.label == "a much, much longer label"
    assert v.diameter > before
    np.testing.assert_allclose(v.body.get_center(), [2.0, 1.0, 0.0], atol=1e-6)
    np.testing.assert_allclose(v.text.get_center(), [2.0, 1.0, 0.0], atol=1e-6)


def test_outline_shrinks_ring_immediately():
    from diagram_anim.mobjects import Vertex

    v = Vertex("a")
    assert v.ring.width == pytest.approx(v.body.width)
    assert v.outline(True) is None
    assert v.ring.width == pytest.approx(v.body.width - v.config.ring_inset)
    v.outline(False)
    assert v.ring.width == pytest.approx(v.body.width)


def test_outlined_vertex_starts_with_inset_ring():
    from diagram_anim.mobjects import Vertex

    v = Vertex("a", outlined=True)
    assert v.ring.width == pytest.approx(v.body.width - v.config.ring_inset)


def test_outline_animation_ends_at_inset():
    from manim import Animation

    from diagram_anim.mobjects import Vertex

    v = Vertex("a")
    anim = v.outline(True, duration=0.5)
    assert isinstance(anim, Animation)
    assert anim.get_run_time() == pytest.approx(0.5)
    anim.begin()
    anim.finish()
    assert v.ring.width == pytest.approx(v.body.width - v.config.ring_inset)


def test_edge_route_starts_and_ends_on_outlines():
    from diagram_anim.mobjects import Edge, Vertex

    a, b = Vertex("a"), Vertex("b")
    a.move_to([-3.0, 0.0, 0.0])
    b.move_to([3.0, 1.0, 0.0])
    e = Edge(a, b)

    start, end = e.path.get_start(), e.path.get_end()
    assert np.linalg.norm(start - a.get_center()) == pytest.approx(a.width / 2, rel=1e-6)
    assert np.linalg.norm(end - b.get_center()) == pytest.approx(b.width / 2, rel=1e-6)
    np.testing.assert_allclose(e.tip.get_start(), end, atol=1e-9)


def test_edge_keeps_bends():
    from diagram_anim.mobjects import Edge, Vertex

    a, b = Vertex("a"), Vertex("b")
    a.move_to([0.0, 3.0, 0.0])
    b.move_to([3.0, 0.0, 0.0])
    e = Edge(a, b)
    e.set_route([a.get_center(), [0.0, 0.0, 0.0], b.get_center()])
    anchors = e.path.get_anchors()
    assert any(np.allclose(p, [0.0, 0.0, 0.0]) for p in anchors)


def test_edge_with_overlapping_endpoints_does_not_fail():
    from diagram_anim.mobjects import Edge, Vertex

    a, b = Vertex("a"), Vertex("b")
    e = Edge(a, b)
    np.testing.assert_allclose(e.path.get_start(), e.path.get_end(), atol=1e-9)


def test_edge_endpoints_and_label():
    from diagram_anim.mobjects import Edge, Vertex

    a, b = Vertex("a"), Vertex("b")
    b.move_to([4.0, 0.0, 0.0])
    plain = Edge(a, b)
    labelled = Edge(a, b, label="calls")

    assert plain.source is a and plain.target is b
    assert plain.text is None
    assert labelled.text is not None
    # Rightward edge: the label sits on the counter-clockwise (upper) side.
    assert labelled.text.get_center()[1] > 0.0
    assert labelled.z_index == -1


def test_edge_survives_copy():
    from diagram_anim.mobjects import Edge, Vertex

    a, b = Vertex("a"), Vertex("b")
    b.move_to([4.0, 0.0, 0.0])
    e = Edge(a, b, label="x")
    dup = e.copy()
    assert dup.source is a
    assert dup.text is not e.text


def test_title_size_steps_down_per_level():
    from diagram_anim.mobjects import Title

    h1 = Title("Overview")
    h3 = Title("Overview", level=3)
    assert h3.level == 3
    assert h3.height < h1.height
