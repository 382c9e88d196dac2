from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Type

from manim import config as manim_config

from diagram_core import __version__
from diagram_core.compiler import DiagramSpec, compile_from_file
from diagram_core.theme import get_theme

from diagram_anim.scenes.diagram import DiagramScene

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def render_scene(
    scene_cls: Type[DiagramScene],
    spec: DiagramSpec,
    quality: str = "ql",
    preview: bool = False,
    time_scale: float = 1.0,
    theme: str = "dark",
):
    # Configure manim (quality shortcuts)
    if quality == "ql":
        manim_config.quality = "low_quality"
    elif quality == "qh":
        manim_config.quality = "high_quality"
    else:
        manim_config.quality = quality
    manim_config.preview = preview

    scene = scene_cls(theme=get_theme(theme))
    setattr(scene, "_diagram", spec)
    setattr(scene, "_time_scale", float(time_scale))
    scene.render()


def summarize(spec: DiagramSpec) -> str:
    lines = [
        f"title: {spec.title or '-'}",
        f"rankdir: {spec.layout.rankdir.value}",
        f"nodes ({len(spec.nodes)}): {', '.join(spec.node_ids())}",
        f"edges ({len(spec.edges)}): " + ", ".join(f"{e.source}->{e.target}" for e in spec.edges),
        f"steps: {len(spec.steps) or len(spec.nodes)}",
    ]
    return "\n".join(lines)


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render an animated diagram from a YAML description",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv)")
    parser.add_argument("--scene", default="DiagramScene")
    parser.add_argument("--diagram", required=True, help="YAML diagram file")
    parser.add_argument("--quality", default="ql", help="manim quality: ql/qh or a manim quality name")
    parser.add_argument("--theme", default="dark")
    parser.add_argument("--preview", action="store_true")
    parser.add_argument("--time-scale", type=float, default=1.0)
    parser.add_argument("--dry-run", action="store_true", help="Compile only and print a summary")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    scene_map = {
        "DiagramScene": DiagramScene,
    }
    scene_cls = scene_map.get(args.scene)
    if scene_cls is None:
        raise SystemExit(f"Unknown scene: {args.scene}")

    logger.info("Compiling diagram from %s", args.diagram)
    try:
        spec = compile_from_file(args.diagram)
    except (OSError, ValueError) as exc:
        logger.error("Could not compile %s: %s", args.diagram, exc)
        return 2

    if args.dry_run:
        print(summarize(spec))
        return 0

    render_scene(scene_cls, spec, quality=args.quality, preview=args.preview, time_scale=args.time_scale, theme=args.theme)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
