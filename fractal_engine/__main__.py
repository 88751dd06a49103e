import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

from fractal_engine import (
    ConfigurationError,
    DepthStepper,
    Frame,
    FrameClock,
    RecordingSink,
    StepStatus,
    create_generator,
    generate_tikz_document,
    run_to_completion,
)
from fractal_engine.generators import GENERATORS

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parameter_overrides(args: argparse.Namespace) -> Dict[str, object]:
    overrides: Dict[str, object] = {}
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.min_size is not None:
        overrides["min_segment_size"] = args.min_size
    if args.angle_delta is not None:
        overrides["angle_delta"] = math.radians(args.angle_delta)
    if args.length_scale is not None:
        overrides["length_scale"] = args.length_scale
    if args.child_offset is not None:
        overrides["child_offset"] = args.child_offset
    if args.child_offset_rotation is not None:
        overrides["child_offset_rotation"] = math.radians(args.child_offset_rotation)
    if args.children is not None:
        overrides["child_count"] = args.children
    if args.speed is not None:
        overrides["draw_every_n_ticks"] = args.speed
    return overrides


def _write_png(path: Path, geometry, frame: Frame, title: str) -> None:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from fractal_engine.render import MatplotlibSink

    fig, ax = plt.subplots(figsize=(frame.width / 100, frame.height / 100))
    sink = MatplotlibSink(ax, frame)
    sink.replace(geometry)
    ax.set_title(title)
    ax.set_axis_off()
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Step a fractal through its recursion depths")
    parser.add_argument("family", choices=sorted(GENERATORS), help="Fractal family to draw")
    parser.add_argument("--width", type=float, default=400.0, help="Frame width (default: 400)")
    parser.add_argument("--height", type=float, default=400.0, help="Frame height (default: 400)")
    parser.add_argument("--max-depth", type=int, help="Recursion ceiling; 0 stops on --min-size instead")
    parser.add_argument("--min-size", type=float, help="Smallest branch length before recursion stops")
    parser.add_argument("--angle-delta", type=float, help="Total spread of child branches, in degrees")
    parser.add_argument("--length-scale", type=float, help="Child-to-parent length ratio in (0, 1]")
    parser.add_argument("--child-offset", type=float, help="Pull-back of child start, as a fraction of parent length")
    parser.add_argument(
        "--child-offset-rotation",
        type=float,
        help="Rotation of the pull-back direction, in degrees",
    )
    parser.add_argument("--children", type=int, help="Children per branch (symmetric family)")
    parser.add_argument("--speed", type=int, help="Redraw every N ticks")
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=100_000,
        help="Give up after this many ticks (default: 100000)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the final depth to the given path",
    )
    parser.add_argument(
        "--png-output-path",
        help="Write a PNG of the final depth to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    def _print_status(status: StepStatus) -> None:
        print(status.message)

    try:
        frame = Frame.coerce((args.width, args.height))
        params = GENERATORS[args.family].default_parameters().with_changes(**_parameter_overrides(args))
        generator = create_generator(args.family, params)
        sink = RecordingSink()
        stepper = DepthStepper(sink, frame, _print_status)
        stepper.start(generator)
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise SystemExit(2) from exc

    try:
        ticks = run_to_completion(stepper, FrameClock(), max_ticks=args.max_ticks)
    except RuntimeError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    logger.info("Drew %d frame(s) in %d tick(s)", sink.replace_count, ticks)

    final = sink.current or ()
    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        tikz_document = generate_tikz_document(final, title=generator.title, normalize=True)
        output_path.write_text(tikz_document, encoding="utf-8")
        print(f"TikZ document written to {output_path}")

    if args.png_output_path:
        output_path = Path(args.png_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing PNG to %s", output_path)
        _write_png(output_path, final, frame, generator.title)
        print(f"PNG written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
