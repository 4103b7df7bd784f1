"""Command-line interface for world generation."""

import argparse
import logging
import time
from pathlib import Path

import structlog


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural tile world from noise"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Config name (from configs/) or path to a TOML file",
    )
    parser.add_argument("--cols", type=int, default=None, help="Grid width in cells")
    parser.add_argument("--rows", type=int, default=None, help="Grid height in cells")
    parser.add_argument(
        "--seed", type=int, default=None, help="Noise seed (default: random)"
    )
    parser.add_argument(
        "--choice-seed",
        type=int,
        default=None,
        help="Feature choice seed (default: derived from --seed)",
    )
    parser.add_argument(
        "--preview",
        type=str,
        default=None,
        help="Write a preview PNG of the placements to this path",
    )
    parser.add_argument(
        "--noise-image",
        type=str,
        default=None,
        help="Write a grayscale PNG of the noise field to this path",
    )
    parser.add_argument(
        "--cell-size", type=int, default=4, help="Preview pixels per cell (default: 4)"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check placement invariants and exit non-zero on failure",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for world generation.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    # Import here to avoid slow startup for --help
    from .config import find_config, load_config
    from .exceptions import TileWorldError
    from .preview import render_noise, render_preview
    from .state import TileWorld
    from .terrain.config import GenerationConfig
    from .terrain.validation import validate_placements

    try:
        if args.config is not None:
            config = load_config(find_config(args.config))
        else:
            config = GenerationConfig()

        overrides = {
            "cols": args.cols,
            "rows": args.rows,
            "seed": args.seed,
            "choice_seed": args.choice_seed,
        }
        config = GenerationConfig.model_validate(
            config.model_dump() | {k: v for k, v in overrides.items() if v is not None}
        )
    except (FileNotFoundError, TileWorldError) as e:
        print(f"Error: {e}")
        return 2

    world = TileWorld(config)

    start_time = time.time()
    result = world.generate()
    gen_time = time.time() - start_time

    print(f"Generated {config.cols}x{config.rows} world in {gen_time:.2f}s")
    print(f"  seed: {result.seed}")
    print(f"  choice seed: {result.choice_seed}")
    print(f"  occupied cells: {len(result.occupied):,}")
    counts = result.counts()
    for kind, count in sorted(counts.items(), key=lambda item: item[0].value):
        print(f"  {kind.value:10} {count:>8,}")

    if args.preview:
        preview_path = Path(args.preview)
        preview_path.parent.mkdir(parents=True, exist_ok=True)
        img = render_preview(
            result.placements,
            config.cols,
            config.rows,
            style=config.style,
            cell_size=args.cell_size,
        )
        img.save(preview_path)
        print(f"Saved preview to {preview_path}")

    if args.noise_image:
        noise_path = Path(args.noise_image)
        noise_path.parent.mkdir(parents=True, exist_ok=True)
        grid = world.noise_field().sample_grid(config.cols, config.rows)
        render_noise(grid).save(noise_path)
        print(f"Saved noise image to {noise_path}")

    if args.validate:
        validation = validate_placements(
            result, config.thresholds, field=world.noise_field()
        )
        if not validation.passed:
            print(f"Validation failed with {len(validation.errors)} errors")
            return 1
        print("Validation passed")

    return 0
