#!/usr/bin/env python3
"""Render a scene with the Glint ray tracer.

Renders either the built-in showcase scene or a scene described in a JSON
file, and writes the result to an image file whose format follows the
output extension.

Usage:
    python examples/render_scene.py [options]

Options:
    --width WIDTH           Image width in pixels (default: 400)
    --height HEIGHT         Image height in pixels (default: 200)
    --recursions N          Reflection/refraction bounce budget (default: 5)
    --scene PATH            JSON scene file (default: built-in showcase)
    --output OUTPUT         Output file path (default: showcase.png)
    --show                  Open a preview window after rendering
    --quiet                 Suppress progress output

Example:
    python examples/render_scene.py --width 200 --height 100 --output small.png
    python examples/render_scene.py --scene examples/scenes/mirrors.json --output mirrors.ppm
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene with the Glint ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Image width in pixels (default: 400, or the scene file's value)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Image height in pixels (default: 200, or the scene file's value)",
    )
    parser.add_argument(
        "--recursions",
        type=int,
        default=None,
        help="Reflection/refraction bounce budget (default: 5)",
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file (default: built-in showcase scene)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="showcase.png",
        help="Output file path (default: showcase.png)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open a Matplotlib preview window after rendering",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(
    width: int | None = None,
    height: int | None = None,
    recursions: int | None = None,
    scene_path: str | None = None,
    output_path: str = "showcase.png",
    show: bool = False,
    quiet: bool = False,
) -> Path:
    """Render a scene and save it to file.

    Args:
        width: Image width in pixels; overrides the scene file.
        height: Image height in pixels; overrides the scene file.
        recursions: Bounce budget; overrides the scene file.
        scene_path: Optional JSON scene file. The showcase scene is used
            when omitted.
        output_path: Output image path.
        show: If True, display the result in a Matplotlib window.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports so Taichi is initialized before any field is created
    from glint.preview.export import save_image
    from glint.scene.config import SceneConfig, build_camera, build_world
    from glint.scene.showcase import create_showcase_scene

    if scene_path is not None:
        config = SceneConfig.from_json(scene_path)
        if width is not None:
            config.camera["width"] = width
        if height is not None:
            config.camera["height"] = height
        if recursions is not None:
            config.recursion_limit = recursions
        world = build_world(config)
        camera = build_camera(config)
        scene_name = Path(scene_path).stem
    else:
        world, camera = create_showcase_scene(
            width=width if width is not None else 400,
            height=height if height is not None else 200,
        )
        if recursions is not None:
            world = world.with_recursions(recursions)
        scene_name = "showcase"

    if not quiet:
        print(
            f"Rendering '{scene_name}' ({camera.hsize}x{camera.vsize}, "
            f"{len(world.objects)} objects, {len(world.lights)} lights, "
            f"{world.recursion_limit} bounces)..."
        )

    start_time = time.time()

    def progress_callback(current: int, total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (current / total) * 100 if total > 0 else 0
            rows_per_sec = current / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {current}/{total} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    save_image(canvas, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    if show:
        from glint.preview.display import show_canvas

        show_canvas(canvas, title=f"{scene_name} - {camera.hsize}x{camera.vsize}")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Use GPU if available, fall back to CPU
    try:
        ti.init(arch=ti.gpu)
        if not args.quiet:
            print("Using GPU backend")
    except Exception:
        ti.init(arch=ti.cpu)
        if not args.quiet:
            print("Using CPU backend")

    try:
        render_scene(
            width=args.width,
            height=args.height,
            recursions=args.recursions,
            scene_path=args.scene,
            output_path=args.output,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
