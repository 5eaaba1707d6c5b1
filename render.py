"""
Rendering Script

Draws ink-painting trees with the Cairo renderer.

Controls are loaded from config/controls.json; missing entries fall back to
their defaults.

Modes:
    still   - Render the fully grown tree as a single PNG
    growth  - Render the growth animation from seed to full tree
    sway    - Render the fully grown tree swaying in the wind
"""

import argparse
import os
from pathlib import Path
from typing import Optional

from config import load_config, InkRenderConfig, InkTreeConfig
from inktree.state import SimulationState
from rendering import InkRenderer


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def remove_if_exists(path: str):
    """Remove file if it exists to ensure fresh write."""
    p = Path(path)
    if p.exists():
        try:
            os.remove(p)
            print(f"Removed existing file: {path}")
        except OSError as e:
            print(f"Error removing {path}: {e}")


def frames_to_full_growth(state: SimulationState) -> int:
    """Ticks needed for progress to go from 0 to 1 at the current growth speed."""
    step = state.config.growth.speed_factor * state.controls.growth_speed
    if step <= 0:
        raise ValueError("growth_speed must be positive to render a growth animation")
    return int(1.0 / step) + 1


def render_still(state: SimulationState, renderer: InkRenderer, output_path: str):
    state.complete_growth()
    remove_if_exists(output_path)
    renderer.save_frame(state, output_path)
    print(f"Saved frame to {output_path}")


def render_growth(state: SimulationState, renderer: InkRenderer, output_path: str,
                  num_frames: Optional[int], fps: int, frame_skip: int, seed: Optional[int] = None):
    state.start_growth(seed)
    if num_frames is None:
        num_frames = frames_to_full_growth(state)
    print(f"Growing tree (seed {state.seed}) over {num_frames} frames...")
    remove_if_exists(output_path)
    renderer.render_animation(state, output_path, num_frames, fps=fps, frame_skip=frame_skip)


def render_sway(state: SimulationState, renderer: InkRenderer, output_path: str,
                num_frames: int, fps: int, frame_skip: int):
    state.complete_growth()
    if state.controls.wind_strength <= 0:
        print("Warning: wind_strength is 0, the tree will not move")
    if num_frames is None:
        num_frames = fps * 5
    remove_if_exists(output_path)
    renderer.render_animation(state, output_path, num_frames, fps=fps, frame_skip=frame_skip)


def main():
    parser = argparse.ArgumentParser(description="Render procedural ink-painting trees.")
    parser.add_argument(
        '--mode',
        type=str,
        choices=['still', 'growth', 'sway'],
        default='growth',
        help='Rendering mode: still, growth, or sway (default: growth)'
    )
    parser.add_argument('--config', type=str, default='config/controls.json',
                        help='Path to the controls JSON file')
    parser.add_argument('--seed', type=int, default=None,
                        help='Tree seed (random if omitted)')
    parser.add_argument('--frames', type=positive_int, default=None,
                        help='Number of frames to simulate (default depends on mode)')
    parser.add_argument('--frame-skip', type=positive_int, default=2,
                        help='Write every Nth simulated frame')
    parser.add_argument('--size', type=int, nargs=2, default=[800, 600],
                        metavar=('WIDTH', 'HEIGHT'))
    parser.add_argument('--output', type=str, default=None,
                        help='Output path (default: outputs/ink_tree_<mode>.png|.gif)')
    args = parser.parse_args()

    controls = load_config(args.config)
    config = InkTreeConfig()
    state = SimulationState(controls, config, seed=args.seed)

    render_config = InkRenderConfig(output_width=args.size[0], output_height=args.size[1])
    renderer = InkRenderer(render_config)

    suffix = '.png' if args.mode == 'still' else '.gif'
    output_path = args.output or str(Path('outputs') / f'ink_tree_{args.mode}{suffix}')
    fps = config.canvas.frame_rate

    print(f"Mode: {args.mode}")
    print(f"Seed: {state.seed}")
    print(f"Depth: {controls.depth}, randomness: {controls.randomness_factor:.2f}")
    print(f"Output: {output_path}")
    print()

    if args.mode == 'still':
        render_still(state, renderer, output_path)
    elif args.mode == 'growth':
        render_growth(state, renderer, output_path, args.frames, fps, args.frame_skip, seed=args.seed)
    elif args.mode == 'sway':
        render_sway(state, renderer, output_path, args.frames, fps, args.frame_skip)


if __name__ == '__main__':
    main()
