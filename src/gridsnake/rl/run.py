# gridsnake/rl/run.py
from __future__ import annotations
import argparse
import csv
import os
import time
from typing import List, Optional, Tuple

from gridsnake.config import Config
from gridsnake.rl.env import SnakeEnv
from gridsnake.rl.policies import POLICIES

MAX_STEPS = 10_000


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: SnakeEnv, policy: str, epsilon: float,
                render_delay: float = 0.0) -> Tuple[int, float, int]:
    """
    Run a single episode with a scripted policy (random, greedy, eps-greedy).

    Returns:
        steps: number of steps taken
        total: total return (sum of rewards)
        score: final engine score
    """
    try:
        choose = POLICIES[policy]
    except KeyError:
        raise ValueError(f"Unknown policy: {policy}") from None

    obs = env.reset()
    total = 0.0
    steps = 0
    score = 0

    while True:
        a = choose(obs, env, epsilon)
        obs, r, done, info = env.step(a)
        total += r
        steps += 1

        if env.render_enabled:
            env.render()
            if render_delay:
                time.sleep(render_delay)

        if done or steps >= MAX_STEPS:
            score = info.get("score", 0)
            break

    return steps, total, score


def run_episodes(env: SnakeEnv, policy: str, episodes: int, epsilon: float,
                 out_csv: Optional[str] = None, render_delay: float = 0.0) -> List[Tuple]:
    """Run `episodes` episodes, print one CSV line each and optionally save them."""
    print(f"Running {episodes} episode(s) with policy={policy} ε={epsilon}")
    print("ep,steps,return,score")

    rows: List[Tuple] = [("ep", "steps", "return", "score")]
    for ep in range(1, episodes + 1):
        steps, ret, score = run_episode(env, policy, epsilon, render_delay)
        print(f"{ep},{steps},{ret:.3f},{score}")
        rows.append((ep, steps, float(f"{ret:.6f}"), score))

    if out_csv is not None:
        with open(out_csv, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerows(rows)
        print(f"\nSaved results → {out_csv}")

    return rows


# --------------------------
# Main
# --------------------------
def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Run scripted Snake agents headlessly.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument(
        "--policy",
        type=str,
        default="random",
        choices=sorted(POLICIES),
        help="Which scripted policy to run",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy (ignored otherwise)",
    )
    parser.add_argument("--cols", type=int, default=32)
    parser.add_argument("--rows", type=int, default=24)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV results are saved here",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Watch the agent play in a pygame window.",
    )
    parser.add_argument(
        "--render-delay",
        type=float,
        default=0.05,
        help="Seconds to pause after each rendered step (only with --render).",
    )

    args = parser.parse_args(argv)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"rl_{args.policy}.csv")

    env = SnakeEnv(
        seed_value=args.seed,
        cfg=Config(cols=args.cols, rows=args.rows),
        render_enabled=args.render,
    )
    try:
        run_episodes(env, args.policy, args.episodes, args.epsilon, out_csv, args.render_delay)
    finally:
        env.close()


if __name__ == "__main__":
    main()
