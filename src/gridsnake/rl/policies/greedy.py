# gridsnake/rl/policies/greedy.py
import numpy as np # type: ignore
from gridsnake.config import UP, DOWN, LEFT, RIGHT
from gridsnake.rl.env import ACTIONS, left_of, right_of
from gridsnake.rl.policies.random import policy_random


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int):
    """
    Returns a preference ordering of moves that reduce Manhattan distance to food.
    Does NOT check collisions; caller should filter unsafe moves.
    """
    prefs = []
    if fx < hx:
        prefs.append(LEFT)
    elif fx > hx:
        prefs.append(RIGHT)
    if fy < hy:
        prefs.append(UP)
    elif fy > hy:
        prefs.append(DOWN)
    # Orthogonal options last, so a blocked primary axis still leaves choices
    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def dir_to_action(direction) -> int:
    """Map (dx, dy) to the env action id."""
    for a, d in ACTIONS.items():
        if d == direction:
            return a
    raise ValueError(f"No action for direction {direction}")


def decode_obs(obs: np.ndarray, cols: int, rows: int):
    """
    Inverse of env.observe() (9 dims):
    [hx_n, hy_n, fx_n, fy_n, dx, dy, danger_ahead, danger_left, danger_right]
    Grid coords are recovered by scaling with (cols-1)/(rows-1).
    """
    hx_n, hy_n, fx_n, fy_n, dx, dy, dan_f, dan_l, dan_r = obs.tolist()
    hx = int(round(hx_n * max(cols - 1, 1)))
    hy = int(round(hy_n * max(rows - 1, 1)))
    fx = int(round(fx_n * max(cols - 1, 1)))
    fy = int(round(fy_n * max(rows - 1, 1)))
    return hx, hy, fx, fy, int(dx), int(dy), bool(dan_f), bool(dan_l), bool(dan_r)


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Greedy on food distance with simple safety:
    - prefer actions that reduce Manhattan distance
    - avoid any move flagged dangerous if possible
    - if all preferred moves dangerous, choose any safe move
    - if all moves look dangerous, fall back to random
    """
    cols, rows = env.engine.grid_dimensions
    hx, hy, fx, fy, dx, dy, dan_f, dan_l, dan_r = decode_obs(obs, cols, rows)

    forward = (dx, dy)
    danger_map = {
        dir_to_action(forward): dan_f,
        dir_to_action(left_of(forward)): dan_l,
        dir_to_action(right_of(forward)): dan_r,
    }
    # The "back" action is dropped by the engine, which means it keeps going
    # forward; treat it as dangerous so it is never chosen on purpose.
    all_actions = list(range(env.action_space_n))
    for a in all_actions:
        danger_map.setdefault(a, True)

    # 1) try safe preferred actions in order
    for d in best_move_toward_food(hx, hy, fx, fy):
        a = dir_to_action(d)
        if not danger_map[a]:
            return a

    # 2) otherwise, fallback to random (we're boxed in)
    return policy_random(obs, env)


def policy_eps_greedy(obs: np.ndarray, env, epsilon: float = 0.1) -> int:
    """With probability epsilon explore a random legal action, else act greedily."""
    if np.random.rand() < epsilon:
        return policy_random(obs, env)
    return policy_greedy(obs, env)
